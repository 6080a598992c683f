from dataclasses import replace
from unittest.mock import AsyncMock, MagicMock

import pytest
from fastapi.testclient import TestClient

from reuse_architect.core.application.usecases.generate_architecture_usecase import (
    GenerateArchitectureUseCase,
)
from reuse_architect.core.domain.exceptions import ConfigurationError, MissingAudioError, ProviderError
from reuse_architect.infrastructure.configuration.main_settings import Settings
from reuse_architect.infrastructure.entrypoints.api.app_factory import create_app
from reuse_architect.infrastructure.entrypoints.api.dependencies import get_generate_usecase
from reuse_architect.presentation.studio_session import StudioSession

ARCHITECTURE_URL = "/api/v1/architecture"


@pytest.fixture
def studio(generate_usecase, speech_usecase):
    return StudioSession(generate_usecase, speech_usecase)


@pytest.fixture
def client(studio):
    app = create_app(Settings(), studio=studio)
    with TestClient(app) as test_client:
        yield test_client


def test_health(client):
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json()["status"] == "ok"


def test_correlation_id_is_echoed(client):
    response = client.get("/health", headers={"x-correlation-id": "abc-123"})

    assert response.headers["x-correlation-id"] == "abc-123"


def test_options_list_labels_and_defaults(client):
    body = client.get("/api/v1/options").json()

    assert body["appTypes"]["default"] == "Nền Tảng SaaS Enterprise"
    assert len(body["appTypes"]["values"]) == 6
    assert body["techStacks"]["default"] == "React + Node.js (MERN)"
    assert "Serverless Function" in body["architectures"]["values"]


def test_architecture_returns_wire_result(client, mock_generator):
    response = client.post(ARCHITECTURE_URL, json={"libraryPath": "/lib", "requirements": "Add auth module"})

    assert response.status_code == 200
    body = response.json()
    assert body["reusedSnippets"] == ["auth_utils", "db_connection"]
    assert body["fileTree"][0]["children"][1]["isReused"] is True
    assert body["diagramData"][0] == {"name": "Reuse", "value": 70.0}
    prompt = mock_generator.generate.await_args.args[0]
    assert "Nền Tảng SaaS Enterprise" in prompt.user_instruction


def test_architecture_requires_path_and_requirements(client, mock_generator):
    response = client.post(ARCHITECTURE_URL, json={"libraryPath": "", "requirements": "x"})

    assert response.status_code == 400
    assert response.json()["error"] == "InputValidationError"
    mock_generator.generate.assert_not_awaited()


def test_architecture_rejects_unknown_option(client):
    response = client.post(
        ARCHITECTURE_URL, json={"libraryPath": "/lib", "requirements": "x", "appType": "Desktop"}
    )

    assert response.status_code == 422


def test_malformed_answer_maps_to_bad_gateway(client, mock_generator):
    mock_generator.generate.return_value = '{"analysis": "cut'

    response = client.post(ARCHITECTURE_URL, json={"libraryPath": "/lib", "requirements": "x"})

    assert response.status_code == 502
    assert response.json()["message"].startswith("Dữ liệu trả về bị lỗi cấu trúc")


@pytest.mark.parametrize(
    "error, expected",
    [
        (ProviderError(provider="gemini", message="quota", status_code=429), 502),
        (ConfigurationError("API Key not found"), 500),
    ],
)
def test_provider_and_configuration_failures(client, mock_generator, error, expected):
    mock_generator.generate.side_effect = error

    response = client.post(ARCHITECTURE_URL, json={"libraryPath": "/lib", "requirements": "x"})

    assert response.status_code == expected
    assert response.json()["status"] == "error"


def test_speech_returns_audio(client, mock_synthesizer):
    response = client.post("/api/v1/speech", json={"text": "x" * 800, "speaker": "Nu_TruyenCam", "speed": 1.5})

    assert response.status_code == 200
    assert response.json() == {"audio_base64": "AAAAAA==", "mime_type": "audio/L16;rate=24000", "speed": 1.5}
    assert len(mock_synthesizer.synthesize.await_args.args[0]) == 500


def test_speech_rejects_out_of_range_speed(client):
    response = client.post("/api/v1/speech", json={"text": "x", "speed": 3})

    assert response.status_code == 422


def test_speech_without_audio_maps_to_bad_gateway(client, mock_synthesizer):
    mock_synthesizer.synthesize.side_effect = MissingAudioError()

    response = client.post("/api/v1/speech", json={"text": "x"})

    assert response.status_code == 502
    assert response.json()["message"] == "No audio data returned"


def test_studio_page_renders_empty_state(client):
    response = client.get("/")

    assert response.status_code == 200
    assert "Sẵn Sàng Kiến Tạo" in response.text
    assert "Kích Hoạt Genesis Core" in response.text


def test_studio_generate_then_browse_tree(client):
    response = client.post(
        "/studio/generate",
        data={"library_path": "/lib", "requirements": "Add auth module"},
        follow_redirects=False,
    )

    assert response.status_code == 303
    assert response.headers["location"] == "/?tab=tree"

    page = client.get("/?tab=tree&node=0/1").text
    assert "auth.ts" in page
    assert "REUSED" in page
    assert "Lấy từ auth_utils" in page


def test_studio_generate_failure_is_shown_on_page(client):
    client.post("/studio/generate", data={"library_path": "", "requirements": ""})

    page = client.get("/").text
    assert "Vui lòng nhập đường dẫn thư viện và yêu cầu chi tiết." in page


def test_studio_generate_while_loading_conflicts(client, studio):
    studio.state = replace(studio.state, loading=True)

    response = client.post("/studio/generate", data={"library_path": "/lib", "requirements": "x"})

    assert response.status_code == 409
    assert response.json()["error"] == "OperationInFlightError"


def test_studio_audio_is_missing_before_speech(client):
    assert client.get("/studio/audio").status_code == 404


def test_studio_speech_and_playback_toggle(client, studio):
    client.post("/studio/generate", data={"library_path": "/lib", "requirements": "x"})

    response = client.post(
        "/studio/speech", data={"speaker": "Nu_TruyenCam", "speed": "1.25"}, follow_redirects=False
    )

    assert response.status_code == 303
    assert response.headers["location"] == "/?tab=docs"
    audio = client.get("/studio/audio")
    assert audio.headers["content-type"] == "audio/wav"
    assert audio.content.startswith(b"RIFF")
    assert "playbackRate = 1.25" in client.get("/?tab=docs").text

    client.post("/studio/playback/toggle")
    assert studio.playback.is_playing is False


def test_studio_speech_rejects_unknown_speaker(client):
    response = client.post("/studio/speech", data={"speaker": "Robot", "speed": "1.0"})

    assert response.status_code == 400


def test_architecture_uses_overridden_usecase(client, mock_generator):
    generator = MagicMock()
    generator.generate = AsyncMock(return_value='```json\n{"analysis": "override", "documentation": "y"}\n```')
    client.app.dependency_overrides[get_generate_usecase] = lambda: GenerateArchitectureUseCase(generator)

    response = client.post(ARCHITECTURE_URL, json={"libraryPath": "/lib", "requirements": "x"})

    client.app.dependency_overrides.clear()
    assert response.status_code == 200
    assert response.json()["analysis"] == "override"
    mock_generator.generate.assert_not_awaited()


def test_studio_generate_rejects_unknown_option(client, mock_generator):
    response = client.post(
        "/studio/generate", data={"library_path": "/lib", "requirements": "x", "app_type": "Desktop"}
    )

    assert response.status_code == 400
    assert response.json()["error"] == "InputValidationError"
    mock_generator.generate.assert_not_awaited()


def test_studio_speech_without_documentation_records_error(client, studio, mock_synthesizer):
    response = client.post(
        "/studio/speech", data={"speaker": "Nu_TruyenCam", "speed": "1.0"}, follow_redirects=False
    )

    assert response.status_code == 303
    assert "Chưa có tài liệu để đọc" in client.get("/?tab=docs").text
    assert studio.state.speech_error == "Chưa có tài liệu để đọc. Hãy tạo kiến trúc trước."
    assert studio.state.speech_loading is False
    mock_synthesizer.synthesize.assert_not_awaited()


def test_revisiting_docs_tab_does_not_restart_audio(client, studio):
    client.post("/studio/generate", data={"library_path": "/lib", "requirements": "x"})
    client.post("/studio/speech", data={"speaker": "Nu_TruyenCam", "speed": "1.0"})

    assert "autoplay" in client.get("/?tab=docs").text

    client.get("/?tab=tree")
    page = client.get("/?tab=docs").text

    assert "autoplay" not in page
    assert 'src="/studio/audio"' in page
    assert studio.playback.is_playing is False


def test_page_events_update_playback(client, studio):
    client.post("/studio/generate", data={"library_path": "/lib", "requirements": "x"})
    client.post("/studio/speech", data={"speaker": "Nu_TruyenCam", "speed": "1.0"})
    client.get("/?tab=docs")

    assert client.post("/studio/playback/pause").status_code == 204
    assert studio.playback.is_playing is False
    assert client.post("/studio/playback/play").status_code == 204
    assert studio.playback.is_playing is True

    assert client.post("/studio/playback/finished").status_code == 204
    assert studio.playback.is_playing is False
    assert "autoplay" not in client.get("/?tab=docs").text
