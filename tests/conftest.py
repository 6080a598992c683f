import json
from unittest.mock import AsyncMock, MagicMock

import pytest

from reuse_architect.core.application.ports.speech_synthesis_port import SpeechSynthesisPort
from reuse_architect.core.application.ports.text_generation_port import TextGenerationPort
from reuse_architect.core.application.usecases.generate_architecture_usecase import (
    GenerateArchitectureUseCase,
)
from reuse_architect.core.application.usecases.synthesize_speech_usecase import (
    SynthesizeSpeechUseCase,
)
from reuse_architect.core.domain.entities.generated_result import GeneratedResult
from reuse_architect.core.domain.value_objects import SynthesizedAudio


@pytest.fixture
def result_payload():
    return {
        "analysis": "Tái sử dụng module auth và db.",
        "reusedSnippets": ["auth_utils", "db_connection"],
        "fileTree": [
            {
                "name": "src",
                "type": "folder",
                "isReused": False,
                "children": [
                    {"name": "main.ts", "type": "file", "content": "console.log('hi')", "isReused": False},
                    {
                        "name": "auth.ts",
                        "type": "file",
                        "content": "// Logic xử lý auth ở đây...",
                        "description": "Lấy từ auth_utils",
                        "isReused": True,
                    },
                ],
            },
            {"name": "README.md", "type": "file", "content": "# Demo", "isReused": False},
        ],
        "documentation": "Chạy npm install rồi npm start.",
        "diagramData": [{"name": "Reuse", "value": 70}, {"name": "New Code", "value": 30}],
    }


@pytest.fixture
def result_json(result_payload):
    return json.dumps(result_payload, ensure_ascii=False)


@pytest.fixture
def generated_result(result_payload):
    return GeneratedResult.model_validate(result_payload)


@pytest.fixture
def mock_generator(result_json):
    generator = MagicMock(spec=TextGenerationPort)
    generator.generate = AsyncMock(return_value=result_json)
    return generator


@pytest.fixture
def mock_synthesizer():
    synthesizer = MagicMock(spec=SpeechSynthesisPort)
    # two silent 16-bit PCM samples
    synthesizer.synthesize = AsyncMock(return_value=SynthesizedAudio("AAAAAA=="))
    return synthesizer


@pytest.fixture
def generate_usecase(mock_generator):
    return GenerateArchitectureUseCase(mock_generator)


@pytest.fixture
def speech_usecase(mock_synthesizer):
    return SynthesizeSpeechUseCase(mock_synthesizer)
