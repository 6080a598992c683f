from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock

import pytest

from reuse_architect.core.application.prompts.architecture_prompt_builder import (
    ArchitecturePromptBuilder,
)
from reuse_architect.core.domain.entities.generation_request import GenerationRequest
from reuse_architect.core.domain.exceptions import ConfigurationError, ProviderError
from reuse_architect.core.domain.value_objects import VoiceConfig, VoiceSpeaker
from reuse_architect.infrastructure.providers.gemini.gemini_client_factory import GeminiClientFactory
from reuse_architect.infrastructure.providers.gemini.gemini_config import GeminiConfig
from reuse_architect.infrastructure.providers.gemini.gemini_speech_provider import (
    GeminiSpeechProvider,
)
from reuse_architect.infrastructure.providers.gemini.gemini_text_generation_provider import (
    GeminiTextGenerationProvider,
)

CONFIG = GeminiConfig(api_key="test-key", text_model="text-model", tts_model="tts-model")


@pytest.fixture
def mock_client():
    client = MagicMock()
    client.aio.models.generate_content = AsyncMock()
    return client


@pytest.fixture
def client_factory(mock_client):
    factory = MagicMock(spec=GeminiClientFactory)
    factory.create.return_value = (mock_client, CONFIG)
    return factory


@pytest.fixture
def prompt():
    return ArchitecturePromptBuilder().build(GenerationRequest.create("/lib", "Add auth module"))


@pytest.mark.asyncio
async def test_generate_returns_response_text(client_factory, mock_client, prompt):
    mock_client.aio.models.generate_content.return_value = SimpleNamespace(text='{"analysis": "ok"}')
    provider = GeminiTextGenerationProvider(client_factory=client_factory)

    raw = await provider.generate(prompt)

    assert raw == '{"analysis": "ok"}'
    kwargs = mock_client.aio.models.generate_content.await_args.kwargs
    assert kwargs["model"] == "text-model"
    assert kwargs["contents"] == prompt.user_instruction


@pytest.mark.asyncio
async def test_generate_wraps_sdk_failures(client_factory, mock_client, prompt):
    sdk_error = RuntimeError("503 overloaded")
    sdk_error.code = 503
    mock_client.aio.models.generate_content.side_effect = sdk_error
    provider = GeminiTextGenerationProvider(client_factory=client_factory)

    with pytest.raises(ProviderError) as exc:
        await provider.generate(prompt)

    assert exc.value.status_code == 503
    assert exc.value.__cause__ is sdk_error


@pytest.mark.asyncio
async def test_generate_fails_fast_without_key(prompt):
    factory = GeminiClientFactory(config_loader=MagicMock(side_effect=ConfigurationError("no key")))
    provider = GeminiTextGenerationProvider(client_factory=factory)

    with pytest.raises(ConfigurationError):
        await provider.generate(prompt)


@pytest.mark.asyncio
async def test_synthesize_returns_base64_audio(client_factory, mock_client):
    part = SimpleNamespace(inline_data=SimpleNamespace(data=b"\x00\x00"))
    mock_client.aio.models.generate_content.return_value = SimpleNamespace(
        candidates=[SimpleNamespace(content=SimpleNamespace(parts=[part]))]
    )
    provider = GeminiSpeechProvider(client_factory=client_factory)

    audio = await provider.synthesize("Xin chào", VoiceConfig(VoiceSpeaker.FEMALE_WARM))

    assert audio.audio_base64 == "AAA="
    assert audio.mime_type == "audio/L16;rate=24000"
    kwargs = mock_client.aio.models.generate_content.await_args.kwargs
    assert kwargs["model"] == "tts-model"
    assert kwargs["config"].speech_config.voice_config.prebuilt_voice_config.voice_name == "Fenrir"


@pytest.mark.asyncio
async def test_synthesize_wraps_sdk_failures(client_factory, mock_client):
    mock_client.aio.models.generate_content.side_effect = TimeoutError("timed out")
    provider = GeminiSpeechProvider(client_factory=client_factory)

    with pytest.raises(ProviderError) as exc:
        await provider.synthesize("doc", VoiceConfig())

    assert "timed out" in exc.value.message
