from reuse_architect.core.domain.value_objects.synthesized_audio import PCM_MIME_TYPE, SynthesizedAudio
from reuse_architect.core.domain.value_objects.voice_config import VoiceConfig
from reuse_architect.core.domain.value_objects.voice_speaker import VoiceSpeaker

__all__ = ["PCM_MIME_TYPE", "SynthesizedAudio", "VoiceConfig", "VoiceSpeaker"]
