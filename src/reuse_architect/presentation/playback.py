"""Single playback handle for synthesized speech.

Gemini answers with raw 16-bit mono PCM; sessions wrap it in a WAV container
so any browser ``<audio>`` element can play it. At most one session is alive:
starting a new one stops and replaces the previous.
"""

from __future__ import annotations

import base64
import io
import re
import wave
from dataclasses import dataclass, field

from reuse_architect.core.application.usecases.synthesize_speech_usecase import SpeechClip
from reuse_architect.infrastructure.observability.logger_factory_service import get_logger

logger = get_logger("playback")

DEFAULT_SAMPLE_RATE = 24000
_RATE_PATTERN = re.compile(r"rate=(\d+)")


def pcm_to_wav(pcm: bytes, sample_rate: int = DEFAULT_SAMPLE_RATE) -> bytes:
    buffer = io.BytesIO()
    with wave.open(buffer, "wb") as wf:
        wf.setnchannels(1)
        wf.setsampwidth(2)
        wf.setframerate(sample_rate)
        wf.writeframes(pcm)
    return buffer.getvalue()


def _sample_rate(mime_type: str) -> int:
    match = _RATE_PATTERN.search(mime_type)
    return int(match.group(1)) if match else DEFAULT_SAMPLE_RATE


@dataclass(slots=True)
class AudioSession:
    wav_bytes: bytes
    playback_rate: float
    playing: bool = False
    closed: bool = False
    # the next served player element should start on its own
    autoplay_pending: bool = True

    @classmethod
    def from_clip(cls, clip: SpeechClip) -> AudioSession:
        payload = base64.b64decode(clip.audio_base64)
        if clip.mime_type.startswith("audio/L16"):
            payload = pcm_to_wav(payload, _sample_rate(clip.mime_type))
        return cls(wav_bytes=payload, playback_rate=clip.speed)

    def play(self) -> None:
        if not self.closed:
            self.playing = True

    def pause(self) -> None:
        self.playing = False

    def close(self) -> None:
        self.playing = False
        self.autoplay_pending = False
        self.closed = True


@dataclass(slots=True)
class PlaybackController:
    """
    Server-side mirror of the page's single ``<audio>`` element.

    The page reports play, pause and end events back, so ``is_playing`` follows
    what the listener actually hears. Serving a new page replaces the element:
    only the first page after ``start`` (or a toggle from the no-script form)
    may autoplay, any other page leaves the session paused.
    """

    _session: AudioSession | None = field(default=None)

    @property
    def session(self) -> AudioSession | None:
        return self._session

    @property
    def is_playing(self) -> bool:
        return self._session is not None and self._session.playing

    def start(self, clip: SpeechClip) -> AudioSession:
        """Tear down any previous session, then play the new clip."""
        self.stop()
        self._session = AudioSession.from_clip(clip)
        self._session.play()
        logger.info("Playback started", wav_bytes=len(self._session.wav_bytes), rate=clip.speed)
        return self._session

    def claim_autoplay(self, with_player: bool = True) -> bool:
        """Called once per served page; True when that page's player should start by itself."""
        session = self._session
        if session is None:
            return False
        if with_player and session.playing and session.autoplay_pending:
            session.autoplay_pending = False
            return True
        session.autoplay_pending = False
        session.pause()
        return False

    def toggle(self) -> bool:
        """Flip play/pause from a page reload; returns whether it is now playing."""
        if self._session is None:
            return False
        if self._session.playing:
            self._session.pause()
        else:
            self._session.play()
            self._session.autoplay_pending = True
        return self._session.playing

    def resume(self) -> None:
        if self._session is not None:
            self._session.play()

    def pause(self) -> None:
        if self._session is not None:
            self._session.pause()

    def finished(self) -> None:
        if self._session is not None:
            self._session.pause()
            self._session.autoplay_pending = False
            logger.info("Playback finished")

    def stop(self) -> None:
        if self._session is not None:
            self._session.close()
            self._session = None
