from __future__ import annotations

from collections.abc import Callable
from pathlib import Path
from typing import Protocol, runtime_checkable

import anyio
import structlog

from jalwa.assistant import is_blank
from jalwa.core.errors import VoiceCaptureBusyError, VoiceCaptureError

logger = structlog.get_logger(__name__)


@runtime_checkable
class SpeechRecognizer(Protocol):
    def recognize(self, audio_path: Path, language: str | None = None) -> str:
        """Return the transcript for one recorded utterance."""
        ...


class VoiceCapture:
    """Runs one speech recognition at a time and reports its outcome.

    ``on_transcript`` receives a non-blank transcript, ``on_error`` receives
    the failure (when unset the error propagates), and ``on_end`` fires after
    every attempt, successful or not.
    """

    def __init__(
        self,
        recognizer: SpeechRecognizer | None,
        on_transcript: Callable[[str], None] | None = None,
        on_error: Callable[[VoiceCaptureError], None] | None = None,
        on_end: Callable[[], None] | None = None,
    ) -> None:
        self.recognizer = recognizer
        self.on_transcript = on_transcript
        self.on_error = on_error
        self.on_end = on_end
        self.listening = False

    @property
    def supported(self) -> bool:
        return self.recognizer is not None

    async def listen(self, audio_path: str | Path, language: str | None = None) -> str | None:
        if self.listening:
            raise VoiceCaptureBusyError()

        self.listening = True
        logger.info("voice_capture_started", language=language)
        try:
            if self.recognizer is None:
                raise VoiceCaptureError("Voice input is not supported here", reason="unsupported")
            recognizer = self.recognizer
            transcript = await anyio.to_thread.run_sync(
                lambda: recognizer.recognize(Path(audio_path), language)
            )
            if is_blank(transcript):
                logger.info("voice_capture_empty")
                return None

            transcript = transcript.strip()
            if self.on_transcript is not None:
                self.on_transcript(transcript)
            return transcript
        except VoiceCaptureError as exc:
            logger.warning("voice_capture_failed", reason=exc.reason, error=str(exc))
            if self.on_error is None:
                raise
            self.on_error(exc)
            return None
        finally:
            self.listening = False
            if self.on_end is not None:
                self.on_end()
