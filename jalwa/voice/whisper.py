from __future__ import annotations

import re
from collections.abc import Callable
from pathlib import Path
from typing import Any

import requests
import structlog
from tenacity import retry, retry_if_exception, stop_after_attempt, wait_exponential_jitter

from jalwa.core.config import settings
from jalwa.core.errors import ExternalAPIError, VoiceCaptureError

logger = structlog.get_logger(__name__)

SUPPORTED_LANGUAGES = {"en", "hi", "ur", "es"}
MAX_FILE_SIZE_BYTES = 25 * 1024 * 1024
OPENAI_TRANSCRIPTIONS_URL = "https://api.openai.com/v1/audio/transcriptions"
SERVICE = "openai_stt"


def _should_retry(exc: BaseException) -> bool:
    if isinstance(exc, (requests.Timeout, requests.ConnectionError)):
        return True
    if isinstance(exc, ExternalAPIError):
        return exc.status_code is None or exc.status_code == 429 or exc.status_code >= 500
    return False


def _log_retry(state: Any) -> None:
    outcome = state.outcome
    logger.warning(
        "external_api_retry",
        service=SERVICE,
        attempt=state.attempt_number,
        reason=str(outcome.exception()) if outcome and outcome.failed else None,
    )


def _retry_policy() -> Callable[[Callable[..., Any]], Callable[..., Any]]:
    return retry(
        retry=retry_if_exception(_should_retry),
        stop=stop_after_attempt(settings.retry_max_attempts),
        wait=wait_exponential_jitter(
            initial=settings.retry_backoff_initial,
            max=settings.retry_backoff_max,
        ),
        before_sleep=_log_retry,
        reraise=True,
    )


def _normalize_transcript(text: str) -> str:
    text = text.replace("\u00a0", " ")
    text = re.sub(r"[\u200b\ufeff]", "", text)
    text = re.sub(r"\s+", " ", text)
    return text.strip()


class WhisperRecognizer:
    """Speech recognizer backed by the OpenAI Whisper transcription API."""

    def __init__(
        self,
        api_key: str | None = None,
        model: str | None = None,
        default_language: str | None = None,
        timeout: float = 60.0,
    ) -> None:
        self.api_key = api_key if api_key is not None else settings.openai_api_key
        self.model = model or settings.whisper_model
        self.default_language = default_language or settings.voice_language
        self.timeout = timeout

    def recognize(self, audio_path: Path, language: str | None = None) -> str:
        language = language or self.default_language
        if language not in SUPPORTED_LANGUAGES:
            raise VoiceCaptureError(f"Unsupported language: {language}", reason="unsupported_language")
        if not self.api_key:
            raise VoiceCaptureError("OPENAI_API_KEY is not configured", reason="unsupported")

        audio_path = Path(audio_path)
        if not audio_path.exists():
            raise VoiceCaptureError(f"Audio file not found: {audio_path}", reason="no_audio")
        if audio_path.stat().st_size > MAX_FILE_SIZE_BYTES:
            raise VoiceCaptureError("Audio recording is too large", reason="too_large")

        try:
            response = self._post(audio_path, language)
            response.raise_for_status()
            payload = response.json()
        except (ExternalAPIError, requests.RequestException, ValueError) as exc:
            raise VoiceCaptureError(f"Transcription failed: {exc}") from exc

        transcript = _normalize_transcript(payload.get("text", ""))
        logger.info("voice_transcribed", language=language, characters=len(transcript))
        return transcript

    @_retry_policy()
    def _post(self, audio_path: Path, language: str) -> requests.Response:
        with audio_path.open("rb") as audio_file:
            response = requests.post(
                OPENAI_TRANSCRIPTIONS_URL,
                headers={"Authorization": f"Bearer {self.api_key}"},
                data={"model": self.model, "language": language, "response_format": "json"},
                files={"file": (audio_path.name, audio_file, "application/octet-stream")},
                timeout=self.timeout,
            )

        if response.status_code == 429 or response.status_code >= 500:
            raise ExternalAPIError(
                SERVICE,
                f"OpenAI STT error {response.status_code}: {response.text}",
                status_code=response.status_code,
            )
        return response
