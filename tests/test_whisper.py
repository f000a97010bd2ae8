from __future__ import annotations

from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest
import requests

from jalwa.core.errors import ExternalAPIError, VoiceCaptureError
from jalwa.voice import whisper
from jalwa.voice.whisper import WhisperRecognizer


@pytest.fixture()
def audio_file(tmp_path: Path) -> Path:
    path = tmp_path / "clip.webm"
    path.write_bytes(b"fake-audio")
    return path


def _response(status_code: int, payload: dict[str, object] | None = None) -> MagicMock:
    response = MagicMock()
    response.status_code = status_code
    response.text = "upstream says no"
    response.json.return_value = payload or {}
    if status_code >= 400:
        response.raise_for_status.side_effect = requests.HTTPError(f"{status_code} error")
    return response


def test_recognize_posts_audio_and_normalizes_text(audio_file: Path) -> None:
    recognizer = WhisperRecognizer(api_key="sk-test", model="whisper-1")

    with patch("jalwa.voice.whisper.requests.post") as mock_post:
        mock_post.return_value = _response(200, {"text": "  Do you have\u00a0mango\u200b lassi?  "})
        transcript = recognizer.recognize(audio_file, "en")

    assert transcript == "Do you have mango lassi?"
    _, kwargs = mock_post.call_args
    assert mock_post.call_args.args[0] == whisper.OPENAI_TRANSCRIPTIONS_URL
    assert kwargs["headers"]["Authorization"] == "Bearer sk-test"
    assert kwargs["data"]["model"] == "whisper-1"
    assert kwargs["data"]["language"] == "en"


def test_recognize_uses_default_language(audio_file: Path) -> None:
    recognizer = WhisperRecognizer(api_key="sk-test", default_language="hi")

    with patch("jalwa.voice.whisper.requests.post") as mock_post:
        mock_post.return_value = _response(200, {"text": "namaste"})
        recognizer.recognize(audio_file)

    assert mock_post.call_args.kwargs["data"]["language"] == "hi"


def test_missing_api_key_is_unsupported(audio_file: Path) -> None:
    recognizer = WhisperRecognizer(api_key="")

    with pytest.raises(VoiceCaptureError) as exc_info:
        recognizer.recognize(audio_file, "en")

    assert exc_info.value.reason == "unsupported"


def test_unsupported_language_rejected(audio_file: Path) -> None:
    recognizer = WhisperRecognizer(api_key="sk-test")

    with pytest.raises(VoiceCaptureError) as exc_info:
        recognizer.recognize(audio_file, "xx")

    assert exc_info.value.reason == "unsupported_language"


def test_missing_file_rejected(tmp_path: Path) -> None:
    recognizer = WhisperRecognizer(api_key="sk-test")

    with pytest.raises(VoiceCaptureError) as exc_info:
        recognizer.recognize(tmp_path / "nothing.wav", "en")

    assert exc_info.value.reason == "no_audio"


def test_oversized_file_rejected(audio_file: Path) -> None:
    recognizer = WhisperRecognizer(api_key="sk-test")

    with patch.object(whisper, "MAX_FILE_SIZE_BYTES", 4):
        with pytest.raises(VoiceCaptureError) as exc_info:
            recognizer.recognize(audio_file, "en")

    assert exc_info.value.reason == "too_large"


def test_client_error_becomes_voice_error(audio_file: Path) -> None:
    recognizer = WhisperRecognizer(api_key="sk-test")

    with patch("jalwa.voice.whisper.requests.post") as mock_post:
        mock_post.return_value = _response(400)
        with pytest.raises(VoiceCaptureError, match="Transcription failed"):
            recognizer.recognize(audio_file, "en")

    assert mock_post.call_count == 1


def test_server_error_is_retried(audio_file: Path) -> None:
    recognizer = WhisperRecognizer(api_key="sk-test")

    with (
        patch("jalwa.voice.whisper.requests.post") as mock_post,
        patch("tenacity.nap.time.sleep"),
    ):
        mock_post.side_effect = [_response(503), _response(200, {"text": "hello"})]
        transcript = recognizer.recognize(audio_file, "en")

    assert transcript == "hello"
    assert mock_post.call_count == 2


def test_exhausted_retries_surface_as_voice_error(audio_file: Path) -> None:
    recognizer = WhisperRecognizer(api_key="sk-test")

    with (
        patch("jalwa.voice.whisper.requests.post") as mock_post,
        patch("tenacity.nap.time.sleep"),
    ):
        mock_post.return_value = _response(503)
        with pytest.raises(VoiceCaptureError, match="Transcription failed") as exc_info:
            recognizer.recognize(audio_file, "en")

    assert exc_info.value.reason == "recognition_failed"
    assert isinstance(exc_info.value.__cause__, ExternalAPIError)
    assert exc_info.value.__cause__.status_code == 503
    assert mock_post.call_count == whisper.settings.retry_max_attempts
