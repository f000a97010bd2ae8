from __future__ import annotations


class CatalogError(RuntimeError):
    """Raised when the menu catalog cannot be loaded or fails validation."""


class VoiceCaptureError(RuntimeError):
    def __init__(self, message: str, reason: str = "recognition_failed") -> None:
        super().__init__(message)
        self.reason = reason


class VoiceCaptureBusyError(VoiceCaptureError):
    def __init__(self) -> None:
        super().__init__("A voice recognition is already in progress", reason="busy")


class ExternalAPIError(RuntimeError):
    def __init__(self, service: str, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.service = service
        self.status_code = status_code
