"""Custom exceptions for the YouTube Transcript Digest Service."""
from typing import Optional

class TranscriptDigestBaseException(Exception):
    """Base exception for the transcript digest service."""

    def __init__(self, message: str, error_code: str, details: Optional[dict] = None):
        self.message = message
        self.error_code = error_code
        self.details = details or {}
        super().__init__(self.message)

class ValidationError(TranscriptDigestBaseException):
    """Exception raised for input validation errors."""

    def __init__(self, message: str, details: Optional[dict] = None):
        super().__init__(message, "VALIDATION_ERROR", details)

class APIKeyInvalidError(TranscriptDigestBaseException):
    """Exception raised for invalid API key."""

    def __init__(self):
        message = "Invalid or missing API key"
        super().__init__(message, "API_KEY_INVALID")

class TranscriptServiceError(TranscriptDigestBaseException):
    """Exception raised when the transcription service rejects a batch."""

    # Guidance for the statuses a caller can act on
    STATUS_MESSAGES = {
        401: "Authentication failed (401): Invalid API key or insufficient permissions.",
        402: "Payment required (402): Insufficient balance for YouTube transcript requests.",
        429: "Rate limit exceeded (429): Too many requests. Please wait before trying again.",
    }

    def __init__(self, status_code: int, body: str = ""):
        message = self.STATUS_MESSAGES.get(status_code, f"API error: {status_code} {body}")
        details = {"status_code": status_code, "reason": body}
        self.status_code = status_code
        super().__init__(message, "TRANSCRIPT_SERVICE_ERROR", details)

class ConfigurationError(TranscriptDigestBaseException):
    """Exception raised for configuration errors."""

    def __init__(self, setting: str, reason: str = ""):
        message = f"Configuration error for {setting}: {reason}" if reason else f"Configuration error: {setting}"
        details = {"setting": setting, "reason": reason}
        super().__init__(message, "CONFIGURATION_ERROR", details)
