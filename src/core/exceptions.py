"""
VoiceTask exception hierarchy.

All application-specific exceptions inherit from VoiceTaskError,
enabling centralized error handling in the API middleware layer and
uniform ``st.error`` reporting in the UI.
"""

from datetime import UTC, datetime


class VoiceTaskError(Exception):
    """Base exception for all VoiceTask errors."""

    def __init__(
        self,
        detail: str = "An unexpected error occurred",
        code: str = "VOICETASK_ERROR",
        status_code: int = 500,
    ) -> None:
        self.detail = detail
        self.code = code
        self.status_code = status_code
        self.timestamp = datetime.now(UTC).isoformat()
        super().__init__(detail)


# ---------------------------------------------------------------------------
# Transcription endpoint
# ---------------------------------------------------------------------------


class NoAudioProvidedError(VoiceTaskError):
    """Raised when the upload carries no ``audio`` field."""

    def __init__(self) -> None:
        super().__init__(
            detail="No audio file provided",
            code="NO_AUDIO",
            status_code=400,
        )


class TranscriptionError(VoiceTaskError):
    """Raised when STT processing fails."""

    def __init__(self, detail: str = "Failed to transcribe audio") -> None:
        super().__init__(
            detail=detail,
            code="TRANSCRIPTION_ERROR",
            status_code=500,
        )


class ClassificationError(VoiceTaskError):
    """Raised when the task classification call fails."""

    def __init__(self, detail: str = "Failed to transcribe audio") -> None:
        super().__init__(
            detail=detail,
            code="CLASSIFICATION_ERROR",
            status_code=500,
        )


class EmptyAIResponseError(ClassificationError):
    """Raised when the classification provider returns no content."""

    def __init__(self) -> None:
        super().__init__(detail="No response from AI")
        self.code = "EMPTY_AI_RESPONSE"


class AIResponseParseError(ClassificationError):
    """Raised when the classification output is not valid JSON."""

    def __init__(self, content: str = "") -> None:
        super().__init__(detail="Failed to parse AI response")
        self.code = "AI_RESPONSE_PARSE_ERROR"
        self.content = content


# ---------------------------------------------------------------------------
# Client application
# ---------------------------------------------------------------------------


class MicrophoneAccessError(VoiceTaskError):
    """Raised when the capture device refuses access."""

    def __init__(
        self, detail: str = "Could not access microphone. Please check permissions."
    ) -> None:
        super().__init__(detail=detail, code="MICROPHONE_ACCESS", status_code=403)


class InvalidRecordingTransitionError(VoiceTaskError):
    """Raised on start while recording, or stop while idle."""

    def __init__(self, phase: str, command: str) -> None:
        super().__init__(
            detail=f"Cannot {command} while {phase}",
            code="INVALID_RECORDING_TRANSITION",
            status_code=409,
        )


class RecordingNotFoundError(VoiceTaskError):
    """Raised when a recording ID does not exist."""

    def __init__(self, recording_id: str) -> None:
        super().__init__(
            detail=f"Recording not found: {recording_id}",
            code="RECORDING_NOT_FOUND",
            status_code=404,
        )


class TaskNotFoundError(VoiceTaskError):
    """Raised when a task ID does not exist."""

    def __init__(self, task_id: str) -> None:
        super().__init__(
            detail=f"Task not found: {task_id}",
            code="TASK_NOT_FOUND",
            status_code=404,
        )
