"""
Pydantic v2 models shared by the API layer and the Streamlit client.

Server side: Health, Transcription, Error
Client side: Task, Recording, AppState (session snapshot owned by
``src.ui.controller.AppController``)
"""

import uuid
from datetime import UTC, datetime
from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field


def new_id() -> str:
    """Random 128-bit identifier rendered as 32 hex characters."""
    return uuid.uuid4().hex


def _now() -> datetime:
    return datetime.now(UTC)


# ---------------------------------------------------------------------------
# Health
# ---------------------------------------------------------------------------


class HealthResponse(BaseModel):
    """GET /health response."""

    status: str = "ok"
    version: str = "0.1.0"
    timestamp: datetime


# ---------------------------------------------------------------------------
# Transcription
# ---------------------------------------------------------------------------


class TranscriptionResult(BaseModel):
    """Plain transcript returned by an STT provider."""

    text: str
    language: str | None = None
    duration: float | None = None


# ---------------------------------------------------------------------------
# Tasks
# ---------------------------------------------------------------------------


class TaskCategory(StrEnum):
    """Display bucket of a task."""

    urgent = "urgent"
    later = "later"
    completed = "completed"


class TaskPriority(StrEnum):
    """User-adjustable priority, independent of the category."""

    low = "low"
    medium = "medium"
    high = "high"


class Task(BaseModel):
    """One actionable item extracted from a recording."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(default_factory=new_id)
    text: str
    category: TaskCategory
    created_at: datetime = Field(default_factory=_now)
    due_date: datetime | None = None
    priority: TaskPriority = TaskPriority.medium


# ---------------------------------------------------------------------------
# Recordings
# ---------------------------------------------------------------------------


class RecordingPhase(StrEnum):
    """Capture lifecycle: idle -> recording -> idle."""

    idle = "idle"
    recording = "recording"


class Recording(BaseModel):
    """One captured audio session.

    ``url`` is a playable reference issued by ``MediaRegistry``; it is
    revoked when the recording is deleted. ``duration`` is never measured
    and stays 0.0.
    """

    model_config = ConfigDict(frozen=True)

    id: str = Field(default_factory=new_id)
    audio: bytes = Field(repr=False)
    mime_type: str = "audio/webm"
    url: str
    created_at: datetime = Field(default_factory=_now)
    duration: float = 0.0
    transcript: str | None = None

    @property
    def transcribed(self) -> bool:
        """True once a classification produced transcript text."""
        return bool(self.transcript)


# ---------------------------------------------------------------------------
# Application state
# ---------------------------------------------------------------------------


class ActiveTab(StrEnum):
    """The four views of the client."""

    record = "record"
    tasks = "tasks"
    recordings = "recordings"
    settings = "settings"


class AppState(BaseModel):
    """Immutable snapshot of one client session."""

    model_config = ConfigDict(frozen=True)

    active_tab: ActiveTab = ActiveTab.record
    phase: RecordingPhase = RecordingPhase.idle
    transcribing: bool = False
    recordings: tuple[Recording, ...] = ()
    tasks: tuple[Task, ...] = ()
    selected_recording_id: str | None = None

    def _in_category(self, category: TaskCategory) -> list[Task]:
        return [t for t in self.tasks if t.category == category]

    @property
    def urgent_tasks(self) -> list[Task]:
        return self._in_category(TaskCategory.urgent)

    @property
    def later_tasks(self) -> list[Task]:
        return self._in_category(TaskCategory.later)

    @property
    def completed_tasks(self) -> list[Task]:
        return self._in_category(TaskCategory.completed)

    @property
    def open_task_count(self) -> int:
        """Tasks not yet completed (shown next to the Tasks tab)."""
        return sum(1 for t in self.tasks if t.category != TaskCategory.completed)

    @property
    def selected_recording(self) -> Recording | None:
        if self.selected_recording_id is None:
            return None
        return next((r for r in self.recordings if r.id == self.selected_recording_id), None)


# ---------------------------------------------------------------------------
# Error
# ---------------------------------------------------------------------------


class ErrorResponse(BaseModel):
    """Error envelope returned by the API."""

    error: str
