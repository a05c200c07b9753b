"""
Session controller for the Streamlit client.

``AppController`` owns the session's ``AppState`` and exposes one command
per user action. Every command swaps in a new immutable snapshot, so the
views only ever read a consistent state.

Recording lifecycle: idle -> recording -> idle
"""

import logging

from src.core.exceptions import (
    InvalidRecordingTransitionError,
    RecordingNotFoundError,
    TaskNotFoundError,
)
from src.core.models import (
    ActiveTab,
    AppState,
    Recording,
    RecordingPhase,
    Task,
    TaskCategory,
    TaskPriority,
)
from src.services.audio.capture import BaseCapture
from src.services.audio.media import MediaRegistry
from src.ui.api_client import APIClient, APIError

logger = logging.getLogger(__name__)

_EXTENSIONS = {
    "audio/webm": ".webm",
    "audio/wav": ".wav",
    "audio/x-wav": ".wav",
    "audio/ogg": ".ogg",
    "audio/mpeg": ".mp3",
    "audio/mp4": ".m4a",
}


def _upload_filename(recording: Recording) -> str:
    mime = recording.mime_type.split(";")[0].strip()
    return f"recording-{recording.id}{_EXTENSIONS.get(mime, '.webm')}"


def _bucket(data: dict, key: str) -> list:
    """Return ``data[key]`` as a list, ``[]`` when absent or null."""
    value = data.get(key)
    if value is None:
        return []
    if not isinstance(value, list):
        raise ValueError(f"Expected a list for {key!r}, got {type(value).__name__}")
    return value


class AppController:
    """Command surface over one session's state.

    Args:
        media: Registry issuing playable references for recordings.
        state: Initial snapshot (defaults to an empty session).
    """

    def __init__(self, media: MediaRegistry | None = None, state: AppState | None = None) -> None:
        self._media = media or MediaRegistry()
        self._state = state or AppState()
        self._capture: BaseCapture | None = None

    @property
    def state(self) -> AppState:
        return self._state

    @property
    def media(self) -> MediaRegistry:
        return self._media

    @property
    def capture(self) -> BaseCapture | None:
        """The open capture device while recording, else None."""
        return self._capture

    def _commit(self, **update) -> AppState:
        self._state = self._state.model_copy(update=update)
        return self._state

    def _get_recording(self, recording_id: str) -> Recording:
        for rec in self._state.recordings:
            if rec.id == recording_id:
                return rec
        raise RecordingNotFoundError(recording_id)

    def _replace_task(self, task_id: str, **update) -> AppState:
        tasks = list(self._state.tasks)
        for idx, task in enumerate(tasks):
            if task.id == task_id:
                tasks[idx] = task.model_copy(update=update)
                return self._commit(tasks=tuple(tasks))
        raise TaskNotFoundError(task_id)

    # -- navigation --

    def select_tab(self, tab: ActiveTab | str) -> AppState:
        return self._commit(active_tab=ActiveTab(tab))

    def select_recording(self, recording_id: str | None) -> AppState:
        if recording_id is not None:
            self._get_recording(recording_id)
        return self._commit(selected_recording_id=recording_id)

    # -- recording lifecycle --

    def start_recording(self, capture: BaseCapture) -> AppState:
        """Open the capture device and enter the recording phase.

        Raises:
            InvalidRecordingTransitionError: Already recording.
            MicrophoneAccessError: The device refused access; phase stays idle.
        """
        if self._state.phase == RecordingPhase.recording:
            raise InvalidRecordingTransitionError("recording", "start recording")

        capture.open()
        self._capture = capture
        logger.info("Recording started (%s)", type(capture).__name__)
        return self._commit(phase=RecordingPhase.recording)

    def stop_recording(self) -> AppState:
        """Finalize the capture into a new, selected Recording.

        A capture that produced no audio (permission denied in the browser,
        or nothing recorded) returns to idle without adding a Recording.

        Raises:
            InvalidRecordingTransitionError: Not recording.
        """
        if self._state.phase == RecordingPhase.idle or self._capture is None:
            raise InvalidRecordingTransitionError("idle", "stop recording")

        capture = self._capture
        try:
            audio = capture.finalize()
        finally:
            capture.close()
            self._capture = None

        if not audio:
            logger.warning("Recording stopped with no audio captured")
            return self._commit(phase=RecordingPhase.idle)

        recording = Recording(
            audio=audio,
            mime_type=capture.mime_type,
            url=self._media.create_url(audio, capture.mime_type),
        )
        logger.info("Recording %s stopped (%d bytes)", recording.id, len(audio))
        return self._commit(
            phase=RecordingPhase.idle,
            recordings=(recording, *self._state.recordings),
            selected_recording_id=recording.id,
        )

    # -- transcription --

    def transcribe(self, recording_id: str, api_client: APIClient) -> AppState:
        """Send a recording to the backend and merge the returned tasks.

        Failures are logged and leave tasks and transcripts untouched.
        ``transcribing`` is cleared on every exit path.
        """
        recording = self._get_recording(recording_id)
        if self._state.transcribing:
            logger.info("Transcription already in progress; ignoring %s", recording_id)
            return self._state

        self._commit(transcribing=True)
        try:
            data = api_client.transcribe(
                recording.audio,
                filename=_upload_filename(recording),
                mime_type=recording.mime_type,
            )
            self._apply_classification(recording.id, data)
        except (APIError, ValueError) as exc:
            logger.error("Error transcribing: %s", exc)
        finally:
            self._commit(transcribing=False)
        return self._state

    def _apply_classification(self, recording_id: str, data) -> None:
        if not isinstance(data, dict):
            raise ValueError(f"Unexpected response body: {data!r}")
        if data.get("urgent") is None and data.get("later") is None:
            logger.info("Classification for %s contained no task buckets", recording_id)
            return

        urgent = _bucket(data, "urgent")
        later = _bucket(data, "later")
        new_tasks = [
            Task(text=text, category=TaskCategory.urgent, priority=TaskPriority.high)
            for text in urgent
        ] + [
            Task(text=text, category=TaskCategory.later, priority=TaskPriority.medium)
            for text in later
        ]

        transcript = "\n".join([*urgent, *later])
        recordings = tuple(
            rec.model_copy(update={"transcript": transcript}) if rec.id == recording_id else rec
            for rec in self._state.recordings
        )
        logger.info(
            "Added %d urgent and %d later tasks from %s", len(urgent), len(later), recording_id
        )
        self._commit(
            tasks=(*new_tasks, *self._state.tasks),
            recordings=recordings,
            active_tab=ActiveTab.tasks,
        )

    # -- task mutations --

    def toggle_task(self, task_id: str) -> AppState:
        """Flip completion. Un-completing always lands in ``later``."""
        task = next((t for t in self._state.tasks if t.id == task_id), None)
        if task is None:
            raise TaskNotFoundError(task_id)
        if task.category == TaskCategory.completed:
            category = TaskCategory.later
        else:
            category = TaskCategory.completed
        return self._replace_task(task_id, category=category)

    def set_priority(self, task_id: str, priority: TaskPriority | str) -> AppState:
        return self._replace_task(task_id, priority=TaskPriority(priority))

    def delete_task(self, task_id: str) -> AppState:
        tasks = tuple(t for t in self._state.tasks if t.id != task_id)
        if len(tasks) == len(self._state.tasks):
            raise TaskNotFoundError(task_id)
        return self._commit(tasks=tasks)

    def clear_tasks(self) -> AppState:
        return self._commit(tasks=())

    # -- recording mutations --

    def delete_recording(self, recording_id: str) -> AppState:
        """Remove a recording and revoke its playable reference."""
        recording = self._get_recording(recording_id)
        self._media.revoke(recording.url)
        selected = self._state.selected_recording_id
        return self._commit(
            recordings=tuple(r for r in self._state.recordings if r.id != recording_id),
            selected_recording_id=None if selected == recording_id else selected,
        )

    def clear_recordings(self) -> AppState:
        for rec in self._state.recordings:
            self._media.revoke(rec.url)
        return self._commit(recordings=(), selected_recording_id=None)
