"""
Recorder component: capture, playback, and transcription of the selected recording.

States: idle -> recording -> idle
"""

import logging

import streamlit as st

from src.core.config import get_settings
from src.core.exceptions import InvalidRecordingTransitionError, MicrophoneAccessError
from src.core.models import ActiveTab, RecordingPhase
from src.services.audio.capture import BrowserCapture, create_capture
from src.ui.api_client import get_api_client
from src.ui.controller import AppController
from src.ui.utils import get_controller, play_recording

logger = logging.getLogger(__name__)

RECORD_PAGE = "pages/01_record.py"
TASKS_PAGE = "pages/02_tasks.py"


def run_transcription(controller: AppController, recording_id: str) -> None:
    """Transcribe a recording and jump to the Tasks page when tasks arrive."""
    client = get_api_client(st.session_state.api_base_url)
    with st.spinner("Transcribing..."):
        state = controller.transcribe(recording_id, client)
    if state.active_tab == ActiveTab.tasks:
        st.switch_page(TASKS_PAGE)
    else:
        st.warning("No tasks were created. Check the server log for details.")


def render_recorder() -> None:
    """Render the record view based on the controller's phase."""
    controller = get_controller()
    st.caption(
        "Record your thoughts, ideas, or to-do list. "
        "AI will transcribe and organize tasks automatically."
    )

    notice = st.session_state.pop("recorder_notice", None)
    if notice:
        st.warning(notice)

    if controller.state.phase == RecordingPhase.idle:
        _render_idle(controller)
    else:
        _render_recording(controller)

    selected = controller.state.selected_recording
    if selected is not None:
        with st.container(border=True):
            play_recording(controller, selected.url)
            transcribing = controller.state.transcribing
            if st.button(
                "Transcribing..." if transcribing else "Transcribe & Organize",
                type="primary",
                disabled=transcribing,
                use_container_width=True,
            ):
                run_transcription(controller, selected.id)

    _render_stats(controller)


def _render_idle(controller: AppController) -> None:
    st.info("Click to start recording")
    if st.button("Start recording", type="primary"):
        settings = get_settings()
        kwargs = {}
        if settings.capture_backend == "microphone":
            kwargs["sample_rate"] = settings.capture_sample_rate
        try:
            controller.start_recording(create_capture(settings.capture_backend, **kwargs))
        except MicrophoneAccessError as exc:
            st.error(exc.detail)
            return
        except InvalidRecordingTransitionError as exc:
            st.warning(exc.detail)
            return
        st.rerun()


def _render_recording(controller: AppController) -> None:
    st.warning("Recording... Click to stop")

    capture = controller.capture
    if isinstance(capture, BrowserCapture):
        audio = st.audio_input("Record audio")
        if audio is not None:
            capture.push_blob(audio.getvalue(), audio.type)

    if st.button("Stop recording", type="primary"):
        count = len(controller.state.recordings)
        try:
            state = controller.stop_recording()
        except InvalidRecordingTransitionError as exc:
            st.warning(exc.detail)
            return
        if len(state.recordings) == count:
            st.session_state.recorder_notice = (
                "No audio was captured. Check microphone permissions and try again."
            )
        st.rerun()


def _render_stats(controller: AppController) -> None:
    state = controller.state
    col1, col2, col3 = st.columns(3)
    col1.metric("Urgent", len(state.urgent_tasks))
    col2.metric("Later", len(state.later_tasks))
    col3.metric("Completed", len(state.completed_tasks))
