"""
Recording card display components.
"""

import streamlit as st

from src.core.models import Recording
from src.ui.components.recorder import RECORD_PAGE, run_transcription
from src.ui.controller import AppController
from src.ui.utils import format_timestamp, play_recording


def render_recording_card(controller: AppController, recording: Recording) -> None:
    """Render one saved recording with playback, transcript and actions."""
    selected = controller.state.selected_recording_id == recording.id

    with st.container(border=True):
        col1, col2, col3 = st.columns([4, 1, 1])
        with col1:
            header = f"**{format_timestamp(recording.created_at)}**"
            if recording.transcribed:
                header += "  :green[Transcribed]"
            if selected:
                header += "  :blue[Selected]"
            st.markdown(header)
        with col2:
            if st.button(
                "Select",
                key=f"select_rec_{recording.id}",
                disabled=selected,
                help="Open in the recorder",
            ):
                controller.select_recording(recording.id)
                st.switch_page(RECORD_PAGE)
        with col3:
            if st.button("\U0001f5d1", key=f"delete_rec_{recording.id}", help="Delete recording"):
                controller.delete_recording(recording.id)
                st.rerun()

        play_recording(controller, recording.url)

        if recording.transcribed:
            st.code(recording.transcript, language=None)
        else:
            transcribing = controller.state.transcribing
            if st.button(
                "Transcribing..." if transcribing else "Transcribe",
                key=f"transcribe_{recording.id}",
                disabled=transcribing,
                use_container_width=True,
            ):
                run_transcription(controller, recording.id)


def render_recording_list(controller: AppController) -> None:
    """Render every recording, newest first."""
    recordings = controller.state.recordings
    if not recordings:
        st.info("No recordings yet.")
        return

    st.caption(f"{len(recordings)} recording(s)")
    for recording in recordings:
        render_recording_card(controller, recording)
