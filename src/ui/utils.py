"""UI utility functions."""

from datetime import datetime

import streamlit as st

from src.ui.controller import AppController


def get_controller() -> AppController:
    """Return this session's controller, creating it on first access."""
    if "controller" not in st.session_state:
        st.session_state.controller = AppController()
    return st.session_state.controller


def format_timestamp(value: datetime) -> str:
    """Render a UTC timestamp in the viewer's local time."""
    return value.astimezone().strftime("%Y-%m-%d %H:%M:%S")


def play_recording(controller: AppController, url: str) -> None:
    """Resolve a playable reference and render an audio player for it."""
    try:
        audio, mime_type = controller.media.resolve(url)
    except KeyError:
        st.caption("Audio no longer available.")
        return
    st.audio(audio, format=mime_type)
