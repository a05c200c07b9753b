"""
Settings page: bulk clear actions and provider information.
"""

# Ensure project root is on sys.path (Streamlit page files need this).
import sys as _sys; from pathlib import Path as _Path; _r = str(_Path(__file__).resolve().parents[3]); _r in _sys.path or _sys.path.insert(0, _r)  # noqa: E702,I001

import streamlit as st  # noqa: E402

from src.core.config import get_settings  # noqa: E402
from src.core.models import ActiveTab  # noqa: E402
from src.ui.api_client import get_api_client  # noqa: E402
from src.ui.utils import get_controller  # noqa: E402

controller = get_controller()
controller.select_tab(ActiveTab.settings)
st.header("Settings")


@st.dialog("Clear all tasks?")
def _confirm_clear_tasks():
    st.write("This removes every task from this session.")
    col1, col2 = st.columns(2)
    with col1:
        if st.button("Clear", type="primary", use_container_width=True):
            controller.clear_tasks()
            st.rerun()
    with col2:
        if st.button("Cancel", use_container_width=True):
            st.rerun()


@st.dialog("Clear all recordings?")
def _confirm_clear_recordings():
    st.write("This removes every recording and its audio from this session.")
    col1, col2 = st.columns(2)
    with col1:
        if st.button("Clear", type="primary", use_container_width=True):
            controller.clear_recordings()
            st.rerun()
    with col2:
        if st.button("Cancel", use_container_width=True):
            st.rerun()


with st.container(border=True):
    st.subheader("Data")
    state = controller.state
    if st.button(f"Clear All Tasks ({len(state.tasks)})", use_container_width=True):
        _confirm_clear_tasks()
    if st.button(f"Clear All Recordings ({len(state.recordings)})", use_container_width=True):
        _confirm_clear_recordings()

with st.container(border=True):
    st.subheader("Backend")
    st.text(st.session_state.api_base_url)
    _ok, _msg = get_api_client(st.session_state.api_base_url).check_connection()
    if _ok:
        st.success(_msg)
    else:
        st.error(_msg)

with st.container(border=True):
    st.subheader("About")
    _settings = get_settings()
    _llm_model = _settings.openai_model if _settings.llm_provider == "openai" else _settings.claude_model
    st.write(
        f"VoiceTask uses {_settings.stt_provider} ({_settings.stt_model}) for transcription "
        f"and {_settings.llm_provider} ({_llm_model}) for task organization."
    )
