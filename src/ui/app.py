"""
VoiceTask Streamlit UI: main entry point.

Run with: ``streamlit run src/ui/app.py``
"""

# ---------------------------------------------------------------------------
# Ensure project root is on sys.path so ``from src.xxx`` imports work.
# Streamlit replaces sys.path[0] with the script directory (src/ui/),
# which removes the project root needed for absolute ``src.*`` imports.
# ---------------------------------------------------------------------------
import logging  # noqa: E402
import sys  # noqa: E402
from pathlib import Path  # noqa: E402

_project_root = str(Path(__file__).resolve().parent.parent.parent)
if _project_root not in sys.path:
    sys.path.insert(0, _project_root)

import streamlit as st  # noqa: E402

from src.core.config import get_settings  # noqa: E402
from src.ui.api_client import get_api_client  # noqa: E402
from src.ui.utils import get_controller  # noqa: E402

_settings = get_settings()
logging.basicConfig(
    level=_settings.log_level.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

# ---------------------------------------------------------------------------
# Page config (must be first Streamlit call)
# ---------------------------------------------------------------------------
st.set_page_config(
    page_title="VoiceTask",
    page_icon="\U0001f399️",
    layout="wide",
)

# ---------------------------------------------------------------------------
# Session state defaults
# ---------------------------------------------------------------------------
if "api_base_url" not in st.session_state:
    st.session_state.api_base_url = _settings.api_base_url

controller = get_controller()

# ---------------------------------------------------------------------------
# Sidebar
# ---------------------------------------------------------------------------
with st.sidebar:
    st.title("\U0001f399️ VoiceTask")
    st.caption("AI voice-to-text task organizer")
    st.divider()
    st.session_state.api_base_url = st.text_input(
        "Backend API URL",
        value=st.session_state.api_base_url,
        help="URL of the VoiceTask FastAPI backend server (default: http://localhost:8000)",
    )

    # Connection status indicator
    _client = get_api_client(st.session_state.api_base_url)
    _conn_ok, _conn_msg = _client.check_connection()
    if _conn_ok:
        st.success(f"Backend: {_conn_msg}")
    else:
        st.error(f"Backend: {_conn_msg}")

# ---------------------------------------------------------------------------
# Navigation (multipage)
# ---------------------------------------------------------------------------
_open_tasks = controller.state.open_task_count

record_page = st.Page(
    "pages/01_record.py",
    title="Record",
    icon="\U0001f3a4",
    default=True,
)
tasks_page = st.Page(
    "pages/02_tasks.py",
    title=f"Tasks ({_open_tasks})" if _open_tasks else "Tasks",
    icon="\U0001f4cb",
)
recordings_page = st.Page(
    "pages/03_recordings.py",
    title="Recordings",
    icon="\U0001f4be",
)
settings_page = st.Page(
    "pages/04_settings.py",
    title="Settings",
    icon="⚙️",
)

nav = st.navigation([record_page, tasks_page, recordings_page, settings_page])
nav.run()
