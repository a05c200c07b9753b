"""
Recordings page: saved recordings with playback and transcripts.
"""

# Ensure project root is on sys.path (Streamlit page files need this).
import sys as _sys; from pathlib import Path as _Path; _r = str(_Path(__file__).resolve().parents[3]); _r in _sys.path or _sys.path.insert(0, _r)  # noqa: E702,I001

import streamlit as st  # noqa: E402

from src.core.models import ActiveTab  # noqa: E402
from src.ui.components.recording_card import render_recording_list  # noqa: E402
from src.ui.utils import get_controller  # noqa: E402

controller = get_controller()
controller.select_tab(ActiveTab.recordings)
st.header("Recordings")
render_recording_list(controller)
