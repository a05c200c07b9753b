"""Tests for the recording card component.

The component's ``st`` module is patched with a MagicMock; button clicks
are simulated through ``st.button``'s return value.
"""

from unittest.mock import MagicMock, patch

import pytest

from src.services.audio.capture import BrowserCapture
from src.services.audio.media import MediaRegistry
from src.ui.components.recorder import RECORD_PAGE
from src.ui.components.recording_card import render_recording_card
from src.ui.controller import AppController


def _record(controller: AppController, audio: bytes) -> str:
    capture = BrowserCapture()
    controller.start_recording(capture)
    capture.push_blob(audio)
    controller.stop_recording()
    return controller.state.selected_recording_id


@pytest.fixture
def controller():
    return AppController(media=MediaRegistry())


@pytest.fixture
def mock_st():
    """Patch Streamlit inside the component; no button is clicked by default."""
    with (
        patch("src.ui.components.recording_card.st") as st,
        patch("src.ui.components.recording_card.play_recording"),
    ):
        st.columns.return_value = (MagicMock(), MagicMock(), MagicMock())
        st.button.return_value = False
        yield st


def _button_keys(mock_st) -> dict:
    return {c.kwargs.get("key"): c for c in mock_st.button.call_args_list}


def _header(mock_st) -> str:
    return mock_st.markdown.call_args[0][0]


class TestTranscriptDisplay:
    def test_untranscribed_shows_transcribe_button(self, controller, mock_st):
        recording_id = _record(controller, b"one")

        render_recording_card(controller, controller.state.recordings[0])

        assert f"transcribe_{recording_id}" in _button_keys(mock_st)
        assert "Transcribed" not in _header(mock_st)
        mock_st.code.assert_not_called()

    def test_empty_transcript_counts_as_untranscribed(self, controller, mock_st):
        recording_id = _record(controller, b"one")
        recording = controller.state.recordings[0].model_copy(update={"transcript": ""})

        render_recording_card(controller, recording)

        assert f"transcribe_{recording_id}" in _button_keys(mock_st)
        assert "Transcribed" not in _header(mock_st)
        mock_st.code.assert_not_called()

    def test_transcript_shown_with_badge(self, controller, mock_st):
        recording_id = _record(controller, b"one")
        recording = controller.state.recordings[0].model_copy(
            update={"transcript": "call bank\nbuy milk"}
        )

        render_recording_card(controller, recording)

        assert "Transcribed" in _header(mock_st)
        mock_st.code.assert_called_once_with("call bank\nbuy milk", language=None)
        assert f"transcribe_{recording_id}" not in _button_keys(mock_st)


class TestSelect:
    def test_select_loads_recording_into_recorder(self, controller, mock_st):
        older = _record(controller, b"one")
        _record(controller, b"two")
        mock_st.button.side_effect = lambda *args, **kwargs: kwargs.get("key") == (
            f"select_rec_{older}"
        )

        recording = next(r for r in controller.state.recordings if r.id == older)
        render_recording_card(controller, recording)

        assert controller.state.selected_recording_id == older
        mock_st.switch_page.assert_called_once_with(RECORD_PAGE)

    def test_select_disabled_for_current_selection(self, controller, mock_st):
        recording_id = _record(controller, b"one")

        render_recording_card(controller, controller.state.recordings[0])

        select = _button_keys(mock_st)[f"select_rec_{recording_id}"]
        assert select.kwargs["disabled"] is True
        assert "Selected" in _header(mock_st)

    def test_select_enabled_for_other_recordings(self, controller, mock_st):
        older = _record(controller, b"one")
        _record(controller, b"two")

        recording = next(r for r in controller.state.recordings if r.id == older)
        render_recording_card(controller, recording)

        select = _button_keys(mock_st)[f"select_rec_{older}"]
        assert select.kwargs["disabled"] is False
        mock_st.switch_page.assert_not_called()
