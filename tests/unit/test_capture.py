"""Tests for the capture devices.

``sounddevice.InputStream`` is patched so no PortAudio device is opened.
"""

import io
from unittest.mock import MagicMock, patch

import numpy as np
import pytest
import soundfile as sf

from src.core.exceptions import MicrophoneAccessError
from src.services.audio.capture import (
    BrowserCapture,
    MicrophoneCapture,
    create_capture,
)

# ---------------------------------------------------------------------------
# BrowserCapture
# ---------------------------------------------------------------------------


class TestBrowserCapture:
    def test_open_and_close(self):
        capture = BrowserCapture()
        capture.open()
        assert capture.is_open
        capture.close()
        capture.close()
        assert not capture.is_open

    def test_chunks_joined_in_order(self):
        capture = BrowserCapture()
        capture.open()
        capture.push(b"ab")
        capture.push(b"")
        capture.push(b"cd")
        assert capture.finalize() == b"abcd"

    def test_finalize_without_chunks_is_empty(self):
        capture = BrowserCapture()
        capture.open()
        assert capture.finalize() == b""

    def test_push_blob_replaces_buffer_and_mime(self):
        capture = BrowserCapture()
        capture.open()
        capture.push(b"stale")
        capture.push_blob(b"RIFFwav", mime_type="audio/wav")

        assert capture.finalize() == b"RIFFwav"
        assert capture.mime_type == "audio/wav"

    def test_reopen_discards_previous_buffer(self):
        capture = BrowserCapture()
        capture.open()
        capture.push(b"old")
        capture.close()
        capture.open()
        assert capture.finalize() == b""


# ---------------------------------------------------------------------------
# MicrophoneCapture
# ---------------------------------------------------------------------------


def _sounddevice():
    try:
        import sounddevice
    except OSError:
        pytest.skip("PortAudio library not available")
    return sounddevice


@pytest.fixture
def mock_stream():
    stream = MagicMock()
    sd = _sounddevice()
    with patch.object(sd, "InputStream", return_value=stream) as cls:
        stream.factory = cls
        yield stream


class TestMicrophoneCapture:
    def test_open_starts_mono_float_stream(self, mock_stream):
        capture = MicrophoneCapture(sample_rate=16000, device=2)
        capture.open()

        kwargs = mock_stream.factory.call_args.kwargs
        assert kwargs["samplerate"] == 16000
        assert kwargs["channels"] == 1
        assert kwargs["device"] == 2
        assert kwargs["dtype"] == np.float32
        mock_stream.start.assert_called_once()

    def test_close_stops_stream(self, mock_stream):
        capture = MicrophoneCapture()
        capture.open()
        capture.close()
        capture.close()

        mock_stream.stop.assert_called_once()
        mock_stream.close.assert_called_once()

    def test_device_refusal_raises_access_error(self):
        sd = _sounddevice()
        with patch.object(
            sd,
            "InputStream",
            side_effect=sd.PortAudioError("Error querying device -1"),
        ):
            capture = MicrophoneCapture()
            with pytest.raises(MicrophoneAccessError) as exc_info:
                capture.open()
        assert exc_info.value.status_code == 403
        assert "microphone" in exc_info.value.detail

    def test_finalize_encodes_wav(self, mock_stream):
        capture = MicrophoneCapture(sample_rate=8000)
        capture.open()
        frame = np.zeros((800, 1), dtype=np.float32)
        capture._callback(frame, 800, None, None)
        capture._callback(frame, 800, None, None)

        wav = capture.finalize()

        assert wav[:4] == b"RIFF"
        data, rate = sf.read(io.BytesIO(wav))
        assert rate == 8000
        assert len(data) == 1600
        assert capture.mime_type == "audio/wav"

    def test_finalize_without_frames_is_empty(self, mock_stream):
        capture = MicrophoneCapture()
        capture.open()
        assert capture.finalize() == b""


# ---------------------------------------------------------------------------
# Factory
# ---------------------------------------------------------------------------


def test_factory_browser():
    assert isinstance(create_capture("browser"), BrowserCapture)


def test_factory_microphone():
    capture = create_capture("microphone", sample_rate=16000)
    assert isinstance(capture, MicrophoneCapture)


def test_factory_unknown():
    with pytest.raises(ValueError, match="Unknown capture backend"):
        create_capture("tape")
