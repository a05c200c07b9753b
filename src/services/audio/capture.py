"""Audio capture devices.

A capture device is opened when recording starts, buffers audio chunks
while open, and is finalized into a single audio object when recording
stops. ``AppController`` drives the lifecycle; the devices only buffer.
"""

import io
import logging
from abc import ABC, abstractmethod

import numpy as np
import soundfile as sf

from src.core.exceptions import MicrophoneAccessError

logger = logging.getLogger(__name__)


class BaseCapture(ABC):
    """Interface every capture device implements."""

    mime_type: str = "audio/webm"

    def __init__(self) -> None:
        self._chunks: list[bytes] = []

    @abstractmethod
    def open(self) -> None:
        """Acquire the device.

        Raises:
            MicrophoneAccessError: If the device cannot be used.
        """

    @abstractmethod
    def close(self) -> None:
        """Release the device. Safe to call more than once."""

    def push(self, chunk: bytes) -> None:
        """Buffer one chunk of encoded audio; empty chunks are dropped."""
        if chunk:
            self._chunks.append(chunk)

    def finalize(self) -> bytes:
        """Join the buffered chunks into one audio object."""
        return b"".join(self._chunks)


class BrowserCapture(BaseCapture):
    """Capture performed by the browser's recorder widget.

    ``st.audio_input`` owns the microphone and delivers the finished blob
    to the page, which pushes it here. Permission prompts happen in the
    browser, so ``open`` never fails.
    """

    def __init__(self, mime_type: str = "audio/webm") -> None:
        super().__init__()
        self.mime_type = mime_type
        self._open = False

    def open(self) -> None:
        self._chunks = []
        self._open = True

    def close(self) -> None:
        self._open = False

    def push_blob(self, data: bytes, mime_type: str | None = None) -> None:
        """Replace the buffer with a complete blob from the browser widget."""
        self._chunks = []
        if mime_type:
            self.mime_type = mime_type
        self.push(data)

    @property
    def is_open(self) -> bool:
        return self._open


class MicrophoneCapture(BaseCapture):
    """Local microphone capture through PortAudio (``sounddevice``).

    Frames arrive on the PortAudio callback thread as float32 arrays and
    are encoded to a WAV container on ``finalize``.

    Args:
        sample_rate: Capture rate in Hz.
        device: PortAudio device index, or None for the system default.
    """

    mime_type = "audio/wav"

    def __init__(self, sample_rate: int = 44100, device: int | None = None) -> None:
        super().__init__()
        self._sample_rate = sample_rate
        self._device = device
        self._frames: list[np.ndarray] = []
        self._stream = None

    def _callback(self, indata, frames, time, status) -> None:  # noqa: ANN001
        if status:
            logger.debug("Audio callback status: %s", status)
        if indata.size > 0:
            self._frames.append(indata.copy())

    def open(self) -> None:
        try:
            import sounddevice as sd
        except OSError as exc:
            logger.error("PortAudio is unavailable: %s", exc)
            raise MicrophoneAccessError() from exc

        self._frames = []
        try:
            self._stream = sd.InputStream(
                samplerate=self._sample_rate,
                channels=1,
                device=self._device,
                callback=self._callback,
                dtype=np.float32,
            )
            self._stream.start()
        except sd.PortAudioError as exc:
            self._stream = None
            logger.error("Error starting recording: %s", exc)
            raise MicrophoneAccessError() from exc

    def close(self) -> None:
        if self._stream is not None:
            self._stream.stop()
            self._stream.close()
            self._stream = None

    def finalize(self) -> bytes:
        if not self._frames:
            return b""
        data = np.concatenate(self._frames, axis=0)
        buf = io.BytesIO()
        sf.write(buf, data, self._sample_rate, format="WAV")
        return buf.getvalue()


def create_capture(backend: str, **kwargs) -> BaseCapture:
    """Factory for capture devices ("browser" or "microphone").

    Raises:
        ValueError: If backend is unknown.
    """
    if backend == "browser":
        return BrowserCapture(**kwargs)
    elif backend == "microphone":
        return MicrophoneCapture(**kwargs)
    else:
        raise ValueError(f"Unknown capture backend: {backend}")
