"""
Audio module - Capture devices and playable references.
"""

from .capture import BaseCapture, BrowserCapture, MicrophoneCapture, create_capture
from .media import MediaRegistry

__all__ = [
    "BaseCapture",
    "BrowserCapture",
    "MediaRegistry",
    "MicrophoneCapture",
    "create_capture",
]
