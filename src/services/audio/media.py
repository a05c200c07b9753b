"""Playable references for in-memory audio.

``MediaRegistry`` hands out opaque ``media://`` references for audio
blobs, the way a browser issues object URLs. The Streamlit views resolve
a reference back to bytes for ``st.audio``; deleting a recording revokes
its reference.
"""

import uuid

_SCHEME = "media://"


class MediaRegistry:
    """In-memory table of playable audio references."""

    def __init__(self) -> None:
        self._entries: dict[str, tuple[bytes, str]] = {}

    def create_url(self, audio: bytes, mime_type: str = "audio/webm") -> str:
        url = f"{_SCHEME}{uuid.uuid4().hex}"
        self._entries[url] = (audio, mime_type)
        return url

    def resolve(self, url: str) -> tuple[bytes, str]:
        """Return ``(audio, mime_type)`` for a live reference.

        Raises:
            KeyError: If the reference is unknown or was revoked.
        """
        return self._entries[url]

    def revoke(self, url: str) -> None:
        """Drop a reference. Revoking twice is harmless."""
        self._entries.pop(url, None)

    def __contains__(self, url: object) -> bool:
        return url in self._entries

    def __len__(self) -> int:
        return len(self._entries)
