"""
Synchronous HTTP client for the VoiceTask backend API.

Uses ``httpx.Client`` (sync) because Streamlit scripts run synchronously.
"""

import logging

import httpx
import streamlit as st

logger = logging.getLogger(__name__)


class APIError(Exception):
    """User-friendly API error with categorized message.

    Categories: "connection", "timeout", "http", "network", "decode", "unknown".
    Used by the UI to display appropriate error messages.
    """

    def __init__(self, message: str, category: str = "unknown") -> None:
        self.message = message
        self.category = category
        super().__init__(message)


class APIClient:
    """Thin synchronous wrapper around httpx for calling the FastAPI backend.

    All methods return parsed JSON or raise ``APIError`` with
    user-friendly messages for display in the UI.
    """

    def __init__(
        self,
        base_url: str = "http://localhost:8000",
        http_client: httpx.Client | None = None,
    ) -> None:
        """Initialize the HTTP client.

        Args:
            base_url: Base URL of the VoiceTask FastAPI backend.
            http_client: Preconfigured client to use instead of creating one
                (e.g. a Starlette ``TestClient``).
        """
        self._base_url = base_url.rstrip("/")
        self._client = http_client or httpx.Client(base_url=self._base_url, timeout=30.0)

    def _request(self, method: str, path: str, **kwargs) -> httpx.Response:
        """Execute an HTTP request with user-friendly error handling.

        Args:
            method: HTTP method name ("get", "post").
            path: API endpoint path (e.g. "/api/transcribe").
            **kwargs: Passed through to httpx (files, params, timeout, etc.).

        Returns:
            The httpx Response object with a successful status code.

        Raises:
            APIError: On connection, timeout, HTTP status, or network errors.
        """
        try:
            resp = getattr(self._client, method)(path, **kwargs)
            resp.raise_for_status()
            return resp
        except httpx.ConnectError:
            raise APIError(
                "Backend server is not running. "
                "Start it with: `uvicorn src.api.app:app --reload --port 8000`",
                category="connection",
            ) from None
        except httpx.TimeoutException:
            raise APIError(
                "Request timed out. The server may be overloaded.",
                category="timeout",
            ) from None
        except httpx.HTTPStatusError as exc:
            try:
                detail = exc.response.json().get("error", exc.response.text)
            except Exception:
                detail = exc.response.text or str(exc)
            raise APIError(str(detail), category="http") from None
        except httpx.HTTPError as exc:
            raise APIError(f"Network error: {exc}", category="network") from None

    @staticmethod
    def _json(resp: httpx.Response):
        try:
            return resp.json()
        except ValueError as exc:
            raise APIError(f"Invalid JSON from server: {exc}", category="decode") from None

    # -- health --

    def health_check(self) -> dict:
        return self._json(self._request("get", "/health"))

    def check_connection(self) -> tuple[bool, str]:
        """Check if the backend is reachable. Returns (ok, message)."""
        try:
            self.health_check()
            return True, "Connected"
        except APIError as exc:
            return False, exc.message

    # -- transcription --

    def transcribe(
        self,
        audio: bytes,
        filename: str = "audio.webm",
        mime_type: str = "audio/webm",
    ):
        """Upload audio as multipart field ``audio`` and return the task buckets.

        Transcription plus classification can take a while, so the timeout
        is longer than the client default.
        """
        return self._json(
            self._request(
                "post",
                "/api/transcribe",
                files={"audio": (filename, audio, mime_type)},
                timeout=300.0,
            )
        )


@st.cache_resource
def get_api_client(base_url: str = "http://localhost:8000") -> APIClient:
    """Return a cached APIClient, keyed by base_url.

    Uses Streamlit's ``cache_resource`` to persist the client across reruns.
    When the base URL changes (e.g. user updates Settings), a new client
    is created automatically because the cache key includes the parameter.
    """
    return APIClient(base_url=base_url)
