"""User Backend API client.

A thin wrapper around the HTTP API for Python callers such as scripts,
tests or a desktop front end.  It uses the ``requests`` library.

Every method returns a tuple ``(data, error)``:

* on success ``data`` holds the unwrapped ``data`` member of the
  response envelope and ``error`` is ``None``;
* on failure ``data`` is ``None`` (``False`` for :meth:`delete_user`)
  and ``error`` is a dictionary with keys ``status_code`` and
  ``message``.  ``status_code`` is ``None`` when the server could not
  be reached at all.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple

import requests


logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "http://localhost:8080"
DEFAULT_TIMEOUT = 10

ApiError = Dict[str, Any]


class UserAPIClient:
    """Client for the ``/api/users`` endpoints."""

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        *,
        timeout: float = DEFAULT_TIMEOUT,
        session: Optional[requests.Session] = None,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Root URL of the service, e.g. ``http://localhost:8080``.
            timeout: Per‑request timeout in seconds.
            session: Optional session.  Anything with a compatible
                ``request`` method works, which is how the tests drive
                the client against an in‑process app.
        """
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()

    # ------------------------------------------------------------------
    # Low level HTTP helper
    # ------------------------------------------------------------------
    def _request(
        self, method: str, path: str, *, json_body: Any | None = None
    ) -> Tuple[Optional[Any], Optional[ApiError]]:
        """Perform an HTTP request and decode the JSON body.

        Returns ``(body, None)`` for 2xx responses and
        ``(None, error)`` otherwise.
        """
        url = f"{self.base_url}{path}"
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = self.session.request(
                method=method,
                url=url,
                json=json_body,
                headers={"Content-Type": "application/json"},
                timeout=self.timeout,
            )
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "message": str(exc)}

        try:
            body = response.json() if response.content else None
        except ValueError:
            body = None

        if response.status_code >= 400:
            message = ""
            if isinstance(body, dict):
                message = body.get("error") or body.get("message") or ""
            if not message:
                message = response.text or f"HTTP {response.status_code}"
            logger.error("API request failed (%s): %s", response.status_code, message)
            return None, {"status_code": response.status_code, "message": message}
        return body, None

    def _data(self, method: str, path: str, json_body: Any | None = None) -> Tuple[Optional[Any], Optional[ApiError]]:
        body, error = self._request(method, path, json_body=json_body)
        if error:
            return None, error
        return (body or {}).get("data"), None

    # ------------------------------------------------------------------
    # User operations
    # ------------------------------------------------------------------
    def list_users(self) -> Tuple[List[Dict[str, Any]], Optional[ApiError]]:
        """Retrieve all users.  Returns an empty list on failure."""
        data, error = self._data("GET", "/api/users")
        if error:
            return [], error
        return data or [], None

    def get_user(self, user_id: int) -> Tuple[Optional[Dict[str, Any]], Optional[ApiError]]:
        return self._data("GET", f"/api/users/{user_id}")

    def create_user(self, name: str, email: str) -> Tuple[Optional[Dict[str, Any]], Optional[ApiError]]:
        return self._data("POST", "/api/users", {"name": name, "email": email})

    def update_user(
        self, user_id: int, *, name: Optional[str] = None, email: Optional[str] = None
    ) -> Tuple[Optional[Dict[str, Any]], Optional[ApiError]]:
        """Update a user.  Only the fields that are given are sent."""
        payload: Dict[str, str] = {}
        if name is not None:
            payload["name"] = name
        if email is not None:
            payload["email"] = email
        return self._data("PUT", f"/api/users/{user_id}", payload)

    def delete_user(self, user_id: int) -> Tuple[bool, Optional[ApiError]]:
        _, error = self._request("DELETE", f"/api/users/{user_id}")
        if error:
            return False, error
        return True, None

    def health(self) -> Tuple[Optional[Dict[str, Any]], Optional[ApiError]]:
        """Return the body of ``GET /health``."""
        return self._request("GET", "/health")
