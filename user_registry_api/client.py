"""User Registry API client.

A thin wrapper around the ``/users`` REST resource built on the
``requests`` library.  Every method returns a tuple ``(result, error)``:
on success ``error`` is ``None``; on failure ``result`` is empty and
``error`` is a dictionary with keys ``status_code`` and ``message``.
Network failures are reported the same way with ``status_code`` set to
``None``, so callers never have to catch ``requests`` exceptions.

Example::

    api = UserRegistryClient(base_url="http://localhost:3001")
    user, error = api.create_user(name="Ana", age=30)
    if error is None:
        api.replace_user(user["id"], name="Ana", age=31)
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple
from urllib.parse import quote

import requests


logger = logging.getLogger(__name__)

Error = Dict[str, Any]


class UserRegistryClient:
    """Client for the ``/users`` resource of a User Registry API server."""

    users_path = "/users"

    def __init__(
        self,
        *,
        base_url: str,
        session: Optional[requests.Session] = None,
        timeout: float = 15,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL for the API, e.g. ``http://localhost:3001``.
                Include any path prefix the server is mounted under.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
            timeout: Per request timeout in seconds.
        """
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout

    # ------------------------------------------------------------------
    # Low level HTTP helpers
    # ------------------------------------------------------------------
    def _request(
        self, method: str, path: str, *, json_body: Any | None = None
    ) -> Tuple[Optional[Any], Optional[Error]]:
        """Perform an HTTP request to the API.

        Returns:
            A tuple ``(data, error)``.  ``data`` holds the parsed JSON
            response, or ``None`` for an empty body.
        """
        url = f"{self.base_url}{path}"
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = self.session.request(
                method=method,
                url=url,
                json=json_body,
                timeout=self.timeout,
            )
            response.raise_for_status()
            if response.content:
                return response.json(), None
            return None, None
        except requests.HTTPError as exc:
            status = exc.response.status_code if exc.response is not None else None
            message = ""
            if exc.response is not None:
                try:
                    err_json = exc.response.json()
                except ValueError:
                    message = exc.response.text
                else:
                    if isinstance(err_json, dict):
                        message = str(err_json.get("message") or "")
                    else:
                        message = exc.response.text
            if not message:
                message = str(exc)
            logger.error("API request failed (%s): %s", status, message)
            return None, {"status_code": status, "message": message}
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "message": str(exc)}

    def _user_path(self, user_id: str) -> str:
        return f"{self.users_path}/{quote(str(user_id), safe='')}"

    @staticmethod
    def _body(name: Any, age: Any) -> Dict[str, Any]:
        body: Dict[str, Any] = {}
        if name is not None:
            body["name"] = name
        if age is not None:
            body["age"] = age
        return body

    # ------------------------------------------------------------------
    # User operations
    # ------------------------------------------------------------------
    def list_users(self) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        """Retrieve all users; the list is empty on failure."""
        data, error = self._request("GET", self.users_path)
        if error:
            return [], error
        return data or [], None

    def create_user(self, name: Any = None, age: Any = None) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Create a user.  Omitted fields are not sent at all."""
        return self._request("POST", self.users_path, json_body=self._body(name, age))

    def replace_user(self, user_id: str, name: Any = None, age: Any = None) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Replace ``name`` and ``age`` of the user ``user_id``.

        The server answers 404 for an unknown id and 400 when either
        field is missing; both come back as ``error``.
        """
        return self._request("PUT", self._user_path(user_id), json_body=self._body(name, age))

    def delete_user(self, user_id: str) -> Tuple[bool, Optional[Error]]:
        """Delete the user ``user_id``.

        Returns:
            A tuple ``(success, error)``.
        """
        _, error = self._request("DELETE", self._user_path(user_id))
        return error is None, error
