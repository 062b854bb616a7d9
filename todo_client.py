"""Todo Registry API client.

This module defines a small client wrapper around the Todo Registry
HTTP API.  It uses the ``requests`` library internally and exposes one
method per service operation:

* :meth:`TodoRegistryClient.add` – create a todo, returning its id.
* :meth:`TodoRegistryClient.read` – fetch the text of a todo.
* :meth:`TodoRegistryClient.read_all` – fetch one page of todo texts.
* :meth:`TodoRegistryClient.update` – replace the text of a todo.
* :meth:`TodoRegistryClient.delete` – remove a todo.

Each of these returns the service's ``Ok``/``Err`` result, so callers
branch on the variant exactly as they would against the registry
itself.  :meth:`TodoRegistryClient.query_call` and
:meth:`TodoRegistryClient.update_call` issue raw calls by method name.

Transport failures and HTTP errors (a rejected call, a malformed id)
are not part of the service contract; they raise
:class:`TodoRegistryError`.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Sequence, Tuple

import requests

from todo_registry_api.app.core.result import Err, Ok, Result, from_variant


logger = logging.getLogger(__name__)

API_PREFIX = "/api/v1"


class TodoRegistryError(Exception):
    """Raised when a request fails below the Ok/Err contract."""

    def __init__(self, message: str, status_code: Optional[int] = None) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class TodoRegistryClient:
    """Client for interacting with the Todo Registry API."""

    def __init__(
        self,
        *,
        base_url: str,
        session: Optional[requests.Session] = None,
        timeout: float = 15,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL of the service, e.g. ``http://localhost:8000``.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
            timeout: Per-request timeout in seconds.
        """
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout

    # ------------------------------------------------------------------
    # Low level HTTP helpers
    # ------------------------------------------------------------------
    def _request(
        self, method: str, path: str, *, params: Dict[str, Any] | None = None,
        json_body: Any | None = None
    ) -> Tuple[Optional[Any], Optional[Dict[str, Any]]]:
        """Perform an HTTP request to the API.

        Args:
            method: HTTP method (``GET``, ``POST``, ``PUT``, ``DELETE``).
            path: Path relative to the API prefix (e.g. ``/todos``).
            params: Query parameters to include in the request.
            json_body: JSON body to send with the request.
        Returns:
            A tuple ``(data, error)``. ``data`` contains the parsed JSON
            response on success and ``error`` is ``None``. On failure,
            ``data`` is ``None`` and ``error`` is a dictionary with keys
            ``status_code`` and ``message`` describing the issue.
        """
        url = f"{self.base_url}{API_PREFIX}{path}"
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = self.session.request(
                method=method,
                url=url,
                params=params,
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
                    message = str(err_json.get("detail") or err_json)
                except ValueError:
                    message = exc.response.text
            if not message:
                message = str(exc)
            logger.error("API request failed (%s): %s", status, message)
            return None, {"status_code": status, "message": message}
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "message": str(exc)}

    def _variant(
        self, method: str, path: str, *, params: Dict[str, Any] | None = None,
        json_body: Any | None = None
    ) -> Result[Any]:
        data, error = self._request(method, path, params=params, json_body=json_body)
        if error:
            raise TodoRegistryError(error["message"], status_code=error["status_code"])
        try:
            return from_variant(data)
        except ValueError as exc:
            raise TodoRegistryError(f"Malformed reply from {path}: {exc}") from exc

    # ------------------------------------------------------------------
    # Todo operations
    # ------------------------------------------------------------------
    def add(self, text: str) -> Result[int]:
        return self._variant("POST", "/todos", json_body={"text": text})

    def read(self, todo_id: int) -> Result[str]:
        return self._variant("GET", f"/todos/{todo_id}")

    def read_all(self, page: int = 1) -> Result[Dict[str, Any]]:
        """Return one page as ``Ok({"items": [...], "next": page_or_None})``."""
        return self._variant("GET", "/todos", params={"page": page})

    def update(self, todo_id: int, text: str) -> Result[None]:
        return self._variant("PUT", f"/todos/{todo_id}", json_body={"text": text})

    def delete(self, todo_id: int) -> Result[None]:
        return self._variant("DELETE", f"/todos/{todo_id}")

    def iter_texts(self) -> List[str]:
        """Follow ``read_all`` cursors from page 1 and collect every text."""
        texts: List[str] = []
        page: Optional[int] = 1
        while page is not None:
            result = self.read_all(page)
            if isinstance(result, Err):
                # An empty registry has no first page.
                break
            texts.extend(result.value["items"])
            page = result.value["next"]
        return texts

    # ------------------------------------------------------------------
    # Raw calls
    # ------------------------------------------------------------------
    def query_call(self, method: str, *args: Any) -> Result[Any]:
        return self._call("query", method, args)

    def update_call(self, method: str, *args: Any) -> Result[Any]:
        return self._call("update", method, args)

    def _call(self, mode: str, method: str, args: Sequence[Any]) -> Result[Any]:
        data, error = self._request("POST", f"/call/{mode}/{method}", json_body={"args": list(args)})
        if error:
            raise TodoRegistryError(error["message"], status_code=error["status_code"])
        try:
            return from_variant((data or {}).get("reply"))
        except ValueError as exc:
            raise TodoRegistryError(f"Malformed reply from {method}: {exc}") from exc


__all__ = ["Ok", "Err", "TodoRegistryClient", "TodoRegistryError"]
