"""Task Manager API client.

A small wrapper around the HTTP API for scripts and bots that manage a
task list remotely.  It uses the ``requests`` library and exposes one
method per operation:

* :meth:`TaskManagerAPI.list_tasks` – return every task.
* :meth:`TaskManagerAPI.create_task` – add a task with a name.
* :meth:`TaskManagerAPI.delete_task` – remove a task by id.

Every method returns a ``(result, error)`` tuple.  On success ``error``
is ``None``; on failure ``result`` is empty and ``error`` is a
dictionary with ``status_code`` and ``message``.  Network and HTTP
errors are logged and never raised to the caller.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple

import requests


logger = logging.getLogger(__name__)

Error = Dict[str, Any]


class TaskManagerAPI:
    """Client for a running Task Manager API service."""

    def __init__(
        self,
        *,
        base_url: str,
        prefix: str = "/api",
        session: Optional[requests.Session] = None,
        timeout: float = 15,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL of the service, e.g. ``http://localhost:3000``.
            prefix: Path prefix of the task routes (``/api`` or ``/api/v1``).
            session: Optional requests session.  If not supplied a
                session will be created automatically.
            timeout: Request timeout in seconds.
        """
        self.base_url = base_url.rstrip("/")
        self.prefix = "/" + prefix.strip("/") if prefix.strip("/") else ""
        self.session = session or requests.Session()
        self.timeout = timeout

    # ------------------------------------------------------------------
    # Low level HTTP helpers
    # ------------------------------------------------------------------
    def _request(
        self, method: str, path: str, *, json_body: Any | None = None
    ) -> Tuple[Optional[Any], Optional[Error]]:
        """Perform an HTTP request against the task routes.

        Args:
            method: HTTP method (``GET``, ``POST``, ``DELETE``).
            path: Path relative to the route prefix (e.g. ``/tasks``).
            json_body: JSON body to send with the request.
        Returns:
            A tuple ``(data, error)``.  ``data`` is the parsed JSON body,
            or ``None`` for empty responses.
        """
        url = f"{self.base_url}{self.prefix}{path}"
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
                    message = err_json.get("detail") if isinstance(err_json, dict) else str(err_json)
                    message = str(message) if message else str(err_json)
                except ValueError:
                    message = exc.response.text
            if not message:
                message = str(exc)
            logger.error("API request failed (%s): %s", status, message)
            return None, {"status_code": status, "message": message}
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "message": str(exc)}

    # ------------------------------------------------------------------
    # Task operations
    # ------------------------------------------------------------------
    def list_tasks(self) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        """Retrieve all tasks.

        Returns:
            A tuple ``(tasks, error)``.  ``tasks`` is empty on failure.
        """
        data, error = self._request("GET", "/tasks")
        if error:
            return [], error
        if isinstance(data, list):
            return data, None
        return [], None

    def create_task(self, name: Optional[str]) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Create a task.

        Args:
            name: Label of the new task.  ``None`` omits the field.
        Returns:
            A tuple ``(task, error)`` where ``task`` carries the
            generated ``id``.
        """
        payload: Dict[str, Any] = {} if name is None else {"name": name}
        return self._request("POST", "/tasks", json_body=payload)

    def delete_task(self, task_id: str) -> Tuple[bool, Optional[Error]]:
        """Delete a task by id.

        The service answers 204 even for unknown ids, so ``success`` is
        ``True`` whenever the request itself went through.

        Returns:
            A tuple ``(success, error)``.
        """
        path = "/tasks/" + requests.utils.quote(str(task_id), safe="")
        _, error = self._request("DELETE", path)
        if error:
            return False, error
        return True, None
