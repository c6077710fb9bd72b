"""Student Records API client.

This module defines a small client wrapper around the student records
REST API.  It uses the ``requests`` library internally and exposes one
method per operation:

* :meth:`list_students` – return all student records.
* :meth:`create_student` – create a record from a payload.
* :meth:`get_student` – fetch a single record by its identifier.
* :meth:`update_student` – merge a payload into an existing record.
* :meth:`delete_student` – remove a record.

Every method returns a tuple ``(result, error)``.  On success ``error``
is ``None``.  On failure ``result`` is an empty value and ``error`` is
a dictionary with the keys ``status_code`` and ``message``, so callers
never have to catch ``requests`` exceptions themselves.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple

import requests


logger = logging.getLogger(__name__)

Error = Dict[str, Any]


class StudentRecordsAPI:
    """Client for interacting with the student records API."""

    STUDENTS_PATH = "/students"

    def __init__(
        self,
        *,
        base_url: str = "http://localhost:3000",
        session: Optional[requests.Session] = None,
        timeout: float = 15,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL for the API, e.g. ``http://localhost:3000``.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
            timeout: Timeout in seconds applied to every request.
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

        Args:
            method: HTTP method (``GET``, ``POST``, ``PUT``, ``DELETE``).
            path: Path relative to :attr:`base_url` (e.g. ``/students``).
            json_body: JSON body to send with the request.
        Returns:
            A tuple ``(data, error)``. ``data`` contains the parsed JSON
            response on success (``None`` for an empty body) and
            ``error`` is ``None``. On failure, ``data`` is ``None`` and
            ``error`` describes the issue.
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
                    message = err_json.get("detail") if isinstance(err_json, dict) else None
                    message = str(message or err_json)
                except ValueError:
                    message = exc.response.text
            if not message:
                message = str(exc)
            logger.error("API request failed (%s): %s", status, message)
            return None, {"status_code": status, "message": message}
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "message": str(exc)}

    def _student_path(self, student_id: Any) -> str:
        return f"{self.STUDENTS_PATH}/{student_id}"

    # ------------------------------------------------------------------
    # Student operations
    # ------------------------------------------------------------------
    def list_students(self) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        """Retrieve all student records.

        Returns:
            A tuple ``(students, error)``. ``students`` is empty on failure.
        """
        data, error = self._request("GET", self.STUDENTS_PATH)
        if error:
            return [], error
        if isinstance(data, list):
            return data, None
        return [], None

    def create_student(self, payload: Dict[str, Any]) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Create a student record.

        Args:
            payload: Fields of the new record, conventionally ``{"name": ...}``.
        Returns:
            A tuple ``(student, error)``.
        """
        return self._request("POST", self.STUDENTS_PATH, json_body=payload)

    def get_student(self, student_id: Any) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Retrieve a single student record by ID.

        Returns:
            A tuple ``(student, error)``; an unknown ID gives an error
            with ``status_code`` 404.
        """
        return self._request("GET", self._student_path(student_id))

    def update_student(
        self, student_id: Any, payload: Dict[str, Any]
    ) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Merge ``payload`` into an existing student record.

        Returns:
            A tuple ``(student, error)`` with the updated record.
        """
        return self._request("PUT", self._student_path(student_id), json_body=payload)

    def delete_student(self, student_id: Any) -> Tuple[bool, Optional[Error]]:
        """Delete a student record.

        The server reports success for unknown IDs as well.

        Returns:
            A tuple ``(success, error)``.
        """
        _, error = self._request("DELETE", self._student_path(student_id))
        if error:
            return False, error
        return True, None
