"""
Domain errors and their HTTP mapping.

The store signals a missing record with ``StudentNotFoundError``.
``create_app`` registers ``student_not_found_handler`` so that the
error reaches clients as a bare ``404`` with the plain‑text body
``Not Found`` rather than FastAPI's JSON ``detail`` envelope.
"""

import logging
from typing import Any

from fastapi import Request, status
from fastapi.responses import PlainTextResponse

logger = logging.getLogger(__name__)


class StudentNotFoundError(LookupError):
    """Raised when no student record matches the requested id."""

    def __init__(self, student_id: Any) -> None:
        super().__init__(f"Student {student_id!r} not found")
        self.student_id = student_id


async def student_not_found_handler(request: Request, exc: StudentNotFoundError) -> PlainTextResponse:
    logger.info("%s %s: %s", request.method, request.url.path, exc)
    return PlainTextResponse("Not Found", status_code=status.HTTP_404_NOT_FOUND)
