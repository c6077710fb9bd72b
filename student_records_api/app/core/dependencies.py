"""
FastAPI dependencies shared by the route modules.

The record store belongs to the application instance: ``create_app``
puts it on ``app.state`` and handlers obtain it through
``get_student_service`` instead of importing a module‑level global.
"""

from fastapi import Request

from ..services.student_service import StudentService


def get_student_service(request: Request) -> StudentService:
    """Return the ``StudentService`` owned by the running application."""
    return request.app.state.student_service
