"""
Main entrypoint for the Student Records API.

This module assembles the FastAPI application, sets up logging,
creates the record store and includes the API router.  The
``create_app`` function builds and configures the app, which is then
instantiated at module import time as ``app``, e.g.::

    uvicorn student_records_api.app.main:app --port 3000

Interactive docs are served under ``settings.docs_url`` (``/api-docs``
by default) and the OpenAPI document under ``/openapi.json``.
"""

from typing import Optional

from fastapi import FastAPI

from .api.router import router as api_router
from .core.config import Settings, settings as default_settings
from .core.errors import StudentNotFoundError, student_not_found_handler
from .core.logging_config import setup_logging
from .services.student_service import StudentService


def create_app(
    settings: Optional[Settings] = None,
    student_service: Optional[StudentService] = None,
) -> FastAPI:
    """Create and configure a FastAPI application.

    Each call returns an independent application with its own store,
    unless an existing ``student_service`` is passed in.

    Parameters
    ----------
    settings : Optional[Settings]
        Configuration to use.  Defaults to the module‑level settings
        read from the environment at import time.
    student_service : Optional[StudentService]
        Store to serve.  A new, empty store is created when omitted.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    settings = settings or default_settings
    setup_logging(settings)

    app = FastAPI(
        title=settings.project_name,
        version=settings.api_version,
        description=settings.description,
        docs_url=settings.docs_url,
        redoc_url=None,
        debug=settings.debug,
    )
    app.state.settings = settings
    if student_service is None:
        student_service = StudentService()
    app.state.student_service = student_service

    app.add_exception_handler(StudentNotFoundError, student_not_found_handler)
    app.include_router(api_router)

    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
