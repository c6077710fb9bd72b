"""
Application package initializer.

This package contains the main entrypoint for the API and its
submodules: configuration and logging live in ``core``, request and
response models in ``schemas``, the record store in ``services`` and
the HTTP routes in ``api``.
"""

from .main import app, create_app  # noqa: F401
