"""
Top‑level API router.

This router aggregates domain‑specific routers under their prefixes.
When new domains are introduced, include their routers here.
"""

from fastapi import APIRouter

from .endpoints import students

router = APIRouter()

router.include_router(students.router, prefix="/students", tags=["students"])
