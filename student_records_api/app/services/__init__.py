"""
Service layer abstraction.

Each service encapsulates business logic for a domain.  API handlers
talk to services only, so the in‑memory structures used here could be
swapped for persistent storage without changing the routes.
"""
