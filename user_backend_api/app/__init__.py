"""
Application package initializer.

The service is split into ``core`` (configuration, logging, HTTP
plumbing), ``schemas`` (pydantic models), ``services`` (the in‑memory
user store) and ``api`` (route handlers).  The assembled FastAPI
application is exposed as ``app``.
"""

from .main import app  # noqa: F401
