"""
Top‑level package for the User Backend API.

The HTTP service lives in ``user_backend_api.app``; a small Python
client for talking to a running instance lives in
``user_backend_api.client``.
"""

__all__ = []
