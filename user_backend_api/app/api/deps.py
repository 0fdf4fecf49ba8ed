"""
Request dependencies shared by the endpoints.
"""

from fastapi import Request

from ..services.user_store import UserStore


def get_user_store(request: Request) -> UserStore:
    """Return the store owned by the running application."""
    return request.app.state.user_store
