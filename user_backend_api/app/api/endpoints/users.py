"""
User endpoints.

CRUD over the in‑memory user store.  Single‑user routes only match a
purely numeric id, so a path such as ``/api/users/abc`` never reaches
these handlers and gets the router's 404 instead.
"""

from fastapi import APIRouter, Depends, HTTPException, status

from ..deps import get_user_store
from ...core.errors import to_http_exception
from ...schemas.user import (
    MessageEnvelope,
    UserCreate,
    UserEnvelope,
    UserListEnvelope,
    UserUpdate,
)
from ...services.user_store import USER_NOT_FOUND, UserStore

router = APIRouter()


@router.get("", response_model=UserListEnvelope)
async def list_users(store: UserStore = Depends(get_user_store)) -> UserListEnvelope:
    """Return every user in creation order."""
    return UserListEnvelope(data=store.list_all())


@router.get("/{user_id:int}", response_model=UserEnvelope, response_model_exclude_none=True)
async def get_user(user_id: int, store: UserStore = Depends(get_user_store)) -> UserEnvelope:
    """Return a single user, or 404 if the id is unknown."""
    user, error = store.get_by_id(user_id)
    if error:
        raise to_http_exception(error)
    return UserEnvelope(data=user)


@router.post("", response_model=UserEnvelope, status_code=status.HTTP_201_CREATED)
async def create_user(payload: UserCreate, store: UserStore = Depends(get_user_store)) -> UserEnvelope:
    """Create a user.

    Empty fields and duplicate e‑mail addresses are both answered with
    400 and the store's message.
    """
    user, error = store.create(payload.name, payload.email)
    if error:
        raise to_http_exception(error)
    return UserEnvelope(data=user, message="User created successfully")


@router.put("/{user_id:int}", response_model=UserEnvelope)
async def update_user(
    user_id: int,
    payload: UserUpdate,
    store: UserStore = Depends(get_user_store),
) -> UserEnvelope:
    """Update a user's name and/or e‑mail.

    Omitted or empty fields keep their current value.  Unknown ids
    give 404, an e‑mail taken by another user gives 400.
    """
    user, error = store.update(user_id, payload.name, payload.email)
    if error:
        raise to_http_exception(error)
    return UserEnvelope(data=user, message="User updated successfully")


@router.delete("/{user_id:int}", response_model=MessageEnvelope)
async def delete_user(user_id: int, store: UserStore = Depends(get_user_store)) -> MessageEnvelope:
    """Delete a user by ID."""
    if not store.delete(user_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=USER_NOT_FOUND)
    return MessageEnvelope(message="User deleted successfully")
