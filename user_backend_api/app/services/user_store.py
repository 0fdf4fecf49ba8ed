"""
In‑memory user store.

``UserStore`` keeps users in insertion order together with a counter
for the next id.  Ids are never reused, even after a delete.  E‑mail
addresses are unique among the stored users (case sensitive, checked
by a linear scan).

Operations never raise for rejected input.  Each one returns a tuple
``(user, error)``: on success ``error`` is ``None``; on failure
``user`` is ``None`` and ``error`` is a ``StoreError`` naming the rule
that was broken.  A rejected operation leaves the store untouched.

Every operation runs under a single lock, so a reader never sees a
half‑applied write when the store is shared between threads.  Records
handed out are copies; mutating them does not affect the store.
"""

import logging
import threading
from datetime import datetime
from typing import Callable, List, Optional, Tuple

from ..core.errors import StoreError, StoreErrorKind
from ..schemas.user import User

logger = logging.getLogger(__name__)

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"

USER_NOT_FOUND = "User not found"
EMPTY_FIELDS = "Name and email must not be empty"
EMAIL_EXISTS = "Email already exists"

DEMO_USERS = (
    ("Zhang San", "zhang@example.com"),
    ("Li Si", "li@example.com"),
    ("Wang Wu", "wang@example.com"),
)

StoreResult = Tuple[Optional[User], Optional[StoreError]]


class UserStore:
    """Authoritative collection of user records.

    Parameters
    ----------
    clock : Callable[[], datetime]
        Source of the current local time, used for ``createdAt`` and
        ``updatedAt``.  Defaults to ``datetime.now``.
    """

    def __init__(self, clock: Callable[[], datetime] = datetime.now) -> None:
        self._users: List[User] = []
        self._next_id = 1
        self._clock = clock
        self._lock = threading.Lock()

    @property
    def next_id(self) -> int:
        """Id that the next successful ``create`` will assign."""
        return self._next_id

    def _now(self) -> str:
        return self._clock().strftime(TIMESTAMP_FORMAT)

    def _find(self, user_id: int) -> Optional[User]:
        for user in self._users:
            if user.id == user_id:
                return user
        return None

    def _email_taken(self, email: str) -> bool:
        return any(user.email == email for user in self._users)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    def list_all(self) -> List[User]:
        """Return copies of all users in insertion order."""
        with self._lock:
            return [user.model_copy() for user in self._users]

    def get_by_id(self, user_id: int) -> StoreResult:
        with self._lock:
            user = self._find(user_id)
            if user is None:
                return None, StoreError(StoreErrorKind.NOT_FOUND, USER_NOT_FOUND)
            return user.model_copy(), None

    def user_exists(self, user_id: int) -> bool:
        with self._lock:
            return self._find(user_id) is not None

    def email_exists(self, email: str) -> bool:
        with self._lock:
            return self._email_taken(email)

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------
    def create(self, name: str, email: str) -> StoreResult:
        """Add a new user.

        Both ``name`` and ``email`` must be non‑empty and ``email`` must
        not belong to another user.  The new record gets the next id
        and identical ``createdAt``/``updatedAt`` timestamps.
        """
        with self._lock:
            if not name or not email:
                logger.warning("Rejected user creation: empty name or email")
                return None, StoreError(StoreErrorKind.INVALID_ARGUMENT, EMPTY_FIELDS)
            if self._email_taken(email):
                logger.warning("Rejected user creation: email %s already exists", email)
                return None, StoreError(StoreErrorKind.CONFLICT, EMAIL_EXISTS)
            now = self._now()
            user = User(id=self._next_id, name=name, email=email, createdAt=now, updatedAt=now)
            self._next_id += 1
            self._users.append(user)
            logger.info("Created user %s (%s)", user.id, user.email)
            return user.model_copy(), None

    def update(self, user_id: int, name: Optional[str] = None, email: Optional[str] = None) -> StoreResult:
        """Overwrite the non‑empty fields of an existing user.

        An empty or ``None`` value keeps the current field.  Changing
        the e‑mail to one held by another user is rejected before any
        field is modified.  ``updatedAt`` is refreshed on every
        successful call, even when no field changes.
        """
        with self._lock:
            user = self._find(user_id)
            if user is None:
                return None, StoreError(StoreErrorKind.NOT_FOUND, USER_NOT_FOUND)
            if email and email != user.email and self._email_taken(email):
                logger.warning("Rejected update of user %s: email %s already exists", user_id, email)
                return None, StoreError(StoreErrorKind.CONFLICT, EMAIL_EXISTS)
            if name:
                user.name = name
            if email:
                user.email = email
            user.updatedAt = self._now()
            logger.info("Updated user %s", user_id)
            return user.model_copy(), None

    def delete(self, user_id: int) -> bool:
        """Remove a user.  Returns ``False`` if there was no such user."""
        with self._lock:
            user = self._find(user_id)
            if user is None:
                return False
            self._users.remove(user)
            logger.info("Deleted user %s", user_id)
            return True


def seed_demo_users(store: UserStore) -> UserStore:
    """Populate ``store`` with the demo users shown on first launch."""
    for name, email in DEMO_USERS:
        store.create(name, email)
    return store
