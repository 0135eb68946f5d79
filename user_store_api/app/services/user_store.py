"""
In‑memory, thread‑safe store of user records.

``UserStore`` owns the mapping from identifier to record together with
the counter used for auto-assigned identifiers.  Both are guarded as a
single unit by one :class:`~user_store_api.app.core.locking.ReadWriteLock`:
lookups take it in shared mode, while create, update and delete take it
exclusively for the whole check‑then‑mutate sequence.

Records handed in or out are copies, so callers can never mutate stored
state outside the lock.
"""

import logging
from typing import Dict, Iterable, List, Optional

from ..core.locking import ReadWriteLock
from ..schemas.user import User


logger = logging.getLogger(__name__)


class UserStoreError(Exception):
    """Base class for errors raised by :class:`UserStore`."""

    def __init__(self, message: str, user_id: Optional[int] = None) -> None:
        super().__init__(message)
        self.user_id = user_id


class UserNotFoundError(UserStoreError, LookupError):
    """The requested identifier is not present in the store."""


class UserConflictError(UserStoreError):
    """A record with the requested identifier already exists."""


class EmptyNameError(UserStoreError, ValueError):
    """A record was created without a name."""


class UserStore:
    """Process‑wide owner of user records and the id counter.

    Parameters
    ----------
    users : Iterable[User], optional
        Seed records.  Identifiers must be unique.
    next_id : int, optional
        First identifier handed out by auto-assignment.  Defaults to one
        past the largest seeded identifier, or ``1`` for an empty store.
    """

    def __init__(self, users: Optional[Iterable[User]] = None, next_id: Optional[int] = None) -> None:
        self._lock = ReadWriteLock()
        self._users: Dict[int, User] = {}
        for user in users or ():
            if user.id in self._users:
                raise UserConflictError(f"User {user.id} seeded twice", user.id)
            self._users[user.id] = user.model_copy()
        if next_id is None:
            next_id = max(self._users, default=0) + 1
        self._next_id = next_id

    @property
    def next_id(self) -> int:
        """The identifier the next auto-assigning create will receive."""
        with self._lock.read_locked():
            return self._next_id

    def __len__(self) -> int:
        with self._lock.read_locked():
            return len(self._users)

    def get(self, user_id: int) -> User:
        """Return the record stored under ``user_id``.

        Raises ``UserNotFoundError`` if there is none.
        """
        with self._lock.read_locked():
            user = self._users.get(user_id)
            if user is None:
                raise UserNotFoundError(f"User {user_id} not found", user_id)
            return user.model_copy()

    def list_users(self) -> List[User]:
        """Return a snapshot of all records ordered by identifier."""
        with self._lock.read_locked():
            return [self._users[key].model_copy() for key in sorted(self._users)]

    def create(self, name: str, user_id: Optional[int] = None) -> User:
        """Insert a new record and return it.

        When ``user_id`` is ``None`` the next sequential identifier is
        assigned and the counter advances, even if the insert is then
        rejected.  An explicit identifier, ``0`` included, is used as
        given and leaves the counter untouched.

        Raises ``EmptyNameError`` for an empty name and
        ``UserConflictError`` if the identifier is already taken.
        """
        if not name:
            logger.debug("Rejected user without a name")
            raise EmptyNameError("Name is required", user_id)
        with self._lock.write_locked():
            if user_id is None:
                user_id = self._next_id
                self._next_id += 1
            if user_id in self._users:
                logger.debug("Rejected duplicate user %s", user_id)
                raise UserConflictError(f"User {user_id} already exists", user_id)
            user = User(id=user_id, name=name)
            self._users[user_id] = user
            logger.info("Created user %s", user_id)
            return user.model_copy()

    def update(self, user: User) -> User:
        """Replace the stored record with ``user`` as a whole.

        No field is merged and the name is not validated.  Raises
        ``UserNotFoundError`` if ``user.id`` is not present.
        """
        with self._lock.write_locked():
            if user.id not in self._users:
                logger.debug("Rejected update of missing user %s", user.id)
                raise UserNotFoundError(f"User {user.id} not found", user.id)
            self._users[user.id] = user.model_copy()
            logger.info("Updated user %s", user.id)
            return user.model_copy()

    def delete(self, user_id: int) -> None:
        """Remove the record stored under ``user_id``.

        Raises ``UserNotFoundError`` if there is none.
        """
        with self._lock.write_locked():
            if user_id not in self._users:
                logger.debug("Rejected delete of missing user %s", user_id)
                raise UserNotFoundError(f"User {user_id} not found", user_id)
            del self._users[user_id]
            logger.info("Deleted user %s", user_id)
