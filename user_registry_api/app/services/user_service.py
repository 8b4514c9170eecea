"""
Business logic for users.

``UserService`` works on a ``UserStore`` handed to it by the API layer
and implements the four operations of the ``/users`` resource.
Replacement and deletion first pass through ``locate``, the existence
guard, which resolves a route id to a store position.  The store lock
is held from that lookup until the mutation completes, so the resolved
position cannot be invalidated by a concurrent request.
"""

import logging
import uuid
from dataclasses import dataclass
from typing import List, Optional

from ..core.errors import UserNotFoundError, UserValidationError
from ..schemas.user import UserPayload, UserRead
from .user_store import UserRecord, UserStore

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class UserLookup:
    """Result of the existence guard.

    ``found`` tells whether ``user_id`` exists; ``index`` is its
    position in the store when it does and ``None`` otherwise.
    """

    user_id: str
    found: bool
    index: Optional[int] = None


def _to_read(record: UserRecord) -> UserRead:
    return UserRead(id=record.id, name=record.name, age=record.age)


class UserService:
    """Operations on the user collection held by ``store``."""

    def __init__(self, store: UserStore) -> None:
        self.store = store

    def locate(self, user_id: str) -> UserLookup:
        """Resolve ``user_id`` to a store position.

        Never raises; callers decide what a miss means.  The returned
        index is only meaningful while ``store.lock`` is held.
        """
        index = self.store.find_index_by_id(user_id)
        if index is None:
            return UserLookup(user_id=user_id, found=False)
        return UserLookup(user_id=user_id, found=True, index=index)

    def _require(self, user_id: str) -> UserLookup:
        lookup = self.locate(user_id)
        if not lookup.found:
            raise UserNotFoundError()
        return lookup

    async def list_users(self) -> List[UserRead]:
        """Return every stored user in insertion order."""
        return [_to_read(record) for record in self.store.list_all()]

    async def create_user(self, data: UserPayload) -> UserRead:
        """Store a new user under a freshly generated id.

        No field is required here: absent ``name`` or ``age`` are
        stored as ``None``.  Replacement, by contrast, insists on both.
        """
        record = UserRecord(id=str(uuid.uuid4()), name=data.name, age=data.age)
        self.store.insert(record)
        logger.info("Created user %s", record.id)
        return _to_read(record)

    async def replace_user(self, user_id: str, data: UserPayload) -> UserRead:
        """Overwrite ``name`` and ``age`` of an existing user.

        Raises ``UserNotFoundError`` for an unknown id and
        ``UserValidationError`` when either field is missing or falsy
        (empty string, zero, null).  In both cases the store is left
        unchanged.  The id is taken from the route and never changes.
        """
        with self.store.lock:
            lookup = self._require(user_id)
            if not data.name or not data.age:
                raise UserValidationError()
            record = UserRecord(id=user_id, name=data.name, age=data.age)
            self.store.replace_at(lookup.index, record)
        logger.info("Replaced user %s", user_id)
        return _to_read(record)

    async def delete_user(self, user_id: str) -> None:
        """Remove an existing user; raises ``UserNotFoundError`` otherwise."""
        with self.store.lock:
            lookup = self._require(user_id)
            self.store.remove_at(lookup.index)
        logger.info("Deleted user %s", user_id)
