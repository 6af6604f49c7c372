"""
Business logic for users.

``UserService`` implements listing, lookup, creation, renaming and
deletion on top of a ``UserStore``.  Lookups that find nothing raise
``UserNotFoundError`` and names that fail validation raise
``InvalidUserError``; the API layer maps them to 404 and 400.

Ids arrive from the URL as text and are read the way clients have
always been able to send them: leading whitespace and a sign are
allowed and parsing stops at the first non-digit, so ``"3"`` and
``"3-karen"`` both address user 3.  Text without leading digits
addresses nobody.
"""

from __future__ import annotations

import logging
import re
from typing import Any, List, Mapping, Optional, Union

from pydantic import ValidationError

from user_directory_api.app.core.store import UserRecord, UserStore
from user_directory_api.app.schemas.user import UserPayload, UserRead, validation_message

logger = logging.getLogger(__name__)

NOT_FOUND_MESSAGE = "El usuario no se encuentra."

_ID_PREFIX = re.compile(r"\s*([+-]?\d+)")


class UserNotFoundError(LookupError):
    """No user matches the requested id."""

    def __init__(self, user_id: Any) -> None:
        super().__init__(NOT_FOUND_MESSAGE)
        self.user_id = user_id


class InvalidUserError(ValueError):
    """The submitted user data failed validation."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


def parse_user_id(raw_id: Union[int, str]) -> Optional[int]:
    """Parse a user id from a path segment.

    Returns ``None`` when ``raw_id`` has no leading integer, which
    never matches a stored user.
    """
    if isinstance(raw_id, int) and not isinstance(raw_id, bool):
        return raw_id
    match = _ID_PREFIX.match(str(raw_id))
    if not match:
        return None
    return int(match.group(1))


class UserService:
    """Operations on the user directory."""

    def __init__(self, store: UserStore) -> None:
        self.store = store

    async def list_users(self) -> List[UserRead]:
        """Return every user in collection order."""
        return [self._record_to_read(record) for record in self.store.all()]

    async def get_user(self, raw_id: Union[int, str]) -> UserRead:
        """Retrieve a user by id or raise ``UserNotFoundError``."""
        return self._record_to_read(self._find(raw_id))

    async def create_user(self, data: Any) -> UserRead:
        """Validate ``data`` and append a new user.

        The new id comes from the store's counter, so it is never
        shared with a current or previously deleted user.
        """
        payload = self._validate(data)
        record = self.store.add(payload.name)
        logger.info("Created user %s (%s)", record.id, record.name)
        return self._record_to_read(record)

    async def update_user(self, raw_id: Union[int, str], data: Any) -> UserRead:
        """Rename an existing user.

        The lookup happens first, so an unknown id is reported as not
        found even when the body is invalid.  Only the name changes.
        """
        existing = self._find(raw_id)
        payload = self._validate(data)
        updated = self.store.rename(existing.id, payload.name)
        if updated is None:
            # Removed between lookup and rename.
            raise UserNotFoundError(raw_id)
        logger.info("Renamed user %s from %s to %s", updated.id, existing.name, updated.name)
        return self._record_to_read(updated)

    async def delete_user(self, raw_id: Union[int, str]) -> UserRead:
        """Remove a user and return the record as it was before removal."""
        existing = self._find(raw_id)
        removed = self.store.remove(existing.id)
        if removed is None:
            raise UserNotFoundError(raw_id)
        logger.info("Deleted user %s (%s)", removed.id, removed.name)
        return self._record_to_read(removed)

    def _find(self, raw_id: Union[int, str]) -> UserRecord:
        user_id = parse_user_id(raw_id)
        record = self.store.get(user_id) if user_id is not None else None
        if record is None:
            logger.info("User %r not found", raw_id)
            raise UserNotFoundError(raw_id)
        return record

    @staticmethod
    def _validate(data: Any) -> UserPayload:
        # Bodies that are not objects carry no name at all.
        if not isinstance(data, Mapping):
            data = {}
        try:
            return UserPayload.model_validate(dict(data))
        except ValidationError as exc:
            message = validation_message(exc)
            logger.info("Rejected user data: %s", message)
            raise InvalidUserError(message) from exc

    @staticmethod
    def _record_to_read(record: UserRecord) -> UserRead:
        return UserRead(id=record.id, name=record.name)
