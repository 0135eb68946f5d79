"""
Pydantic models for user data.

A user record carries exactly two fields, ``id`` and ``name``.  Request
payloads use strict types so that ``{"id": "5"}`` or ``{"name": 7}`` is
rejected as invalid user data rather than silently coerced.  Identifiers
must fit in a signed 64-bit integer.  Unknown fields are ignored.
"""

from typing import Optional

from pydantic import BaseModel, Field, StrictInt, StrictStr


MIN_USER_ID = -(2 ** 63)
MAX_USER_ID = 2 ** 63 - 1


class UserBase(BaseModel):
    name: StrictStr = Field("", description="Display name of the user")


class UserCreate(UserBase):
    """Schema for creating a user.

    ``id`` may be omitted, ``null`` or ``0`` to let the store assign the
    next sequential identifier.  Any other value is used verbatim and
    rejected with 409 if it is already taken.
    """

    id: Optional[StrictInt] = Field(
        None,
        ge=MIN_USER_ID,
        le=MAX_USER_ID,
        description="Explicit identifier; omit or send 0 to auto-assign",
    )

    def requested_id(self) -> Optional[int]:
        """Return the explicit identifier, or ``None`` to auto-assign."""
        return self.id or None


class UserUpdate(UserBase):
    """Schema for replacing a user record.

    The whole record is replaced: ``name`` is written as given, even when
    empty.  A missing ``id`` defaults to ``0``, which normally does not
    exist and therefore yields 404.
    """

    id: StrictInt = Field(0, ge=MIN_USER_ID, le=MAX_USER_ID, description="Identifier of the record to replace")


class User(BaseModel):
    """A stored user record, also used as the response body.

    ``id`` is declared first so it leads the serialised object.
    """

    id: int
    name: str
