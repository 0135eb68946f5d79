"""
User endpoints.

A single ``/user`` resource supports get, create, update and delete.
Lookups and deletions take the identifier from the ``id`` query
parameter, while creation and update read a JSON body of the form
``{"id": 1, "name": "Alice"}`` whatever its ``Content-Type``.  Any other
method on ``/user`` is answered with 405 by the router.

Endpoints are plain ``def`` functions so FastAPI runs each request on
its own worker thread; the store's lock is the only synchronisation.
"""

import re
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query, Response, status

from user_store_api.app.api.deps import get_store, json_payload
from user_store_api.app.schemas.user import MAX_USER_ID, MIN_USER_ID, User, UserCreate, UserUpdate
from user_store_api.app.services.user_store import (
    EmptyNameError,
    UserConflictError,
    UserNotFoundError,
    UserStore,
)


router = APIRouter()

_USER_ID_PATTERN = re.compile(r"[+-]?[0-9]{1,19}")


def parse_user_id(raw: Optional[str]) -> int:
    """Convert the ``id`` query parameter into an integer.

    Raises 400 ``Missing user ID`` when it is absent or empty and 400
    ``Invalid user ID`` when it is not a decimal integer in the signed
    64-bit range.
    """
    if not raw:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Missing user ID")
    if not _USER_ID_PATTERN.fullmatch(raw):
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Invalid user ID")
    user_id = int(raw)
    if not MIN_USER_ID <= user_id <= MAX_USER_ID:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Invalid user ID")
    return user_id


@router.get("/user", response_model=User)
def get_user(
    user_id: Optional[str] = Query(None, alias="id"),
    store: UserStore = Depends(get_store),
) -> User:
    """Return the user identified by the ``id`` query parameter."""
    try:
        return store.get(parse_user_id(user_id))
    except UserNotFoundError:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")


@router.post("/user", response_model=User, status_code=status.HTTP_201_CREATED)
def create_user(
    payload: UserCreate = Depends(json_payload(UserCreate)),
    store: UserStore = Depends(get_store),
) -> User:
    """Create a user.

    Omitting ``id`` (or sending ``0``) lets the store assign the next
    identifier.  Returns 409 if an explicit identifier is taken.
    """
    if not payload.name:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Name is required")
    try:
        return store.create(payload.name, payload.requested_id())
    except EmptyNameError:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Name is required")
    except UserConflictError:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail="User already exists")


@router.patch("/user", response_model=User)
def update_user(
    payload: UserUpdate = Depends(json_payload(UserUpdate)),
    store: UserStore = Depends(get_store),
) -> User:
    """Replace an existing user record with the request body."""
    try:
        return store.update(User(id=payload.id, name=payload.name))
    except UserNotFoundError:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")


@router.delete("/user", status_code=status.HTTP_204_NO_CONTENT)
def delete_user(
    user_id: Optional[str] = Query(None, alias="id"),
    store: UserStore = Depends(get_store),
) -> Response:
    """Delete the user identified by the ``id`` query parameter."""
    try:
        store.delete(parse_user_id(user_id))
    except UserNotFoundError:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found :<")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
