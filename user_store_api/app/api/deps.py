"""Dependencies shared by endpoint modules."""

from typing import Awaitable, Callable, Type, TypeVar

from fastapi import HTTPException, Request, status
from pydantic import BaseModel, ValidationError

from user_store_api.app.services.user_store import UserStore


PayloadT = TypeVar("PayloadT", bound=BaseModel)


def get_store(request: Request) -> UserStore:
    """Return the store attached to the running application."""
    return request.app.state.store


def json_payload(model: Type[PayloadT]) -> Callable[[Request], Awaitable[PayloadT]]:
    """Build a dependency that decodes the raw request body as ``model``.

    The body is read as JSON whatever the ``Content-Type`` header says,
    so ``curl -d '{"name": "Alice"}'`` works without ``-H``.  Anything
    that does not decode (invalid JSON, a non-object, an empty body,
    wrong field types) is answered with 400 ``Invalid user data``.
    """

    async def decode(request: Request) -> PayloadT:
        body = await request.body()
        try:
            return model.model_validate_json(body)
        except ValidationError:
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Invalid user data")

    return decode
