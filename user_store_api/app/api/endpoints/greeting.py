"""Static greeting endpoints used as liveness checks."""

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse


ROOT_GREETING = "This is a simple Python http server :)\n"
HELLO_GREETING = "Hello, HTTP!\n"

router = APIRouter()

ROOT_METHODS = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]


@router.api_route("/", methods=ROOT_METHODS, response_class=PlainTextResponse)
def read_root() -> str:
    """Greet on any method; only the exact path ``/`` is served."""
    return ROOT_GREETING


@router.get("/hello", response_class=PlainTextResponse)
def read_hello() -> str:
    return HELLO_GREETING
