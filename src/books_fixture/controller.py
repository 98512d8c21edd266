"""Books route: a canned lookup used to exercise client error binding.

The handler answers every ISBN with the same book, except the
unauthorized ISBN, which gets a 401 with a JSON error body.
"""

import logging

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

from books_fixture.config import DEFAULT_PREFIX
from books_fixture.models import (
    BOOK_ISBN,
    BOOK_NAME,
    NO_MESSAGE,
    UNAUTHORIZED_ERROR,
    UNAUTHORIZED_ISBN,
    Book,
    ErrorBody,
)

logger = logging.getLogger(__name__)

# Error bodies always report the canonical mount point.
ERROR_PATH_PREFIX = "/books/"


def find(isbn: str) -> Book | JSONResponse:
    """Look up a book by ISBN.

    The requested ISBN does not select the book: any ISBN other than the
    unauthorized one returns the same record.
    """
    if isbn == UNAUTHORIZED_ISBN:
        body = ErrorBody(
            status=status.HTTP_401_UNAUTHORIZED,
            error=UNAUTHORIZED_ERROR,
            message=NO_MESSAGE,
            path=ERROR_PATH_PREFIX + isbn,
        )
        return JSONResponse(status_code=status.HTTP_401_UNAUTHORIZED, content=body.model_dump())
    return Book(isbn=BOOK_ISBN, name=BOOK_NAME)


def create_books_router(prefix: str = DEFAULT_PREFIX) -> APIRouter:
    """Create an APIRouter exposing ``GET {prefix}/{isbn}``.

    Args:
        prefix: URL prefix for the route, without a trailing slash.

    Returns:
        A router with the find handler registered.

    Example:
        from fastapi import FastAPI
        from books_fixture import create_books_router

        app = FastAPI()
        app.include_router(create_books_router())
    """
    router = APIRouter(prefix=prefix)
    router.add_api_route(
        path="/{isbn}",
        endpoint=find,
        methods=["GET"],
        response_model=Book,
        responses={status.HTTP_401_UNAUTHORIZED: {"model": ErrorBody}},
        tags=["books"],
        description=find.__doc__,
    )

    logger.debug(
        "Registered route",
        extra={"method": "GET", "path": f"{prefix}/{{isbn}}"},
    )

    return router
