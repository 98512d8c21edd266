"""Payload models returned by the books route."""

from pydantic import BaseModel

UNAUTHORIZED_ISBN = "1680502395"

BOOK_ISBN = "1491950358"
BOOK_NAME = "Building Microservices"

UNAUTHORIZED_ERROR = "Unauthorized"
NO_MESSAGE = "No message available"


class Book(BaseModel):
    """A book identified by ISBN."""

    isbn: str
    name: str


class ErrorBody(BaseModel):
    """Error payload in the shape of a servlet-style error page.

    Field order is the serialization order.
    """

    status: int
    error: str
    message: str
    path: str
