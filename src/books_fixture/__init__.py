"""Books fixture: a FastAPI route for exercising HTTP client error bodies."""

# Primary API
from books_fixture.app import create_app
from books_fixture.client import BooksClient
from books_fixture.config import ACTIVATION_NAME, FixtureConfig
from books_fixture.controller import create_books_router, find

# Exceptions — for error handling
from books_fixture.exceptions import (
    BooksFixtureError,
    ConfigurationError,
    HttpClientResponseError,
)

# Payload models
from books_fixture.models import UNAUTHORIZED_ISBN, Book, ErrorBody

__all__ = [
    # Primary API
    "create_app",
    "create_books_router",
    "find",
    "BooksClient",
    "FixtureConfig",
    "ACTIVATION_NAME",
    # Payload models
    "Book",
    "ErrorBody",
    "UNAUTHORIZED_ISBN",
    # Exceptions
    "BooksFixtureError",
    "ConfigurationError",
    "HttpClientResponseError",
]

__version__ = "1.0.0"
