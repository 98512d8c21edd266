"""HTTP client for the books route.

Wraps an httpx.Client so error statuses surface as
HttpClientResponseError, whose body can be bound to a model.
"""

import logging
from urllib.parse import quote

import httpx

from books_fixture.config import DEFAULT_PREFIX
from books_fixture.exceptions import HttpClientResponseError
from books_fixture.models import Book

logger = logging.getLogger(__name__)


class BooksClient:
    """Blocking client for ``GET {prefix}/{isbn}``.

    Any httpx.Client works, including fastapi.testclient.TestClient.

    Example:
        with httpx.Client(base_url="http://localhost:8000") as http:
            book = BooksClient(http).find("1491950358")
    """

    def __init__(self, http: httpx.Client, *, prefix: str = DEFAULT_PREFIX) -> None:
        self._http = http
        self._prefix = prefix

    def exchange(self, isbn: str) -> httpx.Response:
        """Fetch the raw response for ``isbn``.

        The ISBN is sent as a single escaped path segment.

        Raises:
            HttpClientResponseError: If the response status is 400 or above.
            httpx.TransportError: If the request could not be sent.
        """
        response = self._http.get(f"{self._prefix}/{quote(isbn, safe='')}")
        if response.is_error:
            logger.debug(
                "Error response",
                extra={"status_code": response.status_code, "path": response.request.url.path},
            )
            raise HttpClientResponseError(response)
        return response

    def find(self, isbn: str) -> Book:
        """Fetch and bind the book for ``isbn``."""
        return Book.model_validate(self.exchange(isbn).json())
