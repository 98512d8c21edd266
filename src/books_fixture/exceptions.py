"""Exception hierarchy for the books fixture."""

from typing import Any, TypeVar

import httpx
from pydantic import BaseModel, ValidationError

ModelT = TypeVar("ModelT", bound=BaseModel)


class BooksFixtureError(Exception):
    """Base exception for all errors raised by the books fixture.

    Catching this exception will catch every error the package raises
    itself. Transport errors from httpx are not wrapped.

    Example:
        try:
            app = create_app()
        except BooksFixtureError as e:
            logger.error(f"Failed to build app: {e}")
    """


class ConfigurationError(BooksFixtureError):
    """Raised when a FixtureConfig holds invalid values.

    Examples of invalid configuration:
        - A blank activation name: "" or "   "
        - A prefix without a leading slash: "books"
        - A prefix with a trailing slash: "/books/"

    Example:
        ConfigurationError("prefix must start with '/', got 'books'")
    """


class HttpClientResponseError(BooksFixtureError):
    """Raised by BooksClient when the server answers with an error status.

    The raw response is kept so callers can bind the error body to
    whatever model they expect.

    Example:
        try:
            client.find("1680502395")
        except HttpClientResponseError as e:
            error = e.get_body(ErrorBody)
            assert error is not None and error.status == 401
    """

    def __init__(self, response: httpx.Response) -> None:
        self.response = response
        self.status_code = response.status_code
        self.reason = response.reason_phrase
        super().__init__(f"{self.status_code} {self.reason}: {response.request.url.path}")

    @property
    def body(self) -> Any:
        """Decoded JSON body, or None when the body is empty or not JSON."""
        if not self.response.content:
            return None
        try:
            return self.response.json()
        except ValueError:
            return None

    def get_body(self, model: type[ModelT]) -> ModelT | None:
        """Bind the error body to ``model``.

        Returns None when the body is missing, not JSON, or does not
        validate against the model.
        """
        body = self.body
        if body is None:
            return None
        try:
            return model.model_validate(body)
        except ValidationError:
            return None
