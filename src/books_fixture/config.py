"""Startup configuration for the books fixture.

The books route is switched on by an activation name rather than by
discovery. Pass a FixtureConfig to create_app(), or let it read one from
BOOKS_FIXTURE_* environment variables.
"""

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from books_fixture.exceptions import ConfigurationError

ACTIVATION_NAME = "BindHttpClientExceptionBodySpec"

ENV_PREFIX = "BOOKS_FIXTURE_"
ENV_NAME = f"{ENV_PREFIX}NAME"
ENV_ROUTE_PREFIX = f"{ENV_PREFIX}PREFIX"
ENV_TITLE = f"{ENV_PREFIX}TITLE"

DEFAULT_PREFIX = "/books"
DEFAULT_TITLE = "Books Fixture"


class FixtureConfig(BaseSettings):
    """Configuration for a books fixture application.

    Values passed to the constructor win over the environment.

    Attributes:
        name: Activation name. The books route is registered only when
            this equals ACTIVATION_NAME. None leaves the route off.
        prefix: URL prefix of the books route (no trailing slash).
        title: OpenAPI title of the application.
    """

    model_config = SettingsConfigDict(env_prefix=ENV_PREFIX, frozen=True)

    name: str | None = None
    prefix: str = DEFAULT_PREFIX
    title: str = DEFAULT_TITLE

    @field_validator("name")
    @classmethod
    def _check_name(cls, value: str | None) -> str | None:
        if value is not None and not value.strip():
            raise ConfigurationError("name must not be blank")
        return value

    @field_validator("prefix")
    @classmethod
    def _check_prefix(cls, value: str) -> str:
        if not value.startswith("/"):
            raise ConfigurationError(f"prefix must start with '/', got {value!r}")
        if value.endswith("/"):
            raise ConfigurationError(f"prefix must not end with '/', got {value!r}")
        return value

    @property
    def is_active(self) -> bool:
        """Whether the books route should be registered."""
        return self.name == ACTIVATION_NAME
