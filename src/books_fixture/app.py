"""Application factory for the books fixture."""

import logging

from fastapi import FastAPI

from books_fixture.config import ACTIVATION_NAME, FixtureConfig
from books_fixture.controller import create_books_router

logger = logging.getLogger(__name__)


def create_app(config: FixtureConfig | None = None) -> FastAPI:
    """Build a FastAPI application for the given configuration.

    The books route is included only when ``config.is_active``. An
    inactive app still starts, it just has no books route.

    Args:
        config: Startup configuration. Loaded from the environment when None.

    Raises:
        ConfigurationError: If the environment holds invalid values.
    """
    if config is None:
        config = FixtureConfig()

    application = FastAPI(title=config.title)

    if config.is_active:
        application.include_router(create_books_router(config.prefix))
        logger.info(
            "Books route activated",
            extra={"fixture_name": config.name, "prefix": config.prefix},
        )
    else:
        logger.info(
            "Books route skipped",
            extra={"fixture_name": config.name or "(none)", "required": ACTIVATION_NAME},
        )

    return application
