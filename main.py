import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from app.application.use_cases.load_greeting_configuration import (
    load_greeting_configuration,
)
from app.config import get_settings
from app.domain.errors import ConfigurationError
from app.infrastructure.config_sources import build_config_sources
from app.infrastructure.log_redaction import configure_logging, register_secrets
from app.interfaces.api.routes import register_routes

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Bind the greeting configuration at startup and refuse to start without it."""

    settings = get_settings()
    configure_logging(settings.log_level)

    try:
        configuration = load_greeting_configuration(build_config_sources(settings))
    except ConfigurationError as exc:
        logger.error("Refusing to start %s: %s", settings.app_name, exc)
        raise

    register_secrets(configuration.handshake_private_key.get_secret_value())
    app.state.greeting_configuration = configuration
    logger.info("%s started", settings.app_name)
    yield
    app.state.greeting_configuration = None


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""

    app = FastAPI(title=get_settings().app_name, lifespan=lifespan)
    register_routes(app)
    return app


app = create_app()
