"""FastAPI dependency utilities."""

from fastapi import HTTPException, Request, status

from app.domain.entities import GreetingConfiguration


def get_greeting_configuration(request: Request) -> GreetingConfiguration:
    """Return the greeting configuration bound during application startup."""

    configuration = getattr(request.app.state, "greeting_configuration", None)
    if configuration is None:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Greeting configuration is not loaded",
        )
    return configuration
