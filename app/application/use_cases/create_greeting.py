"""Use cases for producing greeting messages."""

from app.domain.entities.greeting import Greeting, GreetingConfiguration


def create_greeting(
    configuration: GreetingConfiguration, name: str | None = None
) -> Greeting:
    """Return a greeting for the provided name.

    The configured ``greeting.message`` is used as is when no name is
    provided, otherwise the name is appended to it.
    """

    if name:
        message = f"{configuration.message} {name}"
    else:
        message = configuration.message

    return Greeting(message=message)
