from fastapi import APIRouter, Depends

from app.application.use_cases.create_greeting import create_greeting
from app.domain.entities import GreetingConfiguration
from app.interfaces.api.dependencies import get_greeting_configuration
from app.interfaces.api.schemas import GreetingRead, HandshakeRead

router = APIRouter()


@router.get("/", response_model=GreetingRead)
async def root(
    configuration: GreetingConfiguration = Depends(get_greeting_configuration),
) -> GreetingRead:
    greeting = create_greeting(configuration)
    return GreetingRead(message=greeting.message)


@router.get("/hello/{name}", response_model=GreetingRead)
async def say_hello(
    name: str,
    configuration: GreetingConfiguration = Depends(get_greeting_configuration),
) -> GreetingRead:
    greeting = create_greeting(configuration, name)
    return GreetingRead(message=greeting.message)


@router.get("/handshake", response_model=HandshakeRead)
async def handshake(
    configuration: GreetingConfiguration = Depends(get_greeting_configuration),
) -> HandshakeRead:
    """Describe the configured handshake without exposing the private key."""

    return HandshakeRead(
        type=configuration.handshake_type,
        private_key_configured=bool(
            configuration.handshake_private_key.get_secret_value()
        ),
    )
