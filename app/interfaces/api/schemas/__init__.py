from .greeting import GreetingRead, HandshakeRead

__all__ = [
    "GreetingRead",
    "HandshakeRead",
]
