"""Greeting related schemas."""

from pydantic import BaseModel, Field


class GreetingRead(BaseModel):
    message: str


class HandshakeRead(BaseModel):
    type: str = Field(..., description="Configured handshake mode")
    private_key_configured: bool = Field(
        ..., description="Whether a handshake private key was resolved at startup"
    )
