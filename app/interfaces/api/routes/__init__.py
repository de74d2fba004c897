from fastapi import FastAPI

from .hello import router as hello_router


def register_routes(app: FastAPI) -> None:
    """Register every API router on the FastAPI application."""

    app.include_router(hello_router)
