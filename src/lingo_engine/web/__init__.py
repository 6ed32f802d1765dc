"""Web application package: an HTTP proxy in front of the localization engine."""

from typing import Optional

from flask import Flask

from lingo_engine.translation import LocalizationEngine


def create_app(engine: Optional[LocalizationEngine] = None, request_timeout: Optional[float] = None) -> Flask:
    """Application factory; builds the engine from the environment unless one is given."""
    if engine is None:
        engine = LocalizationEngine.from_env()

    from .app import build_app  # Import here to avoid circular imports

    return build_app(engine, request_timeout=request_timeout)


__all__ = ["create_app"]
