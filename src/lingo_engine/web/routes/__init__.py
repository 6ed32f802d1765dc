"""Route blueprints for the web application."""

from .localize import localize_bp

__all__ = [
    "localize_bp",
]
