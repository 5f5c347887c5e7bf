"""Web layer - HTTP routes and page rendering"""

from .app import create_app

__all__ = ["create_app"]
