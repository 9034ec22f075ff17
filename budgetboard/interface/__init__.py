"""Mini README: Interactive interfaces for Budget Board.

Exports the FastAPI application factory behind the browser dashboard.
"""

from .web_app import create_application

__all__ = ["create_application"]
