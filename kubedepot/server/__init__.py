"""HTTP server exposing the config store.

The application is built around an already loaded store, see `create_app`.
"""

from .app import create_app

__all__ = [
    "create_app",
]
