"""
bookstore
---------

Inventory and order management backend for a bookstore.

This package exposes:

- ``create_app()``: application factory returning a FastAPI instance
  (see ``bookstore.adapters.api.main``).
"""

from importlib import metadata as _metadata

try:
    __version__: str = _metadata.version("bookstore-backend")
except _metadata.PackageNotFoundError:  # When running from source tree
    __version__ = "0.0.0"


__all__ = ["__version__"]
