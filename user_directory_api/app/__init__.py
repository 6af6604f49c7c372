"""
Application package initializer.

This package contains the main entrypoint for the API and its
submodules.  Configuration, logging, the in-memory store and the
request middleware live in ``core``; payload models in ``schemas``;
business logic in ``services``; and HTTP routes in ``api``.
"""

from .main import app, create_app  # noqa: F401
