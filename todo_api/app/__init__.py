"""
Application package initializer.

This package contains the main entrypoint for the API and its
submodules: ``core`` (configuration, logging, database bootstrap and
error handlers), ``api`` (routers), ``services`` (the todo stores) and
``schemas`` (pydantic payloads).
"""

from .main import app, create_app  # noqa: F401
