"""
Application package initializer.

The API is split into ``core`` (settings, logging, error handlers),
``schemas`` (pydantic payload models), ``services`` (the contact
registry) and ``api`` (versioned routers).  Routes for a version live
under ``api/<version>/endpoints`` and are aggregated by that version's
``router`` module.
"""

from .main import app, create_app  # noqa: F401
