"""
Main entrypoint for the Contacts API.

This module assembles the FastAPI application: it sets up logging,
creates the contact registry, registers the error handlers and mounts
the versioned routers.  ``create_app`` builds a new, independent
application each time it is called; the module-level ``app`` is the
instance served in production, e.g.::

    uvicorn contacts_api.app.main:app --port 8080

Swagger UI is served at ``settings.docs_url`` (``/swagger`` by default).
"""

import logging
from typing import Iterable, Optional

from fastapi import FastAPI

from .api.v1.router import router as v1_router
from .core.config import Settings, settings as default_settings
from .core.errors import register_exception_handlers
from .core.logging_config import setup_logging
from .schemas.contact import Contact
from .services.contact_service import ContactService, default_contacts


def create_app(
    settings: Optional[Settings] = None,
    contacts: Optional[Iterable[Contact]] = None,
) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    settings : Optional[Settings]
        Configuration to use.  Defaults to the module-level settings
        read from the environment at import time.
    contacts : Optional[Iterable[Contact]]
        Initial registry content.  When omitted, the two demo contacts
        are loaded unless ``settings.seed_contacts`` is false.

    Returns
    -------
    FastAPI
        A configured application owning its own contact registry.
    """
    settings = settings or default_settings

    # Configure logging before anything else logs.
    setup_logging(settings.log_level, settings.log_file or None)
    logger = logging.getLogger(__name__)

    app = FastAPI(
        title=settings.project_name,
        version=settings.api_version,
        description=settings.description,
        docs_url=settings.docs_url,
        openapi_url=settings.openapi_url,
        redoc_url=None,
    )

    if contacts is None:
        contacts = default_contacts() if settings.seed_contacts else []
    app.state.settings = settings
    app.state.contact_service = ContactService(contacts)

    register_exception_handlers(app)
    app.include_router(v1_router, prefix=settings.api_prefix)

    logger.info(
        "%s %s ready with %d contacts under %s",
        settings.project_name,
        settings.api_version,
        len(app.state.contact_service),
        settings.api_prefix,
    )
    return app


# Create the application instance at import time so that uvicorn can
# discover it without calling create_app manually.
app = create_app()
