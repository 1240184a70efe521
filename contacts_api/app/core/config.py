"""
Configuration management for the Contacts API.

The ``Settings`` dataclass reads its values from environment variables
at the moment an instance is created, so tests can set variables (for
example with ``monkeypatch.setenv``) and then build a fresh ``Settings``
without reloading this module.  Defaults are provided for all fields.
"""

import os
from dataclasses import dataclass, field


def _env(name: str, default: str) -> str:
    return os.getenv(name, default)


def _env_bool(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() in {"1", "true", "yes"}


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = field(default_factory=lambda: _env("PROJECT_NAME", "Contacts API"))
    api_version: str = field(default_factory=lambda: _env("API_VERSION", "1.0"))
    description: str = "API для управления телефонными контактами"

    # All versioned routes are mounted under this prefix.
    api_prefix: str = field(default_factory=lambda: _env("API_PREFIX", "/api/v1"))

    # Swagger UI location.  The OpenAPI document is served next to it
    # (``<docs_url>/openapi.json``).
    docs_url: str = field(default_factory=lambda: _env("DOCS_URL", "/swagger"))

    log_level: str = field(default_factory=lambda: _env("LOG_LEVEL", "INFO"))
    # Empty string means console logging only.
    log_file: str = field(default_factory=lambda: _env("LOG_FILE", ""))

    host: str = field(default_factory=lambda: _env("HOST", "0.0.0.0"))
    port: int = field(default_factory=lambda: int(_env("PORT", "8080")))

    # When disabled the registry starts empty instead of with the two
    # demo contacts.
    seed_contacts: bool = field(default_factory=lambda: _env_bool("SEED_CONTACTS", "true"))

    @property
    def openapi_url(self) -> str:
        return f"{self.docs_url.rstrip('/')}/openapi.json"


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.
settings = Settings()
