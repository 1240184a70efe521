"""
Top-level router for version 1 of the API.

Aggregates the domain routers under their prefixes.  When a new domain
is introduced, include its router here.
"""

from fastapi import APIRouter

from .endpoints import contacts

router = APIRouter()

router.include_router(contacts.router, prefix="/contacts", tags=["contacts"])
