"""
Top-level package for the Contacts API.

All functionality lives in the ``app`` subpackage; import the ASGI
application as ``contacts_api.app.main:app``.
"""

__all__ = []
