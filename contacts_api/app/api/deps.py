"""
Shared FastAPI dependencies.

The contact registry is created by ``create_app`` and stored on
``app.state``; handlers receive it through ``get_contact_service``
instead of importing a module-level object.  Tests can therefore build
an isolated app (and registry) per test.

Contact payloads are decoded by ``get_contact_payload`` rather than by
FastAPI's body binding: the body is parsed as JSON whatever
``Content-Type`` the client sent, and a JSON ``null`` yields an empty
contact.  Existing clients rely on both.
"""

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from pydantic import ValidationError

from contacts_api.app.schemas.contact import ContactIn
from contacts_api.app.services.contact_service import ContactService


def get_contact_service(request: Request) -> ContactService:
    return request.app.state.contact_service


async def get_contact_payload(request: Request) -> ContactIn:
    """Parse the request body into ``ContactIn``.

    Raises ``RequestValidationError`` (answered with ``400``) for bodies
    that are not UTF-8, not JSON, or not a contact-shaped object.
    """
    body = await request.body()
    try:
        text = body.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise RequestValidationError(
            [{"type": "unicode_decode", "loc": ("body",), "msg": str(exc), "input": None}]
        ) from exc
    if text.strip() == "null":
        return ContactIn()
    try:
        return ContactIn.model_validate_json(text)
    except ValidationError as exc:
        raise RequestValidationError(exc.errors(include_url=False)) from exc
