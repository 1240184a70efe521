"""
Contact endpoints for API v1.

Five routes over the in-memory contact registry: list, retrieve,
create, replace and delete.  Payload validation is done by pydantic;
a payload that cannot be parsed into ``ContactIn`` is answered with
``400`` by the handler registered in ``core.errors``.  Unknown ids
raise ``HTTPException(404)``, rendered as ``{"error": ...}``.
"""

from typing import List

from fastapi import APIRouter, Depends, HTTPException, status

from contacts_api.app.api.deps import get_contact_payload, get_contact_service
from contacts_api.app.core.errors import CONTACT_DELETED, CONTACT_NOT_FOUND, INVALID_DATA
from contacts_api.app.schemas.contact import Contact, ContactIn, ErrorResponse, MessageResponse
from contacts_api.app.services.contact_service import ContactService

router = APIRouter()

NOT_FOUND_RESPONSE = {status.HTTP_404_NOT_FOUND: {"model": ErrorResponse, "description": CONTACT_NOT_FOUND}}
BAD_REQUEST_RESPONSE = {status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse, "description": INVALID_DATA}}

# The body is read by get_contact_payload, so the schema is declared here for the docs.
CONTACT_BODY = {
    "requestBody": {
        "required": True,
        "content": {"application/json": {"schema": ContactIn.model_json_schema()}},
    }
}


@router.get(
    "",
    response_model=List[Contact],
    summary="Получить все контакты",
    description="Возвращает список всех телефонных контактов",
)
async def list_contacts(service: ContactService = Depends(get_contact_service)) -> List[Contact]:
    """Return every contact in stored order."""
    return service.list_contacts()


@router.get(
    "/{contact_id}",
    response_model=Contact,
    responses=NOT_FOUND_RESPONSE,
    summary="Получить контакт по ID",
    description="Возвращает контакт по указанному ID",
)
async def get_contact(contact_id: str, service: ContactService = Depends(get_contact_service)) -> Contact:
    contact = service.get_contact(contact_id)
    if contact is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=CONTACT_NOT_FOUND)
    return contact


@router.post(
    "",
    response_model=Contact,
    status_code=status.HTTP_201_CREATED,
    responses=BAD_REQUEST_RESPONSE,
    openapi_extra=CONTACT_BODY,
    summary="Создать новый контакт",
    description="Создает новый телефонный контакт",
)
async def create_contact(
    contact_in: ContactIn = Depends(get_contact_payload),
    service: ContactService = Depends(get_contact_service),
) -> Contact:
    """Create a contact; the id is assigned by the server."""
    return service.create_contact(contact_in)


@router.put(
    "/{contact_id}",
    response_model=Contact,
    responses={**BAD_REQUEST_RESPONSE, **NOT_FOUND_RESPONSE},
    openapi_extra=CONTACT_BODY,
    summary="Обновить контакт",
    description="Обновляет данные контакта по ID",
)
async def update_contact(
    contact_id: str,
    contact_in: ContactIn = Depends(get_contact_payload),
    service: ContactService = Depends(get_contact_service),
) -> Contact:
    """Replace all fields of a contact.

    The id in the URL wins over any id in the body.
    """
    contact = service.update_contact(contact_id, contact_in)
    if contact is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=CONTACT_NOT_FOUND)
    return contact


@router.delete(
    "/{contact_id}",
    response_model=MessageResponse,
    responses=NOT_FOUND_RESPONSE,
    summary="Удалить контакт",
    description="Удаляет контакт по ID",
)
async def delete_contact(
    contact_id: str,
    service: ContactService = Depends(get_contact_service),
) -> MessageResponse:
    # Удаление сдвигает последующие контакты, порядок остальных сохраняется
    if not service.delete_contact(contact_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=CONTACT_NOT_FOUND)
    return MessageResponse(message=CONTACT_DELETED)
