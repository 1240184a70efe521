"""
Service layer for contacts.

``ContactService`` is the contact registry: an ordered, in-memory list
of ``Contact`` records.  Order is insertion order; updates keep a
record's position and deletions shift later records left.  Nothing is
persisted, every application instance owns its own registry (see
``create_app``) and the data lives as long as the process.

All public methods take a single lock for their whole duration, so a
lookup and the mutation that follows it can never interleave with
another request.

Identifiers come from a strictly increasing counter rendered as a
decimal string.  The counter starts one past the largest numeric id of
the initial records, so with the default seed data the first created
contact gets ``"3"``.  Ids are never reused, even after a delete.
"""

from __future__ import annotations

import logging
import threading
from typing import Iterable, List, Optional

from contacts_api.app.schemas.contact import Contact, ContactIn

logger = logging.getLogger(__name__)


SEED_CONTACTS: List[Contact] = [
    Contact(id="1", name="Иван Иванов", phone="+79161234567", email="ivan@mail.ru"),
    Contact(id="2", name="Петр Петров", phone="+79169876543", email="petr@mail.ru"),
]


def default_contacts() -> List[Contact]:
    """Return fresh copies of the seed records."""
    return [contact.model_copy() for contact in SEED_CONTACTS]


class ContactService:
    """In-memory contact registry."""

    def __init__(self, contacts: Optional[Iterable[Contact]] = None) -> None:
        self._lock = threading.Lock()
        self._contacts: List[Contact] = [c.model_copy() for c in contacts] if contacts is not None else []
        self._next_id = self._initial_counter(self._contacts)

    @staticmethod
    def _initial_counter(contacts: List[Contact]) -> int:
        numeric = [int(c.id) for c in contacts if c.id.isascii() and c.id.isdigit()]
        if numeric:
            return max(numeric) + 1
        return len(contacts) + 1

    def __len__(self) -> int:
        with self._lock:
            return len(self._contacts)

    def _index_of(self, contact_id: str) -> Optional[int]:
        # First match in sequence order wins.  Caller must hold the lock.
        for index, contact in enumerate(self._contacts):
            if contact.id == contact_id:
                return index
        return None

    def _generate_id(self) -> str:
        # Skip values already taken by records supplied at construction.
        taken = {c.id for c in self._contacts}
        while str(self._next_id) in taken:
            self._next_id += 1
        new_id = str(self._next_id)
        self._next_id += 1
        return new_id

    def list_contacts(self) -> List[Contact]:
        """Return all contacts in stored order."""
        with self._lock:
            return [contact.model_copy() for contact in self._contacts]

    def get_contact(self, contact_id: str) -> Optional[Contact]:
        """Return the contact with ``contact_id`` or ``None``."""
        with self._lock:
            index = self._index_of(contact_id)
            if index is None:
                logger.debug("Contact %s not found", contact_id)
                return None
            return self._contacts[index].model_copy()

    def create_contact(self, data: ContactIn) -> Contact:
        """Append a new contact and return it with its assigned id.

        Any ``id`` present in ``data`` is ignored.
        """
        with self._lock:
            contact = Contact(id=self._generate_id(), name=data.name, phone=data.phone, email=data.email)
            self._contacts.append(contact)
            logger.info("Created contact %s", contact.id)
            return contact.model_copy()

    def update_contact(self, contact_id: str, data: ContactIn) -> Optional[Contact]:
        """Replace every field of an existing contact.

        The stored id is always ``contact_id``, whatever ``data.id``
        says, and the record keeps its position.  Returns ``None`` if no
        such contact exists.
        """
        with self._lock:
            index = self._index_of(contact_id)
            if index is None:
                logger.debug("Contact %s not found for update", contact_id)
                return None
            contact = Contact(id=contact_id, name=data.name, phone=data.phone, email=data.email)
            self._contacts[index] = contact
            logger.info("Updated contact %s", contact_id)
            return contact.model_copy()

    def delete_contact(self, contact_id: str) -> bool:
        """Remove a contact.  Returns ``False`` if it does not exist."""
        with self._lock:
            index = self._index_of(contact_id)
            if index is None:
                logger.debug("Contact %s not found for delete", contact_id)
                return False
            del self._contacts[index]
            logger.info("Deleted contact %s", contact_id)
            return True
