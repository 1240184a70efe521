"""Contacts API client.

A thin wrapper around the Contacts REST API built on ``requests``.  The
client exposes one method per route:

* :meth:`ContactsAPI.list_contacts` – return every contact.
* :meth:`ContactsAPI.get_contact` – fetch a single contact by id.
* :meth:`ContactsAPI.create_contact` – add a contact.
* :meth:`ContactsAPI.update_contact` – replace a contact's fields.
* :meth:`ContactsAPI.delete_contact` – remove a contact.

Methods never raise for HTTP or transport failures.  Each returns a
tuple ``(data, error)``: on success ``error`` is ``None``; on failure
``data`` is empty and ``error`` is a dictionary with ``status_code``
and ``message`` keys.  The message is taken from the ``error`` field
the server puts in every failure response.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple
from urllib.parse import quote

import requests


logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "http://localhost:8080/api/v1"

Error = Dict[str, Any]


class ContactsAPI:
    """Client for the contacts endpoints."""

    def __init__(
        self,
        *,
        base_url: str = DEFAULT_BASE_URL,
        session: Optional[requests.Session] = None,
        timeout: float = 15,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: URL of the API root including the version prefix,
                e.g. ``http://localhost:8080/api/v1``.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
            timeout: Per-request timeout in seconds.
        """
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout

    # ------------------------------------------------------------------
    # Low level HTTP helper
    # ------------------------------------------------------------------
    def _request(
        self, method: str, path: str, *, json_body: Any | None = None
    ) -> Tuple[Optional[Any], Optional[Error]]:
        """Perform an HTTP request to the API.

        Returns:
            A tuple ``(data, error)``.  ``data`` is the parsed JSON body
            on success; ``error`` describes the failure otherwise.
        """
        url = f"{self.base_url}{path}"
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = self.session.request(
                method=method,
                url=url,
                json=json_body,
                timeout=self.timeout,
            )
            response.raise_for_status()
            if response.content:
                return response.json(), None
            return None, None
        except requests.HTTPError as exc:
            status = exc.response.status_code if exc.response is not None else None
            message = ""
            if exc.response is not None:
                try:
                    err_json = exc.response.json()
                    if isinstance(err_json, dict):
                        message = err_json.get("error") or err_json.get("message") or ""
                    message = message or str(err_json)
                except ValueError:
                    message = exc.response.text
            if not message:
                message = str(exc)
            logger.error("API request failed (%s): %s", status, message)
            return None, {"status_code": status, "message": message}
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "message": str(exc)}

    @staticmethod
    def _contact_path(contact_id: Any) -> str:
        return f"/contacts/{quote(str(contact_id), safe='')}"

    # ------------------------------------------------------------------
    # Contact operations
    # ------------------------------------------------------------------
    def list_contacts(self) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        """Retrieve all contacts in server order."""
        data, error = self._request("GET", "/contacts")
        if error:
            return [], error
        if isinstance(data, list):
            return data, None
        return [], None

    def get_contact(self, contact_id: Any) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Retrieve a single contact by id."""
        data, error = self._request("GET", self._contact_path(contact_id))
        if error:
            return None, error
        return data, None

    def create_contact(self, payload: Dict[str, Any]) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Create a contact.

        Args:
            payload: ``name``, ``phone`` and ``email``.  An ``id`` key is
                ignored by the server.
        Returns:
            A tuple ``(contact, error)``; ``contact`` carries the
            assigned id.
        """
        data, error = self._request("POST", "/contacts", json_body=payload)
        if error:
            return None, error
        return data, None

    def update_contact(
        self, contact_id: Any, payload: Dict[str, Any]
    ) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Replace all fields of a contact.

        Fields missing from ``payload`` are cleared by the server.
        """
        data, error = self._request("PUT", self._contact_path(contact_id), json_body=payload)
        if error:
            return None, error
        return data, None

    def delete_contact(self, contact_id: Any) -> Tuple[bool, Optional[Error]]:
        """Delete a contact.

        Returns:
            A tuple ``(success, error)``.
        """
        data, error = self._request("DELETE", self._contact_path(contact_id))
        if error:
            return False, error
        return data is not None, None
