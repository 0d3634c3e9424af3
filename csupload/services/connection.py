"""HTTP adapter for the Content Server REST API."""
from __future__ import annotations

import asyncio
import logging
from typing import Optional

import httpx

from ..errors import AuthenticationError, DocumentCreateError, MissingTicketError
from .multipart import build_multipart

logger = logging.getLogger(__name__)

API_BASE = "/api/v1/"
AUTH_ENDPOINT = API_BASE + "auth"
NODES_ENDPOINT = API_BASE + "nodes/"

TICKET_HEADER = "OTCSTicket"
DOCUMENT_TYPE = "144"


class ContentServerConnection:
    """
    Authenticated connection to one Content Server instance.

    The ticket is obtained once by authenticate() and only read afterwards,
    so create_document() may run from many tasks at the same time.

    Usage:
        async with ContentServerConnection(url, "Admin", "livelink") as conn:
            await conn.authenticate()
            await conn.create_document("doc00000", "report.pdf", 2000)
    """

    def __init__(
        self,
        base_url: str,
        username: str,
        password: str,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        max_connections: Optional[int] = None,
    ):
        self._base_url = base_url
        self._username = username
        self._password = password
        self._timeout = timeout
        self._transport = transport
        self._max_connections = max_connections
        self._ticket = ""
        self._client: Optional[httpx.AsyncClient] = None

    async def __aenter__(self):
        kwargs = {}
        if self._max_connections:
            # pool must not be smaller than the number of uploads in flight
            kwargs["limits"] = httpx.Limits(
                max_connections=self._max_connections,
                max_keepalive_connections=self._max_connections,
            )
        self._client = httpx.AsyncClient(
            base_url=self._base_url,
            timeout=self._timeout,
            transport=self._transport,
            **kwargs,
        )
        return self

    async def __aexit__(self, *args):
        if self._client:
            await self._client.aclose()
            self._client = None

    @property
    def ticket(self) -> str:
        """Session ticket, empty until authenticate() succeeds."""
        return self._ticket

    def _require_client(self) -> httpx.AsyncClient:
        if not self._client:
            raise RuntimeError("ContentServerConnection not initialized. Use 'async with' context.")
        return self._client

    async def authenticate(self) -> str:
        """
        Exchange username and password for a session ticket.

        Returns:
            The ticket, also kept on the connection for later calls

        Raises:
            AuthenticationError: transport failure, non-JSON body or repeated call
            MissingTicketError: the response carries no ticket
        """
        client = self._require_client()
        if self._ticket:
            raise AuthenticationError("connection is already authenticated")

        try:
            response = await client.post(
                AUTH_ENDPOINT,
                data={"username": self._username, "password": self._password},
            )
        except httpx.HTTPError as exc:
            raise AuthenticationError(f"auth request failed: {exc}") from exc

        try:
            payload = response.json()
        except ValueError as exc:
            raise AuthenticationError(
                f"auth response is not JSON (HTTP {response.status_code}): {exc}"
            ) from exc

        ticket = payload.get("ticket") if isinstance(payload, dict) else None
        if not ticket or not isinstance(ticket, str):
            raise MissingTicketError()

        self._ticket = ticket
        logger.debug(f"Authenticated as {self._username} against {self._base_url}")
        return ticket

    async def create_document(self, name: str, file_path: str, parent_id: int) -> Optional[int]:
        """
        Create a document node holding the contents of file_path.

        Args:
            name: Document name
            file_path: Local file to upload
            parent_id: Destination folder id

        Returns:
            Always None; the new node id is not read from the response

        Raises:
            OSError: file_path cannot be read
            DocumentCreateError: server answered with a status other than 200
            httpx.HTTPError: transport failure
        """
        client = self._require_client()
        body = await asyncio.to_thread(
            build_multipart,
            "file",
            file_path,
            {
                "type": DOCUMENT_TYPE,
                "name": name,
                "parent_id": str(parent_id),
            },
        )

        response = await client.post(
            NODES_ENDPOINT,
            content=body.content,
            headers={
                TICKET_HEADER: self._ticket,
                "Content-Type": body.content_type,
            },
        )
        # Body is read in full by httpx; only the status matters.
        if response.status_code != 200:
            raise DocumentCreateError(response.status_code, response.reason_phrase)

        logger.debug(f"Created {name} under {parent_id}")
        return None
