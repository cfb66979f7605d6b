"""
Ironclad client registration API

Wrapper around the endpoint modules that owns the HTTP transport.

Usage:
    from ironclad_client import IroncladClient

    async with IroncladClient("https://auth.example.com") as ironclad:
        page = await ironclad.get_client_summaries(size=50)
        for summary in page:
            print(summary.id)
"""

import asyncio
from typing import Optional, Union

import httpx

from .api.clients import (
    get_client,
    get_client_summaries,
    modify_client,
    register_client,
    unregister_client,
)
from .client import ApiClient, AuthenticatedApiClient
from .config import Settings
from .models import Client, ClientSummary, ResourceSet
from .types import Unset
from .utils.logging import get_logger

logger = get_logger(__name__, prefix="Ironclad")


def _require_client_id(client: Union[Client, str]) -> str:
    client_id = client if isinstance(client, str) else client.id
    if isinstance(client_id, Unset) or not client_id:
        raise ValueError("A client id is required for this operation")
    return client_id


class IroncladClient:
    """
    HTTP client for managing the clients of an Ironclad server.

    Every method performs a single request; nothing is cached or retried.
    Methods may be awaited concurrently on the same instance.
    """

    def __init__(
        self,
        authority: str,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        access_token: Optional[str] = None,
    ):
        """
        Initialize the client.

        Args:
            authority: Base URL of the Ironclad server (e.g., https://auth.example.com)
            transport: Handler that executes requests (default: httpx connection pool)
            access_token: Bearer token attached to every request, if given
        """
        self.authority = authority
        if access_token:
            self._api: ApiClient = AuthenticatedApiClient(base_url=authority, transport=transport, token=access_token)
        else:
            self._api = ApiClient(base_url=authority, transport=transport)

    @classmethod
    def from_env(cls, transport: Optional[httpx.AsyncBaseTransport] = None) -> "IroncladClient":
        """Create client from IRONCLAD_* environment variables and .env."""
        settings = Settings.from_env()
        return cls(settings.authority, transport=transport, access_token=settings.access_token)

    @property
    def api_client(self) -> ApiClient:
        """The transport used by this client, for calling endpoint modules directly."""
        return self._api

    @property
    def closed(self) -> bool:
        return self._api.released

    async def get_client_summaries(
        self, start: int = 0, size: int = 0, *, cancel: Optional[asyncio.Event] = None
    ) -> ResourceSet[ClientSummary]:
        """
        Get the clients (or a subset thereof).

        Args:
            start: Zero-based offset of the first client to return
            size: Number of clients to return; 0 means the default page size (20)
            cancel: Cancellation signal
        """
        return await get_client_summaries.asyncio(client=self._api, start=start, size=size, cancel=cancel)

    async def get_client(self, client_id: str, *, cancel: Optional[asyncio.Event] = None) -> Client:
        """Get a client by id."""
        return await get_client.asyncio(_require_client_id(client_id), client=self._api, cancel=cancel)

    async def register_client(self, client: Client, *, cancel: Optional[asyncio.Event] = None) -> None:
        """Register a new client."""
        await register_client.asyncio(client=self._api, body=client, cancel=cancel)

    async def modify_client(self, client: Client, *, cancel: Optional[asyncio.Event] = None) -> None:
        """Replace an existing client's registration with ``client``."""
        client_id = _require_client_id(client)
        await modify_client.asyncio(client_id, client=self._api, body=client, cancel=cancel)

    async def unregister_client(
        self, client: Union[Client, str], *, cancel: Optional[asyncio.Event] = None
    ) -> None:
        """Remove a client, given either the client or its id."""
        client_id = _require_client_id(client)
        await unregister_client.asyncio(client_id, client=self._api, cancel=cancel)

    async def aclose(self) -> None:
        """Release network resources. Safe to call more than once."""
        if not self._api.released:
            logger.debug("Releasing client for %s", self.authority)
        await self._api.aclose()

    async def __aenter__(self) -> "IroncladClient":
        return self

    async def __aexit__(self, *args) -> None:
        await self.aclose()
