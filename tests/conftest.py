"""
Pytest configuration and shared fixtures for the Ironclad client tests.

This file provides:
- An in-memory fake Ironclad server usable as an httpx transport
- A request recorder for asserting on outgoing traffic
- Sample client documents
"""

import json
from typing import Callable

import httpx
import pytest

from ironclad_client import IroncladClient

AUTHORITY = "http://ironclad.test"


# =============================================================================
# Fake Server
# =============================================================================

class FakeIroncladServer:
    """
    Minimal in-memory implementation of the /api/clients endpoints.

    Clients are stored as wire dictionaries in insertion order. Every request
    the server sees is appended to ``requests``.
    """

    def __init__(self):
        self.clients: dict[str, dict] = {}
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        path = request.url.path

        if path == "/api/clients":
            if request.method == "GET":
                return self._list(request)
            if request.method == "POST":
                return self._register(request)

        if path.startswith("/api/clients/"):
            client_id = path[len("/api/clients/"):]
            if request.method == "GET":
                return self._get(client_id)
            if request.method == "PUT":
                return self._modify(client_id, request)
            if request.method == "DELETE":
                return self._unregister(client_id)

        return httpx.Response(405)

    def _list(self, request: httpx.Request) -> httpx.Response:
        skip = int(request.url.params.get("skip", 0))
        take = int(request.url.params.get("take", 20))
        documents = list(self.clients.values())
        page = [
            {"id": doc["id"], "name": doc.get("name"), "enabled": doc.get("enabled", True)}
            for doc in documents[skip:skip + take]
        ]
        return httpx.Response(
            200,
            json={"start": skip, "size": take, "total_size": len(documents), "resources": page},
        )

    def _get(self, client_id: str) -> httpx.Response:
        if client_id not in self.clients:
            return httpx.Response(404)
        return httpx.Response(200, json=self.clients[client_id])

    def _register(self, request: httpx.Request) -> httpx.Response:
        document = json.loads(request.content)
        if not document.get("id"):
            return httpx.Response(400, text="id required")
        if document["id"] in self.clients:
            return httpx.Response(409, text="client already exists")
        self.clients[document["id"]] = document
        return httpx.Response(201)

    def _modify(self, client_id: str, request: httpx.Request) -> httpx.Response:
        document = json.loads(request.content)
        if not document.get("id"):
            return httpx.Response(400, text="id required")
        if client_id not in self.clients:
            return httpx.Response(404)
        self.clients[client_id] = document
        return httpx.Response(200)

    def _unregister(self, client_id: str) -> httpx.Response:
        if self.clients.pop(client_id, None) is None:
            return httpx.Response(404)
        return httpx.Response(200)


@pytest.fixture
def fake_server() -> FakeIroncladServer:
    """Empty fake Ironclad server."""
    return FakeIroncladServer()


@pytest.fixture
async def ironclad(fake_server):
    """IroncladClient wired to the fake server through a MockTransport."""
    async with IroncladClient(AUTHORITY, transport=httpx.MockTransport(fake_server)) as client:
        yield client


# =============================================================================
# Request Recording
# =============================================================================

@pytest.fixture
def recorded_requests() -> list[httpx.Request]:
    return []


@pytest.fixture
def make_transport(recorded_requests) -> Callable[..., httpx.MockTransport]:
    """
    Build a MockTransport that answers every request with a fixed response.

    The requests are appended to ``recorded_requests``.
    """

    def _make(status_code: int = 200, **response_kwargs) -> httpx.MockTransport:
        def handler(request: httpx.Request) -> httpx.Response:
            recorded_requests.append(request)
            return httpx.Response(status_code, **response_kwargs)

        return httpx.MockTransport(handler)

    return _make


# =============================================================================
# Sample Data
# =============================================================================

@pytest.fixture
def sample_client_document() -> dict:
    """Wire form of a typical web application client."""
    return {
        "id": "app1",
        "name": "Sample App",
        "allowed_grant_types": ["authorization_code"],
        "redirect_uris": ["https://app1.example.com/callback"],
        "allowed_scopes": ["openid", "profile"],
        "access_token_type": "jwt",
        "require_pkce": True,
        "enabled": True,
    }
