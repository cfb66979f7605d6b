import asyncio as _asyncio
from http import HTTPStatus
from typing import Any

import httpx

from ... import errors, serialization
from ...client import ApiClient
from ...models.client import Client
from ...types import Response


def _get_kwargs(
    *,
    body: Client,
) -> dict[str, Any]:
    headers: dict[str, Any] = {}

    _kwargs: dict[str, Any] = {
        "method": "post",
        "url": "/api/clients",
    }

    _kwargs["content"] = serialization.encode(body)

    headers["Content-Type"] = "application/json"

    _kwargs["headers"] = headers
    return _kwargs


def _parse_response(*, response: httpx.Response) -> None:
    if response.is_success:
        return None

    raise errors.RequestFailure.from_response(response)


def _build_response(*, response: httpx.Response) -> Response[None]:
    return Response(
        status_code=HTTPStatus(response.status_code),
        content=response.content,
        headers=response.headers,
        parsed=_parse_response(response=response),
    )


async def asyncio_detailed(
    *,
    client: ApiClient,
    body: Client,
    cancel: _asyncio.Event | None = None,
) -> Response[None]:
    """Register Client

     Register a new client with the server.

    Args:
        body (Client): The client to register.
        cancel (asyncio.Event | None): Cancellation signal.

    Raises:
        errors.RequestFailure: If the server returns a non-2xx status code.
        errors.CancellationFailure: If ``cancel`` fires before the response arrives.

    Returns:
        Response[None]
    """

    kwargs = _get_kwargs(
        body=body,
    )

    response = await client.request(cancel=cancel, **kwargs)

    return _build_response(response=response)


async def asyncio(
    *,
    client: ApiClient,
    body: Client,
    cancel: _asyncio.Event | None = None,
) -> None:
    """Register Client

     Register a new client with the server.

    Args:
        body (Client): The client to register.
        cancel (asyncio.Event | None): Cancellation signal.

    Raises:
        errors.RequestFailure: If the server returns a non-2xx status code.
        errors.CancellationFailure: If ``cancel`` fires before the response arrives.
    """

    await asyncio_detailed(
        client=client,
        body=body,
        cancel=cancel,
    )
