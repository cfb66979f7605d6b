import asyncio as _asyncio
from http import HTTPStatus
from typing import Any
from urllib.parse import quote

import httpx

from ... import errors, serialization
from ...client import ApiClient
from ...models.client import Client
from ...types import Response


def _get_kwargs(
    client_id: str,
) -> dict[str, Any]:
    _kwargs: dict[str, Any] = {
        "method": "get",
        "url": "/api/clients/{client_id}".format(
            client_id=quote(str(client_id), safe=""),
        ),
    }

    return _kwargs


def _parse_response(*, response: httpx.Response) -> Client:
    if response.is_success:
        return serialization.decode(Client, response.content, url=str(response.request.url))

    raise errors.RequestFailure.from_response(response)


def _build_response(*, response: httpx.Response) -> Response[Client]:
    return Response(
        status_code=HTTPStatus(response.status_code),
        content=response.content,
        headers=response.headers,
        parsed=_parse_response(response=response),
    )


async def asyncio_detailed(
    client_id: str,
    *,
    client: ApiClient,
    cancel: _asyncio.Event | None = None,
) -> Response[Client]:
    """Get Client

     Get the full registration of a client.

    Args:
        client_id (str):
        cancel (asyncio.Event | None): Cancellation signal.

    Raises:
        errors.RequestFailure: If the server returns a non-2xx status code, including 404.
        errors.SerializationFailure: If the response body cannot be decoded.
        errors.CancellationFailure: If ``cancel`` fires before the response arrives.

    Returns:
        Response[Client]
    """

    kwargs = _get_kwargs(
        client_id=client_id,
    )

    response = await client.request(cancel=cancel, **kwargs)

    return _build_response(response=response)


async def asyncio(
    client_id: str,
    *,
    client: ApiClient,
    cancel: _asyncio.Event | None = None,
) -> Client:
    """Get Client

     Get the full registration of a client.

    Args:
        client_id (str):
        cancel (asyncio.Event | None): Cancellation signal.

    Raises:
        errors.RequestFailure: If the server returns a non-2xx status code, including 404.
        errors.SerializationFailure: If the response body cannot be decoded.
        errors.CancellationFailure: If ``cancel`` fires before the response arrives.

    Returns:
        Client
    """

    return (
        await asyncio_detailed(
            client_id=client_id,
            client=client,
            cancel=cancel,
        )
    ).parsed
