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
    *,
    body: Client,
) -> dict[str, Any]:
    headers: dict[str, Any] = {}

    _kwargs: dict[str, Any] = {
        "method": "put",
        "url": "/api/clients/{client_id}".format(
            client_id=quote(str(client_id), safe=""),
        ),
    }

    _kwargs["content"] = serialization.encode(body)

    headers["Content-Type"] = "application/json"

    _kwargs["headers"] = headers
    return _kwargs


def _parse_response(*, response: httpx.Response) -> None:
    if response.is_success:
        return None

    raise errors.RequestFailure.from_response(response, include_body=True)


def _build_response(*, response: httpx.Response) -> Response[None]:
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
    body: Client,
    cancel: _asyncio.Event | None = None,
) -> Response[None]:
    """Modify Client

     Replace the registration of an existing client. Fields left out of
    ``body`` are not kept by the server.

    Args:
        client_id (str):
        body (Client): The full replacement registration.
        cancel (asyncio.Event | None): Cancellation signal.

    Raises:
        errors.RequestFailure: If the server returns a non-2xx status code. ``detail`` holds the response body.
        errors.CancellationFailure: If ``cancel`` fires before the response arrives.

    Returns:
        Response[None]
    """

    kwargs = _get_kwargs(
        client_id=client_id,
        body=body,
    )

    response = await client.request(cancel=cancel, **kwargs)

    return _build_response(response=response)


async def asyncio(
    client_id: str,
    *,
    client: ApiClient,
    body: Client,
    cancel: _asyncio.Event | None = None,
) -> None:
    """Modify Client

     Replace the registration of an existing client. Fields left out of
    ``body`` are not kept by the server.

    Args:
        client_id (str):
        body (Client): The full replacement registration.
        cancel (asyncio.Event | None): Cancellation signal.

    Raises:
        errors.RequestFailure: If the server returns a non-2xx status code. ``detail`` holds the response body.
        errors.CancellationFailure: If ``cancel`` fires before the response arrives.
    """

    await asyncio_detailed(
        client_id=client_id,
        client=client,
        body=body,
        cancel=cancel,
    )
