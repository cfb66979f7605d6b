import asyncio as _asyncio
from http import HTTPStatus
from typing import Any
from urllib.parse import quote

import httpx

from ... import errors
from ...client import ApiClient
from ...types import Response


def _get_kwargs(
    client_id: str,
) -> dict[str, Any]:
    _kwargs: dict[str, Any] = {
        "method": "delete",
        "url": "/api/clients/{client_id}".format(
            client_id=quote(str(client_id), safe=""),
        ),
    }

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
    client_id: str,
    *,
    client: ApiClient,
    cancel: _asyncio.Event | None = None,
) -> Response[None]:
    """Unregister Client

     Remove a client registration from the server.

    Args:
        client_id (str):
        cancel (asyncio.Event | None): Cancellation signal.

    Raises:
        errors.RequestFailure: If the server returns a non-2xx status code.
        errors.CancellationFailure: If ``cancel`` fires before the response arrives.

    Returns:
        Response[None]
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
) -> None:
    """Unregister Client

     Remove a client registration from the server.

    Args:
        client_id (str):
        cancel (asyncio.Event | None): Cancellation signal.

    Raises:
        errors.RequestFailure: If the server returns a non-2xx status code.
        errors.CancellationFailure: If ``cancel`` fires before the response arrives.
    """

    await asyncio_detailed(
        client_id=client_id,
        client=client,
        cancel=cancel,
    )
