import asyncio as _asyncio
from http import HTTPStatus
from typing import Any

import httpx

from ... import errors, serialization
from ...client import ApiClient
from ...config import PageOptions
from ...models.client_summary import ClientSummary
from ...models.resource_set import ResourceSet
from ...types import Response


def _get_kwargs(
    *,
    options: PageOptions,
) -> dict[str, Any]:
    _kwargs: dict[str, Any] = {
        "method": "get",
        "url": "/api/clients",
        "params": options.query_params(),
    }

    return _kwargs


def _parse_response(*, response: httpx.Response, options: PageOptions) -> ResourceSet[ClientSummary]:
    if response.is_success:
        return serialization.decode(
            ResourceSet,
            response.content,
            url=str(response.request.url),
            resource_type=ClientSummary,
            start=options.start,
            size=options.effective_size,
        )

    raise errors.RequestFailure.from_response(response)


def _build_response(*, response: httpx.Response, options: PageOptions) -> Response[ResourceSet[ClientSummary]]:
    return Response(
        status_code=HTTPStatus(response.status_code),
        content=response.content,
        headers=response.headers,
        parsed=_parse_response(response=response, options=options),
    )


async def asyncio_detailed(
    *,
    client: ApiClient,
    start: int = 0,
    size: int = 0,
    cancel: _asyncio.Event | None = None,
) -> Response[ResourceSet[ClientSummary]]:
    """Get Client Summaries

     Get a page of client summaries, in the order the server returns them.

    Args:
        start (int): Zero-based offset of the first client. Default: 0.
        size (int): Page size; 0 requests the default page size of 20. Default: 0.
        cancel (asyncio.Event | None): Cancellation signal.

    Raises:
        errors.RequestFailure: If the server returns a non-2xx status code.
        errors.SerializationFailure: If the response body cannot be decoded.
        errors.CancellationFailure: If ``cancel`` fires before the response arrives.

    Returns:
        Response[ResourceSet[ClientSummary]]
    """

    options = PageOptions(start=start, size=size)
    kwargs = _get_kwargs(
        options=options,
    )

    response = await client.request(cancel=cancel, **kwargs)

    return _build_response(response=response, options=options)


async def asyncio(
    *,
    client: ApiClient,
    start: int = 0,
    size: int = 0,
    cancel: _asyncio.Event | None = None,
) -> ResourceSet[ClientSummary]:
    """Get Client Summaries

     Get a page of client summaries, in the order the server returns them.

    Args:
        start (int): Zero-based offset of the first client. Default: 0.
        size (int): Page size; 0 requests the default page size of 20. Default: 0.
        cancel (asyncio.Event | None): Cancellation signal.

    Raises:
        errors.RequestFailure: If the server returns a non-2xx status code.
        errors.SerializationFailure: If the response body cannot be decoded.
        errors.CancellationFailure: If ``cancel`` fires before the response arrives.

    Returns:
        ResourceSet[ClientSummary]
    """

    response = await asyncio_detailed(
        client=client,
        start=start,
        size=size,
        cancel=cancel,
    )
    return response.parsed
