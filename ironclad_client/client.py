import asyncio
import ssl
from typing import Any

import httpx
from attrs import define, evolve, field

from .errors import CancellationFailure
from .utils.logging import get_logger

logger = get_logger(__name__, prefix="Transport")


@define
class ApiClient:
    """A class for keeping track of data related to the API

    The following are accepted as keyword arguments and will be used to construct httpx Clients internally:

        ``base_url``: The authority of the Ironclad server, e.g. ``https://auth.example.com``

        ``transport``: The handler that executes requests. Defaults to httpx's connection pooling transport;
            pass an ``httpx.MockTransport`` or any other ``httpx.AsyncBaseTransport`` to intercept traffic.

        ``cookies``: A dictionary of cookies to be sent with every request

        ``headers``: A dictionary of headers to be sent with every request

        ``timeout``: The maximum amount of a time a request can take. No timeout is applied unless one is given.

        ``verify_ssl``: Whether or not to verify the SSL certificate of the API server. This should be True in production,
            but can be set to False for testing purposes.

        ``follow_redirects``: Whether or not to follow redirects. Default value is False.

        ``httpx_args``: A dictionary of additional arguments to be passed to the ``httpx.AsyncClient`` constructor.

    Attributes:
        released: True once ``aclose`` has run. A released client cannot issue further requests.
    """

    _base_url: str = field(alias="base_url")
    _transport: httpx.AsyncBaseTransport | None = field(default=None, kw_only=True, alias="transport")
    _cookies: dict[str, str] = field(factory=dict, kw_only=True, alias="cookies")
    _headers: dict[str, str] = field(factory=dict, kw_only=True, alias="headers")
    _timeout: httpx.Timeout = field(factory=lambda: httpx.Timeout(None), kw_only=True, alias="timeout")
    _verify_ssl: str | bool | ssl.SSLContext = field(default=True, kw_only=True, alias="verify_ssl")
    _follow_redirects: bool = field(default=False, kw_only=True, alias="follow_redirects")
    _httpx_args: dict[str, Any] = field(factory=dict, kw_only=True, alias="httpx_args")
    _async_client: httpx.AsyncClient | None = field(default=None, init=False)
    released: bool = field(default=False, init=False)

    @property
    def base_url(self) -> str:
        return self._base_url

    def with_headers(self, headers: dict[str, str]) -> "ApiClient":
        """Get a new client matching this one with additional headers"""
        if self._async_client is not None:
            self._async_client.headers.update(headers)
        return evolve(self, headers={**self._headers, **headers})

    def with_cookies(self, cookies: dict[str, str]) -> "ApiClient":
        """Get a new client matching this one with additional cookies"""
        if self._async_client is not None:
            self._async_client.cookies.update(cookies)
        return evolve(self, cookies={**self._cookies, **cookies})

    def with_timeout(self, timeout: httpx.Timeout) -> "ApiClient":
        """Get a new client matching this one with a new timeout (in seconds)"""
        if self._async_client is not None:
            self._async_client.timeout = timeout
        return evolve(self, timeout=timeout)

    def set_async_httpx_client(self, async_client: httpx.AsyncClient) -> "ApiClient":
        """Manually set the underlying httpx.AsyncClient

        **NOTE**: This will override any other settings on the client, including cookies, headers, and timeout.
        """
        self._async_client = async_client
        return self

    def _build_async_httpx_client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            base_url=self._base_url,
            transport=self._transport,
            cookies=self._cookies,
            headers=self._headers,
            timeout=self._timeout,
            verify=self._verify_ssl,
            follow_redirects=self._follow_redirects,
            **self._httpx_args,
        )

    def get_async_httpx_client(self) -> httpx.AsyncClient:
        """Get the underlying httpx.AsyncClient, constructing a new one if not previously set"""
        if self.released:
            raise RuntimeError("Cannot send a request, as the client has been closed.")
        if self._async_client is None:
            self._async_client = self._build_async_httpx_client()
        return self._async_client

    async def request(self, *, cancel: asyncio.Event | None = None, **kwargs: Any) -> httpx.Response:
        """
        Send one request through the transport.

        Args:
            cancel: Optional cancellation signal. When it fires before the
                response arrives, the exchange is aborted.
            **kwargs: Arguments for ``httpx.AsyncClient.request``

        Raises:
            CancellationFailure: If ``cancel`` fires while the exchange is outstanding
            httpx.TransportError: If no response could be obtained
        """
        httpx_client = self.get_async_httpx_client()
        url = str(httpx_client.build_request(kwargs["method"], kwargs["url"], params=kwargs.get("params")).url)

        logger.debug("%s %s", kwargs["method"].upper(), url)

        if cancel is None:
            response = await httpx_client.request(**kwargs)
        else:
            response = await self._request_until_cancelled(httpx_client, url, cancel, kwargs)

        logger.debug("%s %s -> %s", kwargs["method"].upper(), url, response.status_code)
        return response

    @staticmethod
    async def _request_until_cancelled(
        httpx_client: httpx.AsyncClient, url: str, cancel: asyncio.Event, kwargs: dict[str, Any]
    ) -> httpx.Response:
        if cancel.is_set():
            raise CancellationFailure(url)

        request_task = asyncio.ensure_future(httpx_client.request(**kwargs))
        cancel_task = asyncio.ensure_future(cancel.wait())
        try:
            done, _ = await asyncio.wait({request_task, cancel_task}, return_when=asyncio.FIRST_COMPLETED)
        finally:
            cancel_task.cancel()
            if not request_task.done():
                request_task.cancel()

        if request_task in done:
            return request_task.result()

        await asyncio.gather(request_task, return_exceptions=True)
        logger.debug("Request to %s aborted by caller", url)
        raise CancellationFailure(url)

    async def aclose(self) -> None:
        """Release the underlying connections. Calling this more than once is a no-op."""
        if self.released:
            return
        self.released = True
        async_client, self._async_client = self._async_client, None
        if async_client is not None:
            await async_client.aclose()
            logger.debug("Closed connections to %s", self._base_url)

    async def __aenter__(self) -> "ApiClient":
        """Open the underlying connections for the lifetime of the context"""
        self.get_async_httpx_client()
        return self

    async def __aexit__(self, *args: Any, **kwargs: Any) -> None:
        """Release the underlying connections"""
        await self.aclose()


@define
class AuthenticatedApiClient(ApiClient):
    """An ApiClient which attaches a caller-supplied access token to every request

    The token is used as-is; obtaining or refreshing it is up to the caller.

    Attributes:
        token: The token to use for authentication
        prefix: The prefix to use for the Authorization header
        auth_header_name: The name of the Authorization header
    """

    token: str = field(kw_only=True)
    prefix: str = field(default="Bearer", kw_only=True)
    auth_header_name: str = field(default="Authorization", kw_only=True)

    def _build_async_httpx_client(self) -> httpx.AsyncClient:
        async_client = super()._build_async_httpx_client()
        async_client.headers[self.auth_header_name] = f"{self.prefix} {self.token}" if self.prefix else self.token
        return async_client
