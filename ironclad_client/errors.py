"""Failures raised by the Ironclad client operations.

Every operation surfaces exactly one of these kinds to its caller:

- ``RequestFailure``: the server answered with a non-2xx status.
- ``CancellationFailure``: the caller's cancellation signal fired first.
- ``SerializationFailure``: the response body could not be decoded.
"""

import httpx


class IroncladError(Exception):
    """Base class for all failures raised by this package"""


class RequestFailure(IroncladError):
    """Raised when the server answers with a non-successful status code"""

    def __init__(
        self,
        url: str,
        status_code: int,
        reason_phrase: str,
        content: bytes = b"",
        detail: str | None = None,
    ):
        self.url = url
        self.status_code = status_code
        self.reason_phrase = reason_phrase
        self.content = content
        self.detail = detail

        message = f"Error connecting to {url}: {reason_phrase}"
        if detail is not None:
            message = f"{message} / {detail}"
        super().__init__(message)

    @property
    def is_not_found(self) -> bool:
        return self.status_code == httpx.codes.NOT_FOUND

    @classmethod
    def from_response(cls, response: httpx.Response, include_body: bool = False) -> "RequestFailure":
        """Build a failure from a response, optionally carrying the raw body text."""
        return cls(
            url=str(response.request.url),
            status_code=response.status_code,
            reason_phrase=response.reason_phrase,
            content=response.content,
            detail=response.text if include_body else None,
        )


class CancellationFailure(IroncladError):
    """Raised when the caller's cancellation signal fires before the exchange completes"""

    def __init__(self, url: str):
        self.url = url
        super().__init__(f"Request to {url} was cancelled")


class SerializationFailure(IroncladError):
    """Raised when a response body does not match the expected wire format"""

    def __init__(self, url: str, content: bytes, reason: str):
        self.url = url
        self.content = content
        self.reason = reason
        super().__init__(f"Could not decode response from {url}: {reason}")


__all__ = ["CancellationFailure", "IroncladError", "RequestFailure", "SerializationFailure"]
