"""Wire codec shared by every request and response body.

Models map themselves to and from snake_case dictionaries (``to_dict`` /
``from_dict``). This module turns those dictionaries into JSON bytes and
back, dropping absent values on the way out and reporting undecodable
payloads as ``SerializationFailure`` on the way in.
"""

import json
from typing import Any, Protocol, TypeVar

from .errors import SerializationFailure

T = TypeVar("T")


class WireModel(Protocol):
    def to_dict(self) -> dict[str, Any]: ...


def compact(value: Any) -> Any:
    """Recursively drop mapping entries whose value is ``None``."""
    if isinstance(value, dict):
        return {key: compact(item) for key, item in value.items() if item is not None}
    if isinstance(value, list):
        return [compact(item) for item in value]
    return value


def to_wire(model: WireModel) -> dict[str, Any]:
    return compact(model.to_dict())


def encode(model: WireModel) -> bytes:
    return json.dumps(to_wire(model)).encode("utf-8")


def decode(model_type: type[T], content: bytes, *, url: str, **kwargs: Any) -> T:
    """
    Decode a response body into ``model_type``.

    Args:
        model_type: Model class exposing ``from_dict``
        content: Raw response body
        url: Request URL, carried by the failure for diagnostics
        **kwargs: Extra arguments forwarded to ``from_dict``

    Raises:
        SerializationFailure: If the body is not JSON or does not match the model
    """
    try:
        data = json.loads(content)
    except ValueError as exc:
        raise SerializationFailure(url, content, f"invalid JSON ({exc})") from exc

    if not isinstance(data, dict):
        raise SerializationFailure(url, content, f"expected a JSON object, got {type(data).__name__}")

    try:
        return model_type.from_dict(data, **kwargs)  # type: ignore[attr-defined]
    except KeyError as exc:
        raise SerializationFailure(url, content, f"missing required field {exc}") from exc
    except (TypeError, ValueError, AttributeError) as exc:
        raise SerializationFailure(url, content, str(exc)) from exc
