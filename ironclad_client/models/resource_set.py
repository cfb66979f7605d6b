from __future__ import annotations

from collections.abc import Iterator, Mapping
from typing import Any, Generic, Protocol, TypeVar

from attrs import define as _attrs_define
from attrs import field as _attrs_field


class _Resource(Protocol):
    def to_dict(self) -> dict[str, Any]: ...


R = TypeVar("R", bound=_Resource)


@_attrs_define
class ResourceSet(Generic[R]):
    """One page of a server-side collection.

    Items keep the order the server returned them in. The set is a snapshot
    taken when the page was fetched.

    Example:
        {'start': 0, 'size': 10, 'total_size': 2, 'resources': [{'id': 'app1'}, {'id': 'app2'}]}

    Attributes:
        start (int): Zero-based offset of the first resource in the page
        size (int): Page size that was requested
        total_size (int): Number of matching resources on the server
        resources (list[R]): Resources in server order, never more than ``size``
    """

    start: int
    size: int
    total_size: int
    resources: list[R] = _attrs_field(factory=list)
    additional_properties: dict[str, Any] = _attrs_field(init=False, factory=dict)

    def to_dict(self) -> dict[str, Any]:
        resources = []
        for resources_item_data in self.resources:
            resources_item = resources_item_data.to_dict()
            resources.append(resources_item)

        field_dict: dict[str, Any] = {}
        field_dict.update(self.additional_properties)
        field_dict.update(
            {
                "start": self.start,
                "size": self.size,
                "total_size": self.total_size,
                "resources": resources,
            }
        )

        return field_dict

    @classmethod
    def from_dict(
        cls,
        src_dict: Mapping[str, Any],
        *,
        resource_type: type[R],
        start: int | None = None,
        size: int | None = None,
    ) -> ResourceSet[R]:
        """
        Build a page from its wire form.

        ``start`` and ``size`` are the window the caller asked for and take
        precedence over the values echoed in the payload.
        """
        d = dict(src_dict)
        _resources = d.pop("resources", [])
        if _resources is None:
            _resources = []
        if not isinstance(_resources, list):
            raise TypeError(f"expected resources to be a list, got {type(_resources).__name__}")

        resources = []
        for resources_item_data in _resources:
            resources_item = resource_type.from_dict(resources_item_data)  # type: ignore[attr-defined]
            resources.append(resources_item)

        wire_start = d.pop("start", 0)
        wire_size = d.pop("size", len(resources))
        page_start = start if start is not None else int(wire_start)
        page_size = size if size is not None else int(wire_size)
        total_size = int(d.pop("total_size"))

        if page_size >= 0 and len(resources) > page_size:
            raise ValueError(f"page holds {len(resources)} resources but only {page_size} were requested")

        resource_set = cls(
            start=page_start,
            size=page_size,
            total_size=total_size,
            resources=resources,
        )

        resource_set.additional_properties = d
        return resource_set

    @property
    def total(self) -> int:
        """Number of matching resources on the server."""
        return self.total_size

    def __iter__(self) -> Iterator[R]:
        return iter(self.resources)

    def __len__(self) -> int:
        return len(self.resources)
