"""HAL collection envelope shared by every paginated resource."""

from __future__ import annotations

from typing import Any, Generic, TypeVar

from pydantic import Field, model_validator

from horizon_sdk.models.base import HorizonModel


class Link(HorizonModel):
    href: str
    templated: bool = False


class Record(HorizonModel):
    """A single collection member. ``paging_token`` is its cursor position."""

    paging_token: str
    links: dict[str, Link] = Field(default_factory=dict, alias="_links")


RecordT = TypeVar("RecordT", bound=Record)


class Page(HorizonModel, Generic[RecordT]):
    """One window of a collection, in server order."""

    records: tuple[RecordT, ...] = ()
    links: dict[str, Link] = Field(default_factory=dict, alias="_links")

    @model_validator(mode="before")
    @classmethod
    def _unwrap_embedded(cls, data: Any) -> Any:
        if isinstance(data, dict) and "_embedded" in data:
            data = dict(data)
            embedded = data.pop("_embedded") or {}
            data["records"] = embedded.get("records", [])
        return data

    def link(self, rel: str) -> str | None:
        """Absolute URL for a navigation relation (``self``, ``next``, ``prev``)."""
        found = self.links.get(rel)
        return found.href if found else None

    def __len__(self) -> int:
        return len(self.records)
