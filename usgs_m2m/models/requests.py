"""Pydantic request models for M2M operation payloads.

Field names are snake_case in Python and camelCase on the wire. Optional
fields left as ``None`` are omitted from the serialized payload entirely,
never sent as ``null``. Required-ness (non-empty ids and names) is checked by
the client operations, not here, so that a bad value becomes a failed
envelope instead of an exception at construction time.
"""

from __future__ import annotations

from datetime import datetime, timezone
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

ISO8601_UTC_FORMAT = "%Y-%m-%dT%H:%M:%SZ"


def format_utc_iso8601(epoch_seconds: int | float) -> str:
    """Format epoch seconds as ``YYYY-MM-DDTHH:MM:SSZ`` in UTC."""
    return datetime.fromtimestamp(epoch_seconds, tz=timezone.utc).strftime(ISO8601_UTC_FORMAT)


class SortDirection(str, Enum):
    """Sort directions accepted by search operations."""

    ASC = "ASC"
    DESC = "DESC"


class RequestModel(BaseModel):
    """Base for payload fragments: camelCase aliases, absent fields omitted."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    def to_payload(self) -> dict:
        return self.model_dump(by_alias=True, exclude_none=True, mode="json")


class UserContext(RequestModel):
    """Caller context forwarded on login."""

    contact_id: str = ""
    ip_address: str = ""

    def is_empty(self) -> bool:
        return not self.contact_id and not self.ip_address


class ProxiedDownload(RequestModel):
    """A download completed through a proxy, reported by download-complete-proxied."""

    download_id: int
    downloaded_size: int


class Download(RequestModel):
    """Scene-level download entry for download-request."""

    entity_id: str
    product_id: str | None = None
    data_use: str | None = None
    label: str | None = None


class FilepathDownload(RequestModel):
    """Path-based download entry for download-request."""

    dataset_name: str
    product_code: str | None = None
    data_path: str | None = None
    data_use: str | None = None
    label: str | None = None


class FilegroupDownload(RequestModel):
    """File-group download entry for download-request."""

    dataset_name: str
    file_groups: list[str] | None = None
    list_id: str | None = None
    data_use: str | None = None
    label: str | None = None


class Product(RequestModel):
    """Product line for order-submit."""

    dataset_name: str
    entity_id: str
    product_id: str
    product_code: str | None = None

    def is_complete(self) -> bool:
        return bool(self.dataset_name and self.entity_id and self.product_id)


class TemporalFilter(RequestModel):
    """Time range in epoch seconds, sent as UTC ISO-8601 strings."""

    start: int | float
    end: int | float

    @field_validator("start", "end")
    @classmethod
    def _check_epoch(cls, value: int | float) -> int | float:
        # NaN, infinities and instants outside years 1-9999 cannot be formatted
        try:
            format_utc_iso8601(value)
        except (OverflowError, OSError, ValueError) as exc:
            raise ValueError(f"epoch seconds out of range: {value!r}") from exc
        return value

    def to_payload(self) -> dict:
        return {
            "start": format_utc_iso8601(self.start),
            "end": format_utc_iso8601(self.end),
        }


class SortCustomization(RequestModel):
    """Scene-search sort override. The API expects snake_case keys here."""

    field_name: str = Field(alias="field_name")
    direction: SortDirection | str


class MetadataSort(BaseModel):
    """Metadata field ordering inside a dataset customization."""

    id: str = ""
    sort_order: int = -1


class SearchSort(BaseModel):
    """Search-result sort entry inside a dataset customization."""

    id: str = ""
    direction: str = ""


class DatasetCustomization(BaseModel):
    """Per-dataset customization for dataset-set-customizations.

    Serialization drops every empty part: empty ids or directions, negative
    sort orders, empty metadata lists and empty file-group lists. A
    customization with nothing left serializes to ``{}``.
    """

    dataset_name: str
    excluded: bool | None = None
    metadata: dict[str, list[MetadataSort]] = Field(default_factory=dict)
    search_sort: list[SearchSort] = Field(default_factory=list)
    file_groups: dict[str, list[str]] = Field(default_factory=dict)

    def to_payload(self) -> dict:
        entry: dict = {}

        if self.excluded is not None:
            entry["excluded"] = self.excluded

        metadata: dict = {}
        for key, sorts in self.metadata.items():
            items = []
            for sort in sorts:
                item: dict = {}
                if sort.id:
                    item["id"] = sort.id
                if sort.sort_order >= 0:
                    item["sortOrder"] = sort.sort_order
                if item:
                    items.append(item)
            if items:
                metadata[key] = items
        if metadata:
            entry["metadata"] = metadata

        search_sort = []
        for sort in self.search_sort:
            item = {}
            if sort.id:
                item["id"] = sort.id
            if sort.direction:
                item["direction"] = sort.direction
            if item:
                search_sort.append(item)
        if search_sort:
            entry["search_sort"] = search_sort

        file_groups = {
            group_id: list(products)
            for group_id, products in self.file_groups.items()
            if products
        }
        if file_groups:
            entry["fileGroups"] = file_groups

        return entry
