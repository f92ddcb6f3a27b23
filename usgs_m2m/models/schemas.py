"""Typed response schemas for reshaped M2M payloads.

All fields are optional (or defaulted) so that partial responses still
produce a model; missing values are left at their defaults rather than
causing validation failures.
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class SpatialBounds(BaseModel):
    """Bounding box of a dataset's coverage."""

    east: float
    west: float
    north: float
    south: float


class DatasetSummary(BaseModel):
    """Flat dataset description as returned by dataset, dataset-search and dataset-categories."""

    dataset_id: str = ""
    dataset_alias: str = ""
    dataset_category_name: str = ""
    collection_name: str = ""
    collection_long_name: str = ""
    abstract_text: str = ""
    doi_number: str = ""
    keywords: str = ""
    data_owner: str = ""
    catalogs: list[str] = Field(default_factory=list)
    spatial_bounds: SpatialBounds | None = None
    scene_count: int | None = None
    acquisition_start: str | None = None
    acquisition_end: str | None = None
    date_updated: str | None = None
    ingest_frequency: str | None = None
    legacy_id: str | None = None
    temporal_coverage: str | None = None
    support_cloud_cover: bool = False
    support_deletion_search: bool = False


class CategoryNode(BaseModel):
    """One node of the dataset category tree."""

    id: str = ""
    name: str = ""
    reference_link: str | None = None
    parent_id: str | None = None
    parent_name: str | None = None
    description: str | None = None
    sub_categories: list[CategoryNode] = Field(default_factory=list)
    datasets: list[DatasetSummary] = Field(default_factory=list)


class DatasetBrowseEntry(BaseModel):
    """Browse image configuration for a dataset."""

    id: str = ""
    browse_name: str = ""
    browse_source: str = ""
    browse_source_name: str = ""
    browse_rotation_enabled: bool = False
    browse_kmz_enabled: bool = False
    is_geolocated: bool = False
    display_order: int = 0
    overlay_spec: str = ""


class BulkProduct(BaseModel):
    """Product available for bulk download."""

    product_code: str = ""
    product_name: str = ""
    download_name: str | None = None
    file_groups: str | None = None
