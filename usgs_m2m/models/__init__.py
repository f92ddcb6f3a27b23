"""Public models for the M2M client."""

from usgs_m2m.models.envelope import Envelope, ErrorInfo, Meta
from usgs_m2m.models.requests import (
    DatasetCustomization,
    Download,
    FilegroupDownload,
    FilepathDownload,
    MetadataSort,
    Product,
    ProxiedDownload,
    SearchSort,
    SortCustomization,
    SortDirection,
    TemporalFilter,
    UserContext,
)
from usgs_m2m.models.schemas import (
    BulkProduct,
    CategoryNode,
    DatasetBrowseEntry,
    DatasetSummary,
    SpatialBounds,
)

__all__ = [
    "BulkProduct",
    "CategoryNode",
    "DatasetBrowseEntry",
    "DatasetCustomization",
    "DatasetSummary",
    "Download",
    "Envelope",
    "ErrorInfo",
    "FilegroupDownload",
    "FilepathDownload",
    "Meta",
    "MetadataSort",
    "Product",
    "ProxiedDownload",
    "SearchSort",
    "SortCustomization",
    "SortDirection",
    "SpatialBounds",
    "TemporalFilter",
    "UserContext",
]
