"""Dataset payload parsing.

Builds typed models from the loosely typed ``data`` payloads of dataset,
dataset-search, dataset-categories, dataset-browse, dataset-bulk-products
and dataset-catalogs. Lists keep their input order.

Category trees are parsed recursively, bounded by ``MAX_CATEGORY_DEPTH``;
sub-categories below that depth are dropped.
"""

from __future__ import annotations

import logging
from typing import Any

from usgs_m2m.models.coercion import (
    get_bool,
    get_int,
    get_int_opt,
    get_list,
    get_object,
    get_spatial_bounds,
    get_string,
    get_string_array,
    get_string_opt,
)
from usgs_m2m.models.schemas import (
    BulkProduct,
    CategoryNode,
    DatasetBrowseEntry,
    DatasetSummary,
)

logger = logging.getLogger(__name__)

MAX_CATEGORY_DEPTH = 64


def parse_dataset_summary(obj: Any) -> DatasetSummary:
    """Build a DatasetSummary from one dataset JSON object."""
    return DatasetSummary(
        dataset_id=get_string(obj, "datasetId"),
        dataset_alias=get_string(obj, "datasetAlias"),
        dataset_category_name=get_string(obj, "datasetCategoryName"),
        collection_name=get_string(obj, "collectionName"),
        collection_long_name=get_string(obj, "collectionLongName"),
        abstract_text=get_string(obj, "abstractText"),
        doi_number=get_string(obj, "doiNumber"),
        keywords=get_string(obj, "keywords"),
        data_owner=get_string(obj, "dataOwner"),
        catalogs=get_string_array(obj, "catalogs"),
        spatial_bounds=get_spatial_bounds(get_object(obj, "spatialBounds")),
        scene_count=get_int_opt(obj, "sceneCount"),
        acquisition_start=get_string_opt(obj, "acquisitionStart"),
        acquisition_end=get_string_opt(obj, "acquisitionEnd"),
        date_updated=get_string_opt(obj, "dateUpdated"),
        ingest_frequency=get_string_opt(obj, "ingestFrequency"),
        legacy_id=get_string_opt(obj, "legacyId"),
        temporal_coverage=get_string_opt(obj, "temporalCoverage"),
        support_cloud_cover=get_bool(obj, "supportCloudCover"),
        support_deletion_search=get_bool(obj, "supportDeletionSearch"),
    )


def parse_dataset_list(data: Any) -> list[DatasetSummary]:
    """Parse a list of dataset objects, skipping non-object entries."""
    if not isinstance(data, list):
        return []
    return [parse_dataset_summary(item) for item in data if isinstance(item, dict)]


def parse_category(obj: Any, depth: int = 0) -> CategoryNode:
    """Recursively build a CategoryNode and its children."""
    node = CategoryNode(
        id=get_string(obj, "id"),
        name=get_string(obj, "categoryName"),
        reference_link=get_string_opt(obj, "referenceLink"),
        parent_id=get_string_opt(obj, "parentCategoryId"),
        parent_name=get_string_opt(obj, "parentCategoryName"),
        description=get_string_opt(obj, "categoryDescription"),
        datasets=parse_dataset_list(get_list(obj, "datasets")),
    )

    children = [child for child in get_list(obj, "subCategories") if isinstance(child, dict)]
    if not children:
        return node

    if depth + 1 >= MAX_CATEGORY_DEPTH:
        logger.warning(
            "Category tree deeper than %d levels; dropping %d sub-categories of %r",
            MAX_CATEGORY_DEPTH,
            len(children),
            node.id,
        )
        return node

    node.sub_categories = [parse_category(child, depth + 1) for child in children]
    return node


def parse_categories(data: Any) -> dict[str, CategoryNode]:
    """Parse a dataset-categories payload into top-level nodes keyed by id.

    The API returns an object keyed by category id; a plain list of
    category objects is keyed by each node's own id instead.
    """
    if isinstance(data, dict):
        items = [(key, value) for key, value in data.items() if isinstance(value, dict)]
    elif isinstance(data, list):
        items = [(get_string(value, "id"), value) for value in data if isinstance(value, dict)]
    else:
        return {}

    return {key: parse_category(value) for key, value in items}


def parse_browse_entries(data: Any) -> list[DatasetBrowseEntry]:
    if not isinstance(data, list):
        return []
    return [
        DatasetBrowseEntry(
            id=get_string(item, "id"),
            browse_name=get_string(item, "browseName"),
            browse_source=get_string(item, "browseSource"),
            browse_source_name=get_string(item, "browseSourceName"),
            browse_rotation_enabled=get_bool(item, "browseRotationEnabled"),
            browse_kmz_enabled=get_bool(item, "browseKmzEnabled"),
            is_geolocated=get_bool(item, "isGeolocated"),
            display_order=get_int(item, "displayOrder"),
            overlay_spec=get_string(item, "overlaySpec"),
        )
        for item in data
        if isinstance(item, dict)
    ]


def parse_bulk_products(data: Any) -> list[BulkProduct]:
    if not isinstance(data, list):
        return []
    return [
        BulkProduct(
            product_code=get_string(item, "productCode"),
            product_name=get_string(item, "productName"),
            download_name=get_string_opt(item, "downloadName"),
            file_groups=get_string_opt(item, "fileGroups"),
        )
        for item in data
        if isinstance(item, dict)
    ]


def parse_catalogs(data: Any) -> dict[str, str]:
    """Parse the catalog code -> display name map, dropping non-string names."""
    if not isinstance(data, dict):
        return {}
    return {code: name for code, name in data.items() if isinstance(name, str)}
