"""Dataset discovery and customization operations."""

from __future__ import annotations

from typing import Any

from usgs_m2m.api.base import (
    M2MClientBase,
    compact,
    expecting,
    require,
    require_any,
    require_items,
)
from usgs_m2m.errors import ParameterError, returns_envelope
from usgs_m2m.models.coercion import as_int
from usgs_m2m.models.datasets import (
    parse_browse_entries,
    parse_bulk_products,
    parse_catalogs,
    parse_categories,
    parse_dataset_list,
    parse_dataset_summary,
)
from usgs_m2m.models.envelope import Envelope
from usgs_m2m.models.requests import DatasetCustomization, SortDirection, TemporalFilter
from usgs_m2m.models.schemas import (
    BulkProduct,
    CategoryNode,
    DatasetBrowseEntry,
    DatasetSummary,
)


class DatasetOperations(M2MClientBase):
    """dataset-* endpoints."""

    @returns_envelope
    def dataset(self, dataset_name: str = "", dataset_id: str = "") -> Envelope[DatasetSummary]:
        """Look up one dataset by name or id (at least one is required)."""
        endpoint = "dataset"
        require_any(endpoint, datasetName=dataset_name, datasetId=dataset_id)

        payload = compact({
            "datasetName": dataset_name or None,
            "datasetId": dataset_id or None,
        })
        envelope = self._post(endpoint, payload)
        return self._reshape(envelope, endpoint, expecting(dict, parse_dataset_summary))

    @returns_envelope
    def dataset_browse(self, dataset_id: str) -> Envelope[list[DatasetBrowseEntry]]:
        endpoint = "dataset-browse"
        require(dataset_id, "datasetId", endpoint)

        envelope = self._post(endpoint, {"datasetId": dataset_id})
        return self._reshape(envelope, endpoint, expecting(list, parse_browse_entries))

    @returns_envelope
    def dataset_bulk_products(self, dataset_name: str | None = None) -> Envelope[list[BulkProduct]]:
        endpoint = "dataset-bulk-products"
        envelope = self._post(endpoint, compact({"datasetName": dataset_name or None}))
        return self._reshape(envelope, endpoint, expecting(list, parse_bulk_products))

    @returns_envelope
    def dataset_catalogs(self) -> Envelope[dict[str, str]]:
        """Catalog code -> display name."""
        endpoint = "dataset-catalogs"
        return self._reshape(self._get(endpoint), endpoint, expecting(dict, parse_catalogs))

    @returns_envelope
    def dataset_categories(
        self,
        catalog: str | None = None,
        include_messages: bool | None = None,
        public_only: bool | None = None,
        use_customization: bool | None = None,
        parent_id: str | None = None,
        dataset_filter: str | None = None,
    ) -> Envelope[dict[str, CategoryNode]]:
        """Fetch the category tree; ``data`` maps top-level category id to node."""
        endpoint = "dataset-categories"
        payload = compact({
            "catalog": catalog,
            "includeMessages": include_messages,
            "publicOnly": public_only,
            "useCustomization": use_customization,
            "parentId": parent_id,
            "datasetFilter": dataset_filter,
        })
        envelope = self._post(endpoint, payload)
        return self._reshape(envelope, endpoint, expecting((dict, list), parse_categories))

    @returns_envelope
    def dataset_clear_customization(
        self,
        dataset_name: str | None = None,
        metadata_type: list[str] | None = None,
        file_group_ids: list[str] | None = None,
    ) -> Envelope[int]:
        """Clear customizations; ``data`` is the number of entries removed."""
        endpoint = "dataset-clear-customization"
        payload = compact({
            "datasetName": dataset_name,
            "metadataType": metadata_type,
            "fileGroupIds": file_group_ids,
        })
        envelope = self._post(endpoint, payload)
        return self._reshape(envelope, endpoint, as_int)

    @returns_envelope
    def dataset_coverage(self, dataset_name: str) -> Envelope[Any]:
        endpoint = "dataset-coverage"
        require(dataset_name, "datasetName", endpoint)
        return self._post(endpoint, {"datasetName": dataset_name})

    @returns_envelope
    def dataset_download_options(
        self,
        dataset_name: str,
        scene_filter: dict | None = None,
    ) -> Envelope[Any]:
        endpoint = "dataset-download-options"
        require(dataset_name, "datasetName", endpoint)
        payload = compact({"datasetName": dataset_name, "sceneFilter": scene_filter})
        return self._post(endpoint, payload)

    @returns_envelope
    def dataset_file_groups(self, dataset_name: str) -> Envelope[Any]:
        endpoint = "dataset-file-groups"
        require(dataset_name, "datasetName", endpoint)
        return self._post(endpoint, {"datasetName": dataset_name})

    @returns_envelope
    def dataset_filters(self, dataset_name: str) -> Envelope[Any]:
        endpoint = "dataset-filters"
        require(dataset_name, "datasetName", endpoint)
        return self._post(endpoint, {"datasetName": dataset_name})

    @returns_envelope
    def dataset_get_customization(self, dataset_name: str) -> Envelope[Any]:
        endpoint = "dataset-get-customization"
        require(dataset_name, "datasetName", endpoint)
        return self._post(endpoint, {"datasetName": dataset_name})

    @returns_envelope
    def dataset_get_customizations(
        self,
        dataset_names: list[str] | None = None,
        metadata_type: list[str] | None = None,
    ) -> Envelope[Any]:
        endpoint = "dataset-get-customizations"
        payload = compact({"datasetNames": dataset_names, "metadataType": metadata_type})
        return self._post(endpoint, payload)

    @returns_envelope
    def dataset_messages(
        self,
        catalog: str | None = None,
        dataset_name: str | None = None,
        dataset_names: list[str] | None = None,
    ) -> Envelope[Any]:
        endpoint = "dataset-messages"
        payload = compact({
            "catalog": catalog,
            "datasetName": dataset_name,
            "datasetNames": dataset_names,
        })
        return self._post(endpoint, payload)

    @returns_envelope
    def dataset_metadata(self, dataset_name: str) -> Envelope[Any]:
        endpoint = "dataset-metadata"
        require(dataset_name, "datasetName", endpoint)
        return self._post(endpoint, {"datasetName": dataset_name})

    @returns_envelope
    def dataset_order_products(self, dataset_name: str) -> Envelope[Any]:
        endpoint = "dataset-order-products"
        require(dataset_name, "datasetName", endpoint)
        return self._post(endpoint, {"datasetName": dataset_name})

    @returns_envelope
    def dataset_search(
        self,
        catalog: str | None = None,
        category_id: str | None = None,
        dataset_name: str | None = None,
        include_messages: bool | None = None,
        public_only: bool | None = None,
        include_unknown_spatial: bool | None = None,
        temporal_filter: TemporalFilter | dict | None = None,
        spatial_filter: dict | None = None,
        sort_direction: SortDirection | str | None = None,
        sort_field: str | None = None,
        use_customization: bool | None = None,
    ) -> Envelope[list[DatasetSummary]]:
        """Search datasets; ``data`` is the list of matches in API order."""
        endpoint = "dataset-search"
        payload = compact({
            "catalog": catalog,
            "categoryId": category_id,
            "datasetName": dataset_name,
            "includeMessages": include_messages,
            "publicOnly": public_only,
            "includeUnknownSpatial": include_unknown_spatial,
            "temporalFilter": temporal_filter,
            "spatialFilter": spatial_filter,
            "sortDirection": sort_direction,
            "sortField": sort_field,
            "useCustomization": use_customization,
        })
        envelope = self._post(endpoint, payload)
        return self._reshape(envelope, endpoint, expecting(list, parse_dataset_list))

    @returns_envelope
    def dataset_set_customization(
        self,
        dataset_name: str,
        excluded: bool | None = None,
        metadata: dict | None = None,
        search_sort: dict | list | None = None,
        file_groups: dict | None = None,
    ) -> Envelope[Any]:
        endpoint = "dataset-set-customization"
        require(dataset_name, "datasetName", endpoint)
        payload = compact({
            "datasetName": dataset_name,
            "excluded": excluded,
            "metadata": metadata,
            "searchSort": search_sort,
            "fileGroups": file_groups,
        })
        return self._post(endpoint, payload)

    @returns_envelope
    def dataset_set_customizations(
        self,
        customizations: list[DatasetCustomization],
    ) -> Envelope[Any]:
        """Apply several customizations in one call.

        Every entry must name its dataset; nothing is sent if any does not.
        Entries with nothing to set are skipped.
        """
        endpoint = "dataset-set-customizations"
        require_items(customizations, "customizations", endpoint)
        for customization in customizations:
            if not customization.dataset_name:
                raise ParameterError(
                    f"DatasetCustomization.datasetName is required for {endpoint}."
                )

        by_dataset: dict[str, list[dict]] = {}
        for customization in customizations:
            entry = customization.to_payload()
            if entry:
                by_dataset.setdefault(customization.dataset_name, []).append(entry)

        payload = compact({"datasetCustomization": by_dataset or None})
        return self._post(endpoint, payload)
