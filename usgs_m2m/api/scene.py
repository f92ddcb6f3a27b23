"""Scene list, metadata and search operations."""

from __future__ import annotations

from typing import Any

from usgs_m2m.api.base import M2MClientBase, compact, require
from usgs_m2m.errors import returns_envelope
from usgs_m2m.models.envelope import Envelope
from usgs_m2m.models.requests import SortCustomization, SortDirection, TemporalFilter


class SceneOperations(M2MClientBase):
    """scene-list-*, scene-metadata* and scene-search* endpoints."""

    # ------------------------------------------------------------------
    # Scene lists
    # ------------------------------------------------------------------

    @returns_envelope
    def scene_list_add(
        self,
        list_id: str,
        dataset_name: str,
        id_field: str | None = None,
        entity_id: str | None = None,
        entity_ids: list[str] | None = None,
        time_to_live: str | None = None,
        check_download_restriction: bool | None = None,
    ) -> Envelope[Any]:
        """Add scenes to a list; ``time_to_live`` is an ISO-8601 duration (e.g. "P1M")."""
        endpoint = "scene-list-add"
        require(list_id, "listId", endpoint)
        require(dataset_name, "datasetName", endpoint)
        payload = compact({
            "listId": list_id,
            "datasetName": dataset_name,
            "idField": id_field,
            "entityId": entity_id,
            "entityIds": entity_ids,
            "timeToLive": time_to_live,
            "checkDownloadRestriction": check_download_restriction,
        })
        return self._post(endpoint, payload)

    @returns_envelope
    def scene_list_get(
        self,
        list_id: str,
        dataset_name: str | None = None,
        starting_number: int | None = None,
        max_results: int | None = None,
    ) -> Envelope[Any]:
        endpoint = "scene-list-get"
        require(list_id, "listId", endpoint)
        payload = compact({
            "listId": list_id,
            "datasetName": dataset_name,
            "startingNumber": starting_number,
            "maxResults": max_results,
        })
        return self._post(endpoint, payload)

    @returns_envelope
    def scene_list_remove(
        self,
        list_id: str,
        dataset_name: str | None = None,
        entity_id: str | None = None,
        entity_ids: list[str] | None = None,
    ) -> Envelope[Any]:
        endpoint = "scene-list-remove"
        require(list_id, "listId", endpoint)
        payload = compact({
            "listId": list_id,
            "datasetName": dataset_name,
            "entityId": entity_id,
            "entityIds": entity_ids,
        })
        return self._post(endpoint, payload)

    @returns_envelope
    def scene_list_summary(self, list_id: str, dataset_name: str | None = None) -> Envelope[Any]:
        endpoint = "scene-list-summary"
        require(list_id, "listId", endpoint)
        return self._post(endpoint, compact({"listId": list_id, "datasetName": dataset_name}))

    @returns_envelope
    def scene_list_types(self, list_filter: str | None = None) -> Envelope[Any]:
        endpoint = "scene-list-types"
        return self._post(endpoint, compact({"listFilter": list_filter}))

    # ------------------------------------------------------------------
    # Scene metadata
    # ------------------------------------------------------------------

    @returns_envelope
    def scene_metadata(
        self,
        dataset_name: str,
        entity_id: str,
        id_type: str | None = None,
        metadata_type: str | None = None,
        include_null_metadata_values: bool | None = None,
        use_customization: bool | None = None,
    ) -> Envelope[Any]:
        endpoint = "scene-metadata"
        require(dataset_name, "datasetName", endpoint)
        require(entity_id, "entityId", endpoint)
        payload = compact({
            "datasetName": dataset_name,
            "entityId": entity_id,
            "idType": id_type,
            "metadataType": metadata_type,
            "includeNullMetadataValues": include_null_metadata_values,
            "useCustomization": use_customization,
        })
        return self._post(endpoint, payload)

    @returns_envelope
    def scene_metadata_list(
        self,
        list_id: str,
        dataset_name: str | None = None,
        metadata_type: str | None = None,
        include_null_metadata_values: bool | None = None,
        use_customization: bool | None = None,
    ) -> Envelope[Any]:
        endpoint = "scene-metadata-list"
        require(list_id, "listId", endpoint)
        payload = compact({
            "listId": list_id,
            "datasetName": dataset_name,
            "metadataType": metadata_type,
            "includeNullMetadataValues": include_null_metadata_values,
            "useCustomization": use_customization,
        })
        return self._post(endpoint, payload)

    @returns_envelope
    def scene_metadata_xml(
        self,
        dataset_name: str,
        entity_id: str,
        metadata_type: str | None = None,
    ) -> Envelope[Any]:
        endpoint = "scene-metadata-xml"
        require(dataset_name, "datasetName", endpoint)
        require(entity_id, "entityId", endpoint)
        payload = compact({
            "datasetName": dataset_name,
            "entityId": entity_id,
            "metadataType": metadata_type,
        })
        return self._post(endpoint, payload)

    # ------------------------------------------------------------------
    # Scene search
    # ------------------------------------------------------------------

    @returns_envelope
    def scene_search(
        self,
        dataset_name: str,
        max_results: int | None = None,
        starting_number: int | None = None,
        metadata_type: str | None = None,
        sort_field: str | None = None,
        sort_direction: SortDirection | str | None = None,
        sort_customization: SortCustomization | None = None,
        use_customization: bool | None = None,
        scene_filter: dict | None = None,
        compare_list_name: str | None = None,
        bulk_list_name: str | None = None,
        order_list_name: str | None = None,
        exclude_list_name: str | None = None,
        include_null_metadata_values: bool | None = None,
    ) -> Envelope[Any]:
        endpoint = "scene-search"
        require(dataset_name, "datasetName", endpoint)
        payload = compact({
            "datasetName": dataset_name,
            "maxResults": max_results,
            "startingNumber": starting_number,
            "metadataType": metadata_type,
            "sortField": sort_field,
            "sortDirection": sort_direction,
            "useCustomization": use_customization,
            "compareListName": compare_list_name,
            "bulkListName": bulk_list_name,
            "orderListName": order_list_name,
            "excludeListName": exclude_list_name,
            "includeNullMetadataValues": include_null_metadata_values,
            "sortCustomization": sort_customization,
            "sceneFilter": scene_filter,
        })
        return self._post(endpoint, payload)

    @returns_envelope
    def scene_search_delete(
        self,
        dataset_name: str,
        max_results: int | None = None,
        starting_number: int | None = None,
        sort_field: str | None = None,
        sort_direction: SortDirection | str | None = None,
        temporal_filter: TemporalFilter | None = None,
    ) -> Envelope[Any]:
        """Search scenes deleted from a dataset, optionally within a time range."""
        endpoint = "scene-search-delete"
        require(dataset_name, "datasetName", endpoint)
        payload = compact({
            "datasetName": dataset_name,
            "maxResults": max_results,
            "startingNumber": starting_number,
            "sortField": sort_field,
            "sortDirection": sort_direction,
            "temporalFilter": temporal_filter,
        })
        return self._post(endpoint, payload)

    @returns_envelope
    def scene_search_secondary(
        self,
        entity_id: str,
        dataset_name: str,
        max_results: int | None = None,
        starting_number: int | None = None,
        metadata_type: str | None = None,
        sort_field: str | None = None,
        sort_direction: SortDirection | str | None = None,
        compare_list_name: str | None = None,
        bulk_list_name: str | None = None,
        order_list_name: str | None = None,
        exclude_list_name: str | None = None,
    ) -> Envelope[Any]:
        """Find scenes related to ``entity_id`` in secondary datasets."""
        endpoint = "scene-search-secondary"
        require(entity_id, "entityId", endpoint)
        require(dataset_name, "datasetName", endpoint)
        payload = compact({
            "entityId": entity_id,
            "datasetName": dataset_name,
            "maxResults": max_results,
            "startingNumber": starting_number,
            "metadataType": metadata_type,
            "sortField": sort_field,
            "sortDirection": sort_direction,
            "compareListName": compare_list_name,
            "bulkListName": bulk_list_name,
            "orderListName": order_list_name,
            "excludeListName": exclude_list_name,
        })
        return self._post(endpoint, payload)
