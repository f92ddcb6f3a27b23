"""Download management operations.

Bulk operations validate every entry before anything is sent: one invalid
entry fails the whole call and no request is made.
"""

from __future__ import annotations

from typing import Any

from usgs_m2m.api.base import (
    M2MClientBase,
    compact,
    require,
    require_any,
    require_items,
    require_positive,
)
from usgs_m2m.errors import ParameterError, returns_envelope
from usgs_m2m.models.envelope import Envelope
from usgs_m2m.models.requests import (
    Download,
    FilegroupDownload,
    FilepathDownload,
    ProxiedDownload,
)


class DownloadOperations(M2MClientBase):
    """download-* endpoints."""

    @returns_envelope
    def download_complete_proxied(self, downloads: list[ProxiedDownload]) -> Envelope[Any]:
        """Report downloads that were completed through a proxy."""
        endpoint = "download-complete-proxied"
        require_items(downloads, "downloads", endpoint)
        for download in downloads:
            require_positive(download.download_id, "downloadId", endpoint)
            if download.downloaded_size < 0:
                raise ParameterError(
                    f"'downloadedSize' must not be negative for {endpoint}."
                )

        return self._post(endpoint, {"proxiedDownloads": [d.to_payload() for d in downloads]})

    @returns_envelope
    def download_eula(
        self,
        eula_code: str | None = None,
        eula_codes: list[str] | None = None,
    ) -> Envelope[Any]:
        endpoint = "download-eula"
        return self._post(endpoint, compact({"eulaCode": eula_code, "eulaCodes": eula_codes}))

    @returns_envelope
    def download_labels(self, download_application: str | None = None) -> Envelope[Any]:
        endpoint = "download-labels"
        return self._post(endpoint, compact({"downloadApplication": download_application}))

    @returns_envelope
    def download_options(
        self,
        dataset_name: str,
        entity_ids: str | list[str] | None = None,
        list_id: str | None = None,
        include_secondary_file_groups: bool | None = None,
    ) -> Envelope[Any]:
        endpoint = "download-options"
        require(dataset_name, "datasetName", endpoint)
        payload = compact({
            "datasetName": dataset_name,
            "entityIds": entity_ids,
            "listId": list_id,
            "includeSecondaryFileGroups": include_secondary_file_groups,
        })
        return self._post(endpoint, payload)

    @returns_envelope
    def download_order_load(
        self,
        label: str | None = None,
        download_application: str | None = None,
    ) -> Envelope[Any]:
        endpoint = "download-order-load"
        require_any(endpoint, label=label, downloadApplication=download_application)
        payload = compact({"label": label, "downloadApplication": download_application})
        return self._post(endpoint, payload)

    @returns_envelope
    def download_order_remove(
        self,
        label: str,
        download_application: str | None = None,
    ) -> Envelope[Any]:
        endpoint = "download-order-remove"
        require(label, "label", endpoint)
        payload = compact({"label": label, "downloadApplication": download_application})
        return self._post(endpoint, payload)

    @returns_envelope
    def download_remove(self, download_id: int) -> Envelope[Any]:
        endpoint = "download-remove"
        require_positive(download_id, "downloadId", endpoint)
        return self._post(endpoint, {"downloadId": download_id})

    @returns_envelope
    def download_request(
        self,
        configuration_code: str | None = None,
        download_application: str | None = None,
        downloads: list[Download] | None = None,
        data_paths: list[FilepathDownload] | None = None,
        label: str | None = None,
        system_id: str | None = None,
        data_groups: list[FilegroupDownload] | None = None,
    ) -> Envelope[Any]:
        """Request downloads by entity, by data path and/or by file group."""
        endpoint = "download-request"
        for download in downloads or []:
            if not download.entity_id:
                raise ParameterError(f"Download.entityId is required for {endpoint}.")
        for data_path in data_paths or []:
            if not data_path.dataset_name:
                raise ParameterError(f"FilepathDownload.datasetName is required for {endpoint}.")
        for data_group in data_groups or []:
            if not data_group.dataset_name:
                raise ParameterError(f"FilegroupDownload.datasetName is required for {endpoint}.")

        payload = compact({
            "configurationCode": configuration_code,
            "downloadApplication": download_application,
            "label": label,
            "systemId": system_id,
        })
        # Provided lists are always sent, even when empty
        if downloads is not None:
            payload["downloads"] = [d.to_payload() for d in downloads]
        if data_paths is not None:
            payload["dataPaths"] = [p.to_payload() for p in data_paths]
        if data_groups is not None:
            payload["dataGroups"] = [g.to_payload() for g in data_groups]

        return self._post(endpoint, payload)

    @returns_envelope
    def download_retrieve(
        self,
        label: str | None = None,
        download_application: str | None = None,
    ) -> Envelope[Any]:
        endpoint = "download-retrieve"
        payload = compact({"label": label, "downloadApplication": download_application})
        return self._post(endpoint, payload)

    @returns_envelope
    def download_search(
        self,
        active_only: bool | None = None,
        label: str | None = None,
        download_application: str | None = None,
        include_archived: bool | None = None,
    ) -> Envelope[Any]:
        endpoint = "download-search"
        payload = compact({
            "activeOnly": active_only,
            "label": label,
            "downloadApplication": download_application,
            "includeArchived": include_archived,
        })
        return self._post(endpoint, payload)

    @returns_envelope
    def download_summary(
        self,
        download_application: str,
        label: str,
        send_email: bool | None = None,
    ) -> Envelope[Any]:
        endpoint = "download-summary"
        require(download_application, "downloadApplication", endpoint)
        require(label, "label", endpoint)
        payload = compact({
            "downloadApplication": download_application,
            "label": label,
            "sendEmail": send_email,
        })
        return self._post(endpoint, payload)
