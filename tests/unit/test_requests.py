"""Unit tests for request model serialization."""

import pytest
from pydantic import ValidationError

from usgs_m2m.models.requests import (
    DatasetCustomization,
    Download,
    FilegroupDownload,
    MetadataSort,
    Product,
    ProxiedDownload,
    SearchSort,
    SortCustomization,
    TemporalFilter,
    UserContext,
    format_utc_iso8601,
)


class TestFormatUtcIso8601:
    def test_epoch(self):
        assert format_utc_iso8601(0) == "1970-01-01T00:00:00Z"

    def test_known_instant(self):
        assert format_utc_iso8601(1_700_000_000) == "2023-11-14T22:13:20Z"


class TestRequestModels:
    def test_absent_fields_are_omitted(self):
        assert Download(entity_id="LC08").to_payload() == {"entityId": "LC08"}

    def test_camel_case_keys(self):
        payload = ProxiedDownload(download_id=5, downloaded_size=1024).to_payload()
        assert payload == {"downloadId": 5, "downloadedSize": 1024}

    def test_filegroup_download(self):
        payload = FilegroupDownload(dataset_name="landsat", file_groups=["ls_c2l1"]).to_payload()
        assert payload == {"datasetName": "landsat", "fileGroups": ["ls_c2l1"]}

    def test_temporal_filter_is_iso(self):
        payload = TemporalFilter(start=0, end=86400).to_payload()
        assert payload == {"start": "1970-01-01T00:00:00Z", "end": "1970-01-02T00:00:00Z"}

    def test_sort_customization_keeps_snake_case(self):
        payload = SortCustomization(field_name="acquisitionDate", direction="DESC").to_payload()
        assert payload == {"field_name": "acquisitionDate", "direction": "DESC"}

    def test_user_context_empty(self):
        assert UserContext().is_empty()
        assert not UserContext(ip_address="10.0.0.1").is_empty()

    def test_product_completeness(self):
        assert Product(dataset_name="d", entity_id="e", product_id="p").is_complete()
        assert not Product(dataset_name="d", entity_id="", product_id="p").is_complete()


class TestDatasetCustomization:
    def test_empty_customization(self):
        assert DatasetCustomization(dataset_name="landsat").to_payload() == {}

    def test_full_customization(self):
        customization = DatasetCustomization(
            dataset_name="landsat",
            excluded=False,
            metadata={"full": [MetadataSort(id="cloudCover", sort_order=2)]},
            search_sort=[SearchSort(id="acquisitionDate", direction="ASC")],
            file_groups={"ls_c2l1": ["D552", "D553"]},
        )

        assert customization.to_payload() == {
            "excluded": False,
            "metadata": {"full": [{"id": "cloudCover", "sortOrder": 2}]},
            "search_sort": [{"id": "acquisitionDate", "direction": "ASC"}],
            "fileGroups": {"ls_c2l1": ["D552", "D553"]},
        }

    def test_empty_parts_are_dropped(self):
        customization = DatasetCustomization(
            dataset_name="landsat",
            metadata={"full": [MetadataSort()], "res": [MetadataSort(id="x")]},
            search_sort=[SearchSort(), SearchSort(direction="DESC")],
            file_groups={"empty": [], "kept": ["D1"]},
        )

        assert customization.to_payload() == {
            "metadata": {"res": [{"id": "x"}]},
            "search_sort": [{"direction": "DESC"}],
            "fileGroups": {"kept": ["D1"]},
        }

    def test_zero_sort_order_is_kept(self):
        customization = DatasetCustomization(
            dataset_name="landsat",
            metadata={"full": [MetadataSort(sort_order=0)]},
        )
        assert customization.to_payload() == {"metadata": {"full": [{"sortOrder": 0}]}}


class TestTemporalFilterValidation:
    @pytest.mark.parametrize(
        "start",
        [1e20, -1e20, float("nan"), float("inf"), float("-inf"), 10**30],
    )
    def test_unformattable_epoch_rejected(self, start):
        with pytest.raises(ValidationError, match="epoch seconds out of range"):
            TemporalFilter(start=start, end=0)

    def test_end_is_checked_too(self):
        with pytest.raises(ValidationError):
            TemporalFilter(start=0, end=float("nan"))

    def test_range_limits(self):
        payload = TemporalFilter(start=-2208988800, end=253402300799).to_payload()
        assert payload == {"start": "1900-01-01T00:00:00Z", "end": "9999-12-31T23:59:59Z"}
