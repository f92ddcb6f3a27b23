"""Unit tests for order, TRAM and miscellaneous operations."""

import pytest

from usgs_m2m.models.requests import Product
from usgs_m2m.transport.types import HttpMethod


class TestOrders:
    def test_submit(self, client, transport):
        client.order_submit(
            [Product(dataset_name="landsat", entity_id="LC08", product_id="5e83")],
            priority=3,
        )

        assert transport.last.url.endswith("order-submit")
        assert transport.last.payload == {
            "products": [{"datasetName": "landsat", "entityId": "LC08", "productId": "5e83"}],
            "priority": 3,
        }

    def test_incomplete_product_sends_nothing(self, client, transport):
        envelope = client.order_submit([
            Product(dataset_name="landsat", entity_id="LC08", product_id="5e83"),
            Product(dataset_name="landsat", entity_id="LC09", product_id=""),
        ])

        assert envelope.success is False
        assert "productId" in envelope.error.message
        assert transport.calls == []

    def test_submit_requires_products(self, client, transport):
        assert client.order_submit([]).success is False
        assert transport.calls == []

    def test_products(self, client, transport):
        client.order_products("landsat", list_id="my-list")
        assert transport.last.payload == {"datasetName": "landsat", "listId": "my-list"}


class TestTram:
    @pytest.mark.parametrize(
        "method,endpoint",
        [
            ("tram_order_details", "tram-order-details"),
            ("tram_order_details_clear", "tram-order-details-clear"),
            ("tram_order_status", "tram-order-status"),
            ("tram_order_units", "tram-order-units"),
        ],
    )
    def test_order_number_calls(self, client, transport, method, endpoint):
        getattr(client, method)("0101")
        assert transport.last.url.endswith(endpoint)
        assert transport.last.payload == {"orderNumber": "0101"}

    def test_order_number_required(self, client, transport):
        envelope = client.tram_order_status("")
        assert envelope.error.message == "'orderNumber' is required for tram-order-status."
        assert transport.calls == []

    def test_detail_update(self, client, transport):
        client.tram_order_detail_update("0101", "note", "rush")
        assert transport.last.payload == {
            "orderNumber": "0101",
            "detailKey": "note",
            "detailValue": "rush",
        }

    def test_details_remove_requires_key(self, client, transport):
        assert client.tram_order_details_remove("0101", "").success is False
        assert transport.calls == []

    def test_search(self, client, transport):
        client.tram_order_search(max_results=5, status_filter=["complete"])
        assert transport.last.payload == {"maxResults": 5, "statusFilter": ["complete"]}


class TestMisc:
    def test_grid2ll(self, client, transport):
        client.grid2ll("WRS2", path="44", row="34")
        assert transport.last.payload == {"gridType": "WRS2", "path": "44", "row": "34"}

    def test_permissions_is_get(self, client, transport):
        transport.respond_data(["download", "order"])

        envelope = client.permissions()

        assert envelope.data == ["download", "order"]
        assert transport.last.method is HttpMethod.GET

    def test_notifications_requires_system(self, client, transport):
        assert client.notifications("").success is False
        assert transport.calls == []

    def test_placename(self, client, transport):
        client.placename(feature_type="US", name="Sioux Falls")
        assert transport.last.payload == {"featureType": "US", "name": "Sioux Falls"}

    def test_rate_limit_summary(self, client, transport):
        client.rate_limit_summary(["10.0.0.1"])
        assert transport.last.payload == {"ipAddress": ["10.0.0.1"]}

    def test_user_preference_get(self, client, transport):
        client.user_preference_get(system_id="EE")
        assert transport.last.payload == {"systemId": "EE"}

    def test_user_preference_set(self, client, transport):
        client.user_preference_set("EE", {"map": {"lat": 43.5}})
        assert transport.last.payload == {
            "systemId": "EE",
            "userPreferences": {"map": {"lat": 43.5}},
        }

    def test_user_preference_set_requires_preferences(self, client, transport):
        envelope = client.user_preference_set("EE", {})
        assert envelope.error.message == "'userPreferences' cannot be empty for user-preference-set."
        assert transport.calls == []
