"""TRAM (order processing) detail and status operations."""

from __future__ import annotations

from typing import Any

from usgs_m2m.api.base import M2MClientBase, compact, require
from usgs_m2m.errors import returns_envelope
from usgs_m2m.models.envelope import Envelope


class TramOperations(M2MClientBase):
    """tram-order-* endpoints."""

    def _order_call(self, endpoint: str, order_number: str) -> Envelope[Any]:
        require(order_number, "orderNumber", endpoint)
        return self._post(endpoint, {"orderNumber": order_number})

    @returns_envelope
    def tram_order_detail_update(
        self,
        order_number: str,
        detail_key: str,
        detail_value: str,
    ) -> Envelope[Any]:
        endpoint = "tram-order-detail-update"
        require(order_number, "orderNumber", endpoint)
        require(detail_key, "detailKey", endpoint)
        require(detail_value, "detailValue", endpoint)
        payload = {
            "orderNumber": order_number,
            "detailKey": detail_key,
            "detailValue": detail_value,
        }
        return self._post(endpoint, payload)

    @returns_envelope
    def tram_order_details(self, order_number: str) -> Envelope[Any]:
        return self._order_call("tram-order-details", order_number)

    @returns_envelope
    def tram_order_details_clear(self, order_number: str) -> Envelope[Any]:
        return self._order_call("tram-order-details-clear", order_number)

    @returns_envelope
    def tram_order_details_remove(self, order_number: str, detail_key: str) -> Envelope[Any]:
        endpoint = "tram-order-details-remove"
        require(order_number, "orderNumber", endpoint)
        require(detail_key, "detailKey", endpoint)
        return self._post(endpoint, {"orderNumber": order_number, "detailKey": detail_key})

    @returns_envelope
    def tram_order_search(
        self,
        order_id: str | None = None,
        max_results: int | None = None,
        system_id: str | None = None,
        sort_asc: bool | None = None,
        sort_field: str | None = None,
        status_filter: list[str] | None = None,
    ) -> Envelope[Any]:
        endpoint = "tram-order-search"
        payload = compact({
            "orderId": order_id,
            "maxResults": max_results,
            "systemId": system_id,
            "sortAsc": sort_asc,
            "sortField": sort_field,
            "statusFilter": status_filter,
        })
        return self._post(endpoint, payload)

    @returns_envelope
    def tram_order_status(self, order_number: str) -> Envelope[Any]:
        return self._order_call("tram-order-status", order_number)

    @returns_envelope
    def tram_order_units(self, order_number: str) -> Envelope[Any]:
        return self._order_call("tram-order-units", order_number)
