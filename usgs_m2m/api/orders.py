"""Order product lookup and submission."""

from __future__ import annotations

from typing import Any

from usgs_m2m.api.base import M2MClientBase, compact, require, require_items
from usgs_m2m.errors import ParameterError, returns_envelope
from usgs_m2m.models.envelope import Envelope
from usgs_m2m.models.requests import Product


class OrderOperations(M2MClientBase):
    """order-products and order-submit."""

    @returns_envelope
    def order_products(
        self,
        dataset_name: str,
        entity_ids: str | list[str] | None = None,
        list_id: str | None = None,
    ) -> Envelope[Any]:
        endpoint = "order-products"
        require(dataset_name, "datasetName", endpoint)
        payload = compact({
            "datasetName": dataset_name,
            "entityIds": entity_ids,
            "listId": list_id,
        })
        return self._post(endpoint, payload)

    @returns_envelope
    def order_submit(
        self,
        products: list[Product],
        auto_bulk_order: bool | None = None,
        processing_parameters: str | None = None,
        priority: int | None = None,
        order_comment: str | None = None,
        system_id: str | None = None,
    ) -> Envelope[Any]:
        """Submit an order. Every product must carry dataset, entity and product ids."""
        endpoint = "order-submit"
        require_items(products, "products", endpoint)
        if not all(product.is_complete() for product in products):
            raise ParameterError(
                f"Product.datasetName, entityId, and productId are required for {endpoint}."
            )

        payload = compact({
            "products": products,
            "autoBulkOrder": auto_bulk_order,
            "processingParameters": processing_parameters,
            "priority": priority,
            "orderComment": order_comment,
            "systemId": system_id,
        })
        return self._post(endpoint, payload)
