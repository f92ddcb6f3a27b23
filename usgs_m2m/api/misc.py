"""Lookup, notification, permission and user preference operations."""

from __future__ import annotations

from typing import Any

from usgs_m2m.api.base import M2MClientBase, compact, require, require_items
from usgs_m2m.errors import returns_envelope
from usgs_m2m.models.envelope import Envelope


class MiscOperations(M2MClientBase):
    """grid2ll, notifications, permissions, placename, rate-limit-summary, user-preference-*."""

    @returns_envelope
    def grid2ll(
        self,
        grid_type: str,
        response_shape: str | None = None,
        path: str | None = None,
        row: str | None = None,
    ) -> Envelope[Any]:
        """Convert a WRS path/row grid cell to coordinates."""
        endpoint = "grid2ll"
        require(grid_type, "gridType", endpoint)
        payload = compact({
            "gridType": grid_type,
            "responseShape": response_shape,
            "path": path,
            "row": row,
        })
        return self._post(endpoint, payload)

    @returns_envelope
    def notifications(self, system_id: str) -> Envelope[Any]:
        endpoint = "notifications"
        require(system_id, "systemId", endpoint)
        return self._post(endpoint, {"systemId": system_id})

    @returns_envelope
    def permissions(self) -> Envelope[Any]:
        return self._get("permissions")

    @returns_envelope
    def placename(
        self,
        feature_type: str | None = None,
        name: str | None = None,
    ) -> Envelope[Any]:
        endpoint = "placename"
        return self._post(endpoint, compact({"featureType": feature_type, "name": name}))

    @returns_envelope
    def rate_limit_summary(self, ip_address: list[str] | None = None) -> Envelope[Any]:
        endpoint = "rate-limit-summary"
        return self._post(endpoint, compact({"ipAddress": ip_address}))

    @returns_envelope
    def user_preference_get(
        self,
        system_id: str | None = None,
        setting: list[str] | None = None,
    ) -> Envelope[Any]:
        endpoint = "user-preference-get"
        return self._post(endpoint, compact({"systemId": system_id, "setting": setting}))

    @returns_envelope
    def user_preference_set(self, system_id: str, user_preferences: dict) -> Envelope[Any]:
        endpoint = "user-preference-set"
        require(system_id, "systemId", endpoint)
        require_items(user_preferences, "userPreferences", endpoint)
        payload = {"systemId": system_id, "userPreferences": user_preferences}
        return self._post(endpoint, payload)
