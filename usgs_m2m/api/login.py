"""Login and logout operations."""

from __future__ import annotations

import logging
from typing import Any

from usgs_m2m.api.base import M2MClientBase, compact, require
from usgs_m2m.errors import returns_envelope
from usgs_m2m.models.envelope import Envelope
from usgs_m2m.models.requests import UserContext
from usgs_m2m.transport.headers import is_header_text

logger = logging.getLogger(__name__)


def _api_key(data: Any) -> str | None:
    # Installed as X-Auth-Token on login-token success
    return data if isinstance(data, str) and is_header_text(data) else None


def _user_context(context: UserContext | None) -> dict | None:
    if context is None or context.is_empty():
        return None
    # Both fields are sent once either is set
    return {"contactId": context.contact_id, "ipAddress": context.ip_address}


class LoginOperations(M2MClientBase):
    """login-app-guest, login-token, login-sso and logout."""

    @returns_envelope
    def login_app_guest(self, application_token: str, user_token: str) -> Envelope[str]:
        """Log in as an application guest; ``data`` is the API key."""
        endpoint = "login-app-guest"
        require(application_token, "applicationToken", endpoint)
        require(user_token, "userToken", endpoint)

        envelope = self._post(
            endpoint,
            {"applicationToken": application_token, "userToken": user_token},
        )
        return self._reshape(envelope, endpoint, _api_key)

    @returns_envelope
    def login_token(
        self,
        username: str,
        token: str,
        user_context: UserContext | None = None,
    ) -> Envelope[str]:
        """Log in with an ERS username and application token.

        On success the returned API key is installed as X-Auth-Token.
        """
        endpoint = "login-token"
        require(username, "username", endpoint)
        require(token, "token", endpoint)

        payload = compact({
            "username": username,
            "token": token,
            "userContext": _user_context(user_context),
        })
        envelope = self._reshape(self._post(endpoint, payload), endpoint, _api_key)
        if envelope.success:
            self.set_auth_token(envelope.data)
            logger.info("Logged in as %s", username)
        return envelope

    @returns_envelope
    def login_sso(self, user_context: UserContext | None = None) -> Envelope[Any]:
        endpoint = "login-sso"
        payload = compact({"userContext": _user_context(user_context)})
        return self._post(endpoint, payload)

    @returns_envelope
    def logout(self) -> Envelope[Any]:
        """Invalidate the current API key and drop the X-Auth-Token header."""
        envelope = self._get("logout", require_data=False)
        if envelope.success:
            self.clear_auth_token()
        return envelope
