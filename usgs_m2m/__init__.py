"""Typed synchronous client for the USGS M2M catalog and ordering API."""

from usgs_m2m.api.client import M2MClient
from usgs_m2m.config.settings import M2MSettings
from usgs_m2m.decoder import decode_envelope
from usgs_m2m.models.envelope import Envelope, ErrorInfo, Meta

__all__ = [
    "Envelope",
    "ErrorInfo",
    "M2MClient",
    "M2MSettings",
    "Meta",
    "decode_envelope",
]
