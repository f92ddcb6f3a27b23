"""Operation façade for the M2M API."""

from usgs_m2m.api.base import M2MClientBase
from usgs_m2m.api.client import M2MClient

__all__ = [
    "M2MClient",
    "M2MClientBase",
]
