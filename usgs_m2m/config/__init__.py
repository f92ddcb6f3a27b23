"""Client configuration settings."""

from usgs_m2m.config.settings import DEFAULT_BASE_URL, M2MSettings

__all__ = [
    "DEFAULT_BASE_URL",
    "M2MSettings",
]
