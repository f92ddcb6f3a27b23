"""The complete M2M client."""

from __future__ import annotations

from usgs_m2m.api.dataset import DatasetOperations
from usgs_m2m.api.download import DownloadOperations
from usgs_m2m.api.login import LoginOperations
from usgs_m2m.api.misc import MiscOperations
from usgs_m2m.api.orders import OrderOperations
from usgs_m2m.api.scene import SceneOperations
from usgs_m2m.api.tram import TramOperations


class M2MClient(
    LoginOperations,
    DatasetOperations,
    DownloadOperations,
    SceneOperations,
    OrderOperations,
    TramOperations,
    MiscOperations,
):
    """Synchronous client for every M2M endpoint.

    Each operation makes at most one HTTP request and always returns an
    ``Envelope``; check ``success`` before using ``data``. Not safe to share
    between threads without external locking.

    Usage::

        with M2MClient() as client:
            login = client.login_token("user", "app-token")
            if login.success:
                found = client.dataset_search(dataset_name="landsat_ot_c2_l2")
    """
