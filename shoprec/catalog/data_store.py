from __future__ import annotations

import logging
import threading

from ..data_ingestion.config import DEFAULT_DATA_CONFIG, DataConfig
from ..data_ingestion.ingest import load_dataset
from .index import CatalogSnapshot, build_snapshot

logger = logging.getLogger(__name__)

_snapshot: CatalogSnapshot | None = None
_load_lock = threading.Lock()


def load_snapshot(config: DataConfig = DEFAULT_DATA_CONFIG) -> CatalogSnapshot:
    """Load the dataset, index it and install the result as the shared snapshot."""
    ratings, categories = load_dataset(config)
    snapshot = build_snapshot(ratings, categories)
    logger.info(
        "Catalog built: %d users, %d categories, %d ranked products",
        len(snapshot.ratings),
        len(snapshot.index.category_products),
        len(snapshot.index.popularity),
    )
    set_snapshot(snapshot)
    return snapshot


def get_snapshot() -> CatalogSnapshot:
    """
    Return the shared snapshot, loading it on first call.

    The app's lifespan handler installs the snapshot before serving, so the
    lazy path only runs outside the server; the lock keeps it to one load.
    """
    if _snapshot is not None:
        return _snapshot
    with _load_lock:
        if _snapshot is None:
            return load_snapshot()
        return _snapshot


def set_snapshot(snapshot: CatalogSnapshot) -> None:
    global _snapshot
    _snapshot = snapshot


def clear_snapshot() -> None:
    global _snapshot
    _snapshot = None
