from __future__ import annotations

import pytest

from shoprec.catalog.data_store import clear_snapshot, set_snapshot
from shoprec.catalog.index import CatalogSnapshot, build_snapshot

_GAMES = ["g1", "g2", "g3", "g4", "g5", "g6"]

CATEGORIES: dict[str, str] = {
    "p1": "Books",
    "p2": "Books",
    "p3": "Books",
    "p4": "Music",
    "p5": "Music",
    "p6": "Music",
    "p7": "Games",
    **{g: "Games" for g in _GAMES},
}

# Popularity: p2=4, p6=3, p1=p3=p4=p5=p7=2, g1=3, g2=g3=2, g4=g5=g6=1.
# p9 has no category.
RATINGS: dict[str, dict[str, float]] = {
    "u1": {"p1": 5.0},
    "u2": {"p2": 4.0, "p3": 3.0, "p4": 5.0},
    "u3": {"p2": 2.0, "p5": 4.0},
    "u4": {"p2": 5.0, "p6": 1.0},
    "u5": {"p1": 4.0, "p2": 3.0, "p4": 5.0, "p5": 2.0},
    "u6": {"p6": 3.0, "p7": 2.0},
    "u7": {"p6": 4.0, "p3": 1.0},
    "u8": {"p9": 3.5},
    "u9": {"p7": 5.0},
    "u10": {g: 4.0 for g in _GAMES},
    "u11": {"g1": 3.0, "g2": 3.0, "g3": 3.0},
    "u12": {"g1": 1.0},
}


@pytest.fixture
def ratings() -> dict[str, dict[str, float]]:
    return {user: dict(products) for user, products in RATINGS.items()}


@pytest.fixture
def categories() -> dict[str, str]:
    return dict(CATEGORIES)


@pytest.fixture
def snapshot(ratings, categories) -> CatalogSnapshot:
    return build_snapshot(ratings, categories)


@pytest.fixture
def installed_snapshot(snapshot):
    set_snapshot(snapshot)
    yield snapshot
    clear_snapshot()
