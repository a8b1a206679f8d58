from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

from ..env import load_env, project_path

load_env()


@dataclass(frozen=True)
class DataConfig:
    """
    Locations of the two datasets the server loads at startup.

    Relative paths are taken from the project root.
    """

    ratings_path: Path = field(
        default_factory=lambda: project_path(os.getenv("SHOPREC_RATINGS_PATH", "data/ratings.json"))
    )
    categories_path: Path = field(
        default_factory=lambda: project_path(
            os.getenv("SHOPREC_CATEGORIES_PATH", "data/categories.json")
        )
    )


DEFAULT_DATA_CONFIG = DataConfig()
