from __future__ import annotations

import os
from dataclasses import dataclass, field


@dataclass(frozen=True)
class RecommenderConfig:
    limit: int = field(
        default_factory=lambda: int(os.getenv("SHOPREC_RECOMMENDATION_LIMIT", "5"))
    )
    unknown_category: str = "Unknown"

    def __post_init__(self) -> None:
        if self.limit < 1:
            raise ValueError(f"limit must be a positive integer, got {self.limit}")


DEFAULT_RECOMMENDER_CONFIG = RecommenderConfig()
