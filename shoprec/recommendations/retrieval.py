from __future__ import annotations

import logging
from typing import Mapping

from ..catalog.data_store import get_snapshot
from ..catalog.index import CatalogSnapshot
from .config import DEFAULT_RECOMMENDER_CONFIG, RecommenderConfig
from .models import (
    PurchasedProduct,
    RecommendationRequest,
    UserRecommendations,
)
from .preferences import resolve_preferences
from .ranking import rank_candidates

logger = logging.getLogger(__name__)


def enrich_purchases(
    user_ratings: Mapping[str, float],
    categories: Mapping[str, str],
    unknown_category: str = DEFAULT_RECOMMENDER_CONFIG.unknown_category,
) -> list[PurchasedProduct]:
    """Attach each purchased product's category, or ``unknown_category``."""
    return [
        PurchasedProduct(
            product_id=product_id,
            rating=rating,
            category=categories.get(product_id, unknown_category),
        )
        for product_id, rating in user_ratings.items()
    ]


def get_recommendations(
    request: RecommendationRequest,
    snapshot: CatalogSnapshot | None = None,
    config: RecommenderConfig = DEFAULT_RECOMMENDER_CONFIG,
) -> UserRecommendations:
    """
    Build the response for one user.

    Reads only the shared snapshot; every intermediate value is local to the
    call. Unknown users and users without categorized purchases get empty
    lists rather than an error.
    """
    snapshot = snapshot if snapshot is not None else get_snapshot()
    user_id = request.user_id
    logger.debug("Processing recommendations for user %r", user_id)

    # --- Lookup ---
    user_ratings = snapshot.ratings.get(user_id)
    if user_ratings is None:
        logger.info("User %r not found", user_id)
        return UserRecommendations(user_id=user_id)

    # --- Enrich ---
    purchased = enrich_purchases(user_ratings, snapshot.categories, config.unknown_category)

    # --- Preferences ---
    preferred = resolve_preferences(user_ratings, snapshot.categories)
    if not preferred:
        logger.debug("User %r has no categorized purchases", user_id)
        return UserRecommendations(user_id=user_id, purchased_products=purchased)

    # --- Ranking ---
    recommendations = rank_candidates(
        user_ratings,
        snapshot.index.category_products,
        snapshot.index.popularity,
        preferred,
        config.limit,
    )

    return UserRecommendations(
        user_id=user_id,
        purchased_products=purchased,
        preferred_categories=sorted(preferred),
        recommendations=recommendations,
    )
