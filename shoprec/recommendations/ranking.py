from __future__ import annotations

from typing import Iterable, Mapping

from .models import Recommendation


def rank_candidates(
    user_ratings: Mapping[str, float],
    category_products: Mapping[str, tuple[str, ...]],
    popularity: Mapping[str, int],
    preferred_categories: Iterable[str],
    limit: int,
) -> list[Recommendation]:
    """
    Rank unowned products from the preferred categories by popularity.

    Categories are scanned in name order and each category's products in
    index order; the sort is stable, so equally popular products keep that
    discovery order. A product reachable from several preferred categories
    is reported once, under the first category that reached it.
    """
    seen = set(user_ratings)
    candidates: list[tuple[str, int, str]] = []

    for category in sorted(preferred_categories):
        for product_id in category_products.get(category, ()):
            if product_id in seen:
                continue
            seen.add(product_id)
            candidates.append((product_id, popularity.get(product_id, 0), category))

    candidates.sort(key=lambda c: c[1], reverse=True)

    return [
        Recommendation(product_id=product_id, category=category)
        for product_id, _, category in candidates[:limit]
    ]
