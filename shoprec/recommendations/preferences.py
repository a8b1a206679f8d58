from __future__ import annotations

from collections import Counter
from typing import Mapping


def count_category_purchases(
    user_ratings: Mapping[str, float],
    categories: Mapping[str, str],
) -> Counter[str]:
    """Count the user's purchased products per category, skipping uncategorized ones."""
    counts: Counter[str] = Counter()
    for product_id in user_ratings:
        category = categories.get(product_id)
        if category is not None:
            counts[category] += 1
    return counts


def resolve_preferences(
    user_ratings: Mapping[str, float],
    categories: Mapping[str, str],
) -> frozenset[str]:
    """
    Return every category tied for the user's highest purchase count.

    An empty set means the user bought nothing categorized, so there is
    nothing to base recommendations on.
    """
    counts = count_category_purchases(user_ratings, categories)
    if not counts:
        return frozenset()
    top = max(counts.values())
    return frozenset(category for category, n in counts.items() if n == top)
