from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Mapping


@dataclass(frozen=True)
class CatalogIndex:
    category_products: Mapping[str, tuple[str, ...]] = field(
        default_factory=lambda: MappingProxyType({})
    )
    popularity: Mapping[str, int] = field(default_factory=lambda: MappingProxyType({}))


@dataclass(frozen=True)
class CatalogSnapshot:
    """The dataset plus its derived indexes. Never mutated after the build."""

    ratings: Mapping[str, Mapping[str, float]]
    categories: Mapping[str, str]
    index: CatalogIndex

    def describe(self) -> dict[str, Any]:
        products = {p for user_ratings in self.ratings.values() for p in user_ratings}
        return {
            "users": len(self.ratings),
            "products": len(products),
            "categories": [
                {"name": name, "products": len(self.index.category_products[name])}
                for name in sorted(self.index.category_products)
            ],
        }


def build_catalog_index(
    ratings: Mapping[str, Mapping[str, float]],
    categories: Mapping[str, str],
) -> CatalogIndex:
    """
    Scan every purchase once and build the category and popularity indexes.

    Purchases of products without a category are skipped: they can neither
    be recommended nor counted towards popularity.
    """
    category_products: dict[str, list[str]] = {}
    listed: set[tuple[str, str]] = set()
    popularity: dict[str, int] = {}

    for user_ratings in ratings.values():
        for product_id in user_ratings:
            category = categories.get(product_id)
            if category is None:
                continue
            if (category, product_id) not in listed:
                listed.add((category, product_id))
                category_products.setdefault(category, []).append(product_id)
            popularity[product_id] = popularity.get(product_id, 0) + 1

    return CatalogIndex(
        category_products=MappingProxyType(
            {c: tuple(products) for c, products in category_products.items()}
        ),
        popularity=MappingProxyType(popularity),
    )


def build_snapshot(
    ratings: Mapping[str, Mapping[str, float]],
    categories: Mapping[str, str],
) -> CatalogSnapshot:
    """Copy the dataset into read-only views and index it."""
    frozen_ratings = MappingProxyType(
        {user_id: MappingProxyType(dict(products)) for user_id, products in ratings.items()}
    )
    frozen_categories = MappingProxyType(dict(categories))
    return CatalogSnapshot(
        ratings=frozen_ratings,
        categories=frozen_categories,
        index=build_catalog_index(frozen_ratings, frozen_categories),
    )
