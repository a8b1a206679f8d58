from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

import pandas as pd
from pydantic import TypeAdapter, ValidationError

from ..exceptions import DatasetLoadError
from .config import DEFAULT_DATA_CONFIG, DataConfig

logger = logging.getLogger(__name__)

RatingsTable = dict[str, dict[str, float]]
CategoryOf = dict[str, str]

RATINGS_COLUMNS = ["user_id", "product_id", "rating"]
CATEGORY_COLUMNS = ["product_id", "category"]

_ratings_adapter: TypeAdapter[RatingsTable] = TypeAdapter(RatingsTable)
_categories_adapter: TypeAdapter[CategoryOf] = TypeAdapter(CategoryOf)


def _read_json(path: Path) -> Any:
    try:
        with open(path, "r", encoding="utf-8") as f:
            return json.load(f)
    except FileNotFoundError as e:
        logger.error("File not found: %s", path)
        raise DatasetLoadError(f"File not found: {path}") from e
    except OSError as e:
        logger.error("Cannot read %s: %s", path, e)
        raise DatasetLoadError(f"Cannot read {path}: {e}") from e
    except UnicodeDecodeError as e:
        logger.error("Invalid UTF-8 in %s", path)
        raise DatasetLoadError(f"Invalid UTF-8 in {path}") from e
    except json.JSONDecodeError as e:
        logger.error("Invalid JSON in %s", path)
        raise DatasetLoadError(f"Invalid JSON in {path}") from e


def _read_csv(path: Path, columns: list[str]) -> pd.DataFrame:
    try:
        df = pd.read_csv(path, dtype=str, encoding="utf-8")
    except FileNotFoundError as e:
        logger.error("File not found: %s", path)
        raise DatasetLoadError(f"File not found: {path}") from e
    except OSError as e:
        logger.error("Cannot read %s: %s", path, e)
        raise DatasetLoadError(f"Cannot read {path}: {e}") from e
    except UnicodeDecodeError as e:
        logger.error("Invalid UTF-8 in %s", path)
        raise DatasetLoadError(f"Invalid UTF-8 in {path}") from e
    except (pd.errors.ParserError, pd.errors.EmptyDataError) as e:
        logger.error("Invalid CSV in %s", path)
        raise DatasetLoadError(f"Invalid CSV in {path}") from e

    missing = [c for c in columns if c not in df.columns]
    if missing:
        logger.error("Missing columns %s in %s", missing, path)
        raise DatasetLoadError(f"Missing columns {missing} in {path}")

    df = df[columns]
    blank = df.isna().any(axis=1)
    if blank.any():
        rows = [int(i) + 1 for i in df.index[blank]]
        logger.error("Blank fields in data rows %s of %s", rows, path)
        raise DatasetLoadError(f"Blank fields in data rows {rows} of {path}")

    return df


def _validate(adapter: TypeAdapter, raw: Any, path: Path) -> Any:
    try:
        return adapter.validate_python(raw)
    except ValidationError as e:
        logger.error("Unexpected data shape in %s", path)
        raise DatasetLoadError(f"Unexpected data shape in {path}: {e}") from e


def _ratings_from_frame(df: pd.DataFrame) -> dict[str, dict[str, Any]]:
    ratings: dict[str, dict[str, Any]] = {}
    for row in df.itertuples(index=False):
        # Repeated (user, product) rows collapse; the last one wins.
        ratings.setdefault(row.user_id, {})[row.product_id] = row.rating
    return ratings


def load_ratings(path: Path) -> RatingsTable:
    """Load the user -> product -> rating table from a JSON or CSV file."""
    path = Path(path)
    if path.suffix.lower() == ".csv":
        raw: Any = _ratings_from_frame(_read_csv(path, RATINGS_COLUMNS))
    else:
        raw = _read_json(path)
    ratings = _validate(_ratings_adapter, raw, path)
    logger.info("Loaded ratings for %d users from %s", len(ratings), path)
    return ratings


def load_categories(path: Path) -> CategoryOf:
    """Load the product -> category mapping from a JSON or CSV file."""
    path = Path(path)
    if path.suffix.lower() == ".csv":
        df = _read_csv(path, CATEGORY_COLUMNS)
        raw: Any = dict(zip(df["product_id"], df["category"]))
    else:
        raw = _read_json(path)
    categories = _validate(_categories_adapter, raw, path)
    logger.info("Loaded categories for %d products from %s", len(categories), path)
    return categories


def load_dataset(config: DataConfig = DEFAULT_DATA_CONFIG) -> tuple[RatingsTable, CategoryOf]:
    """
    Load both datasets the recommendation engine needs.

    Raises ``DatasetLoadError`` if either file is missing or malformed; the
    caller is expected to abort startup in that case.
    """
    ratings = load_ratings(config.ratings_path)
    categories = load_categories(config.categories_path)
    return ratings, categories
