"""Convert raw recipe rows from the data store into Recipe models."""

import logging
import sys
from typing import Any, Iterable, Optional

from src.common.models import Author, Recipe

logging.basicConfig(
    level=logging.INFO,
    format="[RecipeNormalizer] %(message)s",
    stream=sys.stderr,
)
logger = logging.getLogger(__name__)


def extract_favorite_count(row: dict) -> int:
    """
    Get the favorite count from a row.

    Joined queries report it as a plain number, a list of {"count": n}
    aggregates, or a single aggregate object, under either "favorite_count"
    or "saved_recipes".
    """
    value: Any = row.get("favorite_count")
    if value is None:
        value = row.get("saved_recipes")

    if isinstance(value, bool):
        return 0
    if isinstance(value, int):
        return value
    if isinstance(value, list):
        if not value or not isinstance(value[0], dict):
            return 0
        return value[0].get("count") or 0
    if isinstance(value, dict):
        return value.get("count") or 0
    return 0


def _extract_author(row: dict) -> Optional[Author]:
    profiles = row.get("profiles")
    if isinstance(profiles, list):
        profiles = profiles[0] if profiles else None
    if not profiles or not isinstance(profiles, dict):
        return None

    return Author(
        username=profiles.get("username", ""),
        display_name=profiles.get("display_name"),
        avatar_url=profiles.get("avatar_url"),
    )


def normalize_recipe(row: dict) -> Optional[Recipe]:
    """
    Parse a raw recipe row into a Recipe model.

    Args:
        row: Recipe row, optionally joined with its author profile

    Returns:
        The Recipe, or None when the row has no author profile
    """
    if not isinstance(row, dict):
        logger.warning(f"Skipping recipe row that is not an object: {row!r}")
        return None

    author = _extract_author(row)
    if author is None:
        logger.warning(f"Recipe missing profile data: {row.get('id')}")
        return None

    return Recipe(
        id=str(row.get("id", "")),
        slug=row.get("slug") or "",
        title=row.get("title") or "",
        tags=row.get("tags") or [],
        view_count=row.get("view_count") or 0,
        favorite_count=extract_favorite_count(row),
        created_at=row.get("created_at"),
        description=row.get("description"),
        image_url=row.get("image_url"),
        is_public=row.get("is_public", True),
        author=author,
    )


def normalize_recipes(rows: Iterable[dict]) -> list[Recipe]:
    """Normalize a batch of rows, skipping the ones without an author."""
    recipes = []
    for row in rows:
        recipe = normalize_recipe(row)
        if recipe is not None:
            recipes.append(recipe)
    return recipes
