"""Sort and fuzzy-filter recipe lists for the search page."""

import logging
import sys
from typing import Optional, Sequence

from src.common.fuzzy_search import fuzzy_match, tokenize
from src.common.models import SORT_BY_VALUES, SORT_ORDER_VALUES, Recipe, SortBy, SortOrder

logging.basicConfig(
    level=logging.INFO,
    format="[RecipeSearch] %(message)s",
    stream=sys.stderr,
)
logger = logging.getLogger(__name__)


def _sort_key(sort_by: SortBy):
    if sort_by == "view_count":
        return lambda recipe: recipe.view_count
    return lambda recipe: recipe.created_at.timestamp()


def sort_recipes(
    recipes: Sequence[Recipe],
    sort_by: SortBy = "view_count",
    sort_order: SortOrder = "desc",
) -> list[Recipe]:
    """
    Return a sorted copy of the recipes.

    Args:
        recipes: Recipes to sort (left untouched)
        sort_by: "view_count" or "created_at"
        sort_order: "asc" or "desc"

    Returns:
        New list ordered by the chosen key; ties keep their input order
    """
    if recipes is None:
        raise TypeError("recipes must be a sequence of Recipe, not None")
    if sort_by not in SORT_BY_VALUES:
        raise ValueError(f"Invalid sort_by {sort_by!r}, expected one of {SORT_BY_VALUES}")
    if sort_order not in SORT_ORDER_VALUES:
        raise ValueError(
            f"Invalid sort_order {sort_order!r}, expected one of {SORT_ORDER_VALUES}"
        )

    return sorted(recipes, key=_sort_key(sort_by), reverse=sort_order == "desc")


def recipe_matches(recipe: Recipe, query: str) -> bool:
    """Check if a recipe's title or any one of its tags matches the query."""
    if fuzzy_match(query, recipe.title):
        return True
    return any(fuzzy_match(query, tag) for tag in recipe.tags)


def search_and_sort(
    recipes: Sequence[Recipe],
    query: Optional[str] = "",
    sort_by: SortBy = "view_count",
    sort_order: SortOrder = "desc",
) -> list[Recipe]:
    """
    Sort recipes, then keep the ones whose title or tags match the query.

    A blank query, or one made only of punctuation, does not filter anything.

    Args:
        recipes: Recipes to search through (left untouched)
        query: Raw search text as typed by the user
        sort_by: "view_count" or "created_at"
        sort_order: "asc" or "desc"

    Returns:
        New list of matching recipes in sorted order
    """
    results = sort_recipes(recipes, sort_by, sort_order)
    total = len(results)

    query = (query or "").lower().strip()
    if not tokenize(query):
        return results

    results = [recipe for recipe in results if recipe_matches(recipe, query)]
    logger.debug("Query %r matched %d of %d recipes", query, len(results), total)
    return results
