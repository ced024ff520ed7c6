"""In-memory recipe catalog loaded from an exported JSON file."""

import json
import logging
import os
import sys
from pathlib import Path
from typing import Optional

from src.common.models import Recipe, SortBy, SortOrder
from src.recipes.normalizer import normalize_recipes
from src.recipes.search import search_and_sort

logging.basicConfig(
    level=logging.INFO,
    format="[RecipeCatalog] %(message)s",
    stream=sys.stderr,
)
logger = logging.getLogger(__name__)


class RecipeCatalog:
    """Holds the already-fetched recipe list and runs searches over it."""

    def __init__(
        self,
        recipes_file: Optional[Path] = None,
        rows: Optional[list[dict]] = None,
    ):
        """
        Initialize the catalog from a file or from raw rows.

        Args:
            recipes_file: Path to a JSON array of recipe rows
            rows: List of recipe row dicts (alternative to file)
        """
        if recipes_file is None and rows is None:
            raise ValueError("Either recipes_file or rows is required")

        self.recipes_file = recipes_file
        self._rows = rows
        self._recipes: Optional[list[Recipe]] = None

    def _load_rows(self) -> list[dict]:
        """Read raw rows from the configured source."""
        if self.recipes_file is None:
            return self._rows

        logger.info(f"Loading recipes from {self.recipes_file}")
        data = json.loads(self.recipes_file.read_text(encoding="utf-8"))
        if not isinstance(data, list):
            raise ValueError(f"Expected a JSON array of recipes in {self.recipes_file}")
        return data

    def get_recipes(self, refresh: bool = False) -> list[Recipe]:
        """
        Get all recipes, loading them on first use.

        Args:
            refresh: Reload from the source instead of using the cached list

        Returns:
            List of normalized recipes
        """
        if refresh or self._recipes is None:
            rows = self._load_rows()
            self._recipes = normalize_recipes(rows)
            logger.info(f"Loaded {len(self._recipes)} of {len(rows)} recipes")
        return self._recipes

    def search(
        self,
        query: str = "",
        sort_by: SortBy = "view_count",
        sort_order: SortOrder = "desc",
        limit: Optional[int] = None,
        include_private: bool = False,
    ) -> list[Recipe]:
        """
        Search the catalog by title and tags with typo tolerance.

        Args:
            query: Search text (blank returns everything)
            sort_by: "view_count" or "created_at"
            sort_order: "asc" or "desc"
            limit: Maximum results to return (None or <= 0 returns all)
            include_private: Also search recipes that are not public

        Returns:
            Matching recipes in sorted order
        """
        recipes = self.get_recipes()
        if not include_private:
            recipes = [recipe for recipe in recipes if recipe.is_public]

        results = search_and_sort(recipes, query, sort_by, sort_order)

        if limit is not None and limit > 0:
            results = results[:limit]

        return results

    @classmethod
    def from_env(cls) -> "RecipeCatalog":
        """Create a RecipeCatalog from environment variables."""
        recipes_file = os.environ.get("RECIPES_FILE")
        if recipes_file:
            return cls(recipes_file=Path(recipes_file))

        recipes_json = os.environ.get("RECIPES_JSON")
        if recipes_json:
            rows = json.loads(recipes_json)
            if not isinstance(rows, list):
                raise ValueError("RECIPES_JSON must be a JSON array of recipes")
            return cls(rows=rows)

        # Try default location
        default_path = Path.home() / ".recipes.json"
        if default_path.exists():
            return cls(recipes_file=default_path)

        raise ValueError(
            "No recipes found. Set RECIPES_FILE to path of a recipes JSON file, "
            "or RECIPES_JSON to a JSON array of recipes, "
            "or place recipes at ~/.recipes.json"
        )
