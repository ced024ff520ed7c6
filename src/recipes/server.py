import json
from typing import Optional

from mcp.server.fastmcp import FastMCP

from src.recipes.catalog import RecipeCatalog
from src.recipes.utils import simplify_recipe

mcp = FastMCP("Recipe Search Server")

# Global catalog instance (initialized on first use)
_catalog: Optional[RecipeCatalog] = None


def get_catalog() -> RecipeCatalog:
    """Get or create the recipe catalog."""
    global _catalog
    if _catalog is None:
        _catalog = RecipeCatalog.from_env()
    return _catalog


@mcp.tool()
def search_recipes(
    query: str,
    sort_by: str = "view_count",
    sort_order: str = "desc",
    limit: int = 50,
) -> str:
    """
    Search recipes by title and tags, tolerating typos and partial words.

    Multi-word queries only match recipes containing every word, in any order.

    Args:
        query: Search text, e.g. "choc cake" or "chiken"
        sort_by: "view_count" or "created_at" (default "view_count")
        sort_order: "asc" or "desc" (default "desc")
        limit: Maximum number of results to return (default 50)

    Returns:
        JSON array of matching recipes
    """
    catalog = get_catalog()

    try:
        results = catalog.search(
            query=query, sort_by=sort_by, sort_order=sort_order, limit=limit
        )
    except ValueError as e:
        return json.dumps({"status": "error", "message": str(e)}, indent=2)

    return json.dumps([simplify_recipe(recipe) for recipe in results], indent=2)


@mcp.tool()
def list_recipes(
    sort_by: str = "view_count",
    sort_order: str = "desc",
    limit: int = 50,
) -> str:
    """
    List public recipes without filtering.

    Args:
        sort_by: "view_count" or "created_at" (default "view_count")
        sort_order: "asc" or "desc" (default "desc")
        limit: Maximum number of recipes to return (default 50)

    Returns:
        JSON array of recipes
    """
    return search_recipes(query="", sort_by=sort_by, sort_order=sort_order, limit=limit)


@mcp.tool()
def refresh_recipes() -> str:
    """
    Reload recipes from the configured source.

    Returns:
        JSON object with count of recipes loaded
    """
    catalog = get_catalog()
    recipes = catalog.get_recipes(refresh=True)

    return json.dumps({
        "status": "success",
        "count": len(recipes),
        "message": f"Reloaded {len(recipes)} recipes",
    }, indent=2)


@mcp.resource("recipes://all")
def list_all_recipes() -> str:
    """List all public recipes, most viewed first, as a resource."""
    catalog = get_catalog()
    recipes = catalog.search()

    return json.dumps([simplify_recipe(recipe) for recipe in recipes], indent=2)


def main():
    """Entry point for the recipe search MCP server."""
    mcp.run()


if __name__ == "__main__":
    main()
