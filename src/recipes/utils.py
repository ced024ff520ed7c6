"""Helpers for shaping recipes into compact tool output."""

from src.common.models import Recipe


def clean_text(text: str, max_length: int = 200) -> str:
    """Normalize typographic unicode to ASCII and optionally truncate."""
    replacements = {
        "\u2019": "'",  # right single quote
        "\u2018": "'",  # left single quote
        "\u201c": '"',  # left double quote
        "\u201d": '"',  # right double quote
        "\u2014": "-",  # em dash
        "\u2013": "-",  # en dash
        "\u2026": "...",  # ellipsis
    }
    for old, new in replacements.items():
        text = text.replace(old, new)

    if max_length and len(text) > max_length:
        text = text[: max_length - 3] + "..."

    return text


def simplify_recipe(recipe: Recipe, max_description_length: int = 200) -> dict:
    """Convert a Recipe to a simplified dict for LLM consumption."""
    result = {
        "id": recipe.id,
        "slug": recipe.slug,
        "title": recipe.title,
        "tags": recipe.tags,
        "view_count": recipe.view_count,
        "created_at": recipe.created_at.isoformat().replace("+00:00", "Z"),
    }

    if recipe.author:
        result["author"] = recipe.author.username

    # Only include optional fields when present
    if recipe.description:
        result["description"] = clean_text(recipe.description, max_description_length)
    if recipe.favorite_count:
        result["favorite_count"] = recipe.favorite_count
    if recipe.image_url:
        result["image_url"] = recipe.image_url

    return result
