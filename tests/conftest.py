import pytest

from src.recipes.normalizer import normalize_recipes


@pytest.fixture
def raw_rows() -> list[dict]:
    """Recipe rows shaped like a joined recipes/profiles query."""
    return [
        {
            "id": "r1",
            "slug": "chocolate-birthday-cake",
            "title": "Chocolate Birthday Cake",
            "tags": ["dessert", "baking"],
            "view_count": 120,
            "saved_recipes": [{"count": 9}],
            "created_at": "2024-03-01T10:00:00+00:00",
            "description": "Three layers, one candle.",
            "is_public": True,
            "profiles": [{"username": "ana"}],
        },
        {
            "id": "r2",
            "slug": "chicken-tikka-masala",
            "title": "Chicken Tikka Masala",
            "tags": ["curry", "indian", "spicy"],
            "view_count": 300,
            "created_at": "2024-01-15T18:30:00+00:00",
            "is_public": True,
            "profiles": {"username": "raj"},
        },
        {
            "id": "r3",
            "slug": "gluten-free-brownies",
            "title": "Gluten Free Brownies",
            "tags": ["dessert", "gluten-free"],
            "view_count": 45,
            "created_at": "2024-05-20T08:00:00+00:00",
            "is_public": True,
            "profiles": [{"username": "ana"}],
        },
        {
            "id": "r4",
            "slug": "lemon-garlic-salmon",
            "title": "Lemon Garlic Salmon",
            "tags": ["fish", "quick"],
            "view_count": 80,
            "created_at": "2023-11-02T12:00:00+00:00",
            "is_public": True,
            "profiles": {"username": "mo"},
        },
        {
            "id": "r5",
            "slug": "veggie-stir-fry",
            "title": "Veggie Stir Fry",
            "tags": ["vegan", "quick", "stir-fry"],
            "view_count": 10,
            "created_at": "2024-06-10T19:45:00+00:00",
            "is_public": True,
            "profiles": {"username": "raj"},
        },
        {
            "id": "r6",
            "slug": "secret-chili",
            "title": "Secret Chili",
            "tags": ["spicy"],
            "view_count": 999,
            "created_at": "2024-02-01T00:00:00+00:00",
            "is_public": False,
            "profiles": {"username": "mo"},
        },
    ]


@pytest.fixture
def recipes(raw_rows):
    """Public recipes r1 to r5 as models."""
    return [recipe for recipe in normalize_recipes(raw_rows) if recipe.is_public]
