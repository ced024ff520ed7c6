import json

import pytest

from src.recipes.catalog import RecipeCatalog


def test_catalog_requires_a_source():
    with pytest.raises(ValueError):
        RecipeCatalog()


def test_catalog_search_hides_private_recipes(raw_rows):
    catalog = RecipeCatalog(rows=raw_rows)

    assert catalog.search("chili") == []
    assert [r.id for r in catalog.search("chili", include_private=True)] == ["r6"]


def test_catalog_search_limit(raw_rows):
    catalog = RecipeCatalog(rows=raw_rows)
    results = catalog.search(sort_by="created_at", sort_order="desc", limit=2)
    assert [r.id for r in results] == ["r5", "r3"]


def test_catalog_caches_until_refresh(tmp_path, raw_rows):
    recipes_file = tmp_path / "recipes.json"
    recipes_file.write_text(json.dumps(raw_rows[:2]))
    catalog = RecipeCatalog(recipes_file=recipes_file)

    first = catalog.get_recipes()
    assert len(first) == 2

    recipes_file.write_text(json.dumps(raw_rows))
    assert catalog.get_recipes() is first
    assert len(catalog.get_recipes(refresh=True)) == len(raw_rows)


def test_catalog_rejects_non_array_file(tmp_path):
    recipes_file = tmp_path / "recipes.json"
    recipes_file.write_text(json.dumps({"recipes": []}))
    catalog = RecipeCatalog(recipes_file=recipes_file)

    with pytest.raises(ValueError):
        catalog.get_recipes()


def test_from_env_with_file(tmp_path, monkeypatch, raw_rows):
    recipes_file = tmp_path / "recipes.json"
    recipes_file.write_text(json.dumps(raw_rows))
    monkeypatch.setenv("RECIPES_FILE", str(recipes_file))

    catalog = RecipeCatalog.from_env()
    assert catalog.recipes_file == recipes_file
    assert [r.id for r in catalog.search("choc cake")] == ["r1"]


def test_from_env_with_inline_json(monkeypatch, raw_rows):
    monkeypatch.delenv("RECIPES_FILE", raising=False)
    monkeypatch.setenv("RECIPES_JSON", json.dumps(raw_rows))

    catalog = RecipeCatalog.from_env()
    assert len(catalog.get_recipes()) == len(raw_rows)


def test_from_env_inline_json_must_be_array(monkeypatch):
    monkeypatch.delenv("RECIPES_FILE", raising=False)
    monkeypatch.setenv("RECIPES_JSON", '{"id": "r1"}')

    with pytest.raises(ValueError):
        RecipeCatalog.from_env()


def test_from_env_default_location(tmp_path, monkeypatch, raw_rows):
    monkeypatch.delenv("RECIPES_FILE", raising=False)
    monkeypatch.delenv("RECIPES_JSON", raising=False)
    monkeypatch.setenv("HOME", str(tmp_path))
    (tmp_path / ".recipes.json").write_text(json.dumps(raw_rows))

    catalog = RecipeCatalog.from_env()
    assert catalog.recipes_file == tmp_path / ".recipes.json"


def test_from_env_without_configuration(tmp_path, monkeypatch):
    monkeypatch.delenv("RECIPES_FILE", raising=False)
    monkeypatch.delenv("RECIPES_JSON", raising=False)
    monkeypatch.setenv("HOME", str(tmp_path))

    with pytest.raises(ValueError, match="No recipes found"):
        RecipeCatalog.from_env()


@pytest.mark.parametrize("limit", [None, 0, -1])
def test_catalog_search_non_positive_limit_returns_all(raw_rows, limit):
    catalog = RecipeCatalog(rows=raw_rows)
    assert len(catalog.search(limit=limit)) == 5
