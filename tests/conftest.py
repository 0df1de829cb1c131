"""Shared fixtures for grocery_list tests."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

import pytest

from grocery_list.groceries import Groceries

if TYPE_CHECKING:
    from pathlib import Path


@pytest.fixture()
def sample_document() -> dict[str, Any]:
    """Return a small catalog document in its persisted JSON shape.

    ``milk`` is flagged as a recipe ingredient with no recipes, as older
    catalog files sometimes are.

    Returns:
        Catalog document as plain dicts and lists.
    """
    return {
        "sections": ["fresh", "pantry", "protein", "dairy", "freezer"],
        "collection": [
            {
                "name": "eggs",
                "section": "dairy",
                "is_recipe_ingredient": True,
                "recipes": [
                    "oatmeal chocolate chip cookies",
                    "fried eggs for breakfast",
                    "turkey meatballs",
                ],
            },
            {
                "name": "milk",
                "section": "dairy",
                "is_recipe_ingredient": True,
                "recipes": [],
            },
            {
                "name": "lemons",
                "section": "fresh",
                "is_recipe_ingredient": True,
                "recipes": ["chicken breasts with lemon", "hummus"],
            },
            {
                "name": "garlic",
                "section": "fresh",
                "is_recipe_ingredient": True,
                "recipes": ["hummus", "tomato pasta"],
            },
            {
                "name": "carrots",
                "section": "fresh",
                "is_recipe_ingredient": True,
                "recipes": ["flue flighter chicken stew"],
            },
            {
                "name": "tahini",
                "section": "pantry",
                "is_recipe_ingredient": True,
                "recipes": ["hummus"],
            },
            {
                "name": "pasta",
                "section": "pantry",
                "is_recipe_ingredient": True,
                "recipes": ["tomato pasta"],
            },
            {
                "name": "unsalted butter",
                "section": "dairy",
                "is_recipe_ingredient": True,
                "recipes": [
                    "oatmeal chocolate chip cookies",
                    "fried eggs for breakfast",
                ],
            },
            {
                "name": "old fashioned rolled oats",
                "section": "pantry",
                "is_recipe_ingredient": True,
                "recipes": ["oatmeal chocolate chip cookies"],
            },
            {
                "name": "tofu",
                "section": "protein",
                "is_recipe_ingredient": False,
                "recipes": [],
            },
            {
                "name": "ice cream",
                "section": "freezer",
                "is_recipe_ingredient": False,
                "recipes": [],
            },
        ],
        "recipes": [
            "oatmeal chocolate chip cookies",
            "tomato pasta",
            "fried eggs for breakfast",
            "turkey meatballs",
            "flue flighter chicken stew",
            "hummus",
            "chicken breasts with lemon",
        ],
    }


@pytest.fixture()
def groceries(sample_document: dict[str, Any]) -> Groceries:
    """Return the sample catalog as a Groceries model.

    Args:
        sample_document: Catalog document fixture.

    Returns:
        Validated Groceries instance.
    """
    return Groceries.model_validate(sample_document)


@pytest.fixture()
def groceries_file(tmp_path: Path, sample_document: dict[str, Any]) -> Path:
    """Write the sample catalog to a temporary JSON file.

    Args:
        tmp_path: Pytest temporary directory.
        sample_document: Catalog document fixture.

    Returns:
        Path to the written file.
    """
    path = tmp_path / "groceries.json"
    path.write_text(json.dumps(sample_document))
    return path
