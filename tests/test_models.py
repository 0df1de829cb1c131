"""Tests for grocery_list.models module."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from grocery_list.models import (
    DEFAULT_SECTIONS,
    Item,
    ItemName,
    RecipeName,
    Section,
    SectionName,
    ShoppingList,
)

# ---------------------------------------------------------------------------
# Enum tests
# ---------------------------------------------------------------------------


class TestSection:
    """Tests for Section enum."""

    def test_all_values(self) -> None:
        """Test all section values exist."""
        expected = {"fresh", "pantry", "protein", "dairy", "freezer"}
        actual = {s.value for s in Section}
        assert actual == expected

    def test_is_str_enum(self) -> None:
        """Test Section values are strings."""
        assert Section.FRESH == "fresh"
        assert isinstance(Section.DAIRY, str)

    def test_default_sections_order(self) -> None:
        """Test default sections follow the enum order."""
        assert DEFAULT_SECTIONS == ["fresh", "pantry", "protein", "dairy", "freezer"]


# ---------------------------------------------------------------------------
# Item tests
# ---------------------------------------------------------------------------


class TestItem:
    """Tests for the Item model."""

    def test_new_initialized_is_unlinked(self) -> None:
        """Test new_initialized creates an item with no recipes."""
        item = Item.new_initialized(ItemName("kale"), SectionName("fresh"))
        assert item.name == "kale"
        assert item.section == "fresh"
        assert item.is_recipe_ingredient is False
        assert item.recipes == []

    def test_new_items_do_not_share_recipes(self) -> None:
        """Test each item gets its own recipes list."""
        a = Item.new_initialized(ItemName("a"), SectionName("fresh"))
        b = Item.new_initialized(ItemName("b"), SectionName("fresh"))
        a.recipes.append(RecipeName("soup"))
        assert b.recipes == []

    def test_all_fields_required(self) -> None:
        """Test missing fields fail validation."""
        with pytest.raises(ValidationError):
            Item.model_validate({"name": "kale", "section": "fresh"})

    def test_matches_is_case_sensitive_substring(self) -> None:
        """Test matches uses case-sensitive containment."""
        item = Item.new_initialized(ItemName("greek yogurt"), SectionName("dairy"))
        assert item.matches("yog")
        assert item.matches("greek yogurt")
        assert not item.matches("Yog")
        assert not item.matches("yogurts")

    def test_in_section_item_section_contains_name(self) -> None:
        """Test an item belongs to a section its section text contains."""
        item = Item.new_initialized(ItemName("dill"), SectionName("fresh herbs"))
        assert item.in_section(SectionName("fresh"))
        assert item.in_section(SectionName("herbs"))

    def test_in_section_not_reversed(self) -> None:
        """Test a shorter item section does not match a longer name."""
        item = Item.new_initialized(ItemName("dill"), SectionName("fre"))
        assert not item.in_section(SectionName("fresh"))


# ---------------------------------------------------------------------------
# ShoppingList tests
# ---------------------------------------------------------------------------


class TestShoppingList:
    """Tests for the ShoppingList model."""

    def test_defaults_empty(self) -> None:
        """Test a new list is empty."""
        shopping_list = ShoppingList()
        assert shopping_list.is_empty()
        assert shopping_list.recipes == []
        assert shopping_list.checklist == []
        assert shopping_list.items == []

    def test_add_item_lowercases_and_dedupes(self) -> None:
        """Test items are lower-cased and only listed once."""
        shopping_list = ShoppingList()
        assert shopping_list.add_item("Ritz Crackers") is True
        assert shopping_list.add_item("ritz crackers") is False
        assert shopping_list.items == ["ritz crackers"]
        assert not shopping_list.is_empty()

    def test_add_to_checklist_dedupes(self) -> None:
        """Test checklist entries are only listed once."""
        shopping_list = ShoppingList()
        shopping_list.add_to_checklist("Salt")
        shopping_list.add_to_checklist("salt")
        assert shopping_list.checklist == ["salt"]

    def test_add_recipe_dedupes(self) -> None:
        """Test recipes are only listed once."""
        shopping_list = ShoppingList()
        shopping_list.add_recipe(RecipeName("hummus"))
        shopping_list.add_recipe(RecipeName("hummus"))
        assert shopping_list.recipes == ["hummus"]
