"""Pydantic models, identifier types, and enums for the grocery catalog.

This is the shared type system. The catalog aggregate itself lives in
``grocery_list.groceries``; everything it stores is defined here.
"""

from __future__ import annotations

from enum import StrEnum
from typing import NewType

from pydantic import BaseModel

# ---------------------------------------------------------------------------
# Identifier types
# ---------------------------------------------------------------------------

ItemName = NewType("ItemName", str)
SectionName = NewType("SectionName", str)
RecipeName = NewType("RecipeName", str)


# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------


class Section(StrEnum):
    """Kitchen storage sections offered when filing a new item."""

    FRESH = "fresh"
    PANTRY = "pantry"
    PROTEIN = "protein"
    DAIRY = "dairy"
    FREEZER = "freezer"


DEFAULT_SECTIONS: list[SectionName] = [SectionName(s.value) for s in Section]


# ---------------------------------------------------------------------------
# Core models
# ---------------------------------------------------------------------------


class Item(BaseModel):
    """A grocery product filed under a section, with recipe back-references."""

    name: ItemName
    section: SectionName
    is_recipe_ingredient: bool
    recipes: list[RecipeName]

    @classmethod
    def new_initialized(cls, name: ItemName, section: SectionName) -> Item:
        """Create an item that is not yet linked to any recipe.

        Args:
            name: Item name.
            section: Section the item is stored in.

        Returns:
            Unlinked Item.
        """
        return cls(name=name, section=section, is_recipe_ingredient=False, recipes=[])

    def matches(self, fragment: str) -> bool:
        """Return True if ``fragment`` occurs in this item's name."""
        return fragment in self.name

    def in_section(self, section: SectionName) -> bool:
        """Return True if this item is filed under ``section``.

        Membership is substring containment: the item's section text must
        contain the section name, so a section named ``fresh`` claims an
        item filed as ``fresh herbs`` but not one filed as ``fre``.
        """
        return section in self.section


class ShoppingList(BaseModel):
    """A shopping list assembled from recipes and catalog sections."""

    recipes: list[RecipeName] = []
    checklist: list[ItemName] = []
    items: list[ItemName] = []

    def is_empty(self) -> bool:
        """Return True if nothing has been added to any part of the list."""
        return not (self.recipes or self.checklist or self.items)

    def add_recipe(self, name: RecipeName) -> None:
        """Record that a recipe is being made, ignoring repeats."""
        if name not in self.recipes:
            self.recipes.append(name)

    def add_item(self, name: str) -> bool:
        """Add an item to buy.

        Args:
            name: Item name; stored lower-cased.

        Returns:
            True if the item was added, False if it was already listed.
        """
        lowered = ItemName(name.lower())
        if lowered in self.items:
            return False
        self.items.append(lowered)
        return True

    def add_to_checklist(self, name: str) -> bool:
        """Add an item to check for before shopping.

        Args:
            name: Item name; stored lower-cased.

        Returns:
            True if the item was added, False if it was already listed.
        """
        lowered = ItemName(name.lower())
        if lowered in self.checklist:
            return False
        self.checklist.append(lowered)
        return True
