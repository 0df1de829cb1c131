"""The grocery catalog: sections, items, recipes, and their linkage.

``Groceries`` is the aggregate root. It owns every Item and keeps the
item-to-recipe back-references consistent as recipes come and go:

- ``add_recipe`` links every catalog item named in the ingredient text.
- ``delete_recipe`` unlinks the recipe from every item, and an item left
  with no recipes stops being a recipe ingredient.

Ingredient text is always parsed before the catalog is touched, so an
empty ingredient list leaves the catalog exactly as it was.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from pydantic import BaseModel

from grocery_list.errors import DuplicateItemError, ItemNotFoundError
from grocery_list.ingredients import parse_ingredients
from grocery_list.matcher import ItemView, item_matches
from grocery_list.models import Item, ItemName, RecipeName, Section, SectionName

if TYPE_CHECKING:
    from collections.abc import Iterable

    from grocery_list.prompter import Prompter

logger = logging.getLogger(__name__)

_SECTION_OPTIONS: list[str] = [s.value for s in Section]


class Groceries(BaseModel):
    """Catalog of grocery items and the recipes that use them."""

    sections: list[SectionName]
    collection: list[Item]
    recipes: list[RecipeName]

    @classmethod
    def new_initialized(cls, sections: Iterable[str] = ()) -> Groceries:
        """Create an empty catalog.

        Args:
            sections: Section names, in display order.

        Returns:
            Catalog with no items and no recipes.
        """
        return cls(
            sections=[SectionName(s) for s in sections],
            collection=[],
            recipes=[],
        )

    # ------------------------------------------------------------------
    # Items
    # ------------------------------------------------------------------

    def get_item(self, name: str) -> Item | None:
        """Return the item named exactly ``name``, or None."""
        for item in self.collection:
            if item.name == name:
                return item
        return None

    def get_item_matches(self, fragment: str) -> ItemView:
        """Return a view of items whose name contains ``fragment``."""
        return item_matches(self, fragment)

    def add_item(self, item: Item) -> None:
        """Add an item to the catalog.

        Args:
            item: Item to add.

        Raises:
            DuplicateItemError: If an item with the same name exists.
        """
        if self.get_item(item.name) is not None:
            raise DuplicateItemError(item.name)
        self.collection.append(item)
        logger.debug("Added item %r to section %r", item.name, item.section)

    def delete_item(self, name: str) -> None:
        """Remove the item named exactly ``name``.

        Recipes that used the item are left as they are.

        Args:
            name: Item name.

        Raises:
            ItemNotFoundError: If no item has that name.
        """
        for index, item in enumerate(self.collection):
            if item.name == name:
                del self.collection[index]
                logger.debug("Deleted item %r", name)
                return
        raise ItemNotFoundError(name)

    def section_items(self, section: str) -> ItemView:
        """Return a view of the items filed under ``section``.

        Args:
            section: Section name.

        Returns:
            Items whose section contains ``section``, in catalog order.
        """
        section_name = SectionName(section)
        return ItemView(
            lambda: (item for item in self.collection if item.in_section(section_name))
        )

    def items(self) -> ItemView:
        """Return a view of all items grouped by section.

        Sections are visited in display order. An item whose section text
        contains more than one section name appears once per match; an
        item matching no section is left out.
        """
        return ItemView(
            lambda: (
                item
                for section in self.sections
                for item in self.collection
                if item.in_section(section)
            )
        )

    # ------------------------------------------------------------------
    # Recipes
    # ------------------------------------------------------------------

    def check_recipe_ingredients(self, ingredients: str, prompter: Prompter) -> None:
        """Add catalog items for any ingredients the catalog lacks.

        The user picks a section for each new item. Existing items are
        not changed and no recipe links are made.

        Args:
            ingredients: Comma-separated ingredient text.
            prompter: Used to ask which section each new item belongs in.

        Raises:
            EmptyInputError: If ``ingredients`` names no ingredients.
        """
        for name in parse_ingredients(ingredients):
            if self.get_item(name) is not None:
                continue
            section = prompter.ask_choice(
                f"which section is {name} in?", _SECTION_OPTIONS
            )
            self.add_item(Item.new_initialized(name, SectionName(section)))
            logger.info("New item %r filed under %r", name, section)

    def add_recipe(self, name: str, ingredients: str) -> None:
        """Add a recipe and link it to the catalog items it uses.

        Ingredients with no catalog item are ignored; call
        ``check_recipe_ingredients`` first to create them. Adding a recipe
        name that already exists records it again.

        Args:
            name: Recipe name.
            ingredients: Comma-separated ingredient text.

        Raises:
            EmptyInputError: If ``ingredients`` names no ingredients.
        """
        recipe = RecipeName(name)
        wanted: list[ItemName] = parse_ingredients(ingredients)

        linked = 0
        for item in self.collection:
            if item.name in wanted:
                item.is_recipe_ingredient = True
                item.recipes.append(recipe)
                linked += 1

        self.recipes.append(recipe)
        logger.info("Added recipe %r with %d linked item(s)", name, linked)

    def delete_recipe(self, name: str) -> None:
        """Delete a recipe and unlink it from every item.

        The unlinking runs even when the recipe is missing from the recipe
        list, so stray back-references are always cleaned up.

        Args:
            name: Recipe name.

        Raises:
            ItemNotFoundError: If the recipe was not in the recipe list.
        """
        found = name in self.recipes
        if found:
            self.recipes.remove(RecipeName(name))

        for item in self.collection:
            if name not in item.recipes:
                continue
            item.recipes = [r for r in item.recipes if r != name]
            if not item.recipes:
                item.is_recipe_ingredient = False

        if not found:
            logger.warning("Recipe %r not in recipe list; cleaned item links", name)
            raise ItemNotFoundError(name)
        logger.info("Deleted recipe %r", name)

    def recipe_ingredients(self, name: str) -> ItemView:
        """Return a view of the items used by recipe ``name``."""
        return ItemView(
            lambda: (item for item in self.collection if name in item.recipes)
        )
