"""Interactive assembly of a shopping list from the catalog.

Two passes fill a ``ShoppingList``: one offers each recipe and its
ingredients, the other walks the catalog section by section. Items are
lower-cased and never listed twice.

Answer keys used by both passes:

- ``y``: add it.
- ``c``: put it on the checklist to look for at home first.
- ``a``: add this and every remaining ingredient of the recipe.
- ``s``: skip the rest of the current group.
- anything else: move on to the next one.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from grocery_list.groceries import Groceries
    from grocery_list.models import Item, RecipeName, ShoppingList
    from grocery_list.prompter import Prompter

logger = logging.getLogger(__name__)


def add_recipes_to_list(
    shopping_list: ShoppingList,
    groceries: Groceries,
    prompter: Prompter,
) -> ShoppingList:
    """Offer each catalog recipe and add the chosen recipes' ingredients.

    Args:
        shopping_list: List to add to; modified in place.
        groceries: Catalog supplying recipes and their ingredients.
        prompter: Asks which recipes and ingredients to add.

    Returns:
        The updated shopping list.
    """
    for recipe in list(groceries.recipes):
        answer = prompter.ask_text(
            f"Shall we add ...\n{recipe}?\n"
            "--y\n--s to skip to end of recipes\n--any other key for next recipe"
        )
        if answer == "y":
            add_recipe_to_list(shopping_list, groceries, recipe, prompter)
        elif answer == "s":
            break
    return shopping_list


def add_recipe_to_list(
    shopping_list: ShoppingList,
    groceries: Groceries,
    recipe: RecipeName,
    prompter: Prompter,
) -> ShoppingList:
    """Record a recipe and ask about each of its ingredients.

    Args:
        shopping_list: List to add to; modified in place.
        groceries: Catalog supplying the recipe's ingredients.
        recipe: Recipe being made.
        prompter: Asks about each ingredient.

    Returns:
        The updated shopping list.
    """
    shopping_list.add_recipe(recipe)
    ingredients: list[Item] = list(groceries.recipe_ingredients(recipe))
    logger.debug("Recipe %r has %d catalog ingredient(s)", recipe, len(ingredients))

    for index, item in enumerate(ingredients):
        answer = prompter.ask_text(
            f"{item.name.lower()}?\n"
            "--y\n--c to remind to check\n"
            "--a to add this and all remaining ingredients\n"
            "--any other key for next ingredient"
        )
        if answer == "y":
            shopping_list.add_item(item.name)
        elif answer == "c":
            shopping_list.add_to_checklist(item.name)
        elif answer == "a":
            for remaining in ingredients[index:]:
                shopping_list.add_item(remaining.name)
            break
    return shopping_list


def add_groceries_to_list(
    shopping_list: ShoppingList,
    groceries: Groceries,
    prompter: Prompter,
) -> ShoppingList:
    """Walk the catalog by section and ask about each item.

    Items already on the list are not asked about again.

    Args:
        shopping_list: List to add to; modified in place.
        groceries: Catalog to walk.
        prompter: Asks which sections and items to add.

    Returns:
        The updated shopping list.
    """
    for section in groceries.sections:
        answer = prompter.ask_text(
            f"Do we need {section.lower()}?\n"
            "--y\n--s to skip remaining sections\n--any other key to continue"
        )
        if answer == "s":
            break
        if answer != "y":
            continue
        for item in groceries.section_items(section):
            if item.name.lower() in shopping_list.items:
                continue
            answer = prompter.ask_text(
                f"{item.name.lower()}?\n"
                "--y\n--c to check later\n--s to skip to next section\n"
                "--any other key to continue"
            )
            if answer == "y":
                shopping_list.add_item(item.name)
            elif answer == "c":
                shopping_list.add_to_checklist(item.name)
            elif answer == "s":
                break
    return shopping_list


def format_shopping_list(shopping_list: ShoppingList) -> str:
    """Format a shopping list for printing.

    Args:
        shopping_list: List to format.

    Returns:
        Checklist, recipes, and items, each under its own heading. Empty
        parts are left out.
    """
    if shopping_list.is_empty():
        return "Shopping list is empty."

    lines: list[str] = []
    if shopping_list.checklist:
        lines.append("Check if we need ...")
        lines.extend(f"\t{name}" for name in shopping_list.checklist)
        lines.append("")
    if shopping_list.recipes:
        lines.append("We're making ...")
        lines.extend(f"\t{name}" for name in shopping_list.recipes)
        lines.append("")
    if shopping_list.items:
        lines.append("We need ...")
        lines.extend(f"\t{name}" for name in shopping_list.items)
        lines.append("")
    return "\n".join(lines).rstrip()
