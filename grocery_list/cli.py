"""Command-line interface for grocery-list.

Provides subcommands for creating the catalog, managing items and
recipes, and building a shopping list interactively. Each command loads
the catalog, changes it, and saves it back.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import TYPE_CHECKING

from grocery_list.config import Config, ConfigError, load_config
from grocery_list.errors import (
    DuplicateItemError,
    EmptyInputError,
    GroceryListError,
    ItemNotFoundError,
)
from grocery_list.groceries import Groceries
from grocery_list.models import (
    DEFAULT_SECTIONS,
    Item,
    ItemName,
    SectionName,
    ShoppingList,
)
from grocery_list.prompter import ConsolePrompter
from grocery_list.shopping_list import (
    add_groceries_to_list,
    add_recipes_to_list,
    format_shopping_list,
)
from grocery_list.storage import (
    load_groceries,
    load_shopping_list,
    save_groceries,
    save_shopping_list,
)

if TYPE_CHECKING:
    from grocery_list.prompter import Prompter


logger = logging.getLogger(__name__)


# ------------------------------------------------------------------
# Config + dependency bootstrap
# ------------------------------------------------------------------


def _load_config_safe() -> Config:
    """Load application config, falling back to defaults on failure.

    Returns:
        Loaded Config, or a default Config if loading fails.
    """
    try:
        return load_config()
    except ConfigError as exc:
        logger.warning("Ignoring invalid configuration: %s", exc)
        return Config()


def _make_prompter() -> Prompter:
    """Create the prompter used for interactive questions.

    Returns:
        Console prompter reading from stdin.
    """
    return ConsolePrompter()


def _groceries_path(args: argparse.Namespace, cfg: Config) -> str:
    """Return the catalog path, preferring the command-line flag."""
    return args.groceries or cfg.groceries_path


def _list_path(args: argparse.Namespace, cfg: Config) -> str:
    """Return the shopping list path, preferring the command-line flag."""
    return args.list_path or cfg.shopping_list_path


# ------------------------------------------------------------------
# Output formatting
# ------------------------------------------------------------------


def _format_items(groceries: Groceries) -> str:
    """Format catalog items grouped under section headings.

    Args:
        groceries: Catalog to format.

    Returns:
        Formatted item listing.
    """
    if not groceries.collection:
        return "No items in the catalog."

    lines: list[str] = []
    for section in groceries.sections:
        items = list(groceries.section_items(section))
        if not items:
            continue
        lines.append(f"[{section}]")
        for item in items:
            marker = " *" if item.is_recipe_ingredient else ""
            lines.append(f"  {item.name}{marker}")
        lines.append("")
    return "\n".join(lines).rstrip()


def _format_recipes(groceries: Groceries) -> str:
    """Format the recipe list with ingredient counts.

    Args:
        groceries: Catalog to format.

    Returns:
        Formatted recipe listing.
    """
    if not groceries.recipes:
        return "No saved recipes."

    header = f"  {'Name':<40s} {'Items':>5s}"
    lines = [header, "  " + "-" * 46]
    for recipe in groceries.recipes:
        count = len(list(groceries.recipe_ingredients(recipe)))
        lines.append(f"  {recipe:<40s} {count:>5d}")
    return "\n".join(lines)


def _format_matches(items: list[Item]) -> str:
    """Format search results as name and section.

    Args:
        items: Matching items.

    Returns:
        Formatted result lines.
    """
    return "\n".join(f"  {item.name:<30s} ({item.section})" for item in items)


# ------------------------------------------------------------------
# Command handlers
# ------------------------------------------------------------------


def _handle_init(args: argparse.Namespace) -> int:
    """Handle the ``init`` subcommand.

    Args:
        args: Parsed command-line arguments.

    Returns:
        Exit code (0 for success, 1 for failure).
    """
    cfg = _load_config_safe()
    path = _groceries_path(args, cfg)

    if Path(path).exists() and not args.force:
        print(
            f"Error: '{path}' already exists. Use --force to overwrite it.",
            file=sys.stderr,
        )
        return 1

    save_groceries(Groceries.new_initialized(DEFAULT_SECTIONS), path)
    print(f"Created empty catalog at '{path}'.")
    return 0


def _handle_items(args: argparse.Namespace) -> int:
    """Handle the ``items`` subcommand.

    Args:
        args: Parsed command-line arguments.

    Returns:
        Exit code (0 for success, 1 for failure).
    """
    cfg = _load_config_safe()
    path = _groceries_path(args, cfg)
    groceries = load_groceries(path)

    action: str | None = args.action

    if action is None:
        print(_format_items(groceries))
        return 0

    # Lookups are exact; only new items get the lower-cased form.
    name: str = args.name.strip()
    if not name:
        print(f"Error: '{action}' needs an item name.", file=sys.stderr)
        return 1

    if action == "search":
        matches = list(groceries.get_item_matches(name))
        if not matches:
            print(f"No items match '{name}'.")
            return 0
        print(_format_matches(matches))
        return 0

    if action == "add":
        name = name.lower()
        section: str = args.section.strip().lower()
        if section not in groceries.sections:
            valid = ", ".join(groceries.sections)
            print(
                f"Error: Invalid section '{section}'. Valid: {valid}",
                file=sys.stderr,
            )
            return 1
        try:
            groceries.add_item(
                Item.new_initialized(ItemName(name), SectionName(section))
            )
        except DuplicateItemError as exc:
            print(f"Error: {exc}.", file=sys.stderr)
            return 1
        save_groceries(groceries, path)
        print(f"Added '{name}' to {section}.")
        return 0

    if action == "delete":
        try:
            groceries.delete_item(name)
        except ItemNotFoundError:
            print(f"Error: '{name}' not found in catalog.", file=sys.stderr)
            return 1
        save_groceries(groceries, path)
        print(f"Deleted '{name}'.")
        return 0

    print(f"Error: Unknown action '{action}'.", file=sys.stderr)
    return 1


def _handle_recipes(args: argparse.Namespace) -> int:
    """Handle the ``recipes`` subcommand.

    Args:
        args: Parsed command-line arguments.

    Returns:
        Exit code (0 for success, 1 for failure).
    """
    cfg = _load_config_safe()
    path = _groceries_path(args, cfg)
    groceries = load_groceries(path)

    action: str | None = args.action

    if action is None:
        print(_format_recipes(groceries))
        return 0

    recipe_name: str = args.recipe_name.strip()
    if not recipe_name and action != "add":
        print(f"Error: '{action}' needs a recipe name.", file=sys.stderr)
        return 1

    if action == "show":
        if recipe_name not in groceries.recipes:
            print(f"Recipe '{recipe_name}' not found.", file=sys.stderr)
            return 1
        print(f"Recipe: {recipe_name}")
        for item in groceries.recipe_ingredients(recipe_name):
            print(f"  {item.name} ({item.section})")
        return 0

    if action == "add":
        return _add_recipe(groceries, path, recipe_name, args.ingredients)

    if action == "delete":
        return _delete_recipe(groceries, path, recipe_name)

    print(f"Error: Unknown action '{action}'.", file=sys.stderr)
    return 1


def _add_recipe(
    groceries: Groceries,
    path: str,
    recipe_name: str,
    ingredients: str | None,
) -> int:
    """Add a recipe, filing any new ingredients first.

    Args:
        groceries: Loaded catalog.
        path: Catalog file to save to.
        recipe_name: Recipe name; asked for when empty.
        ingredients: Ingredient text; asked for when None.

    Returns:
        Exit code (0 for success, 1 for failure).
    """
    prompter = _make_prompter()
    if not recipe_name:
        recipe_name = prompter.ask_text("What's the recipe?")
    if not recipe_name:
        print("Error: No recipe name given.", file=sys.stderr)
        return 1
    if ingredients is None:
        ingredients = prompter.ask_text("Enter the ingredients, separated by commas")

    try:
        groceries.check_recipe_ingredients(ingredients, prompter)
        groceries.add_recipe(recipe_name, ingredients)
    except EmptyInputError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    save_groceries(groceries, path)
    print(f"Added recipe '{recipe_name}'.")
    return 0


def _delete_recipe(groceries: Groceries, path: str, recipe_name: str) -> int:
    """Delete a recipe and save the catalog.

    The catalog is saved even when the recipe is missing, since stray
    item links to it are still removed.

    Args:
        groceries: Loaded catalog.
        path: Catalog file to save to.
        recipe_name: Recipe to delete.

    Returns:
        Exit code (0 for success, 1 for failure).
    """
    try:
        groceries.delete_recipe(recipe_name)
    except ItemNotFoundError:
        save_groceries(groceries, path)
        print(f"Recipe '{recipe_name}' not found.", file=sys.stderr)
        return 1
    save_groceries(groceries, path)
    print(f"Deleted recipe '{recipe_name}'.")
    return 0


def _handle_list(args: argparse.Namespace) -> int:
    """Handle the ``list`` subcommand.

    Args:
        args: Parsed command-line arguments.

    Returns:
        Exit code (0 for success, 1 for failure).
    """
    cfg = _load_config_safe()
    groceries = load_groceries(_groceries_path(args, cfg))
    list_path = _list_path(args, cfg)
    prompter = _make_prompter()

    shopping_list = ShoppingList()
    if Path(list_path).exists():
        answer = prompter.ask_text(
            "Use saved list?\n--y\n--any other key for new list"
        )
        if answer == "y":
            shopping_list = load_shopping_list(list_path)
            if not shopping_list.is_empty():
                print(format_shopping_list(shopping_list))

    answer = prompter.ask_text(
        "Add recipe ingredients to our list?\n--y\n--any other key to continue"
    )
    if answer == "y":
        add_recipes_to_list(shopping_list, groceries, prompter)

    answer = prompter.ask_text(
        "Add groceries to shopping list?\n--y\n--any other key to skip"
    )
    if answer == "y":
        add_groceries_to_list(shopping_list, groceries, prompter)

    save_shopping_list(shopping_list, list_path)
    print(format_shopping_list(shopping_list))
    return 0


# ------------------------------------------------------------------
# Argument parser
# ------------------------------------------------------------------


def _build_parser() -> argparse.ArgumentParser:
    """Build the CLI argument parser with all subcommands.

    Returns:
        Configured ArgumentParser instance.
    """
    parser = argparse.ArgumentParser(
        prog="grocery-list",
        description="Keep a grocery catalog and recipes, and make shopping lists.",
    )
    parser.add_argument(
        "--groceries",
        default=None,
        help="Catalog JSON file (default: GROCERIES_PATH or groceries.json).",
    )
    parser.add_argument(
        "--list",
        dest="list_path",
        default=None,
        help="Shopping list JSON file (default: SHOPPING_LIST_PATH or list.json).",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Show debug logging.",
    )
    subparsers = parser.add_subparsers(dest="command")

    _add_init_parser(subparsers)
    _add_items_parser(subparsers)
    _add_recipes_parser(subparsers)
    _add_list_parser(subparsers)

    return parser


def _add_init_parser(
    subparsers: argparse._SubParsersAction[argparse.ArgumentParser],
) -> None:
    """Add the ``init`` subcommand parser.

    Args:
        subparsers: Subparsers action from the main parser.
    """
    init_parser = subparsers.add_parser(
        "init",
        help="Create an empty catalog with the default sections.",
    )
    init_parser.add_argument(
        "--force",
        action="store_true",
        help="Overwrite an existing catalog file.",
    )


def _add_items_parser(
    subparsers: argparse._SubParsersAction[argparse.ArgumentParser],
) -> None:
    """Add the ``items`` subcommand parser.

    Args:
        subparsers: Subparsers action from the main parser.
    """
    items_parser = subparsers.add_parser(
        "items",
        help="List, add, delete, or search catalog items.",
    )
    items_parser.add_argument(
        "action",
        nargs="?",
        default=None,
        choices=["add", "delete", "search"],
        help="Action: add, delete, or search.",
    )
    items_parser.add_argument(
        "name",
        nargs="?",
        default="",
        help="Item name, or name fragment for search.",
    )
    items_parser.add_argument(
        "section",
        nargs="?",
        default="",
        help="Section (for 'add' action only).",
    )


def _add_recipes_parser(
    subparsers: argparse._SubParsersAction[argparse.ArgumentParser],
) -> None:
    """Add the ``recipes`` subcommand parser.

    Args:
        subparsers: Subparsers action from the main parser.
    """
    recipes_parser = subparsers.add_parser(
        "recipes",
        help="List, show, add, or delete recipes.",
    )
    recipes_parser.add_argument(
        "action",
        nargs="?",
        default=None,
        choices=["show", "add", "delete"],
        help="Action: show, add, or delete.",
    )
    recipes_parser.add_argument(
        "recipe_name",
        nargs="?",
        default="",
        help="Recipe name.",
    )
    recipes_parser.add_argument(
        "--ingredients",
        default=None,
        help="Comma-separated ingredients (for 'add'; asked for if omitted).",
    )


def _add_list_parser(
    subparsers: argparse._SubParsersAction[argparse.ArgumentParser],
) -> None:
    """Add the ``list`` subcommand parser.

    Args:
        subparsers: Subparsers action from the main parser.
    """
    subparsers.add_parser(
        "list",
        help="Build a shopping list interactively.",
    )


# ------------------------------------------------------------------
# Entry point
# ------------------------------------------------------------------


def main(argv: list[str] | None = None) -> None:
    """Run the CLI application.

    Args:
        argv: Optional argument list (defaults to sys.argv[1:]).
    """
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    level = logging.DEBUG if args.verbose else _load_config_safe().log_level_value
    logging.basicConfig(level=level, format="%(levelname)s: %(message)s")

    exit_code = _dispatch(args)
    sys.exit(exit_code)


def _dispatch(args: argparse.Namespace) -> int:
    """Dispatch a parsed command to the appropriate handler.

    Errors reading or writing data files, and input closing mid-prompt,
    end the command with a message.

    Args:
        args: Parsed command-line arguments.

    Returns:
        Exit code from the handler.
    """
    command: str = args.command
    try:
        if command == "init":
            return _handle_init(args)
        if command == "items":
            return _handle_items(args)
        if command == "recipes":
            return _handle_recipes(args)
        if command == "list":
            return _handle_list(args)
    except GroceryListError as exc:
        logger.debug("Command %r failed", command, exc_info=True)
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    except EOFError:
        logger.debug("Input closed during %r", command)
        print("Error: Input ended before the command finished.", file=sys.stderr)
        return 1
    return 1  # pragma: no cover
