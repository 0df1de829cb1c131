"""JSON persistence for the grocery catalog and the saved shopping list.

Each document is read whole, validated with pydantic in strict mode so
values of the wrong JSON type are rejected rather than coerced, and written
back whole. Load failures are reported as ``PathError`` (the file could not be
read) or ``DeserializingError`` (the file is not a valid document).
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TypeVar

from pydantic import BaseModel, ValidationError

from grocery_list.errors import DeserializingError, PathError
from grocery_list.groceries import Groceries
from grocery_list.models import ShoppingList

logger = logging.getLogger(__name__)

_ModelT = TypeVar("_ModelT", bound=BaseModel)


def _read_document(path: str | Path, model: type[_ModelT]) -> _ModelT:
    """Read ``path`` and validate it as ``model``.

    Args:
        path: JSON file to read.
        model: Pydantic model the document must match.

    Returns:
        Validated model instance.

    Raises:
        PathError: If the file cannot be read.
        DeserializingError: If the content does not match ``model``.
    """
    file_path = Path(path)
    try:
        raw = file_path.read_text(encoding="utf-8")
    except OSError as err:
        raise PathError(
            f"Error: '{err}'! Make sure the file '{file_path}' can be accessed "
            "from the present working directory."
        ) from err
    try:
        document = model.model_validate_json(raw, strict=True)
    except ValidationError as err:
        raise DeserializingError(
            f"Error deserializing from JSON file '{file_path}':\n{err}\n"
            "Something's wrong with the JSON file?"
        ) from err
    logger.debug("Loaded %s from %s", model.__name__, file_path)
    return document


def _write_document(document: BaseModel, path: str | Path) -> None:
    """Write ``document`` to ``path`` as JSON.

    Raises:
        PathError: If the file cannot be written.
    """
    file_path = Path(path)
    try:
        file_path.write_text(document.model_dump_json(indent=2), encoding="utf-8")
    except OSError as err:
        raise PathError(f"Error writing '{file_path}': {err}") from err
    logger.debug("Saved %s to %s", type(document).__name__, file_path)


def load_groceries(path: str | Path) -> Groceries:
    """Load the grocery catalog from a JSON file.

    Args:
        path: Catalog file.

    Returns:
        The catalog.

    Raises:
        PathError: If the file cannot be read.
        DeserializingError: If the file is not a valid catalog.
    """
    return _read_document(path, Groceries)


def save_groceries(groceries: Groceries, path: str | Path) -> None:
    """Save the grocery catalog to a JSON file, replacing its contents."""
    _write_document(groceries, path)


def load_shopping_list(path: str | Path) -> ShoppingList:
    """Load a saved shopping list from a JSON file.

    Args:
        path: Shopping list file.

    Returns:
        The saved shopping list.

    Raises:
        PathError: If the file cannot be read.
        DeserializingError: If the file is not a valid shopping list.
    """
    return _read_document(path, ShoppingList)


def save_shopping_list(shopping_list: ShoppingList, path: str | Path) -> None:
    """Save a shopping list to a JSON file, replacing its contents."""
    _write_document(shopping_list, path)
