"""Exception hierarchy for the grocery catalog and its persistence layer."""

from __future__ import annotations


class GroceryListError(Exception):
    """Base class for all grocery-list errors."""


class ItemNotFoundError(GroceryListError):
    """Raised when deleting an item or recipe that is not in the catalog."""

    def __init__(self, name: str) -> None:
        """Initialize with the name that could not be found.

        Args:
            name: Item or recipe name that was looked up.
        """
        super().__init__(f"'{name}' not found")
        self.name = name


class EmptyInputError(GroceryListError):
    """Raised when ingredient text contains no ingredient names."""

    def __init__(self) -> None:
        """Initialize with a fixed message."""
        super().__init__("No ingredients given. Enter ingredients separated by commas.")


class DuplicateItemError(GroceryListError):
    """Raised when adding an item whose name is already in the catalog."""

    def __init__(self, name: str) -> None:
        """Initialize with the duplicated item name.

        Args:
            name: Item name that already exists.
        """
        super().__init__(f"'{name}' is already in the catalog")
        self.name = name


class PathError(GroceryListError):
    """Raised when a data file cannot be read or written."""


class DeserializingError(GroceryListError):
    """Raised when a data file does not hold a valid document."""
