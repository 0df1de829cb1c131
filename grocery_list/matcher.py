"""Substring lookup of catalog items, returned as restartable views."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable, Iterator

    from grocery_list.groceries import Groceries
    from grocery_list.models import Item


class ItemView:
    """Lazy, restartable view over catalog items.

    Each iteration calls ``source`` afresh, so the view reflects the
    catalog as it is when iterated rather than when the view was made.

    Args:
        source: Zero-argument callable producing the items to yield.
    """

    def __init__(self, source: Callable[[], Iterable[Item]]) -> None:
        """Initialize the view.

        Args:
            source: Zero-argument callable producing the items to yield.
        """
        self._source = source

    def __iter__(self) -> Iterator[Item]:
        return iter(self._source())

    def names(self) -> list[str]:
        """Return the names of the items currently in the view."""
        return [item.name for item in self]

    def __repr__(self) -> str:
        return f"ItemView({self.names()!r})"


def item_matches(groceries: Groceries, fragment: str) -> ItemView:
    """Find catalog items whose name contains ``fragment``.

    Matching is case-sensitive and applies no normalization; callers that
    want case-insensitive lookup lower-case the fragment first.

    Args:
        groceries: Catalog to search.
        fragment: Text to look for in item names.

    Returns:
        View of matching items in catalog order; empty if none match.
    """
    return ItemView(
        lambda: (item for item in groceries.collection if item.matches(fragment))
    )
