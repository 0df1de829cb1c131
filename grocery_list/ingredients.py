"""Parse free-text ingredient lists into normalized item names."""

from __future__ import annotations

from grocery_list.errors import EmptyInputError
from grocery_list.models import ItemName


def parse_ingredients(text: str) -> list[ItemName]:
    """Convert comma-separated ingredient text to a list of item names.

    Each phrase is stripped and lower-cased. Blank phrases are dropped and
    repeats collapse to their first occurrence, keeping first-seen order.

    Args:
        text: Comma-separated ingredient phrases.

    Returns:
        Deduplicated, normalized item names.

    Raises:
        EmptyInputError: If no ingredient names remain after normalizing.
    """
    names: list[ItemName] = []
    for phrase in text.split(","):
        name = phrase.strip().lower()
        if name and name not in names:
            names.append(ItemName(name))
    if not names:
        raise EmptyInputError
    return names
