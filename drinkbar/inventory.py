"""In-memory drink inventory.

One Inventory is created per session and owned by it; nothing is shared
between instances and nothing is written to disk.
"""

from __future__ import annotations

from typing import Iterator, Optional

from drinkbar.collation import SortKey, default_key
from drinkbar.models import Drink


class Inventory:
    """Ordered collection of drinks, insertion order preserved."""

    def __init__(self, sort_key: Optional[SortKey] = None):
        self._drinks: list[Drink] = []
        self._sort_key = sort_key or default_key

    def add(self, name: str, category: str) -> Drink:
        """Append a new drink and return it.

        Raises:
            TypeError: ``name`` or ``category`` is not a string.
        """
        if not isinstance(name, str) or not isinstance(category, str):
            raise TypeError(
                f"name and category must be str, got {type(name).__name__} "
                f"and {type(category).__name__}"
            )
        drink = Drink(name=name, category=category)
        self._drinks.append(drink)
        return drink

    def remove(self, name: str) -> int:
        """Remove every drink named exactly ``name``. Returns how many went."""
        before = len(self._drinks)
        self._drinks = [d for d in self._drinks if d.name != name]
        return before - len(self._drinks)

    def list_by_category(self, category: str) -> list[Drink]:
        """Drinks whose category equals ``category``, sorted by name.

        Returns a new list; an unknown category gives an empty one.
        """
        matches = [d for d in self._drinks if d.category == category]
        matches.sort(key=lambda d: self._sort_key(d.name))
        return matches

    def names(self) -> list[str]:
        """Drink names in insertion order."""
        return [d.name for d in self._drinks]

    def categories(self) -> list[str]:
        """Distinct categories in first-seen order."""
        seen: dict[str, None] = {}
        for d in self._drinks:
            seen.setdefault(d.category, None)
        return list(seen)

    def __len__(self) -> int:
        return len(self._drinks)

    def __iter__(self) -> Iterator[Drink]:
        return iter(list(self._drinks))

    def __contains__(self, name: object) -> bool:
        return any(d.name == name for d in self._drinks)
