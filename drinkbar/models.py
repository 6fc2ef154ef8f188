"""Data models for the drinkbar inventory.

Drink record and MenuChoice enum: the typed structures that flow through
inventory → presenter → menu.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import Optional


class MenuChoice(str, Enum):
    """Numbered menu options, keyed by the exact text the user types."""

    ADD = "1"
    DELETE = "2"
    SORT = "3"
    EXIT = "4"

    @classmethod
    def parse(cls, text: str) -> Optional[MenuChoice]:
        """Map one input line to a choice, or None when it matches no option."""
        try:
            return cls(text)
        except ValueError:
            return None


MENU_LABELS: dict[MenuChoice, str] = {
    MenuChoice.ADD: "Add Drink",
    MenuChoice.DELETE: "Delete Drink",
    MenuChoice.SORT: "Sort Drinks by Category",
    MenuChoice.EXIT: "Exit",
}


@dataclass
class Drink:
    """One inventory item.

    ``name`` is the key used for deletion and is not unique. ``category`` is a
    free-text label and may be empty.
    """

    name: str
    category: str = ""

    def clone(self) -> Drink:
        """Return an equal but independent copy."""
        return replace(self)

    def to_dict(self) -> dict:
        """Serialize to a JSON-compatible dict."""
        return {"name": self.name, "category": self.category}

    @classmethod
    def from_dict(cls, d: dict) -> Drink:
        """Build a Drink from a plain dict; a missing category becomes ''."""
        return cls(name=d.get("name", ""), category=d.get("category", ""))
