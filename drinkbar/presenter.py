"""User-facing wrapper around Inventory.

Every action writes its confirmation line verbatim to the output console's
stream. Status lines for --verbose go through a separate stderr rich console
so stdout stays exactly the menu transcript.
"""

from __future__ import annotations

from typing import Optional

from rich.console import Console
from rich.markup import escape

from drinkbar.inventory import Inventory
from drinkbar.models import Drink


class InventoryPresenter:
    """Runs inventory actions and reports them.

    Args:
        inventory: The session's inventory.
        console: Where confirmation lines go (stdout in the CLI).
        status: Optional stderr console for dimmed status lines; None keeps
            the presenter quiet.
    """

    def __init__(
        self,
        inventory: Inventory,
        console: Console,
        status: Optional[Console] = None,
    ):
        self.inventory = inventory
        self.console = console
        self.status = status

    def say(self, text: str = "", end: str = "\n") -> None:
        """Write text exactly as given to the output console's stream.

        Bypasses rich rendering: emoji codes, tabs and control characters
        in drink names must come back unchanged.
        """
        stream = self.console.file
        stream.write(text + end)
        stream.flush()

    def note(self, text: str) -> None:
        """Emit a status line when a status console is attached."""
        if self.status is not None:
            self.status.print(f"[dim]{escape(text)}[/dim]", highlight=False)

    def add_drink(self, name: str, category: str) -> Drink:
        drink = self.inventory.add(name, category)
        self.say(f'Drink "{name}" added to the system.')
        self.note(f"  add: {drink.to_dict()} ({len(self.inventory)} in inventory)")
        return drink

    def delete_drink(self, name: str) -> int:
        """Remove by name. The confirmation is printed even when nothing matched."""
        removed = self.inventory.remove(name)
        self.say(f'Drink "{name}" deleted from the system.')
        self.note(f"  delete: removed {removed} record(s) named {name!r}")
        return removed

    def sort_drinks_by_category(self, category: str) -> list[Drink]:
        drinks = self.inventory.list_by_category(category)
        self.say(f"Sorted Drinks (Category: {category}):")
        for drink in drinks:
            self.say(drink.name)
        self.note(f"  sort: {len(drinks)} match(es) for category {category!r}")
        return drinks
