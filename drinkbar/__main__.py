"""CLI for the drinkbar inventory manager.

Usage:
    python -m drinkbar                     # Menu loop until "4" or end of input
    python -m drinkbar --one-shot          # Stop after the first completed action
    python -m drinkbar --locale ro_RO.UTF-8  # Sort names with a system locale
    python -m drinkbar --verbose           # Status lines on stderr
"""

from __future__ import annotations

from typing import Optional

import typer
from rich.console import Console

from drinkbar.collation import describe, make_sort_key
from drinkbar.config import ConfigError, Settings
from drinkbar.inventory import Inventory
from drinkbar.menu import MenuSession
from drinkbar.presenter import InventoryPresenter

app = typer.Typer(
    name="drinkbar",
    help="In-memory drink inventory manager with a text menu",
    add_completion=False,
)
console = Console(stderr=True)


@app.command()
def main(
    one_shot: Optional[bool] = typer.Option(
        None, "--one-shot/--loop",
        help="Stop after the first completed action (default: loop). Env: DRINKBAR_ONE_SHOT",
    ),
    locale_name: Optional[str] = typer.Option(
        None, "--locale", "-l",
        help="LC_COLLATE locale for sorting names (default: built-in). Env: DRINKBAR_LOCALE",
    ),
    verbose: Optional[bool] = typer.Option(
        None, "--verbose/--quiet",
        help="Print status lines on stderr. Env: DRINKBAR_VERBOSE",
    ),
) -> None:
    """Run the interactive drink menu."""
    try:
        settings = Settings.from_env().override(
            one_shot=one_shot, locale_name=locale_name, verbose=verbose,
        )
        sort_key = make_sort_key(settings.locale_name)
    except ConfigError as e:
        console.print(f"[red]Error:[/red] {e}", highlight=False)
        raise typer.Exit(2)

    out = Console(highlight=False, soft_wrap=True)
    presenter = InventoryPresenter(
        Inventory(sort_key=sort_key),
        out,
        status=console if settings.verbose else None,
    )
    presenter.note(f"collation: {describe(settings.locale_name)}")

    with MenuSession(presenter, one_shot=settings.one_shot) as session:
        session.run()


if __name__ == "__main__":
    app()
