"""Interactive menu loop for drinkbar.

Session flow per iteration:
1. Print the banner and the four numbered options
2. Read one line for the choice
3. Add / Delete / Sort read their own prompts, then run through the presenter
4. Exit, end of input, or (in one-shot mode) any completed action ends the session
5. Anything else prints the invalid-choice message and shows the menu again
"""

from __future__ import annotations

import sys
from typing import Callable, Optional, TextIO

from drinkbar.models import MENU_LABELS, MenuChoice
from drinkbar.presenter import InventoryPresenter

BANNER = " Bun venit pe acest sistem de gestionare a bauturilor! "
MENU_HEADER = "       Menu    "

PROMPT_CHOICE = "Enter your choice: "
PROMPT_ADD_NAME = "Enter the name of the drink: "
PROMPT_ADD_CATEGORY = "Enter the category of the drink: "
PROMPT_DELETE_NAME = "Enter the name of the drink to delete: "
PROMPT_SORT_CATEGORY = "Enter the category to sort drinks: "

INVALID_CHOICE = "Invalid choice. Please try again."


class SessionClosed(RuntimeError):
    """Input was requested from a session that has already been closed."""


class MenuSession:
    """One interactive session over a line-oriented input stream.

    The session owns its input stream from construction until ``close()``,
    which runs exactly once whether the session ended by choice 4, end of
    input, or a completed one-shot action. Use it as a context manager.

    Args:
        presenter: Wraps the session's inventory.
        stdin: Line source. Defaults to ``sys.stdin`` looked up at construction
            time so test harnesses that swap it are honoured.
        one_shot: End after the first completed action instead of returning
            to the menu.
    """

    def __init__(
        self,
        presenter: InventoryPresenter,
        stdin: Optional[TextIO] = None,
        one_shot: bool = False,
    ):
        self.presenter = presenter
        self.one_shot = one_shot
        self._stdin: Optional[TextIO] = stdin if stdin is not None else sys.stdin
        self.actions_run = 0
        self._handlers: dict[MenuChoice, Callable[[], None]] = {
            MenuChoice.ADD: self._add_flow,
            MenuChoice.DELETE: self._delete_flow,
            MenuChoice.SORT: self._sort_flow,
        }

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    @property
    def closed(self) -> bool:
        return self._stdin is None

    def close(self) -> None:
        """Release the input stream. Later calls are no-ops.

        The stream itself is left open: it usually is the process's stdin,
        which this session borrowed rather than opened.
        """
        if self._stdin is None:
            return
        self._stdin = None
        inventory = self.presenter.inventory
        self.presenter.note(
            f"session closed ({len(inventory)} drink(s), {len(inventory.categories())} category(ies))"
        )

    def __enter__(self) -> MenuSession:
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    # ------------------------------------------------------------------
    # Input
    # ------------------------------------------------------------------

    def ask(self, prompt: str) -> str:
        """Print ``prompt`` and read one line, newline stripped.

        Raises:
            SessionClosed: The session was already closed.
            EOFError: The input stream is exhausted.
        """
        if self._stdin is None:
            raise SessionClosed("menu session is closed")
        self.presenter.say(prompt, end="")
        line = self._stdin.readline()
        if not line:
            # Finish the dangling prompt line
            self.presenter.say()
            raise EOFError("end of input")
        return line.rstrip("\r\n")

    # ------------------------------------------------------------------
    # Flows
    # ------------------------------------------------------------------

    def show_menu(self) -> None:
        self.presenter.say(BANNER)
        self.presenter.say(MENU_HEADER)
        for choice, label in MENU_LABELS.items():
            self.presenter.say(f"{choice.value}. {label}")

    def _add_flow(self) -> None:
        name = self.ask(PROMPT_ADD_NAME)
        category = self.ask(PROMPT_ADD_CATEGORY)
        self.presenter.add_drink(name, category)

    def _delete_flow(self) -> None:
        name = self.ask(PROMPT_DELETE_NAME)
        self.presenter.delete_drink(name)

    def _sort_flow(self) -> None:
        category = self.ask(PROMPT_SORT_CATEGORY)
        self.presenter.sort_drinks_by_category(category)

    def step(self) -> bool:
        """Show the menu, read one choice and act on it.

        Returns:
            True if the session should keep going, False if it is over.

        Raises:
            EOFError: Input ran out at one of the prompts.
        """
        self.show_menu()
        text = self.ask(PROMPT_CHOICE)
        choice = MenuChoice.parse(text)

        if choice is None:
            self.presenter.say(INVALID_CHOICE)
            self.presenter.note(f"invalid choice {text!r}")
            return True
        if choice == MenuChoice.EXIT:
            return False

        self._handlers[choice]()
        self.actions_run += 1
        return not self.one_shot

    def run(self) -> int:
        """Loop until the session ends, then close it.

        Returns:
            Number of completed add/delete/sort actions.
        """
        mode = "one-shot" if self.one_shot else "loop"
        self.presenter.note(f"session started ({mode})")
        try:
            while self.step():
                pass
        except EOFError:
            self.presenter.note("end of input")
        finally:
            self.close()
        return self.actions_run
