"""
Numbered menu screen.

Each option pairs a label with a zero-argument action. An action returns
True to close the menu itself, which is how "Exit" ends the session.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, List, Optional

from record_tracker.activities.abstract import AbstractActivity, parse_int
from record_tracker.console import Console

DEFAULT_PROMPT = "> "


@dataclass(frozen=True)
class MenuOption:
    label: str
    invoke: Callable[[], bool]


class MenuActivity(AbstractActivity):
    """Prints a title and numbered options, then dispatches 1-based selections."""

    def __init__(self, console: Console, title: str, prompt: str = DEFAULT_PROMPT) -> None:
        super().__init__(console)
        self.title = title
        self._prompt = prompt
        self._options: List[MenuOption] = []

    @property
    def prompt(self) -> str:
        return self._prompt

    @property
    def options(self) -> List[MenuOption]:
        return list(self._options)

    def add_option(
        self,
        option: MenuOption | str,
        invoke: Optional[Callable[[], bool]] = None,
    ) -> MenuOption:
        """Append an option, given either a `MenuOption` or a label and action."""
        if not isinstance(option, MenuOption):
            if invoke is None:
                raise ValueError(f"Menu option '{option}' needs an action")
            option = MenuOption(label=option, invoke=invoke)
        self._options.append(option)
        return option

    def print_menu(self) -> None:
        for index, option in enumerate(self._options, start=1):
            self.console.write(f"{index}. {option.label}")

    def on_start(self) -> None:
        self.console.write(self.title)
        self.console.write("\n")
        self.print_menu()
        self.console.write()

    def handle_input(self, line: str) -> bool:
        choice = parse_int(line)
        if choice is None:
            self.console.write(f"Invalid option {line}")
            return False

        if not 1 <= choice <= len(self._options):
            self.console.write(f"Invalid option {choice}")
            return False

        return bool(self._options[choice - 1].invoke())


__all__ = ["DEFAULT_PROMPT", "MenuActivity", "MenuOption"]
