# src/todo_tracker/cli/prompts.py

from __future__ import annotations

import logging
import sys
from collections.abc import Callable, Mapping

logger = logging.getLogger(__name__)

InputFn = Callable[[str], str]
OutputFn = Callable[[str], None]

CLEAR_SEQ = "\033[2J\033[H"


def _print_line(text: str) -> None:
    print(text)


class Console:
    """
    Line-oriented terminal I/O used by the menus.

    input_fn/output_fn default to input()/print() and are swapped out in tests.
    """

    def __init__(
        self,
        input_fn: InputFn | None = None,
        output_fn: OutputFn | None = None,
        *,
        clear_screen: bool = True,
    ) -> None:
        self._input = input_fn or input
        self._output = output_fn or _print_line
        self._clear_screen = clear_screen

    def say(self, text: str = "") -> None:
        self._output(text)

    def clear(self) -> None:
        if not self._clear_screen:
            return
        try:
            if sys.stdout.isatty():
                sys.stdout.write(CLEAR_SEQ)
                sys.stdout.flush()
        except (OSError, ValueError):
            logger.debug("Screen clear failed.", exc_info=True)

    def ask_raw(self, question: str) -> str:
        """Prompt and return the line untouched (a lone space stays a space)."""
        return self._input(f"> {question} ")

    def ask(self, question: str) -> str:
        return self.ask_raw(question).strip()

    def pause(self) -> None:
        self.say("\nPress ENTER to continue...")
        self.ask("")

    def menu(
        self,
        title: str,
        options: Mapping[str, str],
        can_go_back: bool = True,
        back_label: str = "Back",
    ) -> str | None:
        """
        Show numbered options and keep asking until a valid key is entered.

        Returns the chosen key, or None when the user picks the back/exit entry.
        """
        self.clear()
        self.say(f"\n--- {title} ---")

        shown = {str(k): v for k, v in options.items()}
        back_key: str | None = None
        if can_go_back:
            back_key = "9" if "0" in shown else "0"
            shown[back_key] = back_label

        for key, label in shown.items():
            self.say(f"[{key}] {label}")

        choice = self.ask("What would you like to do?")
        while choice not in shown:
            self.say("\n[ERROR] Invalid option. Please pick one of the options shown.")
            choice = self.ask("What would you like to do?")

        if choice == back_key:
            return None
        return choice
