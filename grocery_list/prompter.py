"""Interactive prompting used by catalog and shopping-list operations.

Operations that need an answer from a person take a ``Prompter`` argument
instead of reading the console directly, so tests can pass a scripted one.
"""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING, Protocol, TextIO

if TYPE_CHECKING:
    from collections.abc import Callable, Sequence

logger = logging.getLogger(__name__)


class Prompter(Protocol):
    """Minimal interface for asking a person questions."""

    def ask_choice(self, prompt: str, options: Sequence[str]) -> str:
        """Ask the user to pick one of ``options``.

        Args:
            prompt: Question to show.
            options: Allowed answers.

        Returns:
            The chosen option, always one of ``options``.
        """
        ...  # pragma: no cover

    def ask_text(self, prompt: str) -> str:
        """Ask the user for free text.

        Args:
            prompt: Question to show.

        Returns:
            The answer with surrounding whitespace removed.
        """
        ...  # pragma: no cover


class ConsolePrompter:
    """Prompter that writes questions to a stream and reads typed answers.

    Args:
        input_fn: Function returning one line of user input.
        stream: Where prompts are written; stderr by default so stdout
            stays clean for command output.
    """

    def __init__(
        self,
        input_fn: Callable[[], str] = input,
        stream: TextIO | None = None,
    ) -> None:
        """Initialize the prompter.

        Args:
            input_fn: Function returning one line of user input.
            stream: Output stream for prompts; defaults to ``sys.stderr``.
        """
        self._input = input_fn
        self._stream = stream if stream is not None else sys.stderr

    def _say(self, text: str) -> None:
        print(text, file=self._stream, flush=True)

    def ask_text(self, prompt: str) -> str:
        """Show ``prompt`` and return the stripped answer."""
        self._say(prompt)
        return self._input().strip()

    def ask_choice(self, prompt: str, options: Sequence[str]) -> str:
        """Show numbered ``options`` until a valid one is picked.

        Accepts either the option's 1-based number or its text.

        Args:
            prompt: Question to show above the options.
            options: Allowed answers.

        Returns:
            The chosen option.
        """
        if not options:
            raise ValueError("ask_choice needs at least one option")
        menu = "\n".join(f"  *{i}* {option}" for i, option in enumerate(options, 1))
        while True:
            answer = self.ask_text(f"{prompt}\n{menu}")
            if answer.isdigit() and 1 <= int(answer) <= len(options):
                return options[int(answer) - 1]
            if answer in options:
                return answer
            logger.debug("Rejected answer %r for choice %r", answer, prompt)
            self._say("Please re-enter: pick a number or one of the options.")
