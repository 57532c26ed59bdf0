"""Line-oriented prompt transport.

The workflow engine talks to the operator through a PromptTransport: it
shows one prompt, then waits for one line. Only one prompt is ever
outstanding.
"""

from typing import Protocol

from rich.console import Console

from ..errors import PromptCancelled


class PromptTransport(Protocol):
    """Interactive line channel used by the workflow engine."""

    def show(self, text: str) -> None:
        """Display a prompt without a trailing newline."""
        ...

    def next_line(self) -> str:
        """Block until a line of input arrives.

        Raises:
            PromptCancelled: If the operator interrupts (Ctrl+C) or input ends
        """
        ...


class ConsoleTransport:
    """PromptTransport over a Rich console and stdin.

    Uses simple stdin via input(), matching the rest of the CLI.
    """

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console()

    def show(self, text: str) -> None:
        # Prompts contain "[answer]" hints, so markup must stay off
        self.console.print(
            text, end="", markup=False, highlight=False, emoji=False, soft_wrap=True
        )

    def next_line(self) -> str:
        try:
            return input()
        except (KeyboardInterrupt, EOFError):
            raise PromptCancelled("Input cancelled by operator") from None
