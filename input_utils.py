#!/usr/bin/env python3

from typing import Optional

from rich.console import Console


class LineInput:
    """Read whole lines from the terminal.

    Every prompt in openpr goes through an instance of this class so the
    workflow can be driven by a scripted source in tests.
    """

    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console()

    def read_line(self, prompt: str = "", style: str = "yellow") -> str:
        """
        Show a prompt and read one line.

        Args:
            prompt: Text displayed before the cursor
            style: Rich style applied to the prompt

        Returns:
            str: The line typed by the user, without surrounding whitespace

        Raises:
            EOFError: If stdin is closed
        """
        if prompt:
            self.console.print(prompt, style=style, end="", markup=False, highlight=False)
        return input().strip()
