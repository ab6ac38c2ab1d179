#!/usr/bin/env python3

"""
Reviewer Selection Module

Interactive multi-select over organization members. Each member gets a fixed
ordinal; typing an ordinal toggles that member, an empty line finishes.
"""

from dataclasses import dataclass
from typing import Iterable, List

from rich.console import Console
from rich.markup import escape

from input_utils import LineInput


@dataclass
class Candidate:
    """An organization member that can be requested as a reviewer."""

    username: str
    ordinal: int
    selected: bool = False

    def toggle(self) -> None:
        self.selected = not self.selected

    def render(self) -> str:
        line = f"[magenta]{self.ordinal}[/magenta] - {escape(self.username)}"
        if self.selected:
            return f"[cyan]{line}[/cyan]"
        return line


def build_candidates(usernames: Iterable[str]) -> List[Candidate]:
    """Number candidates in the order they were retrieved."""
    return [
        Candidate(username=username, ordinal=ordinal)
        for ordinal, username in enumerate(usernames)
    ]


def toggle_ordinal(candidates: List[Candidate], ordinal: int) -> bool:
    """Toggle the candidate with the given ordinal. Returns False if none matches."""
    for candidate in candidates:
        if candidate.ordinal == ordinal:
            candidate.toggle()
            return True
    return False


def selected_usernames(candidates: List[Candidate]) -> List[str]:
    return [c.username for c in candidates if c.selected]


class ReviewerSelector:
    """Run the reviewer picking loop."""

    def __init__(self, line_input: LineInput, console: Console):
        self.line_input = line_input
        self.console = console

    def show(self, candidates: List[Candidate]) -> None:
        self.console.print("\n** Reviewers **", style="blue")
        for candidate in candidates:
            self.console.print(candidate.render(), highlight=False)

    def select(self, candidates: List[Candidate]) -> List[str]:
        """
        Let the operator toggle candidates until an empty line is entered.

        Args:
            candidates: Candidates in display order

        Returns:
            list: Usernames of the selected candidates, in ordinal order
        """
        while True:
            self.show(candidates)
            try:
                option = self.line_input.read_line("\nAdd a reviewer (empty to proceed): ")
            except EOFError:
                # closed stdin ends the selection like an empty line
                self.console.print()
                break

            if not option:
                break

            if not (option.isascii() and option.isdigit()):
                self.console.print("Invalid option, it must be a valid number", style="red")
                continue

            if not toggle_ordinal(candidates, int(option)):
                self.console.print("Reviewer not found", style="red")

        return selected_usernames(candidates)
