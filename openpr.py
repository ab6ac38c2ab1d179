#!/usr/bin/env python3

"""
openpr - Pull Request Assistant CLI

Main entry point for the openpr command-line tool. Reads the current branch,
last commit and remote from git, asks for confirmation, then opens a GitHub
pull request, assigns it to you and requests reviewers from your organization.

Requires GITHUB_USER and GITHUB_TOKEN in the environment or in a .env file at
the repository root.
"""

import argparse
import sys

from rich.console import Console
from rich.traceback import install

from clients.git import GitOperations
from commands.pr import PRCommand
from config import Settings
from exceptions import (
    ClientException,
    ConfigException,
    ForgeAPIException,
    OperatorAbort,
)

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_INTERRUPTED = 130


def exit_code_for(error: BaseException) -> int:
    """Map a terminal condition to the process exit code."""
    if isinstance(error, OperatorAbort):
        return EXIT_OK
    if isinstance(error, (KeyboardInterrupt, EOFError)):
        return EXIT_INTERRUPTED
    return EXIT_FAILURE


def report(console: Console, error: BaseException) -> None:
    """Print a user-facing explanation for a terminal condition."""
    if isinstance(error, ForgeAPIException):
        console.print("\nSomething went wrong, error message:", style="red")
        console.print(error.message, highlight=False, markup=False)
    elif isinstance(error, ConfigException):
        console.print(f"Configuration Error: {str(error)}", style="red", markup=False)
    elif isinstance(error, ClientException):
        console.print(f"Error: {str(error)}", style="red", markup=False)
    elif isinstance(error, (KeyboardInterrupt, EOFError)):
        console.print("\n\nCancelled by user", style="yellow")


def main():
    """Main function to open a pull request for the current branch."""
    parser = argparse.ArgumentParser(
        description="openpr - open a GitHub pull request for the current branch"
    )
    parser.parse_args()

    install(show_locals=False)
    console = Console()

    try:
        git = GitOperations()
        settings = Settings.from_env(git.get_git_root())
        command = PRCommand(settings, git=git, console=console)
        code = command.execute()
    except (OperatorAbort, ClientException, KeyboardInterrupt, EOFError) as e:
        report(console, e)
        code = exit_code_for(e)

    sys.exit(code)


if __name__ == "__main__":
    main()
