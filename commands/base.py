#!/usr/bin/env python3

"""
Base Command Module

Provides the abstract base class for openpr commands.
"""

from abc import ABC, abstractmethod


class BaseCommand(ABC):
    """Base class for all commands."""

    @abstractmethod
    def execute(self) -> int:
        """Execute the command and return the process exit code."""
        pass
