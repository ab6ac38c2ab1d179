#!/usr/bin/env python3

"""Command package for openpr."""

from .base import BaseCommand
from .pr import PRCommand
from .reviewers import Candidate, ReviewerSelector

__all__ = [
    "BaseCommand",
    "Candidate",
    "PRCommand",
    "ReviewerSelector",
]
