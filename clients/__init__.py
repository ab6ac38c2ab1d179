#!/usr/bin/env python3

"""
Client modules for external integrations.

This package contains the client classes for the services openpr talks to:
- GitOperations: local git repository queries
- GitHubAPI: GitHub REST calls for pull requests
"""

from .git import GitOperations
from .github import GitHubAPI

__all__ = ["GitOperations", "GitHubAPI"]
