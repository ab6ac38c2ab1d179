#!/usr/bin/env python3

"""
Configuration Module

Runtime settings for openpr. Values come from the environment, optionally
seeded by a .env file in the git repository root. Variables already set in
the environment take precedence over the .env file.
"""

import os
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from exceptions import ConfigException

GITHUB_USER_VAR = "GITHUB_USER"
GITHUB_TOKEN_VAR = "GITHUB_TOKEN"

DEFAULT_API_URL = "https://api.github.com"
DEFAULT_BASE_BRANCH = "next"
DEFAULT_ISSUE_PATTERN = r"^\w+/(\w+-\d+)"
DEFAULT_REMOTE = "origin"


@dataclass(frozen=True)
class Settings:
    """Everything the PR workflow needs to know before it starts."""

    user: str
    token: str
    base_branch: str = DEFAULT_BASE_BRANCH
    issue_pattern: str = DEFAULT_ISSUE_PATTERN
    remote: str = DEFAULT_REMOTE
    owner: Optional[str] = None
    repo: Optional[str] = None
    api_url: str = DEFAULT_API_URL
    http_timeout: Optional[float] = None

    def __post_init__(self):
        try:
            compiled = re.compile(self.issue_pattern)
        except re.error as e:
            raise ConfigException(
                f"Invalid OPENPR_ISSUE_PATTERN '{self.issue_pattern}': {str(e)}"
            )
        if compiled.groups < 1:
            raise ConfigException(
                "OPENPR_ISSUE_PATTERN must contain a capture group for the issue key"
            )

    @classmethod
    def from_env(cls, project_root: Optional[Path] = None) -> "Settings":
        """
        Build settings from environment variables.

        Args:
            project_root: Directory holding an optional .env file

        Returns:
            Settings: Validated settings

        Raises:
            ConfigException: If a credential is missing or a value is invalid
        """
        if project_root is not None:
            load_dotenv(project_root / ".env")

        user = os.getenv(GITHUB_USER_VAR)
        if not user:
            raise ConfigException(
                f"Couldn't get {GITHUB_USER_VAR} environment variable. "
                "Please set it to your GitHub login."
            )

        token = os.getenv(GITHUB_TOKEN_VAR)
        if not token:
            raise ConfigException(
                f"Couldn't get {GITHUB_TOKEN_VAR} environment variable. "
                "Please ensure the variable is available and it is a valid token."
            )

        timeout = os.getenv("OPENPR_HTTP_TIMEOUT")
        try:
            http_timeout = float(timeout) if timeout else None
        except ValueError:
            raise ConfigException(
                f"OPENPR_HTTP_TIMEOUT must be a number of seconds, got '{timeout}'"
            )

        return cls(
            user=user,
            token=token,
            base_branch=os.getenv("OPENPR_BASE_BRANCH") or DEFAULT_BASE_BRANCH,
            issue_pattern=os.getenv("OPENPR_ISSUE_PATTERN") or DEFAULT_ISSUE_PATTERN,
            remote=os.getenv("OPENPR_REMOTE") or DEFAULT_REMOTE,
            owner=os.getenv("OPENPR_OWNER") or None,
            repo=os.getenv("OPENPR_REPO") or None,
            api_url=(os.getenv("GITHUB_API_URL") or DEFAULT_API_URL).rstrip("/"),
            http_timeout=http_timeout,
        )

    def __repr__(self) -> str:
        # keep the token out of tracebacks
        return (
            f"Settings(user={self.user!r}, base_branch={self.base_branch!r}, "
            f"owner={self.owner!r}, repo={self.repo!r}, api_url={self.api_url!r})"
        )
