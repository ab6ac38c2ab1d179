#!/usr/bin/env python3

import subprocess
from pathlib import Path

from exceptions import GitOperationsException


class GitOperations:
    """Handle all Git-related operations."""

    @staticmethod
    def ensure_git_repo() -> bool:
        """Check if we're in a git repository."""
        try:
            subprocess.run(
                ["git", "rev-parse", "--git-dir"],
                capture_output=True,
                text=True,
                check=True,
            )
            return True
        except (subprocess.CalledProcessError, FileNotFoundError):
            return False

    @staticmethod
    def get_git_root() -> Path:
        """Get the root directory of the current git repository."""
        try:
            result = subprocess.run(
                ["git", "rev-parse", "--show-toplevel"],
                capture_output=True,
                text=True,
                check=True,
            )
            return Path(result.stdout.strip())
        except (subprocess.CalledProcessError, FileNotFoundError):
            # If not in a git repo, fall back to current directory
            return Path.cwd()

    @staticmethod
    def _run(args: list, description: str) -> str:
        try:
            result = subprocess.run(
                ["git"] + args,
                capture_output=True,
                text=True,
                check=True,
            )
            return result.stdout.strip()
        except subprocess.CalledProcessError as e:
            raise GitOperationsException(
                f"Failed to get {description}: {e.stderr.strip() or str(e)}"
            )
        except FileNotFoundError:
            raise GitOperationsException("git executable not found in PATH")

    @staticmethod
    def get_remote_url(remote: str = "origin") -> str:
        """Get the URL configured for a remote."""
        return GitOperations._run(
            ["config", "--get", f"remote.{remote}.url"], f"url of remote '{remote}'"
        )

    @staticmethod
    def get_current_branch() -> str:
        """Get the name of the current git branch."""
        branch = GitOperations._run(["branch", "--show-current"], "current branch")
        if not branch:
            raise GitOperationsException("HEAD is detached, check out a branch first")
        return branch

    @staticmethod
    def get_last_commit_subject() -> str:
        """Get the subject line of the last commit."""
        return GitOperations._run(
            ["log", "-1", "--pretty=format:%s"], "last commit subject"
        )
