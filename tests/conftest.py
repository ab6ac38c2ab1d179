"""Shared fixtures for openpr tests."""

from unittest.mock import Mock

import pytest

from clients.git import GitOperations
from clients.github import GitHubAPI
from config import Settings
from fakes import make_console


@pytest.fixture
def console():
    return make_console()


@pytest.fixture
def settings():
    return Settings(user="octocat", token="fake_github_token")


@pytest.fixture
def git():
    """GitOperations double for a checkout of acme/widgets on feat/PROJ-42."""
    git = Mock(spec=GitOperations)
    git.ensure_git_repo.return_value = True
    git.get_remote_url.return_value = "git@github.com:acme/widgets.git"
    git.get_current_branch.return_value = "feat/PROJ-42"
    git.get_last_commit_subject.return_value = "feat: add widget sprockets"
    return git


@pytest.fixture
def github():
    github = Mock(spec=GitHubAPI)
    github.create_pull_request.return_value = {
        "number": 7,
        "html_url": "https://github.com/acme/widgets/pull/7?tab=files#top",
    }
    github.list_org_members.return_value = ["alice", "bob", "carol"]
    return github
