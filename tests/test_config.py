"""Tests for loading settings from the environment."""

import os
from unittest.mock import patch

import pytest

from config import DEFAULT_ISSUE_PATTERN, Settings
from exceptions import ConfigException

ENV_VARS = [
    "GITHUB_USER",
    "GITHUB_TOKEN",
    "OPENPR_BASE_BRANCH",
    "OPENPR_ISSUE_PATTERN",
    "OPENPR_REMOTE",
    "OPENPR_OWNER",
    "OPENPR_REPO",
    "OPENPR_HTTP_TIMEOUT",
    "GITHUB_API_URL",
]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def credentials(monkeypatch):
    monkeypatch.setenv("GITHUB_USER", "octocat")
    monkeypatch.setenv("GITHUB_TOKEN", "fake_github_token")


def test_defaults(credentials):
    settings = Settings.from_env()

    assert settings.user == "octocat"
    assert settings.token == "fake_github_token"
    assert settings.base_branch == "next"
    assert settings.issue_pattern == DEFAULT_ISSUE_PATTERN
    assert settings.remote == "origin"
    assert settings.owner is None and settings.repo is None
    assert settings.api_url == "https://api.github.com"
    assert settings.http_timeout is None


def test_overrides(credentials, monkeypatch):
    monkeypatch.setenv("OPENPR_BASE_BRANCH", "master")
    monkeypatch.setenv("OPENPR_OWNER", "acme")
    monkeypatch.setenv("OPENPR_REPO", "widgets")
    monkeypatch.setenv("OPENPR_HTTP_TIMEOUT", "2.5")
    monkeypatch.setenv("GITHUB_API_URL", "https://ghe.example.com/api/v3/")

    settings = Settings.from_env()

    assert settings.base_branch == "master"
    assert (settings.owner, settings.repo) == ("acme", "widgets")
    assert settings.http_timeout == 2.5
    assert settings.api_url == "https://ghe.example.com/api/v3"


@pytest.mark.parametrize("missing", ["GITHUB_USER", "GITHUB_TOKEN"])
def test_missing_credential(credentials, monkeypatch, missing):
    monkeypatch.delenv(missing)

    with pytest.raises(ConfigException, match=missing):
        Settings.from_env()


def test_dotenv_file_is_loaded(tmp_path):
    (tmp_path / ".env").write_text("GITHUB_USER=fromfile\nGITHUB_TOKEN=filetoken\n")

    with patch.dict(os.environ):
        settings = Settings.from_env(tmp_path)

    assert settings.user == "fromfile"
    assert settings.token == "filetoken"


def test_environment_wins_over_dotenv(tmp_path, credentials):
    (tmp_path / ".env").write_text("GITHUB_USER=fromfile\n")

    assert Settings.from_env(tmp_path).user == "octocat"


@pytest.mark.parametrize("pattern", [r"^\w+/\w+-\d+", r"(unclosed"])
def test_bad_issue_pattern(credentials, monkeypatch, pattern):
    monkeypatch.setenv("OPENPR_ISSUE_PATTERN", pattern)

    with pytest.raises(ConfigException):
        Settings.from_env()


def test_bad_timeout(credentials, monkeypatch):
    monkeypatch.setenv("OPENPR_HTTP_TIMEOUT", "soon")

    with pytest.raises(ConfigException):
        Settings.from_env()


def test_token_not_in_repr():
    assert "secret" not in repr(Settings(user="octocat", token="secret"))
