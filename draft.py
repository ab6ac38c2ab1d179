#!/usr/bin/env python3

"""
Draft Module

Builds the pull request draft from local git state and operator answers:
remote URL parsing, issue key extraction, title/body collection and the
rendered PR body.
"""

import re
from dataclasses import dataclass
from typing import Optional, Tuple
from urllib.parse import urlsplit

from rich.console import Console
from rich.markup import escape

from config import DEFAULT_ISSUE_PATTERN
from exceptions import MalformedRemoteUrlException
from input_utils import LineInput

SEGMENT_REGEX = r"^[\w.-]+$"

DEFAULT_BODY = "Title"

BODY_TEMPLATE = """\
### What does this PR do?

{body}

<!--
Please include a summary of the change and/or which issue is fixed. Please also include relevant motivation and context. List any dependencies that are required for this change, also provide (if appropriate) any evidence - screenshots, gifs, logs, etc.

Oh, remember to follow conventional commits (https://conventionalcommits.org) on pull request title ;)
-->

---

**Related issue:** {issue}
"""


@dataclass
class PullRequestDraft:
    """The pull request as confirmed by the operator, before and after creation."""

    branch: str
    title: str
    body: str
    linked_issue: str
    base: str
    repo: str
    number: Optional[int] = None
    link: Optional[str] = None

    @property
    def rendered_body(self) -> str:
        return render_body(self.body, self.linked_issue)

    @property
    def created(self) -> bool:
        return self.number is not None

    def mark_created(self, number: int, link: str) -> None:
        """Record the remote number and link. Allowed exactly once."""
        if self.created:
            raise ValueError(f"Pull request already created as #{self.number}")
        self.number = number
        self.link = link


def parse_remote_url(remote_url: str) -> Tuple[str, str]:
    """
    Extract the owner and repository name from a git remote URL.

    Both ``git@host:org/repo.git`` and ``https://host/org/repo.git`` forms
    are supported, with or without the ``.git`` suffix.

    Returns:
        tuple: (base, repo)

    Raises:
        MalformedRemoteUrlException: If either part can't be found
    """
    url = remote_url.strip()

    # only the path names owner and repo, never the host
    if "://" in url:
        path = urlsplit(url).path
    elif ":" in url:
        path = url.split(":", 1)[1]
    else:
        path = url

    segments = [segment for segment in path.split("/") if segment]

    repo = segments[-1] if segments else ""
    if repo.endswith(".git"):
        repo = repo[: -len(".git")]
    if not re.match(SEGMENT_REGEX, repo):
        raise MalformedRemoteUrlException(
            f"Failed to get the repo name from remote url: {remote_url}"
        )

    if len(segments) < 2 or not re.match(SEGMENT_REGEX, segments[-2]):
        raise MalformedRemoteUrlException(
            f"Failed to get the user/org name from remote url: {remote_url}"
        )

    return segments[-2], repo


def extract_issue_key(branch: str, pattern: str = DEFAULT_ISSUE_PATTERN) -> str:
    """Return the issue key encoded in a branch name like ``feature/ABC-123``, or ''."""
    match = re.search(pattern, branch)
    if not match:
        return ""
    return match.group(1) or ""


def render_body(body: str, issue: str) -> str:
    """Render the full PR description."""
    return BODY_TEMPLATE.format(body=body, issue=issue)


def pr_link(html_url: str) -> str:
    """Rebuild a PR URL from scheme, host and path, dropping query and fragment."""
    parts = urlsplit(html_url)
    return f"{parts.scheme}://{parts.hostname}{parts.path}"


class MetadataCollector:
    """Ask the operator for the PR title, body and linked issue."""

    def __init__(
        self,
        line_input: LineInput,
        console: Console,
        issue_pattern: str = DEFAULT_ISSUE_PATTERN,
    ):
        self.line_input = line_input
        self.console = console
        self.issue_pattern = issue_pattern

    def _ask_with_default(self, label: str, default: str, what: str) -> str:
        self.console.print(f"{label}: [magenta]{escape(default)}[/magenta]", highlight=False)
        answer = self.line_input.read_line(
            f"Leave it blank to use the {what} above or type a new one: ", style="default"
        )
        return answer.strip() or default

    def ask_title(self, default: str) -> str:
        return self._ask_with_default("PR title", default, "title")

    def ask_body(self, default: str = DEFAULT_BODY) -> str:
        self.console.print()
        return self._ask_with_default("PR body", default, "body")

    def ask_issue(self, branch: str) -> str:
        """Take the issue key from the branch name, or ask for one."""
        issue = extract_issue_key(branch, self.issue_pattern)
        if issue:
            return issue

        self.console.print(
            "\nCouldn't get the issue from the branch name. "
            "Please provide one or leave it empty",
            style="red",
        )
        return self.line_input.read_line("Issue: ", style="default").strip()

    def collect(
        self, branch: str, last_commit: str, base: str, repo: str
    ) -> PullRequestDraft:
        """Run the prompts in order and return the finished draft."""
        self.console.print()
        title = self.ask_title(last_commit)
        linked_issue = self.ask_issue(branch)
        body = self.ask_body()

        return PullRequestDraft(
            branch=branch,
            title=title,
            body=body,
            linked_issue=linked_issue,
            base=base,
            repo=repo,
        )
