#!/usr/bin/env python3

"""
PR Command Module

Opens a pull request for the current branch: builds the draft, asks for
confirmation, creates the PR, assigns it to the operator and requests
reviewers from the organization.
"""

from typing import Callable, Optional

from rich.console import Console
from rich.markup import escape

from .base import BaseCommand
from .reviewers import ReviewerSelector, build_candidates
from clients.git import GitOperations
from clients.github import GitHubAPI
from config import Settings
from draft import MetadataCollector, PullRequestDraft, parse_remote_url, pr_link
from exceptions import (
    ClientException,
    GitOperationsException,
    OperatorAbort,
    TransportException,
)
from input_utils import LineInput


class PRCommand(BaseCommand):
    """Create a pull request for the current branch."""

    def __init__(
        self,
        settings: Settings,
        git: Optional[GitOperations] = None,
        line_input: Optional[LineInput] = None,
        console: Optional[Console] = None,
        github_factory: Optional[Callable[[Settings], GitHubAPI]] = None,
    ):
        """Initialize command with required dependencies."""
        self.settings = settings
        self.git = git or GitOperations()
        self.console = console or Console()
        self.line_input = line_input or LineInput(self.console)
        self.github_factory = github_factory or self._default_github
        self.draft: Optional[PullRequestDraft] = None

    @staticmethod
    def _default_github(settings: Settings) -> GitHubAPI:
        return GitHubAPI(
            settings.token, api_url=settings.api_url, timeout=settings.http_timeout
        )

    def execute(self) -> int:
        """Run the whole workflow. Returns the exit code of a finished run."""
        if not self.git.ensure_git_repo():
            raise GitOperationsException("Not in a git repository")

        self.draft = self.build_draft()
        self.show_draft(self.draft)
        self.confirm()

        # no remote call may happen before the operator confirmed
        github = self.github_factory(self.settings)

        self.create_pr(github, self.draft)
        self.assign_self(github, self.draft)
        self.request_reviews(github, self.draft)

        self.console.print(f"\nPR: {self.draft.link}", highlight=False)
        return 0

    def resolve_target(self):
        """Return (base, repo), preferring configured overrides over the remote URL."""
        if self.settings.owner and self.settings.repo:
            return self.settings.owner, self.settings.repo

        remote_url = self.git.get_remote_url(self.settings.remote)
        base, repo = parse_remote_url(remote_url)
        return self.settings.owner or base, self.settings.repo or repo

    def build_draft(self) -> PullRequestDraft:
        base, repo = self.resolve_target()
        branch = self.git.get_current_branch()
        last_commit = self.git.get_last_commit_subject()

        collector = MetadataCollector(
            self.line_input, self.console, self.settings.issue_pattern
        )
        return collector.collect(branch, last_commit, base, repo)

    def show_draft(self, draft: PullRequestDraft) -> None:
        self.console.print("\n** Review PR **", style="blue")
        rows = [
            ("Title", draft.title),
            ("Body", draft.body),
            ("Issue", draft.linked_issue),
            ("Remote branch", draft.branch),
            ("Target branch", self.settings.base_branch),
            ("Remote", f"{draft.base}/{draft.repo}"),
        ]
        for label, value in rows:
            self.console.print(f"{label}: [cyan]{escape(value)}[/cyan]", highlight=False)

    def confirm(self) -> None:
        """
        Block until the operator types exactly 'y' or 'n'.

        Raises:
            OperatorAbort: If the operator answered 'n'
        """
        prompt = "\nProceed? (y/n): "
        while True:
            answer = self.line_input.read_line(prompt).strip()
            if answer == "y":
                return
            if answer == "n":
                self.console.print("\nClosing...")
                raise OperatorAbort()
            self.console.print(
                "Please type [green]y[/green] for [green]yes[/green] "
                "and [red]n[/red] for [red]no[/red]"
            )
            prompt = ""

    def create_pr(self, github: GitHubAPI, draft: PullRequestDraft) -> None:
        """
        Create the pull request and record its number and link on the draft.

        Raises:
            ForgeAPIException: If GitHub rejected the pull request
            TransportException: If the request could not be completed
        """
        self.console.print("\nCreating PR...")
        created = github.create_pull_request(
            draft.base,
            draft.repo,
            draft.title,
            draft.branch,
            self.settings.base_branch,
            draft.rendered_body,
        )
        draft.mark_created(created["number"], pr_link(created["html_url"]))

        self.console.print(
            f"\n[green]PR created successfully:[/green] {draft.link}", highlight=False
        )

    def assign_self(self, github: GitHubAPI, draft: PullRequestDraft) -> bool:
        """Assign the PR to the operator. Failures are reported, not raised."""
        self.console.print("\nAssigning to you...")
        try:
            github.add_assignees(draft.base, draft.repo, draft.number, [self.settings.user])
        except (ClientException, TransportException) as e:
            self.console.print(f"\nError when assigning: {escape(str(e))}", style="red")
            return False

        self.console.print("\nAssigned successfully", style="green")
        return True

    def request_reviews(self, github: GitHubAPI, draft: PullRequestDraft) -> bool:
        """
        Let the operator pick reviewers among the org members and request them.

        Every failure here is reported and swallowed: the PR already exists.

        Returns:
            bool: True if reviewers were requested or none were needed
        """
        try:
            members = github.list_org_members(draft.base)
        except (ClientException, TransportException) as e:
            self.console.print(
                f"\nError fetching collaborators, ignoring... ({escape(str(e))})", style="red"
            )
            return False

        selector = ReviewerSelector(self.line_input, self.console)
        reviewers = selector.select(build_candidates(members))

        if not reviewers:
            self.console.print("\nNo reviewers to request")
            return True

        try:
            github.request_reviewers(draft.base, draft.repo, draft.number, reviewers, [])
        except (ClientException, TransportException) as e:
            self.console.print(f"\nFailed to request reviewers: {escape(str(e))}", style="red")
            return False

        self.console.print("\nReviewers requested successfully", style="green")
        return True
