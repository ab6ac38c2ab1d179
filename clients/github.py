#!/usr/bin/env python3

from typing import Dict, List, Optional

import requests

from exceptions import ForgeAPIException, TransportException


class GitHubAPI:
    """Handle the GitHub REST calls used to open a pull request."""

    API_VERSION = "2022-11-28"
    MEMBERS_PAGE_SIZE = 100

    def __init__(
        self,
        token: str,
        api_url: str = "https://api.github.com",
        timeout: Optional[float] = None,
        session: Optional[requests.Session] = None,
    ):
        self.api_url = api_url.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()
        self.session.headers.update(
            {
                "Authorization": f"Bearer {token}",
                "Accept": "application/vnd.github+json",
                "X-GitHub-Api-Version": self.API_VERSION,
            }
        )

    def _request(self, method: str, path: str, **kwargs):
        """
        Make a request to the GitHub API.

        Args:
            method (str): HTTP method
            path (str): Path below the API root, starting with '/'
            **kwargs: Passed through to requests (json, params)

        Returns:
            The decoded JSON payload, or None for empty responses

        Raises:
            ForgeAPIException: If GitHub answered with an error message
            TransportException: If the request failed or the answer is unreadable
        """
        url = f"{self.api_url}{path}"
        try:
            response = self.session.request(method, url, timeout=self.timeout, **kwargs)
        except requests.exceptions.RequestException as e:
            raise TransportException(f"{method} {url} failed: {str(e)}") from e

        if not response.ok:
            raise self._forge_error(response)

        if not response.content:
            return None
        try:
            return response.json()
        except ValueError as e:
            raise TransportException(
                f"{method} {url} returned a non-JSON body (status {response.status_code})"
            ) from e

    @staticmethod
    def _forge_error(response) -> Exception:
        """Turn an error response into the matching exception."""
        try:
            data = response.json()
        except ValueError:
            return TransportException(
                f"GitHub returned status {response.status_code} without a readable body: "
                f"{response.text[:200]}"
            )

        if not isinstance(data, dict) or "message" not in data:
            return TransportException(
                f"GitHub returned status {response.status_code} with unexpected body: {data}"
            )

        message = data["message"]
        details = [
            error.get("message", "")
            for error in data.get("errors", [])
            if isinstance(error, dict) and error.get("message")
        ]
        if details:
            message = f"{message}: {', '.join(details)}"
        return ForgeAPIException(message, status=response.status_code)

    def create_pull_request(
        self, owner: str, repo: str, title: str, head: str, base: str, body: str
    ) -> Dict:
        """
        Open a pull request.

        Returns:
            dict: {"number": int, "html_url": str}
        """
        data = self._request(
            "POST",
            f"/repos/{owner}/{repo}/pulls",
            json={"title": title, "head": head, "base": base, "body": body},
        )
        try:
            return {"number": int(data["number"]), "html_url": str(data["html_url"])}
        except (TypeError, KeyError, ValueError) as e:
            raise TransportException(
                f"Pull request response is missing number or html_url: {data}"
            ) from e

    def add_assignees(self, owner: str, repo: str, number: int, assignees: List[str]) -> None:
        """Add assignees to an issue or pull request."""
        self._request(
            "POST",
            f"/repos/{owner}/{repo}/issues/{number}/assignees",
            json={"assignees": assignees},
        )

    def list_org_members(self, org: str, per_page: int = MEMBERS_PAGE_SIZE) -> List[str]:
        """Return the logins on the first page of an organization's members."""
        data = self._request("GET", f"/orgs/{org}/members", params={"per_page": per_page})
        if not isinstance(data, list):
            raise TransportException(f"Unexpected members payload: {data}")
        return [
            member["login"]
            for member in data
            if isinstance(member, dict) and member.get("login")
        ]

    def request_reviewers(
        self,
        owner: str,
        repo: str,
        number: int,
        reviewers: List[str],
        team_reviewers: Optional[List[str]] = None,
    ) -> None:
        """Request reviews on a pull request."""
        self._request(
            "POST",
            f"/repos/{owner}/{repo}/pulls/{number}/requested_reviewers",
            json={"reviewers": reviewers, "team_reviewers": team_reviewers or []},
        )
