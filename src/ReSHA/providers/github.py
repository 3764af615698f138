"""GitHub REST API provider."""

from __future__ import annotations

import requests

from ReSHA.models import AuthConfig, AuthMethod, ProviderType
from ReSHA.providers.base import (
    USER_AGENT,
    HostMatcher,
    RepoProvider,
    Timeout,
    commit_from_response,
    send,
)
from ReSHA.url_parser import parse_github_repo_url


class GitHubProvider(RepoProvider):
    """Provider for github.com repositories using the REST API."""

    API_BASE = "https://api.github.com"

    def __init__(self, session: requests.Session | None = None):
        self.session = session or requests.Session()
        self._matcher = HostMatcher.of(["github.com"])

    @property
    def name(self) -> str:
        return ProviderType.GITHUB.value

    @property
    def hosts(self) -> frozenset[str]:
        return self._matcher.hosts

    @property
    def wildcard(self) -> bool:
        return self._matcher.wildcard

    def is_supported(self, repo_url: str) -> bool:
        return self._matcher.matches(repo_url)

    def get_latest_commit(
        self,
        repo_url: str,
        ref: str,
        auth: AuthConfig | None = None,
        *,
        timeout: Timeout = None,
    ) -> str:
        repo = parse_github_repo_url(repo_url)
        api_url = f"{self.API_BASE}/repos/{repo.owner}/{repo.repo}/commits/{ref}"

        headers = {
            "Accept": "application/vnd.github.v3+json",
            "User-Agent": USER_AGENT,
        }
        basic = None
        auth = auth or AuthConfig.none()
        method = auth.effective_method
        if method == AuthMethod.TOKEN:
            headers["Authorization"] = f"token {auth.token}"
        elif method == AuthMethod.BASIC:
            basic = (auth.username, auth.password)

        with send(
            self.session, api_url, repo_url,
            headers=headers, auth=basic, timeout=timeout,
        ) as resp:
            return commit_from_response(resp, repo_url, "sha", _error_message)


def _error_message(resp: requests.Response) -> str:
    """Return ``message`` from a GitHub error body, or "" if there is none."""
    try:
        data = resp.json()
    except ValueError:
        return ""
    if isinstance(data, dict) and isinstance(data.get("message"), str):
        return data["message"]
    return ""
