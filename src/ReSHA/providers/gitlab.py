"""GitLab REST API provider."""

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
from ReSHA.url_parser import parse_gitlab_repo_url


class GitLabProvider(RepoProvider):
    """Provider for gitlab.com repositories using the v4 REST API.

    Only token authentication is sent (as ``Private-Token``); basic
    credentials are not used by this provider.
    """

    API_BASE = "https://gitlab.com/api/v4"

    def __init__(self, session: requests.Session | None = None):
        self.session = session or requests.Session()
        self._matcher = HostMatcher.of(["gitlab.com"])

    @property
    def name(self) -> str:
        return ProviderType.GITLAB.value

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
        project = parse_gitlab_repo_url(repo_url)
        api_url = (
            f"{self.API_BASE}/projects/{project.escaped_path}"
            f"/repository/commits/{ref}"
        )

        headers = {"User-Agent": USER_AGENT}
        auth = auth or AuthConfig.none()
        if auth.effective_method == AuthMethod.TOKEN:
            headers["Private-Token"] = auth.token

        with send(
            self.session, api_url, repo_url, headers=headers, timeout=timeout
        ) as resp:
            return commit_from_response(resp, repo_url, "id", _error_body)


def _error_body(resp: requests.Response) -> str:
    # GitLab error bodies are surfaced verbatim
    return resp.content.decode("utf-8", errors="replace")
