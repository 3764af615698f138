"""Wildcard provider that hands every repository to a clone-based client."""

from __future__ import annotations

from ReSHA.errors import OP_GENERIC, REASON_DELEGATE, GitError
from ReSHA.models import AuthConfig, ProviderType
from ReSHA.providers.base import HostMatcher, RepoProvider, Timeout


class GenericProvider(RepoProvider):
    """Supports every URL and never resolves anything itself.

    Its host set is empty, yet :meth:`is_supported` is always true; register
    it last so it only catches URLs no host-specific provider claims.
    """

    def __init__(self):
        self._matcher = HostMatcher(wildcard=True)

    @property
    def name(self) -> str:
        return ProviderType.GENERIC.value

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
        raise GitError(OP_GENERIC, repo_url, REASON_DELEGATE)
