"""Ordered provider registry that routes a repository URL to its provider."""

from __future__ import annotations

import logging
from collections.abc import Iterable

import requests

from ReSHA.errors import OP_GENERIC, REASON_UNSUPPORTED, GitError
from ReSHA.models import AuthConfig
from ReSHA.providers.base import RepoProvider, Timeout
from ReSHA.providers.generic import GenericProvider
from ReSHA.providers.github import GitHubProvider
from ReSHA.providers.gitlab import GitLabProvider

logger = logging.getLogger(__name__)


class ProviderRegistry:
    """Providers in registration order; the first one supporting a URL wins.

    Host-specific providers must be registered before any wildcard
    provider, otherwise the wildcard would shadow them.
    """

    def __init__(self, providers: Iterable[RepoProvider] = ()):
        self._providers: list[RepoProvider] = []
        for provider in providers:
            self.register(provider)

    @property
    def providers(self) -> tuple[RepoProvider, ...]:
        return tuple(self._providers)

    def register(self, provider: RepoProvider) -> None:
        for existing in self._providers:
            if existing.name == provider.name:
                raise ValueError(f"Provider already registered: {provider.name}")
            if existing.wildcard:
                raise ValueError(
                    f"Cannot register {provider.name!r} after wildcard "
                    f"provider {existing.name!r}; it would never be selected."
                )
        self._providers.append(provider)

    def find(self, repo_url: str) -> RepoProvider | None:
        """Return the first provider supporting *repo_url*, or None."""
        for provider in self._providers:
            if provider.is_supported(repo_url):
                return provider
        return None

    def resolve(
        self,
        repo_url: str,
        ref: str,
        auth: AuthConfig | None = None,
        *,
        timeout: Timeout = None,
    ) -> str:
        """Resolve *ref* through the provider selected for *repo_url*.

        Whatever the provider returns or raises is passed through unchanged.
        A GitError with ``op == "generic"`` means no API shortcut exists and
        the caller should use its clone-based client.
        """
        provider = self.find(repo_url)
        if provider is None:
            raise GitError(OP_GENERIC, repo_url, REASON_UNSUPPORTED)

        logger.debug("Resolving %s@%s via %s", repo_url, ref, provider.name)
        return provider.get_latest_commit(repo_url, ref, auth, timeout=timeout)


def default_registry(session: requests.Session | None = None) -> ProviderRegistry:
    """GitHub, GitLab, then the generic wildcard, sharing one HTTP session."""
    session = session or requests.Session()
    return ProviderRegistry([
        GitHubProvider(session),
        GitLabProvider(session),
        GenericProvider(),
    ])
