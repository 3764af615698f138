"""Provider interface and the helpers every API-backed provider shares."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections.abc import Callable, Iterable
from dataclasses import dataclass

import requests

from ReSHA.errors import (
    OP_API,
    REASON_API_ERROR,
    REASON_BAD_RESPONSE,
    REASON_NETWORK,
    REASON_NOT_FOUND,
    GitError,
)
from ReSHA.models import AuthConfig
from ReSHA.url_parser import is_host_supported

logger = logging.getLogger(__name__)

USER_AGENT = "Watchtower-Git-Monitor"

Timeout = float | tuple[float, float] | None


class RepoProvider(ABC):
    """Interface for Git hosting service providers."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Short identifier, e.g. "github"."""

    @property
    @abstractmethod
    def hosts(self) -> frozenset[str]:
        """Hostnames this provider claims. Empty for the wildcard provider."""

    @property
    @abstractmethod
    def wildcard(self) -> bool:
        """True if this provider supports every URL regardless of host."""

    @abstractmethod
    def is_supported(self, repo_url: str) -> bool:
        """Return True if this provider can handle *repo_url*."""

    @abstractmethod
    def get_latest_commit(
        self,
        repo_url: str,
        ref: str,
        auth: AuthConfig | None = None,
        *,
        timeout: Timeout = None,
    ) -> str:
        """Resolve *ref* to a commit hash.

        Args:
            repo_url: Repository URL as configured by the user.
            ref: Branch, tag or commit prefix. Inserted into the API URL as-is.
            auth: Credentials; incomplete credentials are ignored.
            timeout: Deadline for the HTTP round-trip, passed to requests.
                This is the only way to cut a lookup short; an in-flight
                request cannot be cancelled from another thread.

        Raises:
            GitError: On any failure. ``err.url`` is always *repo_url*.
        """


@dataclass(frozen=True)
class HostMatcher:
    """Exact host matching shared by providers through composition."""

    hosts: frozenset[str] = frozenset()
    wildcard: bool = False

    @classmethod
    def of(cls, hosts: Iterable[str], wildcard: bool = False) -> HostMatcher:
        return cls(frozenset(h.lower() for h in hosts), wildcard)

    def matches(self, repo_url: str) -> bool:
        if self.wildcard:
            return True
        return is_host_supported(repo_url, self.hosts)


def _no_auth(request: requests.PreparedRequest) -> requests.PreparedRequest:
    # A set auth stops requests from looking up netrc credentials
    return request


def send(
    session: requests.Session,
    api_url: str,
    repo_url: str,
    *,
    headers: dict[str, str],
    auth: tuple[str, str] | None = None,
    timeout: Timeout = None,
) -> requests.Response:
    """Issue the single GET of a lookup. Transport failures become GitError.

    Only the headers and *auth* given here authenticate the request;
    credentials from ~/.netrc are never picked up.
    """
    logger.debug("GET %s", api_url)
    try:
        resp = session.get(
            api_url, headers=headers, auth=auth or _no_auth, timeout=timeout
        )
    except requests.RequestException as exc:
        logger.debug("Request for %s failed: %s", repo_url, exc)
        raise GitError(OP_API, repo_url, REASON_NETWORK, cause=exc) from exc
    logger.debug("%s answered %d", api_url, resp.status_code)
    return resp


def commit_from_response(
    resp: requests.Response,
    repo_url: str,
    field: str,
    error_detail: Callable[[requests.Response], str],
) -> str:
    """Classify *resp* and return the commit hash held in *field*.

    *error_detail* turns an error response into the text that follows
    "API error: "; it must not raise.
    """
    if resp.status_code == 404:
        raise GitError(OP_API, repo_url, REASON_NOT_FOUND)
    if resp.status_code != 200:
        raise GitError(OP_API, repo_url, REASON_API_ERROR + error_detail(resp))

    try:
        return decode_commit_field(resp, field)
    except ValueError as exc:
        raise GitError(OP_API, repo_url, REASON_BAD_RESPONSE, cause=exc) from exc


def decode_commit_field(resp: requests.Response, field: str) -> str:
    """Read string *field* from a JSON object body.

    A missing or null field yields "". Invalid JSON, a body that is not an
    object, or a non-string value raise ValueError.
    """
    data = resp.json()
    if not isinstance(data, dict):
        raise ValueError(f"expected a JSON object, got {type(data).__name__}")

    value = data.get(field)
    if value is None:
        return ""
    if not isinstance(value, str):
        raise ValueError(f"field {field!r} is not a string")
    return value
