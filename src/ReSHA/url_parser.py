"""Repository URL parsing and host matching."""

from __future__ import annotations

import re
from collections.abc import Collection
from urllib.parse import ParseResult, quote, unquote, urlparse

from ReSHA.errors import OP_PARSE, GitError
from ReSHA.models import GitHubRepo, GitLabProject

# Minimum number of path segments (owner/repo) in a GitHub repository URL
MIN_GITHUB_PATH_PARTS = 2

# Characters url.PathEscape-style segment escaping leaves untouched,
# besides the unreserved set that quote() always keeps.
_PATH_SEGMENT_SAFE = "$&+:=@"

_CONTROL_CHARS = re.compile(r"[\x00-\x1f\x7f]")


def _parse(url: str) -> ParseResult:
    """Parse *url*, raising ValueError for input that is not a URL at all."""
    if _CONTROL_CHARS.search(url):
        raise ValueError("invalid control character in URL")
    return urlparse(url)


def _host(parsed: ParseResult) -> str:
    # netloc may carry user:password@ in front of host[:port]
    return parsed.netloc.rpartition("@")[2].lower()


def url_host(url: str) -> str:
    """Return the lowercased ``host[:port]`` of *url*, or "" if there is none."""
    try:
        parsed = _parse(url)
    except ValueError:
        return ""
    return _host(parsed)


def is_host_supported(url: str, hosts: Collection[str]) -> bool:
    """Exact, case-insensitive host match. Subdomains never match."""
    host = url_host(url)
    return bool(host) and host in hosts


def _repo_path(url: str) -> str:
    try:
        parsed = _parse(url)
    except ValueError as exc:
        raise GitError(
            OP_PARSE, url, f"failed to parse repository URL: {exc}", cause=exc
        ) from exc
    return unquote(parsed.path)


def parse_github_repo_url(url: str) -> GitHubRepo:
    """Extract owner and repository name from a GitHub URL.

    Supported formats:
      - https://github.com/owner/repo
      - https://github.com/owner/repo.git
      - https://github.com/owner/repo/anything/else  (extra segments ignored)
    """
    path = _repo_path(url)
    parts = path.strip("/").split("/")
    if len(parts) < MIN_GITHUB_PATH_PARTS:
        raise GitError(
            OP_PARSE, url, f"URL path must have at least 2 parts: {path}"
        )

    return GitHubRepo(owner=parts[0], repo=parts[1].removesuffix(".git"))


def parse_gitlab_repo_url(url: str) -> GitLabProject:
    """Extract the full project path from a GitLab URL.

    Nested groups are kept: ``https://gitlab.com/group/sub/proj.git`` yields
    ``group/sub/proj``, escaped as ``group%2Fsub%2Fproj`` for the API.
    An empty path is not rejected here; the API answers it with a 404.
    """
    path = _repo_path(url).strip("/").removesuffix(".git")
    return GitLabProject(path=path, escaped_path=quote(path, safe=_PATH_SEGMENT_SAFE))
