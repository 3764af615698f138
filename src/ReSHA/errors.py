"""Structured error raised by every provider operation."""

from __future__ import annotations

OP_API = "api"
OP_PARSE = "parse"
OP_GENERIC = "generic"

REASON_NETWORK = "network error"
REASON_NOT_FOUND = "repository or reference not found"
REASON_BAD_RESPONSE = "failed to parse API response"
REASON_API_ERROR = "API error: "
REASON_DELEGATE = "generic provider delegates to go-git"
REASON_UNSUPPORTED = "unsupported Git provider"

_NETWORK_REASONS = frozenset({REASON_NETWORK, "timeout"})


class GitError(Exception):
    """Raised when a commit lookup fails.

    ``url`` is always the repository URL the caller passed in, never the
    derived API URL.
    """

    def __init__(
        self,
        op: str,
        url: str,
        reason: str,
        cause: BaseException | None = None,
    ):
        self.op = op
        self.url = url
        self.reason = reason
        self.cause = cause
        super().__init__(op, url, reason, cause)

    def __str__(self) -> str:
        if self.cause is not None:
            return f"git {self.op} {self.url}: {self.reason}: {self.cause}"
        return f"git {self.op} {self.url}: {self.reason}"

    def __repr__(self) -> str:
        return (
            f"GitError(op={self.op!r}, url={self.url!r}, "
            f"reason={self.reason!r}, cause={self.cause!r})"
        )

    @property
    def is_network_error(self) -> bool:
        return self.reason in _NETWORK_REASONS

    @property
    def is_delegation(self) -> bool:
        """True when the caller should fall back to a clone-based Git client."""
        return self.op == OP_GENERIC
