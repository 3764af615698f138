"""Data classes for ReSHA."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class ProviderType(Enum):
    GITHUB = "github"
    GITLAB = "gitlab"
    GENERIC = "generic"


class AuthMethod(Enum):
    NONE = "none"
    TOKEN = "token"
    BASIC = "basic"


@dataclass(frozen=True)
class AuthConfig:
    """Credentials for a single lookup.

    Build it with :meth:`none`, :meth:`token_auth` or :meth:`basic`.
    Incomplete credentials are demoted to no authentication by
    :attr:`effective_method`.
    """

    method: AuthMethod = AuthMethod.NONE
    token: str = field(default="", repr=False)
    username: str = ""
    password: str = field(default="", repr=False)

    @classmethod
    def none(cls) -> AuthConfig:
        return cls()

    @classmethod
    def token_auth(cls, token: str) -> AuthConfig:
        return cls(method=AuthMethod.TOKEN, token=token)

    @classmethod
    def basic(cls, username: str, password: str) -> AuthConfig:
        return cls(method=AuthMethod.BASIC, username=username, password=password)

    @property
    def effective_method(self) -> AuthMethod:
        if self.method == AuthMethod.TOKEN and self.token:
            return AuthMethod.TOKEN
        if self.method == AuthMethod.BASIC and self.username and self.password:
            return AuthMethod.BASIC
        return AuthMethod.NONE


@dataclass(frozen=True)
class GitHubRepo:
    owner: str
    repo: str


@dataclass(frozen=True)
class GitLabProject:
    path: str  # unescaped, e.g. "group/sub/proj"
    escaped_path: str
