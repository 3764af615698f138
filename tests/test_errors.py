"""Tests for GitError and AuthConfig."""

import pickle

from ReSHA.errors import GitError
from ReSHA.models import AuthConfig, AuthMethod


class TestGitError:
    def test_str_without_cause(self):
        err = GitError("api", "https://github.com/o/r", "repository or reference not found")
        assert str(err) == "git api https://github.com/o/r: repository or reference not found"

    def test_str_with_cause(self):
        cause = ValueError("Expecting value")
        err = GitError("api", "https://github.com/o/r", "failed to parse API response", cause)
        assert str(err) == (
            "git api https://github.com/o/r: failed to parse API response: Expecting value"
        )
        assert err.cause is cause

    def test_network_classification(self):
        assert GitError("api", "u", "network error").is_network_error
        assert GitError("api", "u", "timeout").is_network_error
        assert not GitError("api", "u", "API error: boom").is_network_error

    def test_pickle_round_trip(self):
        err = GitError("api", "https://github.com/o/r", "network error", ValueError("reset"))
        restored = pickle.loads(pickle.dumps(err))

        assert (restored.op, restored.url, restored.reason) == (
            "api", "https://github.com/o/r", "network error"
        )
        assert isinstance(restored.cause, ValueError)
        assert str(restored) == str(err)

    def test_pickle_without_cause(self):
        err = GitError("parse", "https://github.com/x", "URL path must have at least 2 parts: /x")
        restored = pickle.loads(pickle.dumps(err))
        assert restored.cause is None
        assert str(restored) == str(err)

    def test_delegation(self):
        assert GitError("generic", "u", "generic provider delegates to go-git").is_delegation
        assert not GitError("parse", "u", "bad").is_delegation


class TestAuthConfig:
    def test_default_is_none(self):
        assert AuthConfig().effective_method == AuthMethod.NONE
        assert AuthConfig.none() == AuthConfig()

    def test_token(self):
        assert AuthConfig.token_auth("abc").effective_method == AuthMethod.TOKEN

    def test_empty_token_demoted(self):
        assert AuthConfig.token_auth("").effective_method == AuthMethod.NONE

    def test_basic(self):
        assert AuthConfig.basic("u", "p").effective_method == AuthMethod.BASIC

    def test_incomplete_basic_demoted(self):
        assert AuthConfig.basic("u", "").effective_method == AuthMethod.NONE
        assert AuthConfig.basic("", "p").effective_method == AuthMethod.NONE

    def test_repr_hides_secrets(self):
        text = repr(AuthConfig.token_auth("s3cret")) + repr(AuthConfig.basic("u", "hunter2"))
        assert "s3cret" not in text
        assert "hunter2" not in text
