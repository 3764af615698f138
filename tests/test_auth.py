"""Tests for auth module."""

from ReSHA.auth import auth_from_credentials
from ReSHA.models import AuthConfig, AuthMethod


class TestAuthFromCredentials:
    def test_token_wins(self):
        result = auth_from_credentials(token="tok", username="u", password="p")
        assert result == AuthConfig.token_auth("tok")

    def test_basic(self):
        assert auth_from_credentials(username="u", password="p") == AuthConfig.basic("u", "p")

    def test_username_without_password(self):
        assert auth_from_credentials(username="u").method == AuthMethod.NONE

    def test_nothing(self):
        assert auth_from_credentials() == AuthConfig.none()

    def test_whitespace_token_ignored(self):
        assert auth_from_credentials(token="  \n") == AuthConfig.none()

    def test_token_stripped(self):
        assert auth_from_credentials(token=" ghp_abc\n").token == "ghp_abc"

    def test_password_kept_as_given(self):
        assert auth_from_credentials(username="u", password=" p ").password == " p "

