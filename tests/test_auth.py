"""
Tests for credential resolution
"""
import base64
import pytest

from zendesk_connector.exceptions import AuthenticationMissing
from zendesk_connector.utils.auth import (
    BasicCredentials,
    BearerCredentials,
    build_authorization_header,
    resolve_credentials,
)


def _decode_basic(header: str) -> str:
    scheme, encoded = header.split(" ", 1)
    assert scheme == "Basic"
    return base64.b64decode(encoded).decode("utf-8")


class TestResolveCredentials:
    """Test scheme selection"""

    def test_token_selects_basic(self):
        credentials = resolve_credentials(username="u", token="abc")
        assert isinstance(credentials, BasicCredentials)

    def test_token_wins_over_oauth(self):
        """API token takes precedence even when an OAuth token is present"""
        credentials = resolve_credentials(username="u", token="abc", oauth_token="xyz")
        assert isinstance(credentials, BasicCredentials)
        assert _decode_basic(credentials.authorization_header()) == "u/token:abc"

    def test_empty_token_falls_back_to_oauth(self):
        credentials = resolve_credentials(username="u", token="", oauth_token="xyz")
        assert isinstance(credentials, BearerCredentials)

    def test_missing_token_uses_oauth(self):
        assert build_authorization_header(oauth_token="xyz") == "Bearer xyz"

    @pytest.mark.parametrize("token,oauth_token", [(None, None), ("", ""), (None, ""), ("", None)])
    def test_no_credentials(self, token, oauth_token):
        with pytest.raises(AuthenticationMissing) as exc_info:
            resolve_credentials(username="u", token=token, oauth_token=oauth_token)
        assert "Authentication details are missing" in str(exc_info.value)


class TestAuthorizationHeader:
    """Test header encoding"""

    def test_basic_header_format(self):
        header = build_authorization_header(username="agent@acme.com", token="t0k3n")
        expected = base64.b64encode(b"agent@acme.com/token:t0k3n").decode("ascii")
        assert header == f"Basic {expected}"

    def test_basic_header_without_username(self):
        header = build_authorization_header(token="t0k3n")
        assert _decode_basic(header) == "/token:t0k3n"

    def test_scheme_names(self):
        assert BasicCredentials(token="a").scheme == "Basic"
        assert BearerCredentials(oauth_token="b").scheme == "Bearer"
