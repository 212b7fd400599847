"""
Zendesk credential resolution

Two schemes are supported:
- Basic: base64("<email>/token:<api token>")
- Bearer: OAuth access token

An API token always wins over an OAuth token when both are present.
"""
import base64
from typing import ClassVar, Optional, Union

from pydantic import BaseModel, ConfigDict

from zendesk_connector.exceptions import AuthenticationMissing
from zendesk_connector.utils.logger import get_logger

logger = get_logger(__name__)


class BasicCredentials(BaseModel):
    """Email + API token credentials"""
    model_config = ConfigDict(frozen=True)

    scheme: ClassVar[str] = "Basic"

    username: Optional[str] = None
    token: str

    def authorization_header(self) -> str:
        # Omitted username encodes as empty
        raw = f"{self.username or ''}/token:{self.token}"
        return "Basic " + base64.b64encode(raw.encode("utf-8")).decode("ascii")


class BearerCredentials(BaseModel):
    """OAuth access token credentials"""
    model_config = ConfigDict(frozen=True)

    scheme: ClassVar[str] = "Bearer"

    oauth_token: str

    def authorization_header(self) -> str:
        return f"Bearer {self.oauth_token}"


Credentials = Union[BasicCredentials, BearerCredentials]


def resolve_credentials(
    username: Optional[str] = None,
    token: Optional[str] = None,
    oauth_token: Optional[str] = None
) -> Credentials:
    """
    Pick the credential scheme for a request

    Args:
        username: Zendesk user email (only used with token)
        token: Zendesk API token
        oauth_token: OAuth access token

    Returns:
        BasicCredentials if token is non-empty, otherwise BearerCredentials

    Raises:
        AuthenticationMissing: If both token and oauth_token are empty
    """
    if token:
        return BasicCredentials(username=username, token=token)

    if oauth_token:
        return BearerCredentials(oauth_token=oauth_token)

    logger.warning("No Zendesk API token or OAuth token provided")
    raise AuthenticationMissing()


def build_authorization_header(
    username: Optional[str] = None,
    token: Optional[str] = None,
    oauth_token: Optional[str] = None
) -> str:
    """Authorization header value for the resolved credentials"""
    return resolve_credentials(username, token, oauth_token).authorization_header()
