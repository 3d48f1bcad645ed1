"""
Salesforce OAuth2 client.

Exposes the Salesforce provider (endpoint URLs, response checks, token and
resource owner mapping), the generic OAuth2Client that runs the authorization
code flow, the error types, and the FastAPI auth router factory.
"""

from .client import OAuth2Client, generate_state
from .config import ClientSettings, ProviderConfig
from .errors import (
    IdentityProviderError,
    InvalidArgumentError,
    MalformedResponseError,
    MissingGrantParameterError,
    OAuthClientError,
)
from .resource_owner import SalesforceResourceOwner
from .router import create_auth_router
from .salesforce import SalesforceProvider
from .token import AccessToken, create_access_token
from .transport import HttpxTransport, TransportResponse

__all__ = [
    "OAuth2Client",
    "generate_state",
    "ClientSettings",
    "ProviderConfig",
    "OAuthClientError",
    "InvalidArgumentError",
    "MissingGrantParameterError",
    "IdentityProviderError",
    "MalformedResponseError",
    "SalesforceResourceOwner",
    "create_auth_router",
    "SalesforceProvider",
    "AccessToken",
    "create_access_token",
    "HttpxTransport",
    "TransportResponse",
]
