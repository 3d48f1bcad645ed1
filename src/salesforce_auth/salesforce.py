"""
Salesforce OAuth provider.

Builds the Salesforce login endpoints from a configurable base domain
(login.salesforce.com, test.salesforce.com or a My Domain / community URL),
checks Salesforce error responses and maps token and identity responses to
AccessToken and SalesforceResourceOwner.

Salesforce returns the identity URL of the logged-in user in the token
response ("id"); that URL is used as-is to fetch the user's details.
"""

import logging
from typing import Any, Mapping, Optional, Sequence

from salesforce_auth.config import ProviderConfig
from salesforce_auth.errors import IdentityProviderError, MalformedResponseError
from salesforce_auth.resource_owner import SalesforceResourceOwner
from salesforce_auth.token import AccessToken, create_access_token
from salesforce_auth.transport import TransportResponse
from salesforce_auth.urls import is_absolute_url, with_query

logger = logging.getLogger(__name__)

AUTHORIZE_PATH = "/services/oauth2/authorize"
TOKEN_PATH = "/services/oauth2/token"
LOGOUT_PATH = "/apex/IdentityLogout"
PRE_AUTH_PATH = "/IdentityCookie"

# Recognized pre-auth parameters, in output order: (request key, query key, must be a URL).
PRE_AUTH_PARAMS = (
    ("redirect_uri", "retUrl", True),
    ("cookie_redirect_uri", "cRetUrl", True),
    ("locale", "locale", False),
)


class SalesforceProvider:
    """OAuth provider for Salesforce identity (authorization code flow)."""

    name: str = "salesforce"

    def __init__(self, config: Optional[ProviderConfig] = None):
        self.config = config or ProviderConfig()

    @property
    def domain(self) -> str:
        return self.config.domain

    def set_domain(self, domain) -> "SalesforceProvider":
        """
        Point the provider at another base domain.

        The value is coerced with str(); InvalidArgumentError is raised if that
        fails. The config is replaced, not mutated, so callers holding the old
        config keep a consistent view. Not safe to call while requests that
        build URLs are in flight.
        """
        self.config = self.config.with_domain(domain)
        logger.debug("Salesforce domain set to %s", self.config.domain)
        return self

    @property
    def default_scopes(self) -> Sequence[str]:
        return list(self.config.default_scopes)

    @property
    def scope_separator(self) -> str:
        return self.config.scope_separator

    def authorization_url(self) -> str:
        return self.domain + AUTHORIZE_PATH

    def token_url(self) -> str:
        return self.domain + TOKEN_PATH

    def logout_url(self, params: Optional[Mapping[str, str]] = None) -> str:
        """IdentityLogout URL; retUrl is added only when redirect_uri is an absolute URL."""
        params = params or {}
        pairs = []
        redirect_uri = params.get("redirect_uri")
        if is_absolute_url(redirect_uri):
            pairs.append(("retUrl", redirect_uri))
        return with_query(self.domain + LOGOUT_PATH, pairs)

    def pre_auth_url(self, params: Optional[Mapping[str, str]] = None) -> str:
        """
        IdentityCookie URL used to set the login cookie before authorization.

        Parameters are emitted in the order redirect_uri (retUrl),
        cookie_redirect_uri (cRetUrl), locale. Redirect values that are not
        absolute URLs are skipped, unknown keys are ignored.
        """
        params = params or {}
        pairs = []
        for key, query_key, must_be_url in PRE_AUTH_PARAMS:
            if key not in params or params[key] is None:
                continue
            value = params[key]
            if must_be_url and not is_absolute_url(value):
                logger.debug("Skipping %s: not an absolute URL", key)
                continue
            pairs.append((query_key, str(value)))
        return with_query(self.domain + PRE_AUTH_PATH, pairs)

    def resource_owner_details_url(self, token: AccessToken) -> str:
        """The identity URL Salesforce returned with the token."""
        if not token.resource_owner_id:
            raise MalformedResponseError("Access token has no resource owner identity URL")
        return token.resource_owner_id

    def check_response(self, response: TransportResponse) -> None:
        """
        Raise IdentityProviderError for status >= 400.

        Salesforce error bodies are a list of {"message": ..., "errorCode": ...};
        the first message is used, otherwise the HTTP reason phrase.
        """
        if response.status_code < 400:
            return
        data = response.body
        message = None
        if isinstance(data, list) and data and isinstance(data[0], Mapping):
            message = data[0].get("message")
        if not message:
            message = response.reason
        logger.warning("Salesforce returned %s: %s", response.status_code, message)
        raise IdentityProviderError(message, response.status_code, data)

    def create_access_token(self, response: Mapping[str, Any]) -> AccessToken:
        return create_access_token(response)

    def create_resource_owner(self, response: Mapping[str, Any], token: AccessToken) -> SalesforceResourceOwner:
        return SalesforceResourceOwner(response)
