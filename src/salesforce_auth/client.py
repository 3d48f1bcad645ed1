"""
Generic OAuth2 authorization code client.

OAuth2Client runs the flow (authorization URL, code exchange, token refresh,
resource owner lookup) for any OAuthProvider, sending requests through an
HttpTransport. Every response goes through provider.check_response before a
token or resource owner is built from it. Errors from the transport are not
caught, so timeouts and cancellation reach the caller unchanged.
"""

import logging
from typing import Any, Iterable, Optional

from authlib.common.security import generate_token
from authlib.common.urls import add_params_to_uri

from salesforce_auth.config import ClientSettings
from salesforce_auth.grants import AuthorizationCodeGrant, RefreshTokenGrant, get_grant
from salesforce_auth.protocol import HttpTransport, OAuthProvider
from salesforce_auth.token import AccessToken
from salesforce_auth.transport import HttpxTransport

logger = logging.getLogger(__name__)

TOKEN_REQUEST_HEADERS = {
    "Content-Type": "application/x-www-form-urlencoded",
    "Accept": "application/json",
}


def generate_state(length: int = 32) -> str:
    """Random CSRF state for the authorization request."""
    return generate_token(length)


class OAuth2Client:
    """Authorization code flow against an OAuthProvider."""

    def __init__(
        self,
        provider: OAuthProvider,
        settings: ClientSettings,
        transport: Optional[HttpTransport] = None,
    ):
        self.provider = provider
        self.settings = settings
        self.transport = transport or HttpxTransport()

    def get_authorization_url(self, state: str, scopes: Optional[Iterable[str]] = None, **extra) -> str:
        """
        Build the URL that sends the user to the provider's login page.

        Args:
            state: CSRF state, generated by the caller (see generate_state) and
                checked again on the callback.
            scopes: Scopes to request; the provider defaults when None.
            extra: Additional query parameters (e.g. prompt, login_hint).

        Returns:
            The authorization URL with its query string.
        """
        scopes = list(self.provider.default_scopes if scopes is None else scopes)
        params = [
            ("response_type", "code"),
            ("client_id", self.settings.client_id),
        ]
        if self.settings.redirect_uri:
            params.append(("redirect_uri", self.settings.redirect_uri))
        params.append(("state", state))
        if scopes:
            params.append(("scope", self.provider.scope_separator.join(scopes)))
        params.extend((k, str(v)) for k, v in extra.items() if v is not None)
        return add_params_to_uri(self.provider.authorization_url(), params)

    def _grant_defaults(self) -> dict:
        return {
            "client_id": self.settings.client_id,
            "client_secret": self.settings.client_secret,
            "redirect_uri": self.settings.redirect_uri,
        }

    async def get_access_token(self, grant, **options) -> AccessToken:
        """
        Request an access token with the given grant ("authorization_code",
        "refresh_token" or a Grant instance).

        Raises:
            MissingGrantParameterError: a required grant option is missing.
            IdentityProviderError: the token endpoint answered with an error.
            MalformedResponseError: the success response lacks required fields.
        """
        grant = get_grant(grant)
        body = grant.prepare_request_parameters(self._grant_defaults(), options)
        logger.debug("Requesting access token with %s grant", grant.name)
        response = await self.transport.request(
            "POST",
            self.provider.token_url(),
            headers=TOKEN_REQUEST_HEADERS,
            data=body,
        )
        self.provider.check_response(response)
        return self.provider.create_access_token(response.body)

    async def exchange_code(self, code: str) -> AccessToken:
        """Exchange an authorization code from the callback for an access token."""
        return await self.get_access_token(AuthorizationCodeGrant(), code=code)

    async def refresh(self, token: AccessToken) -> AccessToken:
        """
        Get a new access token with the token's refresh token.

        Salesforce does not return the refresh token again, so the new token
        keeps the one it was refreshed with.
        """
        new_token = await self.get_access_token(RefreshTokenGrant(), refresh_token=token.refresh_token)
        if new_token.refresh_token is None and token.refresh_token:
            raw = dict(new_token.raw, refresh_token=token.refresh_token)
            new_token = self.provider.create_access_token(raw)
        return new_token

    def authorization_headers(self, token: AccessToken) -> dict:
        """Bearer authorization header for API calls made with the token."""
        return {"Authorization": f"Bearer {token.access_token}"}

    async def get_resource_owner(self, token: AccessToken) -> Any:
        """Fetch and build the resource owner for a token."""
        url = self.provider.resource_owner_details_url(token)
        headers = {"Accept": "application/json", **self.authorization_headers(token)}
        response = await self.transport.request("GET", url, headers=headers)
        self.provider.check_response(response)
        return self.provider.create_resource_owner(response.body, token)
