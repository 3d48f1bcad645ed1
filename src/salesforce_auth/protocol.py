"""
Protocols for OAuth providers and HTTP transports used by OAuth2Client.

A provider (e.g. SalesforceProvider) supplies the vendor-specific pieces:
endpoint URLs, scope rules, response checking and how raw responses become
tokens and resource owners. OAuth2Client runs the protocol flow around it.
"""

from typing import Any, Mapping, Optional, Protocol, Sequence, runtime_checkable

from salesforce_auth.token import AccessToken
from salesforce_auth.transport import TransportResponse


@runtime_checkable
class OAuthProvider(Protocol):
    """Protocol for an OAuth2 identity provider (e.g. Salesforce)."""

    name: str

    @property
    def default_scopes(self) -> Sequence[str]:
        """Scopes requested when the caller does not pass any."""
        ...

    @property
    def scope_separator(self) -> str:
        """String used to join scopes in the authorization URL."""
        ...

    def authorization_url(self) -> str:
        """Base URL of the login/consent page, without query string."""
        ...

    def token_url(self) -> str:
        """URL of the token endpoint."""
        ...

    def resource_owner_details_url(self, token: AccessToken) -> str:
        """URL to fetch the resource owner's details for a token."""
        ...

    def check_response(self, response: TransportResponse) -> None:
        """Raise IdentityProviderError if the response is an error."""
        ...

    def create_access_token(self, response: Mapping[str, Any]) -> AccessToken:
        """Build an AccessToken from a validated token response."""
        ...

    def create_resource_owner(self, response: Mapping[str, Any], token: AccessToken) -> Any:
        """Build the resource owner from a validated user info response."""
        ...


@runtime_checkable
class HttpTransport(Protocol):
    """Protocol for the HTTP collaborator that performs requests for the client."""

    async def request(
        self,
        method: str,
        url: str,
        headers: Optional[Mapping[str, str]] = None,
        data: Optional[Mapping[str, str]] = None,
    ) -> TransportResponse:
        """Send a request and return status, reason phrase and decoded body."""
        ...
