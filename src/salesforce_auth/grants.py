"""OAuth2 grant types: how each grant builds the token request body."""

from typing import Mapping, Sequence

from salesforce_auth.errors import InvalidArgumentError, MissingGrantParameterError


class Grant:
    """Base grant: a grant_type name plus the options it requires."""

    name: str = ""
    required_parameters: Sequence[str] = ()

    def prepare_request_parameters(self, defaults: Mapping[str, str], options: Mapping[str, str]) -> dict:
        """
        Merge client defaults with caller options into a token request body.

        Options override defaults; None values are dropped. Raises
        MissingGrantParameterError if a required option is absent.
        """
        for param in self.required_parameters:
            if not options.get(param):
                raise MissingGrantParameterError(f"Required parameter not passed: {param!r}")

        body = {"grant_type": self.name}
        body.update(defaults)
        body.update(options)
        return {k: str(v) for k, v in body.items() if v is not None}

    def __str__(self) -> str:
        return self.name


class AuthorizationCodeGrant(Grant):
    name = "authorization_code"
    required_parameters = ("code",)


class RefreshTokenGrant(Grant):
    name = "refresh_token"
    required_parameters = ("refresh_token",)


_GRANTS = {grant.name: grant for grant in (AuthorizationCodeGrant(), RefreshTokenGrant())}


def get_grant(grant) -> Grant:
    """Resolve a grant instance or name to a Grant."""
    if isinstance(grant, Grant):
        return grant
    try:
        return _GRANTS[grant]
    except KeyError:
        raise InvalidArgumentError(f"Unsupported grant type: {grant!r}") from None
