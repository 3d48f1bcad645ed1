"""
Configuration values for the Salesforce OAuth client.

ProviderConfig holds the identity provider settings (base domain, default
scopes, scope separator). ClientSettings holds the connected app credentials.
Both are immutable; reconfiguring the domain produces a new ProviderConfig.
Values are read from the environment (SALESFORCE_*), which main.py fills
from .env via python-dotenv before the package is imported.
"""

import os
from dataclasses import dataclass, field, replace
from typing import Optional, Tuple

from salesforce_auth.errors import InvalidArgumentError

DEFAULT_DOMAIN = "https://login.salesforce.com"
DEFAULT_SCOPE_SEPARATOR = " "
DEFAULT_HTTP_TIMEOUT = 20.0


def _coerce_domain(value) -> str:
    """Coerce a domain to str and drop trailing slashes; raise InvalidArgumentError if it can't be."""
    try:
        domain = str(value)
    except Exception as e:
        raise InvalidArgumentError("Value provided as domain is not a string") from e
    return domain.rstrip("/")


@dataclass(frozen=True)
class ProviderConfig:
    """Identity provider settings: base domain, default scopes and scope separator."""

    domain: str = DEFAULT_DOMAIN
    default_scopes: Tuple[str, ...] = field(default_factory=tuple)
    scope_separator: str = DEFAULT_SCOPE_SEPARATOR

    def __post_init__(self):
        object.__setattr__(self, "domain", _coerce_domain(self.domain))
        object.__setattr__(self, "default_scopes", tuple(self.default_scopes))

    def with_domain(self, domain) -> "ProviderConfig":
        """Return a copy of this config pointing at another base domain."""
        return replace(self, domain=_coerce_domain(domain))

    @classmethod
    def from_env(cls) -> "ProviderConfig":
        """Build from SALESFORCE_DOMAIN and SALESFORCE_SCOPES (separator-delimited)."""
        raw_scopes = os.getenv("SALESFORCE_SCOPES", "")
        scopes = tuple(s for s in raw_scopes.split(DEFAULT_SCOPE_SEPARATOR) if s)
        return cls(
            domain=os.getenv("SALESFORCE_DOMAIN", DEFAULT_DOMAIN),
            default_scopes=scopes,
        )


@dataclass(frozen=True)
class ClientSettings:
    """Connected app credentials and the registered callback URL."""

    client_id: str
    client_secret: Optional[str] = None
    redirect_uri: Optional[str] = None

    @classmethod
    def from_env(cls) -> "ClientSettings":
        return cls(
            client_id=os.getenv("SALESFORCE_CLIENT_ID", ""),
            client_secret=os.getenv("SALESFORCE_CLIENT_SECRET"),
            redirect_uri=os.getenv("SALESFORCE_REDIRECT_URI"),
        )


def http_timeout_from_env() -> float:
    """Seconds before an identity provider request times out (SALESFORCE_HTTP_TIMEOUT)."""
    return float(os.getenv("SALESFORCE_HTTP_TIMEOUT", str(DEFAULT_HTTP_TIMEOUT)))
