"""
Access token value object and the factory that builds it from a token response.

The factory expects a body that already passed the provider's response check.
Salesforce puts the identity URL of the resource owner in the "id" field; it
is kept as an opaque string and only dereferenced when owner details are fetched.
"""

import time
from dataclasses import dataclass, field
from typing import Any, Mapping, Optional

from salesforce_auth.errors import MalformedResponseError

# Key used in a token response to identify the resource owner.
RESOURCE_OWNER_ID_KEY = "id"

# Fields lifted onto AccessToken attributes; everything else stays in `values`.
_KNOWN_FIELDS = {
    "access_token",
    "refresh_token",
    "expires_in",
    "expires",
    "token_type",
    "instance_url",
    RESOURCE_OWNER_ID_KEY,
}


@dataclass(frozen=True)
class AccessToken:
    """Access token issued by the identity provider. Immutable once created."""

    access_token: str
    resource_owner_id: str
    refresh_token: Optional[str] = None
    expires: Optional[int] = None
    token_type: Optional[str] = None
    instance_url: Optional[str] = None
    values: dict = field(default_factory=dict)
    raw: dict = field(default_factory=dict, repr=False)

    def has_expired(self, now: Optional[float] = None) -> bool:
        """True when the token carries an expiry that is in the past. Tokens without one never expire."""
        if self.expires is None:
            return False
        return self.expires <= (time.time() if now is None else now)

    def to_dict(self) -> dict:
        """Return a copy of the raw token response (safe to store in a session)."""
        return dict(self.raw)

    def __str__(self) -> str:
        return self.access_token


def _as_int(response: Mapping[str, Any], key: str) -> int:
    try:
        return int(response[key])
    except (TypeError, ValueError):
        raise MalformedResponseError(f"Token response has a non-numeric '{key}'") from None


def _expires_at(response: Mapping[str, Any], now: float) -> Optional[int]:
    if response.get("expires_in") is not None:
        return int(now) + _as_int(response, "expires_in")
    if response.get("expires") is not None:
        expires = _as_int(response, "expires")
        # Small values are lifetimes, not timestamps.
        return expires if expires > 315360000 else int(now) + expires
    return None


def create_access_token(response: Mapping[str, Any], now: Optional[float] = None) -> AccessToken:
    """
    Build an AccessToken from a validated token response.

    Raises MalformedResponseError when the access token or the resource owner
    identifier ("id") is missing.
    """
    if not isinstance(response, Mapping):
        raise MalformedResponseError("Token response is not a JSON object")
    if not response.get("access_token"):
        raise MalformedResponseError("Token response is missing 'access_token'")
    owner_id = response.get(RESOURCE_OWNER_ID_KEY)
    if not owner_id:
        raise MalformedResponseError(f"Token response is missing '{RESOURCE_OWNER_ID_KEY}'")

    raw = dict(response)
    return AccessToken(
        access_token=str(raw["access_token"]),
        resource_owner_id=str(owner_id),
        refresh_token=raw.get("refresh_token"),
        expires=_expires_at(raw, time.time() if now is None else now),
        token_type=raw.get("token_type"),
        instance_url=raw.get("instance_url"),
        values={k: v for k, v in raw.items() if k not in _KNOWN_FIELDS},
        raw=raw,
    )
