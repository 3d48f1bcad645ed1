"""Salesforce resource owner built from the identity URL response."""

from types import MappingProxyType
from typing import Any, Mapping, Optional

from salesforce_auth.errors import MalformedResponseError


class SalesforceResourceOwner:
    """Read-only view over the user fields returned by the Salesforce identity service."""

    def __init__(self, response: Mapping[str, Any]):
        if not isinstance(response, Mapping):
            raise MalformedResponseError("Resource owner response is not a JSON object")
        self._response = MappingProxyType(dict(response))

    def _get(self, key: str, default=None):
        return self._response.get(key, default)

    @property
    def id(self) -> Optional[str]:
        """Salesforce user ID (user_id)."""
        return self._get("user_id")

    @property
    def organization_id(self) -> Optional[str]:
        """ID of the org the user belongs to."""
        return self._get("organization_id")

    @property
    def username(self) -> Optional[str]:
        """Login username."""
        return self._get("username")

    @property
    def display_name(self) -> Optional[str]:
        """Full display name."""
        return self._get("display_name")

    @property
    def nick_name(self) -> Optional[str]:
        """Community nickname."""
        return self._get("nick_name")

    @property
    def first_name(self) -> Optional[str]:
        """Given name."""
        return self._get("first_name")

    @property
    def last_name(self) -> Optional[str]:
        """Family name."""
        return self._get("last_name")

    @property
    def email(self) -> Optional[str]:
        """Email address."""
        return self._get("email")

    @property
    def email_verified(self) -> bool:
        """Whether Salesforce has verified the email address."""
        return bool(self._get("email_verified", False))

    @property
    def locale(self) -> Optional[str]:
        """User locale, e.g. en_US."""
        return self._get("locale")

    @property
    def language(self) -> Optional[str]:
        """User language, e.g. en_US."""
        return self._get("language")

    @property
    def timezone(self) -> Optional[str]:
        """IANA timezone name."""
        return self._get("timezone")

    @property
    def user_type(self) -> Optional[str]:
        """License type, e.g. STANDARD."""
        return self._get("user_type")

    @property
    def is_active(self) -> bool:
        """Whether the user is active."""
        return bool(self._get("active", False))

    @property
    def photos(self) -> dict:
        """Profile picture URLs keyed by size."""
        return dict(self._get("photos") or {})

    @property
    def urls(self) -> dict:
        """Instance API endpoints (enterprise, rest, sobjects, ...) keyed by name."""
        return dict(self._get("urls") or {})

    def to_dict(self) -> dict:
        """Return a copy of the raw response."""
        return dict(self._response)

    def __repr__(self) -> str:
        return f"SalesforceResourceOwner(id={self.id!r}, username={self.username!r})"
