"""URL helpers shared by the endpoint builders."""

import ipaddress
import re
from typing import Iterable, Tuple
from urllib.parse import quote_plus

import httpx

_HOSTNAME_RE = re.compile(
    r"^(?=.{1,253}$)[a-z0-9](?:[a-z0-9-]{0,61}[a-z0-9])?(?:\.[a-z0-9](?:[a-z0-9-]{0,61}[a-z0-9])?)*\.?$",
    re.IGNORECASE,
)


def _is_valid_host(host: str) -> bool:
    if _HOSTNAME_RE.match(host):
        return True
    try:
        ipaddress.ip_address(host.strip("[]"))
    except ValueError:
        return False
    return True


def is_absolute_url(value) -> bool:
    """
    Return True if value is a well-formed absolute URL.

    Requires a scheme and a valid hostname or IP literal; rejects whitespace,
    control characters and ports outside 0-65535.
    """
    if not isinstance(value, str) or not value:
        return False
    if any(c.isspace() or ord(c) < 32 or ord(c) == 127 for c in value):
        return False
    try:
        url = httpx.URL(value)
        port = url.port
    except httpx.InvalidURL:
        return False
    if not url.scheme or not url.host or not _is_valid_host(url.host):
        return False
    return port is None or 0 <= port <= 65535


def build_query(pairs: Iterable[Tuple[str, str]]) -> str:
    """Join (key, value) pairs as key=value&..., values form-encoded, order kept."""
    return "&".join(f"{key}={quote_plus(value)}" for key, value in pairs)


def with_query(base: str, pairs: Iterable[Tuple[str, str]]) -> str:
    """Append a query string to base; no '?' is emitted when there are no pairs."""
    query = build_query(pairs)
    return f"{base}?{query}" if query else base
