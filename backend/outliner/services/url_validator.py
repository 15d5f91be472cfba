"""SSRF protection: validate a URL before fetching markup from it."""

from __future__ import annotations

import ipaddress
import os
import socket
from urllib.parse import urlparse

_ALLOWED_SCHEMES = {"http", "https"}


class SSRFError(ValueError):
    """Raised when a URL fails SSRF validation."""


def validate_fetch_url(url: str) -> None:
    """Validate a user-supplied URL for SSRF safety.

    Rules:
    - Scheme must be http or https.
    - Every address the hostname resolves to must be public, unless
      OUTLINER_ALLOW_PRIVATE_URLS=true.
    """
    parsed = urlparse(url)

    if parsed.scheme not in _ALLOWED_SCHEMES:
        raise SSRFError(f"URL scheme must be http or https, got '{parsed.scheme}'")

    hostname = parsed.hostname
    if not hostname:
        raise SSRFError("URL has no hostname")

    allow_private = os.environ.get("OUTLINER_ALLOW_PRIVATE_URLS", "").lower() == "true"

    try:
        addr_infos = socket.getaddrinfo(hostname, None, socket.AF_UNSPEC, socket.SOCK_STREAM)
    except socket.gaierror:
        raise SSRFError(f"Cannot resolve hostname: {hostname}")

    if allow_private:
        return

    for _, _, _, _, sockaddr in addr_infos:
        ip_str = sockaddr[0]
        try:
            addr = ipaddress.ip_address(ip_str)
        except ValueError:
            continue

        if (
            addr.is_private
            or addr.is_loopback
            or addr.is_link_local
            or addr.is_reserved
            or addr.is_multicast
            or addr.is_unspecified
        ):
            raise SSRFError(f"URL resolves to private/reserved address ({ip_str})")
