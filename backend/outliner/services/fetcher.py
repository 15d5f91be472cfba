"""Fetch markup over HTTP for parsing."""

from __future__ import annotations

import logging
from urllib.parse import urljoin

import httpx

from outliner.services.parse_config import max_markup_bytes
from outliner.services.url_validator import validate_fetch_url

logger = logging.getLogger(__name__)

FETCH_TIMEOUT_SECONDS = 15.0
MAX_REDIRECTS = 5
_REDIRECT_STATUSES = {301, 302, 303, 307, 308}


class FetchError(Exception):
    """Raised when markup could not be retrieved. The caller may retry."""

    retryable = True


async def _read_limited(resp: httpx.Response, limit: int) -> bytes:
    chunks: list[bytes] = []
    total = 0
    async for chunk in resp.aiter_bytes():
        total += len(chunk)
        if total > limit:
            raise FetchError(f"Response too large (limit {limit} bytes)")
        chunks.append(chunk)
    return b"".join(chunks)


async def _fetch(client: httpx.AsyncClient, url: str) -> str:
    limit = max_markup_bytes()
    current = url
    for _ in range(MAX_REDIRECTS + 1):
        validate_fetch_url(current)
        async with client.stream("GET", current) as resp:
            if resp.status_code in _REDIRECT_STATUSES:
                location = resp.headers.get("Location")
                if not location:
                    raise FetchError(f"Redirect from {current} without Location header")
                current = urljoin(current, location)
                continue
            if not resp.is_success:
                raise FetchError(f"Upstream returned HTTP {resp.status_code} for {current}")
            body = await _read_limited(resp, limit)
            encoding = resp.encoding or "utf-8"
        logger.info("Fetched %d bytes from %s", len(body), current)
        return body.decode(encoding, errors="replace")
    raise FetchError(f"Too many redirects fetching {url}")


async def fetch_markup(url: str, client: httpx.AsyncClient | None = None) -> str:
    """GET ``url`` and return its body as text.

    Raises SSRFError for unsafe URLs (never retried) and FetchError for
    transport failures, non-2xx responses and oversized bodies.
    """
    try:
        if client is not None:
            return await _fetch(client, url)
        async with httpx.AsyncClient(timeout=FETCH_TIMEOUT_SECONDS, follow_redirects=False) as own:
            return await _fetch(own, url)
    except httpx.HTTPError as e:
        logger.warning("Failed to fetch %s: %s", url, e, exc_info=True)
        raise FetchError(f"Failed to fetch {url}: {e}") from e
