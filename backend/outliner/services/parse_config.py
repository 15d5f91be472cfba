"""Process-wide parse defaults, read from the environment.

OUTLINER_ELIGIBLE_TAGS    comma-separated tag allow-list (default "p,div,span")
OUTLINER_CONTENT_MODE     "stripped-text" or "raw-markup"
OUTLINER_MAX_MARKUP_BYTES size limit for pasted or fetched markup
"""

from __future__ import annotations

import logging
import os

from outliner.models.parse_models import DEFAULT_ELIGIBLE_TAGS, ContentMode, ParseOptions

logger = logging.getLogger(__name__)

DEFAULT_MAX_MARKUP_BYTES = 5 * 1024 * 1024  # 5 MB


def _eligible_tags_from_env() -> set[str]:
    raw = os.environ.get("OUTLINER_ELIGIBLE_TAGS")
    if raw is None:
        return set(DEFAULT_ELIGIBLE_TAGS)
    return {t.strip().lower() for t in raw.split(",") if t.strip()}


def _content_mode_from_env() -> ContentMode:
    raw = os.environ.get("OUTLINER_CONTENT_MODE", "").strip().lower()
    if not raw:
        return ContentMode.STRIPPED_TEXT
    try:
        return ContentMode(raw)
    except ValueError:
        logger.warning("Unknown OUTLINER_CONTENT_MODE %r, using stripped-text", raw)
        return ContentMode.STRIPPED_TEXT


def default_parse_options() -> ParseOptions:
    """Build ParseOptions from the environment, falling back to built-in defaults."""
    return ParseOptions(
        eligible_tags=_eligible_tags_from_env(),
        content_mode=_content_mode_from_env(),
    )


def max_markup_bytes() -> int:
    raw = os.environ.get("OUTLINER_MAX_MARKUP_BYTES")
    if not raw:
        return DEFAULT_MAX_MARKUP_BYTES
    try:
        value = int(raw)
    except ValueError:
        logger.warning("Invalid OUTLINER_MAX_MARKUP_BYTES %r, using default", raw)
        return DEFAULT_MAX_MARKUP_BYTES
    return value if value > 0 else DEFAULT_MAX_MARKUP_BYTES
