import logging

from fastapi import APIRouter, HTTPException, Request
from starlette.concurrency import run_in_threadpool

from outliner.models.parse_models import MarkupRequest, ParseResult, UrlRequest
from outliner.rate_limit import PARSE_RATE_LIMIT, limiter
from outliner.services.document_adapter import ParseError
from outliner.services.fetcher import FetchError, fetch_markup
from outliner.services.parse_config import default_parse_options, max_markup_bytes
from outliner.services.tree_builder import parse_markup
from outliner.services.url_validator import SSRFError

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/parse", tags=["parse"])

FETCH_FAILED_DETAIL = "Failed to fetch HTML content. Please check the URL and try again."
RETRY_AFTER_SECONDS = 30


async def _parse(markup: str, body: MarkupRequest | UrlRequest, source_url: str | None = None) -> ParseResult:
    options = body.options or default_parse_options()
    try:
        return await run_in_threadpool(parse_markup, markup, options, source_url)
    except ParseError as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.post("/markup", response_model=ParseResult)
@limiter.limit(PARSE_RATE_LIMIT)
async def parse_markup_input(request: Request, body: MarkupRequest) -> ParseResult:
    limit = max_markup_bytes()
    if len(body.markup.encode("utf-8")) > limit:
        raise HTTPException(
            status_code=413,
            detail=f"Markup too large. Maximum size is {limit // (1024 * 1024)}MB.",
        )
    return await _parse(body.markup, body)


@router.post("/url", response_model=ParseResult)
@limiter.limit(PARSE_RATE_LIMIT)
async def parse_url_input(request: Request, body: UrlRequest) -> ParseResult:
    url = body.url.strip()
    if not url:
        raise HTTPException(status_code=400, detail="URL is empty")
    try:
        markup = await fetch_markup(url)
    except SSRFError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except FetchError as e:
        logger.warning("Fetch for %s failed: %s", url, e)
        headers = {"Retry-After": str(RETRY_AFTER_SECONDS)} if e.retryable else None
        raise HTTPException(status_code=502, detail=FETCH_FAILED_DETAIL, headers=headers)
    return await _parse(markup, body, source_url=url)
