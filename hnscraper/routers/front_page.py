import logging
from typing import Optional

import httpx
from fastapi import APIRouter, HTTPException, Request
from slowapi import Limiter
from slowapi.util import get_remote_address

from hnscraper.models.request import FrontPageRequest
from hnscraper.models.response import FrontPageResponse
from hnscraper.services.extractor import (
    count_matches,
    iter_scores,
    iter_titles,
    parse_document,
)
from hnscraper.services.fetcher import FRONT_PAGE_URL, ensure_public_proxy, fetch_page
from hnscraper.services.reporter import pair_results

logger = logging.getLogger(__name__)

limiter = Limiter(key_func=get_remote_address)
router = APIRouter()


@router.post(
    "/front-page",
    response_model=FrontPageResponse,
    summary="Titles and scores from the front page",
)
@limiter.limit("10/minute")
async def front_page(request: Request, body: FrontPageRequest) -> FrontPageResponse:
    """Fetch the front page and return its titles paired with their scores.

    ``title_count`` and ``score_count`` report both sequence lengths, so a
    caller can tell when ``pairs`` was truncated to the shorter one.
    """
    logger.info("Front page request received", extra={"proxied": body.proxy is not None})

    html = await _fetch_with_http(FRONT_PAGE_URL, body.proxy)
    document = parse_document(html)
    counts = count_matches(document)
    if counts.titles != counts.metadata_blocks:
        logger.warning(
            "Title/metadata count mismatch: %d titles, %d metadata blocks",
            counts.titles,
            counts.metadata_blocks,
        )

    return FrontPageResponse(
        url=FRONT_PAGE_URL,
        title_count=counts.titles,
        score_count=counts.metadata_blocks,
        pairs=list(pair_results(iter_titles(document), iter_scores(document))),
    )


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------

async def _fetch_with_http(url: str, proxy: Optional[str]) -> str:
    """Fetch *url* and propagate errors as HTTP exceptions."""
    try:
        ensure_public_proxy(proxy)
        return await fetch_page(url, proxy=proxy)
    except ValueError as exc:
        logger.warning("Invalid URL or proxy for %s – %s", url, exc)
        raise HTTPException(status_code=400, detail=str(exc))
    except httpx.TimeoutException:
        logger.error("Timeout fetching URL: %s", url)
        raise HTTPException(status_code=504, detail="The target URL timed out.")
    except httpx.RequestError as exc:
        logger.error("Error fetching URL %s: %s", url, exc)
        raise HTTPException(status_code=502, detail=str(exc))
