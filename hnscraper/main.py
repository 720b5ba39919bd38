import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded

from hnscraper.logging_config import configure_logging
from hnscraper.routers.front_page import limiter, router as front_page_router
from hnscraper.services.fetcher import FRONT_PAGE_URL

configure_logging()

logger = logging.getLogger(__name__)

app = FastAPI(
    title="hnscraper",
    description="Fetches the Hacker News front page and returns each title paired with its score.",
    version="1.0.0",
)

app.state.limiter = limiter  # shared with the /front-page decorator
app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)


@app.exception_handler(Exception)
async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled exception for %s", request.url)
    return JSONResponse(status_code=500, content={"detail": "An unexpected error occurred."})


app.include_router(front_page_router)


@app.get("/", summary="Service status and scrape target")
async def root() -> dict:
    return {"status": "ok", "target": FRONT_PAGE_URL}
