"""hnscraper CLI — print the titles and scores listed on the front page.

Usage:
    hnscraper                                  # Direct connection
    hnscraper --proxy http://user:pw@host:8080 # Through a forward proxy
"""

import asyncio
import logging
from typing import Optional

import click
import httpx

from hnscraper.logging_config import configure_logging
from hnscraper.services.extractor import (
    count_matches,
    iter_scores,
    iter_titles,
    parse_document,
)
from hnscraper.services.fetcher import FRONT_PAGE_URL, fetch_page
from hnscraper.services.reporter import report

logger = logging.getLogger(__name__)


def _fetch(url: str, proxy: Optional[str]) -> str:
    """Fetch *url* and turn validation and transport errors into CLI errors."""
    try:
        return asyncio.run(fetch_page(url, proxy=proxy))
    except ValueError as exc:
        logger.error("Invalid URL or proxy for %s: %s", url, exc)
        raise click.ClickException(str(exc)) from exc
    except httpx.RequestError as exc:
        logger.error("Error fetching URL %s: %s", url, exc)
        raise click.ClickException(f"Request to {url} failed: {exc}") from exc


@click.command()
@click.option(
    "--proxy",
    metavar="URL",
    default=None,
    help="Forward proxy used for both HTTP and HTTPS requests.",
)
def main(proxy: Optional[str]) -> None:
    """Fetch the front page and print one (title, score) line per entry."""
    configure_logging()

    html = _fetch(FRONT_PAGE_URL, proxy)
    document = parse_document(html)

    counts = count_matches(document)
    if counts.titles != counts.metadata_blocks:
        logger.warning(
            "Found %d titles but %d metadata blocks; printing only the first %d pairs",
            counts.titles,
            counts.metadata_blocks,
            min(counts),
        )
    else:
        logger.info("Found %d entries", counts.titles)

    report(iter_titles(document), iter_scores(document))


if __name__ == "__main__":
    main()
