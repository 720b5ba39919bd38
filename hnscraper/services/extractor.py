"""Title and score extraction from a front-page listing.

Each listed entry is rendered as a title row (``span.titleline > a``) followed
by a metadata row (``td.subtext``) that carries author, age and, for regular
submissions, a ``span.score`` marker.  Promoted entries have no score marker,
so their score falls back to :data:`DEFAULT_SCORE`.

Titles and scores are produced by two independent queries.  Nothing ties the
n-th title to the n-th metadata block except document order; callers that
pair them should check :func:`count_matches` when the lengths matter.
"""

from typing import Iterator, NamedTuple, Tuple

import soupsieve
from bs4 import BeautifulSoup, Tag

TITLE_SELECTOR = "span.titleline > a"
METADATA_SELECTOR = "td.subtext"
SCORE_SELECTOR = "span.score"

DEFAULT_SCORE = "0 points"


def compile_selector(selector: str) -> soupsieve.SoupSieve:
    """Compile *selector* once so it can be reused against any document.

    Raises:
        soupsieve.SelectorSyntaxError: if *selector* is not valid CSS.
    """
    return soupsieve.compile(selector)


# Compiled at import: a bad selector is a programming error and stops the
# process before any request is made.
_TITLE_QUERY = compile_selector(TITLE_SELECTOR)
_METADATA_QUERY = compile_selector(METADATA_SELECTOR)
_SCORE_QUERY = compile_selector(SCORE_SELECTOR)


class ExtractionCounts(NamedTuple):
    titles: int
    metadata_blocks: int


def parse_document(html: str) -> BeautifulSoup:
    return BeautifulSoup(html, "lxml")


def iter_titles(document: BeautifulSoup) -> Iterator[str]:
    """Yield the inner markup of every title link, in document order."""
    for link in _TITLE_QUERY.iselect(document):
        yield link.decode_contents()


def _score_text(block: Tag) -> str:
    marker = _SCORE_QUERY.select_one(block)
    if marker is None:
        return DEFAULT_SCORE
    return next(marker.strings, DEFAULT_SCORE)


def iter_scores(document: BeautifulSoup) -> Iterator[str]:
    """Yield one score string per metadata block, in document order."""
    for block in _METADATA_QUERY.iselect(document):
        yield _score_text(block)


def count_matches(document: BeautifulSoup) -> ExtractionCounts:
    """Return how many titles and metadata blocks *document* contains.

    Runs the same queries as :func:`iter_titles` and :func:`iter_scores`, so
    the counts equal the lengths of the sequences those would produce.
    """
    return ExtractionCounts(
        titles=len(_TITLE_QUERY.select(document)),
        metadata_blocks=len(_METADATA_QUERY.select(document)),
    )


def extract(html: str) -> Tuple[Iterator[str], Iterator[str]]:
    """Parse *html* and return lazy ``(titles, scores)`` iterators.

    Both iterators keep the parsed document alive until they are exhausted.
    """
    document = parse_document(html)
    return iter_titles(document), iter_scores(document)
