import json
from typing import Iterable, Iterator, Optional, TextIO

import click

from hnscraper.models.result import ResultPair


def pair_results(titles: Iterable[str], scores: Iterable[str]) -> Iterator[ResultPair]:
    """Pair *titles* with *scores* by position.

    Stops as soon as either side is exhausted; a length mismatch is neither
    padded nor reported here.
    """
    for title, score in zip(titles, scores):
        yield ResultPair(title=title, score=score)


def format_pair(pair: ResultPair) -> str:
    """Render *pair* as ``("Title text", "123 points")``."""
    title = json.dumps(pair.title, ensure_ascii=False)
    score = json.dumps(pair.score, ensure_ascii=False)
    return f"({title}, {score})"


def report(
    titles: Iterable[str], scores: Iterable[str], out: Optional[TextIO] = None
) -> None:
    """Write one line per paired title and score to *out* (stdout by default)."""
    for pair in pair_results(titles, scores):
        click.echo(format_pair(pair), file=out)
