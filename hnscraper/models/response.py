from typing import List

from pydantic import BaseModel

from hnscraper.models.result import ResultPair


class FrontPageResponse(BaseModel):
    url: str
    title_count: int
    score_count: int
    pairs: List[ResultPair]
    """Titles paired with scores by position.

    Holds ``min(title_count, score_count)`` entries; surplus titles or scores
    are dropped rather than padded.
    """
