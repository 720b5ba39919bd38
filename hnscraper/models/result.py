from pydantic import BaseModel


class ResultPair(BaseModel):
    """One front-page entry: its title paired with its score text."""

    title: str
    score: str
