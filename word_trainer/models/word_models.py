"""Pydantic models for vocabulary entries"""

from pydantic import BaseModel, ConfigDict, Field


class WordPair(BaseModel):
    """One vocabulary entry: a term and its meaning"""

    model_config = ConfigDict(frozen=True)

    term: str = Field(description="Word or phrase being learned")
    meaning: str = Field(description="Meaning shown alongside the term")
