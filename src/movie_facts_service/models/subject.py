"""Resolved content models returned by external lookups."""

from pydantic import BaseModel, Field


class Subject(BaseModel):
    """A movie resolved by a content lookup."""

    name: str = Field(..., description="Canonical title")
    synopsis: str = Field("", description="Short plot synopsis")
    contributors: list[str] = Field(default_factory=list, description="Director names")
    participants: list[str] = Field(default_factory=list, description="Cast member names")
