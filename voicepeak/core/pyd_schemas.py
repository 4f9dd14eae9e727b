from __future__ import annotations

from typing import List

from pydantic import BaseModel, Field


class Narrator(BaseModel):
    """A VOICEPEAK narrator and the emotion labels it supports."""

    name: str
    emotions: List[str] = Field(default_factory=list)

    def __init__(self, name: str, emotions: List[str] | None = None, **data):
        super().__init__(name=name, emotions=list(emotions or []), **data)
