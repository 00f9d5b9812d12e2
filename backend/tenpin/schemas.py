from typing import List

from pydantic import BaseModel, ConfigDict, Field


class FrameSummary(BaseModel):
    number: int = Field(..., ge=1, le=10)
    rolls: List[int]
    score: int
    cumulative: int
    finished: bool
    settled: bool

    model_config = ConfigDict(frozen=True)


class GameSummary(BaseModel):
    frames: List[FrameSummary]
    scores: List[int]
    total: int
    complete: bool
    current_frame: int = Field(..., ge=1, le=10)

    model_config = ConfigDict(frozen=True)
