"""AttemptResult: the outcome of one timed pass through a QuestionSet."""

from enum import StrEnum
from typing import Self

from pydantic import BaseModel, Field, model_validator


class AttemptState(StrEnum):
    """How a finished attempt ended. An attempt in progress has no result yet."""

    TIMED_OUT = "timed_out"
    COMPLETED = "completed"


class AttemptResult(BaseModel, frozen=True):
    """Immutable score of one attempt.

    ``total`` is always the full size of the question set, including questions
    that were never presented because the deadline expired.
    """

    score: int = Field(ge=0)
    total: int = Field(ge=0)
    state: AttemptState

    @model_validator(mode="after")
    def _score_within_total(self) -> Self:
        if self.score > self.total:
            raise ValueError(f"score {self.score} exceeds total {self.total}")
        return self

    @property
    def timed_out(self) -> bool:
        return self.state is AttemptState.TIMED_OUT

    def format_score(self) -> str:
        return f"{self.score}/{self.total}"
