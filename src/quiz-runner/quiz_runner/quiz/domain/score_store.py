"""ScoreStore Protocol: where finished attempt scores are kept."""

from typing import Protocol

from quiz_runner.quiz.domain.result import AttemptResult


class ScoreStore(Protocol):
    @property
    def location(self) -> str: ...

    def append(self, result: AttemptResult) -> None: ...
