"""Observer port for the quiz domain: defines events in domain language."""

from typing import Protocol


class QuizObserver(Protocol):
    """Observer port emitting structured events while a quiz session runs.

    Implementations may log to structlog or record for tests.
    """

    def attempt_started(
        self,
        attempt_number: int,
        total_questions: int,
        time_limit_seconds: float,
    ) -> None: ...

    def answer_checked(
        self,
        attempt_number: int,
        question_index: int,
        correct: bool,
    ) -> None: ...

    def attempt_timed_out(
        self,
        attempt_number: int,
        score: int,
        total: int,
        answered: int,
    ) -> None: ...

    def attempt_completed(
        self,
        attempt_number: int,
        score: int,
        total: int,
        elapsed_seconds: float,
    ) -> None: ...

    def score_saved(self, location: str, score: int, total: int) -> None: ...

    def retry_answered(self, attempt_number: int, accepted: bool) -> None: ...
