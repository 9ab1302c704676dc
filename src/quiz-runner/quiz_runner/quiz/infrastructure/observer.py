"""StructlogQuizObserver: production observer that delegates to structlog."""

import structlog


class StructlogQuizObserver:
    """Logs quiz domain events to structlog.

    Does NOT inherit from QuizObserver (structural typing via Protocol).
    """

    def __init__(self) -> None:
        self._log = structlog.get_logger()

    def attempt_started(
        self,
        attempt_number: int,
        total_questions: int,
        time_limit_seconds: float,
    ) -> None:
        self._log.info(
            "quiz.attempt_started",
            attempt_number=attempt_number,
            total_questions=total_questions,
            time_limit_seconds=time_limit_seconds,
        )

    def answer_checked(
        self,
        attempt_number: int,
        question_index: int,
        correct: bool,
    ) -> None:
        self._log.debug(
            "quiz.answer_checked",
            attempt_number=attempt_number,
            question_index=question_index,
            correct=correct,
        )

    def attempt_timed_out(
        self,
        attempt_number: int,
        score: int,
        total: int,
        answered: int,
    ) -> None:
        self._log.info(
            "quiz.attempt_timed_out",
            attempt_number=attempt_number,
            score=score,
            total=total,
            answered=answered,
        )

    def attempt_completed(
        self,
        attempt_number: int,
        score: int,
        total: int,
        elapsed_seconds: float,
    ) -> None:
        self._log.info(
            "quiz.attempt_completed",
            attempt_number=attempt_number,
            score=score,
            total=total,
            elapsed_seconds=round(elapsed_seconds, 2),
        )

    def score_saved(self, location: str, score: int, total: int) -> None:
        self._log.info("quiz.score_saved", location=location, score=score, total=total)

    def retry_answered(self, attempt_number: int, accepted: bool) -> None:
        self._log.info(
            "quiz.retry_answered",
            attempt_number=attempt_number,
            accepted=accepted,
        )
