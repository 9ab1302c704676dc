"""QuizSession: drives one or more attempts, reports and stores scores, asks to retry."""

from quiz_runner.questions.domain.pair import QuestionSet
from quiz_runner.quiz.application.controller import QuizController
from quiz_runner.quiz.domain.answer import normalize_answer
from quiz_runner.quiz.domain.console import QuizConsole
from quiz_runner.quiz.domain.observer import QuizObserver
from quiz_runner.quiz.domain.result import AttemptResult
from quiz_runner.quiz.domain.score_store import ScoreStore
from quiz_runner.quiz.infrastructure.errors import InputReadError

RETRY_PROMPT = "Do you want to retry? (yes/no)"
_RETRY_ACCEPT = "yes"


class QuizSession:
    """Runs attempts until the user declines a retry (or after one, without retry)."""

    def __init__(
        self,
        controller: QuizController,
        console: QuizConsole,
        observer: QuizObserver,
        score_store: ScoreStore | None = None,
    ) -> None:
        self._controller = controller
        self._console = console
        self._observer = observer
        self._score_store = score_store

    async def run(
        self,
        question_set: QuestionSet,
        time_limit_seconds: float,
        retry: bool,
    ) -> list[AttemptResult]:
        """Run the session and return every AttemptResult in order.

        A timed-out attempt is reported and stored like any other. End of input
        at the retry prompt counts as declining.

        Raises:
            InputReadError: if input runs out or fails while answering questions.
            ScoreWriteError: if the score cannot be appended to the store.
        """
        results: list[AttemptResult] = []
        attempt_number = 1

        while True:
            result = await self._controller.run_attempt(
                question_set=question_set,
                time_limit_seconds=time_limit_seconds,
                attempt_number=attempt_number,
            )
            results.append(result)
            self._report(result=result)

            if self._score_store is not None:
                self._score_store.append(result=result)
                self._observer.score_saved(
                    location=self._score_store.location,
                    score=result.score,
                    total=result.total,
                )

            if not retry or not await self._ask_retry(attempt_number=attempt_number):
                return results
            attempt_number += 1

    def _report(self, result: AttemptResult) -> None:
        if result.timed_out:
            # The cursor is still on the unanswered prompt line.
            self._console.write("\nTime out\n")
        self._console.write(f"Your Score: {result.format_score()}\n")

    async def _ask_retry(self, attempt_number: int) -> bool:
        self._console.write(f"{RETRY_PROMPT}\n")
        try:
            answer = await self._console.read_line()
        except InputReadError:
            answer = ""
        accepted = normalize_answer(answer) == _RETRY_ACCEPT
        self._observer.retry_answered(attempt_number=attempt_number, accepted=accepted)
        return accepted
