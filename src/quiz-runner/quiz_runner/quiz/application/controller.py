"""QuizController: runs one timed attempt over a QuestionSet."""

import asyncio
import time

from quiz_runner.questions.domain.pair import QuestionSet
from quiz_runner.quiz.domain.answer import is_correct
from quiz_runner.quiz.domain.console import QuizConsole
from quiz_runner.quiz.domain.observer import QuizObserver
from quiz_runner.quiz.domain.result import AttemptResult, AttemptState


class QuizController:
    """Presents questions in order and races each typed answer against one deadline.

    The controller only knows the QuizConsole and QuizObserver ports, so tests
    drive it with scripted answers and no real terminal.
    """

    def __init__(self, console: QuizConsole, observer: QuizObserver) -> None:
        self._console = console
        self._observer = observer

    async def run_attempt(
        self,
        question_set: QuestionSet,
        time_limit_seconds: float,
        attempt_number: int = 1,
    ) -> AttemptResult:
        """Run a single attempt and return its AttemptResult.

        The deadline covers the whole attempt and is never reset between
        questions: a slow first answer leaves less time for the rest. When it
        expires the pending read is cancelled, no further prompt is written,
        and the result carries the score so far with state TIMED_OUT.

        Raises:
            InputReadError: if the console reaches end of input or fails to read.
        """
        total = len(question_set)
        self._observer.attempt_started(
            attempt_number=attempt_number,
            total_questions=total,
            time_limit_seconds=time_limit_seconds,
        )
        started_at = time.monotonic()
        score = 0
        answered = 0

        if total == 0:
            self._observer.attempt_completed(
                attempt_number=attempt_number,
                score=0,
                total=0,
                elapsed_seconds=0.0,
            )
            return AttemptResult(score=0, total=0, state=AttemptState.COMPLETED)

        try:
            async with asyncio.timeout(time_limit_seconds):
                for index, pair in enumerate(question_set.questions):
                    self._console.write(f"{pair.prompt}: ")
                    line = await self._console.read_line()
                    correct = is_correct(given=line, expected=pair.answer)
                    if correct:
                        score += 1
                    answered += 1
                    self._observer.answer_checked(
                        attempt_number=attempt_number,
                        question_index=index,
                        correct=correct,
                    )
        except TimeoutError:
            self._observer.attempt_timed_out(
                attempt_number=attempt_number,
                score=score,
                total=total,
                answered=answered,
            )
            return AttemptResult(score=score, total=total, state=AttemptState.TIMED_OUT)

        self._observer.attempt_completed(
            attempt_number=attempt_number,
            score=score,
            total=total,
            elapsed_seconds=time.monotonic() - started_at,
        )
        return AttemptResult(score=score, total=total, state=AttemptState.COMPLETED)
