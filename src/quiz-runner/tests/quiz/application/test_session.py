"""Tests for QuizSession: reporting, score persistence, and the retry loop."""

from quiz_runner.questions.domain.pair import QuestionPair, QuestionSet
from quiz_runner.quiz.application.controller import QuizController
from quiz_runner.quiz.application.session import RETRY_PROMPT, QuizSession
from quiz_runner.quiz.domain.result import AttemptState
from quiz_runner.quiz.domain.score_store import ScoreStore
from tests.quiz.fake_console import FakeConsole, ScriptedLine
from tests.quiz.fake_observer import FakeQuizObserver
from tests.quiz.fake_score_store import FakeScoreStore


def _question_set() -> QuestionSet:
    return QuestionSet(
        questions=(
            QuestionPair(prompt="5+5", answer="10"),
            QuestionPair(prompt="Capital of France", answer="Paris"),
            QuestionPair(prompt="7+3", answer="10"),
        ),
        source="test.csv",
        sha256="fake-sha256",
    )


def _make_session(
    console: FakeConsole,
    observer: FakeQuizObserver | None = None,
    score_store: ScoreStore | None = None,
) -> QuizSession:
    observer = observer or FakeQuizObserver()
    return QuizSession(
        controller=QuizController(console=console, observer=observer),
        console=console,
        observer=observer,
        score_store=score_store,
    )


class TestSingleAttempt:
    async def test_reports_score_line(self) -> None:
        console = FakeConsole(["10\n", "Rome\n", "10\n"])

        await _make_session(console).run(
            _question_set(), time_limit_seconds=5, retry=False
        )

        assert console.output.endswith("Your Score: 2/3\n")

    async def test_without_retry_exactly_one_attempt_runs(self) -> None:
        console = FakeConsole(["10\n", "Paris\n", "10\n", "yes\n"])

        results = await _make_session(console).run(
            _question_set(), time_limit_seconds=5, retry=False
        )

        assert len(results) == 1
        assert RETRY_PROMPT not in console.output
        assert console.reads == 3

    async def test_score_is_appended_to_store(self) -> None:
        store = FakeScoreStore()
        console = FakeConsole(["10\n", "Paris\n", "10\n"])

        await _make_session(console, score_store=store).run(
            _question_set(), time_limit_seconds=5, retry=False
        )

        assert [r.format_score() for r in store.results] == ["3/3"]

    async def test_score_saved_event_names_the_store(self) -> None:
        observer = FakeQuizObserver()
        store = FakeScoreStore(location="scores.txt")
        console = FakeConsole(["10\n", "Paris\n", "10\n"])

        await _make_session(console, observer=observer, score_store=store).run(
            _question_set(), time_limit_seconds=5, retry=False
        )

        assert observer.scores_saved[0].location == "scores.txt"
        assert observer.scores_saved[0].score == 3

    async def test_no_store_means_no_score_saved_event(self) -> None:
        observer = FakeQuizObserver()
        console = FakeConsole(["10\n", "Paris\n", "10\n"])

        await _make_session(console, observer=observer).run(
            _question_set(), time_limit_seconds=5, retry=False
        )

        assert observer.scores_saved == []


class TestTimedOutAttempt:
    async def test_time_out_is_reported_before_the_score(self) -> None:
        console = FakeConsole(["10\n", ScriptedLine("Paris\n", delay_seconds=5.0)])

        await _make_session(console).run(
            _question_set(), time_limit_seconds=0.1, retry=False
        )

        assert console.output.endswith("\nTime out\nYour Score: 1/3\n")

    async def test_timed_out_score_is_still_stored(self) -> None:
        store = FakeScoreStore()
        console = FakeConsole(["10\n", ScriptedLine("Paris\n", delay_seconds=5.0)])

        results = await _make_session(console, score_store=store).run(
            _question_set(), time_limit_seconds=0.1, retry=False
        )

        assert results[0].state is AttemptState.TIMED_OUT
        assert store.results == results

    async def test_retry_is_offered_after_a_timeout(self) -> None:
        console = FakeConsole([ScriptedLine("no\n", delay_seconds=0.3)])

        results = await _make_session(console).run(
            _question_set(), time_limit_seconds=0.1, retry=True
        )

        assert len(results) == 1
        assert RETRY_PROMPT in console.output


class TestRetryLoop:
    async def test_yes_starts_another_attempt(self) -> None:
        console = FakeConsole(
            ["1\n", "2\n", "3\n", "yes\n", "10\n", "Paris\n", "10\n", "no\n"]
        )

        results = await _make_session(console).run(
            _question_set(), time_limit_seconds=5, retry=True
        )

        assert [r.format_score() for r in results] == ["0/3", "3/3"]
        assert console.output.count(f"{RETRY_PROMPT}\n") == 2

    async def test_yes_is_matched_case_insensitively_after_trimming(self) -> None:
        console = FakeConsole(
            ["10\n", "Paris\n", "10\n", "  YES \n", "10\n", "Paris\n", "10\n", "no\n"]
        )

        results = await _make_session(console).run(
            _question_set(), time_limit_seconds=5, retry=True
        )

        assert len(results) == 2

    async def test_any_other_answer_ends_the_session(self) -> None:
        for answer in ["no\n", "y\n", "\n", "yes please\n"]:
            console = FakeConsole(["10\n", "Paris\n", "10\n", answer, "10\n"])

            results = await _make_session(console).run(
                _question_set(), time_limit_seconds=5, retry=True
            )

            assert len(results) == 1, answer

    async def test_end_of_input_at_retry_prompt_ends_the_session(self) -> None:
        observer = FakeQuizObserver()
        console = FakeConsole(["10\n", "Paris\n", "10\n"])

        results = await _make_session(console, observer=observer).run(
            _question_set(), time_limit_seconds=5, retry=True
        )

        assert len(results) == 1
        assert observer.retries_answered[0].accepted is False

    async def test_each_attempt_is_stored_in_order(self) -> None:
        store = FakeScoreStore()
        console = FakeConsole(
            ["10\n", "x\n", "x\n", "yes\n", "10\n", "Paris\n", "10\n", "no\n"]
        )

        await _make_session(console, score_store=store).run(
            _question_set(), time_limit_seconds=5, retry=True
        )

        assert [r.format_score() for r in store.results] == ["1/3", "3/3"]

    async def test_attempt_numbers_increase(self) -> None:
        observer = FakeQuizObserver()
        console = FakeConsole(
            ["10\n", "x\n", "x\n", "yes\n", "10\n", "Paris\n", "10\n", "no\n"]
        )

        await _make_session(console, observer=observer).run(
            _question_set(), time_limit_seconds=5, retry=True
        )

        assert [e.attempt_number for e in observer.attempts_started] == [1, 2]
        assert [e.accepted for e in observer.retries_answered] == [True, False]
