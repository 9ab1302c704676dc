"""Structlog implementation of the QuestionsObserver port."""

import structlog


class StructlogQuestionsObserver:
    """Delegates questions domain events to structlog.

    Satisfies the QuestionsObserver protocol structurally.
    """

    def __init__(self) -> None:
        self._log = structlog.get_logger()

    def questions_loading_started(self, path: str) -> None:
        self._log.info("questions.loading_started", path=path)

    def questions_loading_completed(
        self, path: str, total_questions: int, sha256: str
    ) -> None:
        self._log.info(
            "questions.loading_completed",
            path=path,
            total_questions=total_questions,
            sha256=sha256,
        )

    def questions_loading_failed(self, path: str, reason: str) -> None:
        self._log.error("questions.loading_failed", path=path, reason=reason)
