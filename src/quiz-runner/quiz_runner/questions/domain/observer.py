"""Observer port for the questions domain: defines events in domain language."""

from typing import Protocol


class QuestionsObserver(Protocol):
    def questions_loading_started(self, path: str) -> None: ...

    def questions_loading_completed(
        self, path: str, total_questions: int, sha256: str
    ) -> None: ...

    def questions_loading_failed(self, path: str, reason: str) -> None: ...
