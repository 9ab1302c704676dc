"""QuestionLoader Protocol: structural interface for loading quiz questions."""

from pathlib import Path
from typing import Protocol

from quiz_runner.questions.domain.pair import QuestionSet


class QuestionLoader(Protocol):
    """Loads every question from the file at path, or nothing at all."""

    def load(self, path: Path) -> QuestionSet: ...
