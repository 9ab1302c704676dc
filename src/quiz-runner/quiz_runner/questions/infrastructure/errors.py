"""Error types raised by questions infrastructure."""

from quiz_runner.core.errors import QuizError


class QuestionReadError(QuizError):
    """Raised when the questions file cannot be read or its quoting is malformed."""

    def __init__(self, reason: str) -> None:
        super().__init__(f"Failed to read questions: {reason}")


class QuestionFormatError(QuizError):
    """Raised when one or more records do not have exactly two fields."""

    def __init__(self, reason: str) -> None:
        super().__init__(f"Failed to parse questions: {reason}")
