"""Base exception class for all quiz-runner-specific errors."""


class QuizError(Exception):
    """Base class for all quiz-runner errors. Every one of them is fatal to the run."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
