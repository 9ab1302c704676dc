"""Error types raised by quiz infrastructure."""

from pathlib import Path

from quiz_runner.core.errors import QuizError


class InputReadError(QuizError):
    """Raised when standard input is exhausted or cannot be read."""

    def __init__(self, reason: str) -> None:
        super().__init__(f"Failed to read answer: {reason}")


class ScoreWriteError(QuizError):
    """Raised when a score cannot be appended to the output file."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"Failed to save score to {path}: {reason}")
