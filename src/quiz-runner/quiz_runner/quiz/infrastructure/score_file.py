"""ScoreFileStore: appends one human-readable line per attempt to a text file."""

from pathlib import Path

from quiz_runner.quiz.domain.result import AttemptResult
from quiz_runner.quiz.infrastructure.errors import ScoreWriteError


class ScoreFileStore:
    """Satisfies the ScoreStore protocol. Creates the file if needed, never truncates it."""

    def __init__(self, path: Path) -> None:
        self._path = path

    @property
    def location(self) -> str:
        return str(self._path)

    def append(self, result: AttemptResult) -> None:
        try:
            with self._path.open("a", encoding="utf-8") as fh:
                fh.write(f"Score: {result.format_score()}\n")
        except OSError as exc:
            raise ScoreWriteError(path=self._path, reason=exc.strerror or str(exc)) from exc
