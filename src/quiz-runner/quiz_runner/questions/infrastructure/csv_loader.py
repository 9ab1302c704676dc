"""CSV question loader: reads a two-column file and returns a typed QuestionSet."""

import csv
import hashlib
import io
from pathlib import Path

from quiz_runner.questions.domain.observer import QuestionsObserver
from quiz_runner.questions.domain.pair import QuestionPair, QuestionSet
from quiz_runner.questions.infrastructure.errors import (
    QuestionFormatError,
    QuestionReadError,
)

_FIELDS_PER_RECORD = 2


class CsvQuestionLoader:
    """Loads a comma-separated question,answer file with no header row."""

    def __init__(self, observer: QuestionsObserver) -> None:
        self._observer = observer

    def load(self, path: Path) -> QuestionSet:
        """
        Load every record of the CSV file at path as a QuestionPair.

        Blank lines are skipped. Collects ALL records with the wrong number of
        fields before raising a single QuestionFormatError listing each of them.

        Raises:
            QuestionReadError: if the file cannot be read, is not UTF-8, or has
                malformed quoting.
            QuestionFormatError: if any record does not have exactly two fields.
        """
        path_str = str(path)
        self._observer.questions_loading_started(path=path_str)

        try:
            raw = self._read_bytes(path=path)
            rows = self._parse_rows(raw=raw)
        except QuestionReadError as exc:
            self._observer.questions_loading_failed(path=path_str, reason=str(exc))
            raise

        questions, errors = self._build_questions(rows=rows)
        if errors:
            error = QuestionFormatError(reason="; ".join(errors))
            self._observer.questions_loading_failed(path=path_str, reason=str(error))
            raise error

        question_set = QuestionSet(
            questions=tuple(questions),
            source=path_str,
            sha256=hashlib.sha256(raw).hexdigest(),
        )
        self._observer.questions_loading_completed(
            path=path_str,
            total_questions=len(question_set),
            sha256=question_set.sha256,
        )
        return question_set

    def _read_bytes(self, path: Path) -> bytes:
        try:
            return path.read_bytes()
        except FileNotFoundError as exc:
            raise QuestionReadError(reason=f"file not found: {path}") from exc
        except OSError as exc:
            raise QuestionReadError(reason=f"{path}: {exc.strerror or exc}") from exc

    def _parse_rows(self, raw: bytes) -> list[tuple[int, list[str]]]:
        """Decode raw and split it into (line number, fields) records."""
        try:
            text = raw.decode("utf-8-sig")
        except UnicodeDecodeError as exc:
            raise QuestionReadError(reason=f"not valid UTF-8: {exc}") from exc

        reader = csv.reader(io.StringIO(text, newline=""), strict=True)
        rows: list[tuple[int, list[str]]] = []
        try:
            for fields in reader:
                if fields:
                    rows.append((reader.line_num, fields))
        except csv.Error as exc:
            raise QuestionReadError(reason=f"line {reader.line_num}: {exc}") from exc
        return rows

    def _build_questions(
        self, rows: list[tuple[int, list[str]]]
    ) -> tuple[list[QuestionPair], list[str]]:
        """Turn each record into a QuestionPair, collecting shape errors without aborting early."""
        questions: list[QuestionPair] = []
        errors: list[str] = []

        for line_num, fields in rows:
            if len(fields) != _FIELDS_PER_RECORD:
                errors.append(
                    f"line {line_num}: expected {_FIELDS_PER_RECORD} fields,"
                    f" got {len(fields)}"
                )
                continue
            questions.append(QuestionPair(prompt=fields[0], answer=fields[1]))

        return questions, errors
