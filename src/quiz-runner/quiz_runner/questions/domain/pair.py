"""QuestionPair and QuestionSet: the loaded quiz content."""

from pydantic import BaseModel, Field


class QuestionPair(BaseModel, frozen=True):
    """Immutable value object representing a single question and its expected answer."""

    prompt: str
    answer: str


class QuestionSet(BaseModel, frozen=True):
    """Immutable, ordered collection of QuestionPairs returned by a QuestionLoader.

    Order is presentation order. Carries the SHA-256 hex digest of the raw file
    bytes so that scores can be traced to the exact file version.
    """

    questions: tuple[QuestionPair, ...]
    source: str
    sha256: str = Field(min_length=1)

    def __len__(self) -> int:
        return len(self.questions)
