"""QuizConfig: the root configuration object for a quiz session."""

from pathlib import Path

from pydantic import BaseModel, Field, field_validator


class QuizConfig(BaseModel, frozen=True, extra="forbid"):
    """Settings for one quiz session, from a YAML file and/or CLI flags."""

    filename: Path = Path("problems.csv")
    limit: int = Field(default=30, ge=0)
    shuffle: bool = False
    output: Path | None = None
    retry: bool = False
    seed: int | None = None

    @field_validator("output", mode="before")
    @classmethod
    def _empty_output_disables_persistence(cls, value: object) -> object:
        if isinstance(value, str) and not value.strip():
            return None
        return value
