"""Error types raised by config infrastructure."""

from pathlib import Path

from quiz_runner.core.errors import QuizError


class MissingEnvVarsError(QuizError):
    """Raised when one or more required environment variables are not set."""

    def __init__(self, missing_vars: list[str]) -> None:
        self.missing_vars = missing_vars
        var_list = ", ".join(sorted(missing_vars))
        super().__init__(
            f"Failed to load config: missing environment variables: {var_list}"
        )


class ConfigValidationError(QuizError):
    """Raised when the loaded config fails validation."""

    def __init__(self, reason: str) -> None:
        super().__init__(f"Failed to validate config: {reason}")


class ConfigLoadError(QuizError):
    """Raised when the config file cannot be opened or parsed."""

    def __init__(self, path: Path, reason: str = "file not found") -> None:
        super().__init__(f"Failed to load config: {reason}: {path}")
