"""YAML config loader: parses, interpolates env vars, validates, and emits observer events."""

from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from quiz_runner.config.domain.config import QuizConfig
from quiz_runner.config.domain.observer import ConfigObserver
from quiz_runner.config.infrastructure.env_interpolation import (
    collect_missing_vars,
    interpolate,
)
from quiz_runner.config.infrastructure.errors import (
    ConfigLoadError,
    ConfigValidationError,
    MissingEnvVarsError,
)


class YamlConfigLoader:
    """Loads, interpolates, validates, and returns a QuizConfig from a YAML file."""

    def __init__(self, observer: ConfigObserver) -> None:
        self._observer = observer

    def load(self, path: Path) -> QuizConfig:
        """
        Load, interpolate, validate, and return a QuizConfig from a YAML file.

        Raises:
            ConfigLoadError: if the file is missing, unreadable, or not valid YAML.
            MissingEnvVarsError: if any ${ENV_VAR} references are unset (all collected first).
            ConfigValidationError: if the document is not a mapping or violates the schema.
        """
        raw = _parse_yaml(path=path)
        _check_missing_env_vars(raw=raw)
        cfg = build_config(raw=interpolate(raw))
        self._observer.config_loaded(path=str(path), settings=sorted(raw.keys()))
        return cfg


def build_config(raw: dict[str, Any]) -> QuizConfig:
    """Validate a raw settings mapping into a QuizConfig.

    Raises:
        ConfigValidationError: if any value violates the QuizConfig schema.
    """
    try:
        return QuizConfig.model_validate(raw)
    except ValidationError as exc:
        raise ConfigValidationError(str(exc)) from exc


def _parse_yaml(path: Path) -> dict[str, Any]:
    try:
        with path.open("r", encoding="utf-8") as fh:
            raw = yaml.safe_load(fh)
    except FileNotFoundError as exc:
        raise ConfigLoadError(path=path) from exc
    except OSError as exc:
        raise ConfigLoadError(path=path, reason=exc.strerror or str(exc)) from exc
    except yaml.YAMLError as exc:
        raise ConfigLoadError(path=path, reason="invalid YAML") from exc

    if raw is None:
        return {}
    if not isinstance(raw, dict):
        raise ConfigValidationError(
            f"expected a mapping at the top level, got {type(raw).__name__}"
        )
    return raw


def _check_missing_env_vars(raw: dict[str, Any]) -> None:
    """Raise MissingEnvVarsError if any ${ENV_VAR} references in raw are unset."""
    missing = collect_missing_vars(raw)
    if missing:
        raise MissingEnvVarsError(missing)
