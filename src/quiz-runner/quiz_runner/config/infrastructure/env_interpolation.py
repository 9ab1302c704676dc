"""${ENV_VAR} and ${ENV_VAR:-default} interpolation for raw config data."""

import os
import re
from typing import TypeAlias

_ENV_VAR_PATTERN = re.compile(r"\$\{([A-Za-z_][A-Za-z0-9_]*)(?::-([^}]*))?\}")

RawValue: TypeAlias = (
    str | int | float | bool | None | list["RawValue"] | dict[str, "RawValue"]
)


def collect_missing_vars(data: RawValue) -> list[str]:
    """Return every referenced env var that is unset and has no default, in order of appearance."""
    missing: list[str] = []
    for text in _strings(data):
        for match in _ENV_VAR_PATTERN.finditer(text):
            name, default = match.group(1), match.group(2)
            if default is None and name not in os.environ and name not in missing:
                missing.append(name)
    return missing


def interpolate(data: RawValue) -> RawValue:
    """Substitute every reference with its runtime value or its default.

    Call `collect_missing_vars` first; an unset variable without a default
    raises KeyError here.
    """
    if isinstance(data, str):
        return _ENV_VAR_PATTERN.sub(_substitute, data)
    if isinstance(data, list):
        return [interpolate(item) for item in data]
    if isinstance(data, dict):
        return {key: interpolate(value) for key, value in data.items()}
    return data


def _substitute(match: re.Match[str]) -> str:
    name, default = match.group(1), match.group(2)
    if default is None:
        return os.environ[name]
    return os.environ.get(name, default)


def _strings(data: RawValue) -> list[str]:
    if isinstance(data, str):
        return [data]
    if isinstance(data, list):
        return [text for item in data for text in _strings(item)]
    if isinstance(data, dict):
        return [text for value in data.values() for text in _strings(value)]
    return []
