"""Answer matching rules."""


def normalize_answer(text: str) -> str:
    return text.strip().casefold()


def is_correct(given: str, expected: str) -> bool:
    """Exact match after trimming surrounding whitespace and folding case."""
    return normalize_answer(given) == normalize_answer(expected)
