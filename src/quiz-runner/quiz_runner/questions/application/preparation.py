"""Loads a QuestionSet through any QuestionLoader and puts it in quiz order."""

import random
from pathlib import Path

from quiz_runner.questions.domain.loader import QuestionLoader
from quiz_runner.questions.domain.pair import QuestionSet
from quiz_runner.questions.domain.sequencer import order_questions


def prepare_questions(
    loader: QuestionLoader,
    path: Path,
    shuffle: bool,
    rng: random.Random | None = None,
) -> QuestionSet:
    """Load every question from path and return them in presentation order.

    Raises whatever the loader raises; nothing is shuffled unless the whole
    file loaded.
    """
    question_set = loader.load(path=path)
    return order_questions(question_set=question_set, shuffle=shuffle, rng=rng)
