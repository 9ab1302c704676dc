"""Presentation order for a QuestionSet."""

import random
import time

from quiz_runner.questions.domain.pair import QuestionSet


def order_questions(
    question_set: QuestionSet,
    shuffle: bool,
    rng: random.Random | None = None,
) -> QuestionSet:
    """Return question_set in file order, or a shuffled copy when shuffle is set.

    When no rng is given one is seeded from the wall clock, so consecutive runs
    differ. Pass a seeded ``random.Random`` for a reproducible order.
    """
    if not shuffle or len(question_set) < 2:
        return question_set

    if rng is None:
        rng = random.Random(time.time_ns())

    questions = list(question_set.questions)
    rng.shuffle(questions)
    return question_set.model_copy(update={"questions": tuple(questions)})
