"""
Domain models for Modified-Leitner scheduling.

These are pure data structures with no I/O or external dependencies.
"""

from dataclasses import dataclass, field
from enum import IntEnum


class AnswerDifficulty(IntEnum):
    """How well the learner recalled a card in a single practice trial."""

    WRONG = 0
    HARD = 1
    EASY = 2


@dataclass(frozen=True, eq=False)
class Flashcard:
    """
    A single flashcard.

    Cards compare and hash by identity: two cards with the same text are
    still different members of a bucket.

    Attributes:
        front: Prompt shown to the learner.
        back: Expected answer.
        hint: Optional author-written hint.
        tags: Free-form labels.
    """

    front: str
    back: str
    hint: str = ""
    tags: tuple[str, ...] = field(default_factory=tuple)


# bucket number -> cards currently in that bucket
BucketMap = dict[int, set[Flashcard]]

# index i holds the cards of bucket i; empty set where no bucket exists
BucketSets = list[set[Flashcard]]


@dataclass(frozen=True)
class BucketRange:
    """Lowest and highest bucket index holding at least one card."""

    min_bucket: int
    max_bucket: int


@dataclass(frozen=True)
class PracticeRecord:
    """
    A single practice log entry.

    Attributes:
        card_front: Front text of the practiced card.
        card_back: Back text of the practiced card.
        difficulty: Rating reported by the learner.
        day: Day number the trial happened on, if the host tracks it.
        previous_bucket: Bucket before the trial.
        new_bucket: Bucket after the trial.
    """

    card_front: str
    card_back: str
    difficulty: AnswerDifficulty
    day: int | None = None
    previous_bucket: int | None = None
    new_bucket: int | None = None
