"""
Bucket reassignment after a practice trial.

Returns a new mapping; the caller's mapping and its sets are left untouched.
"""

import logging

from leitner.domain.constants import START_BUCKET
from leitner.domain.models import AnswerDifficulty, BucketMap, Flashcard

logger = logging.getLogger(__name__)


def find_bucket(buckets: BucketMap, card: Flashcard) -> int | None:
    """Return the bucket holding `card` (by identity), or None if unfiled."""
    for number, cards in buckets.items():
        if card in cards:
            return number
    return None


def next_bucket(current: int, retired: int, difficulty: AnswerDifficulty) -> int:
    """
    Compute where a card goes after an answer.

    EASY advances one bucket but never past the retired one, HARD falls
    back one bucket (not below 0), WRONG restarts at bucket 0.
    """
    if difficulty == AnswerDifficulty.EASY:
        return current + 1 if current < retired else retired
    if difficulty == AnswerDifficulty.HARD:
        return max(START_BUCKET, current - 1)
    if difficulty == AnswerDifficulty.WRONG:
        return START_BUCKET
    raise ValueError(f"Unknown difficulty: {difficulty!r}")


def update(buckets: BucketMap, card: Flashcard, difficulty: AnswerDifficulty) -> BucketMap:
    """
    Move a card to its new bucket after a practice trial.

    Bucket 0 and the retired bucket are kept even when they become empty;
    any other bucket left empty is removed.

    Args:
        buckets: Current mapping. Not modified.
        card: The practiced card.
        difficulty: How well the learner did.

    Returns:
        A new mapping. If `card` is not in any bucket it is an unchanged copy.
    """
    difficulty = AnswerDifficulty(difficulty)
    new_buckets: BucketMap = {number: set(cards) for number, cards in buckets.items()}

    current = find_bucket(new_buckets, card)
    if current is None:
        logger.debug(f"Card {card.front!r} is not in any bucket; nothing to update")
        return new_buckets

    # Retired bucket is fixed from the mapping before anything is removed
    retired = max(new_buckets)

    cards = new_buckets[current]
    cards.discard(card)
    if not cards and current not in (START_BUCKET, retired):
        del new_buckets[current]

    target = next_bucket(current, retired, difficulty)
    new_buckets.setdefault(target, set()).add(card)

    logger.debug(f"Card {card.front!r}: bucket {current} -> {target} ({difficulty.name})")
    return new_buckets
