"""
Modified-Leitner practice selection.

Bucket i is due every 2**i days. The last bucket is retired and is never
scheduled.
"""

import logging

from leitner.domain.models import BucketSets, Flashcard

logger = logging.getLogger(__name__)


def is_bucket_due(bucket: int, day: int) -> bool:
    return day % (2**bucket) == 0


def practice(bucket_sets: BucketSets, day: int) -> set[Flashcard]:
    """
    Select the cards to practice on a given day.

    Args:
        bucket_sets: Dense bucket representation; the last index is retired.
        day: Day number counted from 0.

    Returns:
        Cards from every non-retired bucket due on `day`.
    """
    if day < 0:
        raise ValueError(f"day must be non-negative, got {day}")

    due: set[Flashcard] = set()

    # Stop before the last index: it is the retired bucket
    for bucket, cards in enumerate(bucket_sets[:-1]):
        if is_bucket_due(bucket, day):
            due.update(cards)

    logger.debug(f"Day {day}: {len(due)} cards due across {len(bucket_sets)} buckets")
    return due
