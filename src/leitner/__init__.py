"""leitner: Modified-Leitner spaced repetition scheduling."""

from leitner.application import (
    compute_progress,
    get_bucket_range,
    get_hint,
    practice,
    to_bucket_sets,
    update,
)
from leitner.consts import VERSION
from leitner.domain import (
    AnswerDifficulty,
    BucketRange,
    Flashcard,
    InvalidBucketsError,
    PracticeRecord,
)
from leitner.domain.stats import ProgressStats

__version__ = VERSION

__all__ = [
    "AnswerDifficulty",
    "BucketRange",
    "Flashcard",
    "InvalidBucketsError",
    "PracticeRecord",
    "ProgressStats",
    "compute_progress",
    "get_bucket_range",
    "get_hint",
    "practice",
    "to_bucket_sets",
    "update",
]
