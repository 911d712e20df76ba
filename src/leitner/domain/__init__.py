# Domain Package
from .errors import InvalidBucketsError
from .models import (
    AnswerDifficulty,
    BucketMap,
    BucketRange,
    BucketSets,
    Flashcard,
    PracticeRecord,
)

__all__ = [
    "AnswerDifficulty",
    "BucketMap",
    "BucketRange",
    "BucketSets",
    "Flashcard",
    "InvalidBucketsError",
    "PracticeRecord",
]
