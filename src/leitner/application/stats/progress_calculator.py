"""
Progress calculator for summarizing bucket state and practice history.

This is a pure computation module with no I/O.
"""

from collections import Counter

from leitner.domain.constants import MAX_HARDEST_CARDS, START_BUCKET
from leitner.domain.errors import InvalidBucketsError
from leitner.domain.models import AnswerDifficulty, BucketMap, Flashcard, PracticeRecord
from leitner.domain.stats.models import ProgressStats

# Cards in history are identified by text, not by object
CardKey = tuple[str, str]


def _card_key(record: PracticeRecord) -> CardKey:
    return (record.card_front, record.card_back)


class ProgressCalculator:
    """
    Computes ProgressStats from a bucket mapping and practice history.

    Stateless and side-effect free.
    """

    def __init__(self, hardest_limit: int = MAX_HARDEST_CARDS):
        if hardest_limit < 0:
            raise ValueError(f"hardest_limit must be non-negative, got {hardest_limit}")
        self.hardest_limit = hardest_limit

    def compute(self, buckets: BucketMap, history: list[PracticeRecord]) -> ProgressStats:
        """
        Summarize progress.

        Args:
            buckets: Mapping with bucket 0 and a retired bucket above it.
            history: Practice records in chronological order.

        Raises:
            InvalidBucketsError: If the mapping has no bucket 0 or no retired bucket.
        """
        retired = self._validate(buckets)

        cards_by_bucket = {i: len(buckets.get(i, ())) for i in range(retired + 1)}

        return ProgressStats(
            total_cards=sum(cards_by_bucket.values()),
            cards_by_bucket=cards_by_bucket,
            retired_cards=cards_by_bucket[retired],
            success_rate=self._compute_success_rate(history),
            hardest_cards=self._compute_hardest_cards(history),
            average_moves_per_card=self._compute_average_moves(history),
            total_practice_events=len(history),
        )

    def _validate(self, buckets: BucketMap) -> int:
        """Check the mapping shape and return the retired bucket number."""
        if len(buckets) < 2 or START_BUCKET not in buckets:
            raise InvalidBucketsError(
                "Buckets must include at least bucket 0 and a retired bucket, "
                f"got keys {sorted(buckets)}"
            )

        retired = max(buckets)
        if retired <= START_BUCKET:
            raise InvalidBucketsError(f"Retired bucket must be greater than 0, got {retired}")
        return retired

    def _compute_success_rate(self, history: list[PracticeRecord]) -> float:
        """
        Percentage of answers that were not WRONG; 0 for an empty history.
        """
        if not history:
            return 0.0
        correct = sum(1 for r in history if r.difficulty != AnswerDifficulty.WRONG)
        return 100 * correct / len(history)

    def _compute_hardest_cards(self, history: list[PracticeRecord]) -> list[Flashcard]:
        """
        Cards with the most WRONG answers, most first.

        Counter keeps first-seen order and sorted() is stable, so equal
        counts stay in the order the cards were first missed. Hint and tags
        are not in the history and come back empty.
        """
        wrong_counts = Counter(
            _card_key(r) for r in history if r.difficulty == AnswerDifficulty.WRONG
        )
        ranked = sorted(wrong_counts.items(), key=lambda item: item[1], reverse=True)
        return [Flashcard(front, back) for (front, back), _ in ranked[: self.hardest_limit]]

    def _compute_average_moves(self, history: list[PracticeRecord]) -> float:
        if not history:
            return 0.0
        distinct = {_card_key(r) for r in history}
        return len(history) / len(distinct)


def compute_progress(
    buckets: BucketMap,
    history: list[PracticeRecord],
    hardest_limit: int = MAX_HARDEST_CARDS,
) -> ProgressStats:
    """Compute learning progress statistics. See ProgressCalculator.compute."""
    return ProgressCalculator(hardest_limit=hardest_limit).compute(buckets, history)
