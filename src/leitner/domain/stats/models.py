"""
Domain models for learning progress.

Read-only snapshots derived from a bucket mapping and practice history.
"""

from dataclasses import dataclass, field

from leitner.domain.models import Flashcard


@dataclass(frozen=True)
class ProgressStats:
    """
    Summary of a learner's progress.

    Attributes:
        total_cards: Cards across buckets 0..retired.
        cards_by_bucket: Card count per bucket index, gaps included as 0.
        retired_cards: Cards sitting in the retired (highest) bucket.
        success_rate: Percentage of practice events not answered WRONG.
        hardest_cards: Cards with the most WRONG answers, most first.
        average_moves_per_card: Practice events per distinct card.
        total_practice_events: Length of the history.
    """

    total_cards: int
    cards_by_bucket: dict[int, int]
    retired_cards: int
    success_rate: float
    hardest_cards: list[Flashcard] = field(default_factory=list)
    average_moves_per_card: float = 0.0
    total_practice_events: int = 0
