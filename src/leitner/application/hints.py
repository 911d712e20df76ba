import math

from leitner.domain.constants import HINT_PLACEHOLDER
from leitner.domain.models import Flashcard


def get_hint(card: Flashcard, placeholder: str = HINT_PLACEHOLDER) -> str:
    """
    Reveal the first half (rounded up) of the card's front and mask the rest.

    The hint has the same length as the front. `card.hint` is not used.
    """
    if len(placeholder) != 1:
        raise ValueError(f"placeholder must be a single character, got {placeholder!r}")

    front = card.front
    if not front:
        return ""

    shown = math.ceil(len(front) / 2)
    return front[:shown] + placeholder * (len(front) - shown)
