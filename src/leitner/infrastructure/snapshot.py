"""
Deck snapshot files for the command-line host.

A snapshot holds the bucket mapping, the practice history and the current
day in a single YAML or JSON file. Loading rebuilds fresh Flashcard objects,
so card identity only lasts for one run.
"""

import json
import logging
from pathlib import Path
from typing import Any

import yaml  # type: ignore
from pydantic import BaseModel, Field, ValidationError, field_serializer, field_validator

from leitner.domain.constants import JSON_SUFFIXES, YAML_SUFFIXES
from leitner.domain.models import AnswerDifficulty, BucketMap, Flashcard, PracticeRecord

logger = logging.getLogger(__name__)


class SnapshotError(ValueError):
    """Raised when a snapshot file cannot be read, parsed or validated."""


class CardModel(BaseModel):
    front: str
    back: str
    hint: str = ""
    tags: list[str] = Field(default_factory=list)

    @classmethod
    def from_card(cls, card: Flashcard) -> "CardModel":
        return cls(front=card.front, back=card.back, hint=card.hint, tags=list(card.tags))

    def to_card(self) -> Flashcard:
        return Flashcard(front=self.front, back=self.back, hint=self.hint, tags=tuple(self.tags))


class RecordModel(BaseModel):
    card_front: str
    card_back: str
    difficulty: AnswerDifficulty
    day: int | None = None
    previous_bucket: int | None = None
    new_bucket: int | None = None

    @field_validator("difficulty", mode="before")
    @classmethod
    def parse_difficulty(cls, v: Any) -> Any:
        # Accept "wrong"/"Hard"/"EASY" as well as 0/1/2
        if isinstance(v, str):
            v = v.strip()
            if v.isdigit():
                return int(v)
            try:
                return AnswerDifficulty[v.upper()]
            except KeyError:
                raise ValueError(f"unknown difficulty {v!r}") from None
        return v

    @field_serializer("difficulty")
    def dump_difficulty(self, v: AnswerDifficulty) -> str:
        return v.name.lower()

    @classmethod
    def from_record(cls, record: PracticeRecord) -> "RecordModel":
        return cls(
            card_front=record.card_front,
            card_back=record.card_back,
            difficulty=record.difficulty,
            day=record.day,
            previous_bucket=record.previous_bucket,
            new_bucket=record.new_bucket,
        )

    def to_record(self) -> PracticeRecord:
        return PracticeRecord(
            card_front=self.card_front,
            card_back=self.card_back,
            difficulty=self.difficulty,
            day=self.day,
            previous_bucket=self.previous_bucket,
            new_bucket=self.new_bucket,
        )


class DeckSnapshot(BaseModel):
    day: int = Field(default=0, ge=0)
    buckets: dict[int, list[CardModel]] = Field(default_factory=dict)
    history: list[RecordModel] = Field(default_factory=list)

    @field_validator("buckets")
    @classmethod
    def check_bucket_numbers(cls, v: dict[int, list[CardModel]]) -> dict[int, list[CardModel]]:
        negative = [k for k in v if k < 0]
        if negative:
            raise ValueError(f"bucket numbers must be non-negative, got {negative}")
        return v

    def to_domain(self) -> tuple[BucketMap, list[PracticeRecord]]:
        """Build a bucket mapping and history from this snapshot."""
        buckets: BucketMap = {
            number: {card.to_card() for card in cards} for number, cards in self.buckets.items()
        }
        history = [record.to_record() for record in self.history]
        return buckets, history

    @classmethod
    def from_domain(
        cls, buckets: BucketMap, history: list[PracticeRecord], day: int = 0
    ) -> "DeckSnapshot":
        return cls(
            day=day,
            buckets={
                number: sorted(
                    (CardModel.from_card(c) for c in buckets[number]),
                    key=lambda c: (c.front, c.back),
                )
                for number in sorted(buckets)
            },
            history=[RecordModel.from_record(r) for r in history],
        )


def find_card(buckets: BucketMap, front: str) -> Flashcard | None:
    """Find the first card whose front matches `front` exactly."""
    for number in sorted(buckets):
        for card in buckets[number]:
            if card.front == front:
                return card
    return None


def load_snapshot(path: Path) -> DeckSnapshot:
    """
    Read and validate a snapshot file.

    Raises:
        SnapshotError: If the file is missing, unparseable or invalid.
    """
    suffix = path.suffix.lower()
    if suffix not in YAML_SUFFIXES + JSON_SUFFIXES:
        raise SnapshotError(f"Unsupported snapshot format '{suffix}' for {path}")

    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise SnapshotError(f"Could not read {path}: {e}") from e

    try:
        raw = yaml.safe_load(text) if suffix in YAML_SUFFIXES else json.loads(text)
    except (yaml.YAMLError, json.JSONDecodeError) as e:
        raise SnapshotError(f"Could not parse {path}: {e}") from e

    try:
        snapshot = DeckSnapshot.model_validate(raw or {})
    except ValidationError as e:
        raise SnapshotError(f"Invalid snapshot {path}: {e}") from e

    logger.info(
        f"Loaded {path}: {sum(len(c) for c in snapshot.buckets.values())} cards, "
        f"{len(snapshot.history)} practice records"
    )
    return snapshot


def save_snapshot(path: Path, snapshot: DeckSnapshot) -> None:
    """Write a snapshot in the format given by the file suffix."""
    suffix = path.suffix.lower()
    if suffix in YAML_SUFFIXES:
        text = yaml.safe_dump(
            snapshot.model_dump(), sort_keys=False, allow_unicode=True, default_flow_style=False
        )
    elif suffix in JSON_SUFFIXES:
        text = snapshot.model_dump_json(indent=2) + "\n"
    else:
        raise SnapshotError(f"Unsupported snapshot format '{suffix}' for {path}")

    path.write_text(text, encoding="utf-8")
    logger.info(f"Saved {path}")
