"""Tests for bucket reassignment after a practice trial."""

import pytest

from leitner.application.updater import find_bucket, next_bucket, update
from leitner.domain.models import AnswerDifficulty, Flashcard


@pytest.fixture
def card():
    return Flashcard("X", "x")


class TestNextBucket:
    @pytest.mark.parametrize(
        "current,retired,difficulty,expected",
        [
            (0, 3, AnswerDifficulty.EASY, 1),
            (2, 3, AnswerDifficulty.EASY, 3),
            (3, 3, AnswerDifficulty.EASY, 3),
            (2, 3, AnswerDifficulty.HARD, 1),
            (0, 3, AnswerDifficulty.HARD, 0),
            (3, 3, AnswerDifficulty.WRONG, 0),
        ],
    )
    def test_destination(self, current, retired, difficulty, expected):
        assert next_bucket(current, retired, difficulty) == expected


class TestUpdate:
    def test_easy_walks_card_to_retirement(self, card):
        buckets = {0: {card}, 1: set(), 2: set()}

        step1 = update(buckets, card, AnswerDifficulty.EASY)
        assert step1 == {0: set(), 1: {card}, 2: set()}

        step2 = update(step1, card, AnswerDifficulty.EASY)
        assert step2 == {0: set(), 2: {card}}

        step3 = update(step2, card, AnswerDifficulty.EASY)
        assert step3 == {0: set(), 2: {card}}

    def test_emptied_intermediate_bucket_is_removed(self, card, cards):
        buckets = {0: {cards["a"]}, 1: {card}, 2: set(), 3: set()}
        result = update(buckets, card, AnswerDifficulty.EASY)

        assert 1 not in result
        assert result[2] == {card}

    def test_bucket_zero_kept_when_emptied(self, card):
        result = update({0: {card}, 3: set()}, card, AnswerDifficulty.EASY)
        assert result[0] == set()
        assert result[1] == {card}

    def test_wrong_always_resets_to_zero(self, card):
        for current in (0, 1, 2, 3):
            buckets = {0: set(), current: {card}, 4: set()}
            result = update(buckets, card, AnswerDifficulty.WRONG)

            assert find_bucket(result, card) == 0
            assert 0 in result

    def test_wrong_from_retired_keeps_retired_bucket(self, card):
        result = update({0: set(), 2: {card}}, card, AnswerDifficulty.WRONG)
        assert result == {0: {card}, 2: set()}

    def test_hard_moves_down_one(self, card):
        result = update({0: set(), 2: {card}, 3: set()}, card, AnswerDifficulty.HARD)
        assert find_bucket(result, card) == 1
        assert 2 not in result

    def test_hard_in_bucket_zero_stays(self, card):
        result = update({0: {card}, 1: set()}, card, AnswerDifficulty.HARD)
        assert result == {0: {card}, 1: set()}

    def test_hard_recreates_deleted_bucket(self, card, cards):
        buckets = {0: set(), 2: {card}, 4: {cards["a"]}}
        result = update(buckets, card, AnswerDifficulty.HARD)

        assert result == {0: set(), 1: {card}, 4: {cards["a"]}}

    def test_retired_bucket_fixed_before_update(self, card, cards):
        # The retired bucket's only card answered EASY must not create bucket 3
        buckets = {0: {cards["a"]}, 2: {card}}
        result = update(buckets, card, AnswerDifficulty.EASY)

        assert result == {0: {cards["a"]}, 2: {card}}
        assert max(result) == 2

    def test_unknown_card_returns_unchanged_copy(self, card, cards):
        buckets = {0: {cards["a"]}, 1: set()}
        result = update(buckets, card, AnswerDifficulty.EASY)

        assert result == buckets
        assert result is not buckets

    def test_caller_mapping_not_mutated(self, card):
        original_zero = {card}
        buckets = {0: original_zero, 1: set(), 2: set()}
        update(buckets, card, AnswerDifficulty.EASY)

        assert buckets == {0: {card}, 1: set(), 2: set()}
        assert original_zero == {card}

    def test_identity_not_text(self, card):
        twin = Flashcard("X", "x")
        buckets = {0: {card}, 1: {twin}, 2: set()}
        result = update(buckets, twin, AnswerDifficulty.WRONG)

        assert result[0] == {card, twin}
        assert 1 not in result

    def test_card_ends_in_exactly_one_bucket(self, card, cards):
        buckets = {0: {cards["a"]}, 1: {card}, 3: {cards["b"]}}
        for difficulty in AnswerDifficulty:
            result = update(buckets, card, difficulty)
            holders = [n for n, s in result.items() if card in s]
            assert len(holders) == 1
            assert all(n >= 0 for n in result)

    def test_accepts_plain_int_difficulty(self, card):
        result = update({0: {card}, 2: set()}, card, 2)
        assert find_bucket(result, card) == 1

    def test_invalid_difficulty_rejected(self, card):
        with pytest.raises(ValueError):
            update({0: {card}, 1: set()}, card, 7)


def test_find_bucket_missing_card(card):
    assert find_bucket({0: set()}, card) is None
