import pytest

from leitner.application.hints import get_hint
from leitner.domain.models import Flashcard


@pytest.mark.parametrize(
    "front,expected",
    [
        ("a", "a"),
        ("ab", "a_"),
        ("abc", "ab_"),
        ("Paris", "Par__"),
        ("capital", "capi___"),
    ],
)
def test_reveals_first_half_rounded_up(front, expected):
    assert get_hint(Flashcard(front, "back")) == expected


def test_empty_front():
    assert get_hint(Flashcard("", "back")) == ""


def test_length_matches_front():
    for front in ["x", "hello world", "0123456789"]:
        assert len(get_hint(Flashcard(front, "b"))) == len(front)


def test_ignores_card_hint():
    card = Flashcard("abcd", "b", hint="starts with a")
    assert get_hint(card) == "ab__"


def test_custom_placeholder():
    assert get_hint(Flashcard("abcd", "b"), placeholder="*") == "ab**"


def test_placeholder_must_be_one_character():
    with pytest.raises(ValueError):
        get_hint(Flashcard("abcd", "b"), placeholder="..")
