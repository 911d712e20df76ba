import pytest

from leitner.domain.models import Flashcard


@pytest.fixture
def cards():
    """Three distinct cards keyed by a short name."""
    return {
        "a": Flashcard("2+2", "4", hint="small sum", tags=("math",)),
        "b": Flashcard("capital of France", "Paris", tags=("geo",)),
        "c": Flashcard("H2O", "water"),
    }


@pytest.fixture
def mock_home(tmp_path, monkeypatch):
    """Mocks Path.home() to point to a temp dir."""
    home = tmp_path / "home"
    home.mkdir()

    # Mocking HOME to a temp directory to isolate config files
    monkeypatch.setenv("HOME", str(home))
    return home
