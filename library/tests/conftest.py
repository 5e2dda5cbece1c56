# tests/conftest.py
import pytest

from library import catalog


CALLER = "c200a1b2c3d4e5f60718293a4b5c6d7e"


def caller_headers(identity: str = CALLER) -> dict:
    """Extra kwargs for the Django test client carrying a caller identity."""
    return {"HTTP_X_CALLER_IDENTITY": identity}


@pytest.fixture
def caller():
    return CALLER


@pytest.fixture
def make_track():
    """
    Returns a function that adds a track with sensible defaults:
      make_track(title="Song A", genre="rock")
    """
    counter = {"n": 0}

    def factory(**overrides):
        counter["n"] += 1
        n = counter["n"]
        fields = dict(
            title=f"Song {n}",
            artist="Artist X",
            album="Album Y",
            genre=None,
            year=None,
            duration_seconds=180,
            file_path=f"tracks/{n}.mp3",
            file_size_bytes=1000,
        )
        fields.update(overrides)
        return catalog.add_track(**fields)

    return factory
