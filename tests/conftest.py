"""Shared fixtures: in-memory brews and brew files on disk."""

import json

import pytest

from brewtracker.store import Brew, BrewStore


def _brew(name: str, rating: int = 3, **overrides) -> Brew:
    fields = {
        "name": name,
        "rating": rating,
        "description": f"{name} description",
        "ingredients": ("Honey", "Water"),
        "method": ("Boil", "Ferment"),
        "gravity": (1.1, 1.0),
    }
    fields.update(overrides)
    return Brew(**fields)


@pytest.fixture
def make_brew():
    return _brew


@pytest.fixture
def mead() -> Brew:
    return Brew(
        name="Mead",
        rating=3,
        description="",
        ingredients=("Honey", "Water"),
        method=("Boil", "Ferment"),
        gravity=(1.10, 1.00),
    )


@pytest.fixture
def three_brews() -> BrewStore:
    return BrewStore([_brew("Mead"), _brew("Cider", 4), _brew("Stout", 5)])


@pytest.fixture
def mead_record() -> dict:
    return {
        "name": "Mead",
        "rating": 3,
        "description": "Dry and still",
        "ingredients": ["Honey", "Water"],
        "method": ["Boil", "Ferment"],
        "gravity": [1.10, 1.00],
    }


@pytest.fixture
def write_brews(tmp_path):
    """Write a brew file and return its path. Accepts records or raw text."""

    def _write(content, name: str = "data.json"):
        path = tmp_path / name
        if isinstance(content, str):
            path.write_text(content, encoding="utf-8")
        else:
            path.write_text(json.dumps({"brews": content}), encoding="utf-8")
        return path

    return _write
