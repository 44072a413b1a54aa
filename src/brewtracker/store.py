"""Record store: brew records loaded once from a JSON file.

The file holds an object with a `brews` list. Each record is validated on
load and the resulting store is immutable for the rest of the session.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Iterator, Sequence


DATA_FILE = "data.json"

MIN_RATING = 0
MAX_RATING = 5


class BrewFileError(RuntimeError):
    """Raised when the brew file is missing, unreadable or malformed."""


@dataclass(frozen=True)
class Brew:
    """A single home-brew recipe."""
    name: str
    rating: int
    description: str
    ingredients: tuple[str, ...]
    method: tuple[str, ...]
    gravity: tuple[float, float]  # (initial, final)


class BrewStore(Sequence[Brew]):
    """Ordered, read-only collection of brews."""

    def __init__(self, brews: Sequence[Brew] = ()) -> None:
        self._brews: tuple[Brew, ...] = tuple(brews)

    def __getitem__(self, index):
        return self._brews[index]

    def __len__(self) -> int:
        return len(self._brews)

    def __iter__(self) -> Iterator[Brew]:
        return iter(self._brews)

    def __repr__(self) -> str:
        return f"BrewStore({len(self._brews)} brews)"

    @property
    def names(self) -> list[str]:
        return [brew.name for brew in self._brews]


# =============================================================================
# Loading
# =============================================================================

def load_brews(path: Path | str = DATA_FILE) -> BrewStore:
    """Read and validate the brew file. Raises BrewFileError on any problem."""
    path = Path(path)
    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as e:
        raise BrewFileError(f"Cannot read brew file {path}: {e.strerror or e}") from e

    try:
        data = json.loads(raw)
    except json.JSONDecodeError as e:
        raise BrewFileError(
            f"{path} is not well-formatted JSON (line {e.lineno}, column {e.colno}): {e.msg}"
        ) from e

    if not isinstance(data, dict) or not isinstance(data.get("brews"), list):
        raise BrewFileError(f"{path} must contain an object with a 'brews' list")

    brews = [_parse_brew(path, index, record) for index, record in enumerate(data["brews"])]
    logging.info("Loaded %d brews from %s", len(brews), path)
    return BrewStore(brews)


def _parse_brew(path: Path, index: int, record: Any) -> Brew:
    """Validate one record from the `brews` list."""

    def fail(reason: str) -> BrewFileError:
        return BrewFileError(f"{path}: brew #{index + 1}: {reason}")

    if not isinstance(record, dict):
        raise fail("expected an object")

    missing = [
        key
        for key in ("name", "rating", "description", "ingredients", "method", "gravity")
        if key not in record
    ]
    if missing:
        raise fail(f"missing field(s): {', '.join(missing)}")

    name = record["name"]
    if not isinstance(name, str) or not name.strip():
        raise fail("'name' must be a non-empty string")

    rating = record["rating"]
    # bool is an int subclass; reject it explicitly
    if isinstance(rating, bool) or not isinstance(rating, int):
        raise fail("'rating' must be an integer")
    if not MIN_RATING <= rating <= MAX_RATING:
        raise fail(f"'rating' must be between {MIN_RATING} and {MAX_RATING}, got {rating}")

    description = record["description"]
    if not isinstance(description, str):
        raise fail("'description' must be a string")

    ingredients = _string_list(record["ingredients"])
    if ingredients is None:
        raise fail("'ingredients' must be a list of strings")

    method = _string_list(record["method"])
    if method is None:
        raise fail("'method' must be a list of strings")

    gravity = record["gravity"]
    if (
        not isinstance(gravity, list)
        or len(gravity) != 2
        or not all(_is_number(value) for value in gravity)
    ):
        raise fail("'gravity' must be a list of exactly two numbers")

    return Brew(
        name=name,
        rating=rating,
        description=description,
        ingredients=ingredients,
        method=method,
        gravity=(float(gravity[0]), float(gravity[1])),
    )


def _string_list(value: Any) -> tuple[str, ...] | None:
    if not isinstance(value, list) or not all(isinstance(item, str) for item in value):
        return None
    return tuple(value)


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)
