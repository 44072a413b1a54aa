"""Detail text for the selected brew.

Pure functions of a Brew; the view decides what to show when nothing is
selected.
"""

from typing import Sequence

from brewtracker.store import Brew, MAX_RATING


NOTHING_SELECTED = "Nothing Selected"

FILLED_STAR = "★"
EMPTY_STAR = "☆"
BULLET = "⬤"


def star_rating(rating: int) -> str:
    """Rating line, e.g. 'Rating: ★★★☆☆'. The empty count never goes negative."""
    filled = max(rating, 0)
    empty = max(MAX_RATING - filled, 0)
    return "Rating: " + FILLED_STAR * filled + EMPTY_STAR * empty


def detail_list(items: Sequence[str], ordered: bool) -> list[str]:
    """Bulleted or 1-based numbered lines, in the given order."""
    if ordered:
        return [f"{number}. {item}" for number, item in enumerate(items, 1)]
    return [f"{BULLET} {item}" for item in items]


def format_details(brew: Brew) -> list[str]:
    initial, final = brew.gravity
    return [
        star_rating(brew.rating),
        "",
        "Description",
        brew.description,
        "",
        "Ingredients",
        *detail_list(brew.ingredients, ordered=False),
        "",
        "Method",
        *detail_list(brew.method, ordered=True),
        "",
        f"Initial Gravity: {initial}",
        f"Final Gravity: {final}",
    ]
