"""Detail text generated for the selected brew."""

import pytest

from brewtracker.tui.details import (
    NOTHING_SELECTED,
    detail_list,
    format_details,
    star_rating,
)


def test_mead_scenario(mead):
    lines = format_details(mead)

    assert lines[0] == "Rating: ★★★☆☆"
    assert lines[5:8] == ["Ingredients", "⬤ Honey", "⬤ Water"]
    assert lines[9:12] == ["Method", "1. Boil", "2. Ferment"]
    assert lines[-2:] == ["Initial Gravity: 1.1", "Final Gravity: 1.0"]


def test_full_layout(make_brew):
    brew = make_brew(
        "Cider",
        rating=4,
        description="Crisp",
        ingredients=("Apples",),
        method=("Press", "Ferment", "Bottle"),
        gravity=(1.05, 0.998),
    )
    assert format_details(brew) == [
        "Rating: ★★★★☆",
        "",
        "Description",
        "Crisp",
        "",
        "Ingredients",
        "⬤ Apples",
        "",
        "Method",
        "1. Press",
        "2. Ferment",
        "3. Bottle",
        "",
        "Initial Gravity: 1.05",
        "Final Gravity: 0.998",
    ]


def test_empty_lists_keep_headings(make_brew):
    brew = make_brew("Water", description="", ingredients=(), method=())
    lines = format_details(brew)
    assert lines[2:10] == ["Description", "", "", "Ingredients", "", "Method", "", "Initial Gravity: 1.1"]


def test_is_deterministic(mead):
    assert format_details(mead) == format_details(mead)


@pytest.mark.parametrize("rating", range(6))
def test_rating_line_has_five_glyphs(rating):
    glyphs = star_rating(rating).removeprefix("Rating: ")
    assert len(glyphs) == 5
    assert glyphs.count("★") == rating


def test_rating_above_five_has_no_empty_stars():
    assert star_rating(7) == "Rating: ★★★★★★★"


def test_negative_rating_has_no_filled_stars():
    assert star_rating(-2) == "Rating: ☆☆☆☆☆"


def test_method_keeps_stored_order():
    steps = ["Zest", "Add", "Boil"]
    assert detail_list(steps, ordered=True) == ["1. Zest", "2. Add", "3. Boil"]


def test_ingredients_are_bulleted():
    assert detail_list(["Hops"], ordered=False) == ["⬤ Hops"]


def test_nothing_selected_sentinel():
    assert NOTHING_SELECTED == "Nothing Selected"
