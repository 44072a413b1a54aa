"""Key handling: Textual key names to state actions."""

from typing import Optional

from brewtracker.tui.state import (
    Action,
    Quit,
    ScrollDetails,
    SelectNext,
    SelectPrevious,
    Unselect,
)


KEYMAP: dict[str, Action] = {
    "q": Quit(),
    "left": Unselect(),
    "down": SelectNext(),
    "up": SelectPrevious(),
    "pagedown": ScrollDetails(1),
    "pageup": ScrollDetails(-1),
}

# Shown in the hint bar, in display order
KEY_HINTS = "↑/↓:select  ←:clear  PgUp/PgDn:scroll  q:quit"


def resolve_key(key: str) -> Optional[Action]:
    """Return the action bound to a key, or None for unbound keys."""
    return KEYMAP.get(key)
