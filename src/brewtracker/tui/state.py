"""
TUI state management and actions.

Architecture:
- Actions are frozen dataclasses representing state transitions
- reduce(state, action) applies a transition to the state in place
- AppState.dispatch(action) mutates self by applying reduce
- Widgets never hold state; they are redrawn from AppState each frame
"""

from dataclasses import dataclass, field
from typing import Optional, Union

from brewtracker.store import Brew, BrewStore


# Upper bound for the detail pane scroll offset (lines)
SCROLL_MAX = 9


# =============================================================================
# Actions
# =============================================================================

@dataclass(frozen=True)
class SelectNext:
    """Highlight the next brew, wrapping from last to first."""
    pass


@dataclass(frozen=True)
class SelectPrevious:
    """Highlight the previous brew, wrapping from first to last."""
    pass


@dataclass(frozen=True)
class Unselect:
    """Clear the highlight. Scroll offset is kept."""
    pass


@dataclass(frozen=True)
class ScrollDetails:
    """Scroll the detail pane by one line; direction is -1, 0 or +1."""
    direction: int


@dataclass(frozen=True)
class Quit:
    """End the session."""
    pass


# Action union type for type checking
Action = Union[
    SelectNext,
    SelectPrevious,
    Unselect,
    ScrollDetails,
    Quit,
]


# =============================================================================
# Reducer
# =============================================================================

def reduce(state: "AppState", action: Action) -> None:
    """
    Apply an action to mutate state.

    An empty store turns selection moves into no-ops, and the scroll offset
    is clamped to [0, SCROLL_MAX].
    """
    count = len(state.brews)

    match action:
        case SelectNext():
            if count == 0:
                return
            if state.selected is None:
                state.selected = 0
            else:
                state.selected = (state.selected + 1) % count

        case SelectPrevious():
            if count == 0:
                return
            if state.selected is None:
                state.selected = 0
            elif state.selected <= 0:
                state.selected = count - 1
            else:
                state.selected = min(state.selected, count) - 1

        case Unselect():
            state.selected = None

        case ScrollDetails(direction=direction):
            step = (direction > 0) - (direction < 0)
            state.scroll = min(max(state.scroll + step, 0), SCROLL_MAX)

        case Quit():
            state.running = False


# =============================================================================
# App State
# =============================================================================

@dataclass
class AppState:
    """
    Session state: the loaded brews plus selection and scroll.

    This is a mutable dataclass. State changes happen via dispatch(action),
    which calls the reduce function to apply transitions.
    """

    brews: BrewStore = field(default_factory=BrewStore)

    # Index into brews; None means nothing is highlighted
    selected: Optional[int] = None

    # Detail pane scroll offset, independent of selection
    scroll: int = 0

    # Cleared by Quit; the app exits once this is False
    running: bool = True

    # -------------------------------------------------------------------------
    # Dispatch
    # -------------------------------------------------------------------------

    def dispatch(self, action: Action) -> None:
        """Apply an action to update state."""
        reduce(self, action)

    # Shorthands for the navigation operations

    def next(self) -> None:
        self.dispatch(SelectNext())

    def previous(self) -> None:
        self.dispatch(SelectPrevious())

    def unselect(self) -> None:
        self.dispatch(Unselect())

    def scroll_by(self, direction: int) -> None:
        self.dispatch(ScrollDetails(direction))

    # -------------------------------------------------------------------------
    # Computed Properties
    # -------------------------------------------------------------------------

    @property
    def selected_brew(self) -> Optional[Brew]:
        """The highlighted brew, if any."""
        if self.selected is None or not 0 <= self.selected < len(self.brews):
            return None
        return self.brews[self.selected]
