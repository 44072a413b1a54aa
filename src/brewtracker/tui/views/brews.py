from rich.text import Text
from textual.containers import Horizontal, Vertical, VerticalScroll
from textual.dom import DOMNode
from textual.widgets import Static

from brewtracker.tui.details import NOTHING_SELECTED, format_details
from brewtracker.tui.keys import KEY_HINTS
from brewtracker.tui.state import AppState
from brewtracker.tui.views.base import View


class DetailPane(VerticalScroll, can_focus=False):
    """Scrolled only from AppState.scroll, so it never takes focus or keys."""


class BrewsView(View):
    name = "brews"

    HIGHLIGHT_SYMBOL = ">> "
    HIGHLIGHT_STYLE = "bold black on white"

    def brew_list(self, state: AppState) -> Text:
        """Brew names, one per line, with the selected row highlighted."""
        # Rows only shift right to make room for the symbol while one is shown
        pad = " " * len(self.HIGHLIGHT_SYMBOL) if state.selected is not None else ""

        text = Text(no_wrap=True, overflow="ellipsis")
        for index, name in enumerate(state.brews.names):
            if index:
                text.append("\n")
            if index == state.selected:
                text.append(self.HIGHLIGHT_SYMBOL + name, style=self.HIGHLIGHT_STYLE)
            else:
                text.append(pad + name)
        return text

    def details(self, state: AppState) -> list[str]:
        """Detail lines for the selection, unwrapped and unscrolled."""
        brew = state.selected_brew
        return format_details(brew) if brew is not None else [NOTHING_SELECTED]

    def render(self, state: AppState):
        brews = Static(self.brew_list(state), id="brews")
        brews.border_title = "My Brews"

        detail = DetailPane(
            Static(Text("\n".join(self.details(state))), id="detail-text"),
            id="detail",
        )
        detail.border_title = "Information"

        return [
            Vertical(
                Horizontal(brews, detail, id="brews-layout"),
                Static(KEY_HINTS, id="hint-bar"),
                id="main",
            )
        ]

    def draw(self, state: AppState, root: DOMNode) -> None:
        root.query_one("#brews", Static).update(self.brew_list(state))
        root.query_one("#detail-text", Static).update(Text("\n".join(self.details(state))))

        # scroll counts wrapped rows; wait for the new text to be laid out
        pane = root.query_one("#detail", DetailPane)
        pane.call_after_refresh(pane.scroll_to, y=state.scroll, animate=False)
