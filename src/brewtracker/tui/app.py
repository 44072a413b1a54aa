"""Brewtracker TUI application.

- Single-threaded render/poll loop on top of Textual's message pump
- Draw phase: views push AppState into mounted widgets (no state changes)
- Wait phase: one timer armed for the time left in the current tick
- Keys map to actions in keys.py; transitions live in state.py
"""

from __future__ import annotations

import logging

from textual import events
from textual.app import App, ComposeResult
from textual.timer import Timer
from textual.widgets import Header

from brewtracker.tui.keys import resolve_key
from brewtracker.tui.state import AppState
from brewtracker.tui.ticker import DEFAULT_TICK_RATE, TickClock
from brewtracker.tui.views.brews import BrewsView


class BrewtrackerApp(App):
    CSS_PATH = "tui.css"
    TITLE = "Brewtracker v0.2.2"

    def __init__(
        self,
        state: AppState | None = None,
        tick_rate: float = DEFAULT_TICK_RATE,
        *args,
        **kwargs,
    ):
        super().__init__(*args, **kwargs)
        self.state = state if state is not None else AppState()
        self.brews_view = BrewsView()
        self.ticker = TickClock(tick_rate)
        self.frames = 0
        self._tick_timer: Timer | None = None

    def compose(self) -> ComposeResult:
        yield Header()
        yield from self.brews_view.render(self.state)

    def on_mount(self) -> None:
        logging.info(
            "Session started: %d brews, tick rate %.3fs",
            len(self.state.brews),
            self.ticker.tick_rate,
        )
        self.ticker.advance()
        self._draw()
        self._wait()

    def on_unmount(self) -> None:
        self._cancel_wait()
        logging.info("Session ended after %d frames", self.frames)

    # =====================
    # Loop phases
    # =====================

    def _draw(self) -> None:
        """Draw phase: render the current state. Never mutates it."""
        self.brews_view.draw(self.state, self)
        self.frames += 1

    def _wait(self) -> None:
        """Wait phase: block for input until the current tick runs out."""
        self._cancel_wait()
        self._tick_timer = self.set_timer(self.ticker.timeout(), self._on_tick)

    def _cancel_wait(self) -> None:
        if self._tick_timer is not None:
            self._tick_timer.stop()
            self._tick_timer = None

    def _on_tick(self) -> None:
        """No input arrived within the tick: redraw anyway."""
        self._tick_timer = None
        self.ticker.advance()
        self._draw()
        self._wait()

    # =====================
    # Event handlers
    # =====================

    def on_key(self, event: events.Key) -> None:
        """Dispatch one bound key, then redraw and wait again.

        Unbound keys change nothing, so they skip the redraw and leave the
        pending tick timer running.
        """
        action = resolve_key(event.key)
        if action is None:
            return
        event.stop()

        logging.debug("Key %r -> %s", event.key, action)
        self.state.dispatch(action)

        if not self.state.running:
            self._cancel_wait()
            self.exit()
            return

        self._draw()
        self._wait()

