from abc import ABC, abstractmethod
from typing import Iterable

from textual.dom import DOMNode
from textual.widget import Widget

from brewtracker.tui.state import AppState


class View(ABC):
    name: str

    @abstractmethod
    def render(self, state: AppState) -> Iterable[Widget]: ...

    @abstractmethod
    def draw(self, state: AppState, root: DOMNode) -> None:
        """Update already-mounted widgets from state."""
