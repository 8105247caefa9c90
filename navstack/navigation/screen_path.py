"""
Navigation path backed by a Textual app's screen stack.
"""

from typing import TYPE_CHECKING, Any, Callable, List, Tuple

from loguru import logger
from textual.screen import Screen

from .navigation_path import NavigationPath

if TYPE_CHECKING:
    from textual.app import App


Destination = Callable[[Any], Screen]


class ScreenPath(NavigationPath):
    """
    Projects path mutations onto ``app``'s screen stack.

    Appending builds a screen with ``destination`` and pushes it; removing
    ``k`` elements pops ``k`` screens. The app's default screen is the root
    content and is never popped from here.
    """

    def __init__(self, app: 'App', destination: Destination):
        super().__init__()
        self.app = app
        self.destination = destination
        self._screens: List[Screen] = []

    @property
    def screens(self) -> Tuple[Screen, ...]:
        """Screens pushed for this path, bottom first."""
        return tuple(self._screens)

    def _on_append(self, element: Any) -> None:
        screen = self.destination(element)
        self.app.push_screen(screen)
        self._screens.append(screen)
        logger.debug(f"Pushed {type(screen).__name__} for {element!r}")

    def _on_remove_last(self, k: int) -> None:
        try:
            for _ in range(k):
                expected = self._screens[-1]
                if self.app.screen is not expected:
                    logger.warning(
                        f"Top screen is {type(self.app.screen).__name__}, expected {type(expected).__name__}; "
                        "screens must not be pushed or dismissed outside the router"
                    )
                self.app.pop_screen()
                self._screens.pop()
        except Exception:
            # Keep the element count equal to the screens actually popped
            del self._elements[len(self._screens):]
            raise
        logger.debug(f"Popped {k} screen(s)")
