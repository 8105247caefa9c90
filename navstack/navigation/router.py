"""
Router: the navigation facade over a route stack and its path.
"""

from typing import Callable, Generic, List, Optional

from loguru import logger

from ..config import get_navigation_logging_enabled
from ..routes.route import R
from ..state.route_stack import RouteSnapshot, RouteStack
from .navigation_path import NavigationPath


Listener = Callable[["Router"], None]


class Router(Generic[R]):
    """
    Programmatic navigation for a single navigation stack.

    The router owns a :class:`RouteStack`, the source of truth, and a
    :class:`NavigationPath` that mirrors it for the host framework. Every
    operation mutates both in one call, so ``len(router.path) == router.count``
    holds whenever control returns to the caller.

    Invalid requests (popping an empty stack, popping to a route that was never
    pushed) are no-ops. With ``logging_enabled`` they are reported as warnings
    and nothing else changes.

    Example::

        router = Router()
        router.navigate(Home())
        router.navigate(Profile(user_id="123"))
        router.pop_to(Home())
        assert router.current_routes == (Home(),)

    Routers are meant to be driven from one thread, the UI event loop.
    """

    def __init__(self, logging_enabled: Optional[bool] = None, path: Optional[NavigationPath] = None):
        """
        Create a router with an empty stack.

        Args:
            logging_enabled: Log navigation operations. Defaults to the
                ``[navigation] logging_enabled`` setting.
            path: An empty path to mirror the stack into. Defaults to an
                in-memory :class:`NavigationPath`.
        """
        if logging_enabled is None:
            logging_enabled = get_navigation_logging_enabled()
        self.logging_enabled = logging_enabled
        self._routes: RouteStack[R] = RouteStack()
        self._path = NavigationPath()
        self._listeners: List[Listener] = []
        self._log = logger.bind(category="Router")
        if path is not None:
            self.bind_path(path)

    def __repr__(self) -> str:
        return f"Router(count={self.count}, top={self.top!r})"

    # ------------------------------------------------------------------
    # Core navigation
    def navigate(self, route: R) -> None:
        """
        Push ``route`` onto the stack, showing its screen.

        Args:
            route: The destination route to navigate to
        """
        self._path.append(route)
        self._routes.push(route)

        if self.logging_enabled:
            self._log.debug(f"Navigated to route {route!r} (stack size: {len(self._routes)})")
        self._did_change()

    def pop(self) -> None:
        """Remove the top route. Does nothing when the stack is empty."""
        if self._routes.is_empty:
            if self.logging_enabled:
                self._log.warning("Pop called on empty stack")
            return

        self._path.remove_last(1)
        popped = self._routes.pop()

        if self.logging_enabled:
            self._log.debug(f"Popped route {popped!r} (stack size: {len(self._routes)})")
        self._did_change()

    def pop_to_root(self) -> None:
        """Remove every route, returning to the root content."""
        previous_count = len(self._routes)
        if previous_count == 0:
            if self.logging_enabled:
                self._log.debug("Popped to root (routes removed: 0)")
            return

        self._path.remove_last(previous_count)
        self._routes.clear()

        if self.logging_enabled:
            self._log.debug(f"Popped to root (routes removed: {previous_count})")
        self._did_change()

    def pop_to(self, route: R) -> None:
        """
        Pop routes until ``route`` is on top.

        The first occurrence of ``route`` counting from the root is kept; any
        later duplicate is popped with the rest. Does nothing if ``route`` is
        not on the stack.

        Args:
            route: The route to navigate back to
        """
        index = self._routes.first_index(route)
        if index is None:
            if self.logging_enabled:
                self._log.warning(f"pop_to ignored: route {route!r} not in stack")
            return

        count_to_remove = len(self._routes) - index - 1
        if count_to_remove == 0:
            if self.logging_enabled:
                self._log.debug(f"Popped to route {route!r} (routes removed: 0)")
            return

        self._path.remove_last(count_to_remove)
        self._routes.truncate(index + 1)

        if self.logging_enabled:
            self._log.debug(
                f"Popped to route {route!r} (routes removed: {count_to_remove}, stack size: {len(self._routes)})"
            )
        self._did_change()

    # ------------------------------------------------------------------
    # Inspection
    @property
    def current_routes(self) -> RouteSnapshot[R]:
        """Immutable view of the stack, root first. O(1); compares equal to a tuple."""
        return self._routes.snapshot()

    @property
    def is_empty(self) -> bool:
        return self._routes.is_empty

    @property
    def count(self) -> int:
        return len(self._routes)

    @property
    def top(self) -> Optional[R]:
        """The visible route, or ``None`` at the root content."""
        return self._routes.top

    @property
    def path(self) -> NavigationPath:
        """The path mirroring the stack. Hosts must not mutate it."""
        return self._path

    # ------------------------------------------------------------------
    # Host integration
    def bind_path(self, path: NavigationPath) -> None:
        """
        Mirror the stack into ``path`` from now on.

        ``path`` is rebuilt from the current routes, so a router can be used
        before the host is ready to display anything.

        Raises:
            ValueError: If ``path`` is not empty
        """
        if not path.is_empty:
            raise ValueError(f"Cannot bind a non-empty path ({len(path)} elements)")
        for route in self._routes.snapshot():
            path.append(route)
        self._path = path
        if self.logging_enabled:
            self._log.debug(f"Bound {path!r} with {len(self._routes)} route(s)")

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """
        Call ``listener(router)`` after every operation that changed the stack.

        Returns:
            A callable that removes the listener
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _did_change(self) -> None:
        if len(self._path) != len(self._routes):
            self._log.error(
                f"Path out of sync ({len(self._path)} vs {len(self._routes)} routes); rebuilding from stack"
            )
            self._path.remove_last(len(self._path))
            for route in self._routes.snapshot():
                self._path.append(route)

        for listener in list(self._listeners):
            listener(self)
