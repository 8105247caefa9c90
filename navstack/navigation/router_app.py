"""
Textual glue: an app hosting a router, and a screen base for routed screens.
"""

from typing import Any, Optional

from loguru import logger
from textual.app import App
from textual.binding import Binding
from textual.screen import Screen

from .router import Router
from .screen_path import Destination, ScreenPath


class RoutedScreen(Screen):
    """
    Base screen for route destinations.

    The router is injected explicitly; ``escape`` goes back through
    :meth:`Router.pop` so the stack and the screens stay in step.
    """

    BINDINGS = [
        Binding("escape", "back", "Back"),
    ]

    def __init__(self, router: Router, route: Any = None, **kwargs):
        super().__init__(**kwargs)
        self.router = router
        self.route = route

    def action_back(self) -> None:
        """Pop this screen's route."""
        self.router.pop()


class RouterApp(App):
    """
    App whose default screen is the root content of a navigation stack.

    Routes navigated on ``router`` are shown by pushing the screen returned
    by ``destination(route)``. Without a destination, ``route.view(router)``
    is used (see :class:`~navstack.routes.Route`).

    The router is bound to the screen stack on mount; routes navigated
    earlier are pushed at that point.
    """

    def __init__(
        self,
        router: Optional[Router] = None,
        destination: Optional[Destination] = None,
        **kwargs,
    ):
        super().__init__(**kwargs)
        self.router = router if router is not None else Router()
        self.destination = destination or self._route_view

    def _route_view(self, route: Any) -> Screen:
        return route.view(self.router)

    @property
    def screen_path(self) -> Optional[ScreenPath]:
        """The bound path, once the app is mounted."""
        path = self.router.path
        return path if isinstance(path, ScreenPath) else None

    def on_mount(self) -> None:
        self.router.bind_path(ScreenPath(self, self.destination))
        logger.info(f"Router bound to {type(self).__name__} screen stack")
