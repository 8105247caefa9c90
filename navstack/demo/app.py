"""
Demo application: a few routes on top of a Textual root screen.
"""

from textual import on
from textual.app import ComposeResult
from textual.containers import Horizontal, Vertical
from textual.widgets import Button, Footer, Header, Static

from ..config import load_cli_config_and_ensure_existence
from ..logging_config import configure_logging
from ..navigation.router import Router
from ..navigation.router_app import RouterApp
from .routes import Detail, Home, Profile, Settings


class DemoApp(RouterApp):
    """Root content with buttons that push routes."""

    TITLE = "navstack demo"

    CSS = """
    #root-body {
        align: center middle;
    }

    #root-actions Button {
        margin-right: 1;
    }
    """

    BINDINGS = [
        ("q", "quit", "Quit"),
    ]

    def compose(self) -> ComposeResult:
        yield Header()
        with Vertical(id="root-body"):
            yield Static("Root content. Push a route to begin.", id="root-label")
            with Horizontal(id="root-actions"):
                yield Button("Home", id="push-home")
                yield Button("Profile u1", id="push-profile")
                yield Button("Settings", id="push-settings")
                yield Button("Detail 1", id="push-detail")
        yield Footer()

    def on_mount(self) -> None:
        self.router.subscribe(self._update_subtitle)
        self._update_subtitle(self.router)

    def _update_subtitle(self, router: Router) -> None:
        self.sub_title = f"{router.count} route(s)"

    @on(Button.Pressed, "#push-home")
    def push_home(self) -> None:
        self.router.navigate(Home())

    @on(Button.Pressed, "#push-profile")
    def push_profile(self) -> None:
        self.router.navigate(Profile(user_id="u1"))

    @on(Button.Pressed, "#push-settings")
    def push_settings(self) -> None:
        self.router.navigate(Settings())

    @on(Button.Pressed, "#push-detail")
    def push_detail(self) -> None:
        self.router.navigate(Detail(item_id=1))


def main() -> None:
    load_cli_config_and_ensure_existence()
    configure_logging()
    DemoApp().run()


if __name__ == "__main__":
    main()
