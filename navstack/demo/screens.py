"""Screens of the demo application."""

from loguru import logger

from textual import on
from textual.app import ComposeResult
from textual.containers import Horizontal, Vertical
from textual.widgets import Button, Footer, Static

from ..config import save_setting_to_cli_config
from ..navigation.router_app import RoutedScreen
from .routes import Detail, Home, Profile, Settings


class DemoScreen(RoutedScreen):
    """
    Common layout: a title, the current stack, and a row of actions.
    Subclasses provide ``title_text`` and ``compose_actions``.
    """

    DEFAULT_CSS = """
    DemoScreen {
        align: center middle;
    }

    .screen-body {
        width: 70;
        height: auto;
        border: round $primary;
        padding: 1 2;
    }

    .screen-title {
        text-style: bold;
        margin-bottom: 1;
    }

    .stack-label {
        color: $text-muted;
        margin-bottom: 1;
    }

    .actions Button {
        margin-right: 1;
    }
    """

    def title_text(self) -> str:
        return type(self.route).__name__

    def compose(self) -> ComposeResult:
        with Vertical(classes="screen-body"):
            yield Static(self.title_text(), classes="screen-title")
            yield Static(self._stack_text(), classes="stack-label")
            with Horizontal(classes="actions"):
                yield from self.compose_actions()
                yield Button("Back", id="back")
                yield Button("Root", id="root")
        yield Footer()

    def compose_actions(self) -> ComposeResult:
        yield from ()

    def _stack_text(self) -> str:
        names = " / ".join(repr(route) for route in self.router.current_routes)
        return f"Stack: {names}"

    @on(Button.Pressed, "#back")
    def handle_back(self) -> None:
        self.router.pop()

    @on(Button.Pressed, "#root")
    def handle_root(self) -> None:
        self.router.pop_to_root()


class HomeScreen(DemoScreen):
    def title_text(self) -> str:
        return "Home"

    def compose_actions(self) -> ComposeResult:
        yield Button("Profile", id="to-profile")
        yield Button("Settings", id="to-settings")

    @on(Button.Pressed, "#to-profile")
    def open_profile(self) -> None:
        self.router.navigate(Profile(user_id="u1"))

    @on(Button.Pressed, "#to-settings")
    def open_settings(self) -> None:
        self.router.navigate(Settings())


class ProfileScreen(DemoScreen):
    def title_text(self) -> str:
        return f"Profile: {self.route.user_id}"

    def compose_actions(self) -> ComposeResult:
        yield Button("Detail", id="to-detail")
        yield Button("Home", id="to-home")

    @on(Button.Pressed, "#to-detail")
    def open_detail(self) -> None:
        self.router.navigate(Detail(item_id=self.router.count))

    @on(Button.Pressed, "#to-home")
    def back_home(self) -> None:
        # Falls back to a plain pop when Home was never pushed
        if Home() in self.router.current_routes:
            self.router.pop_to(Home())
        else:
            self.router.pop()


class SettingsScreen(DemoScreen):
    def title_text(self) -> str:
        return "Settings"

    def compose_actions(self) -> ComposeResult:
        yield Button("Toggle logging", id="toggle-logging")

    @on(Button.Pressed, "#toggle-logging")
    def toggle_logging(self) -> None:
        enabled = not self.router.logging_enabled
        self.router.logging_enabled = enabled
        logger.info(f"Router logging {'enabled' if enabled else 'disabled'}")
        if save_setting_to_cli_config("navigation", "logging_enabled", enabled):
            self.notify(f"Logging: {enabled} (saved)")
        else:
            self.notify(f"Logging: {enabled} (not saved)", severity="warning")


class DetailScreen(DemoScreen):
    def title_text(self) -> str:
        return f"Detail #{self.route.item_id}"

    def compose_actions(self) -> ComposeResult:
        yield Button("Same detail again", id="repeat")
        yield Button("Back to first", id="first")

    @on(Button.Pressed, "#repeat")
    def repeat(self) -> None:
        self.router.navigate(self.route)

    @on(Button.Pressed, "#first")
    def back_to_first(self) -> None:
        self.router.pop_to(self.route)
