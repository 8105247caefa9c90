"""Routes of the demo application."""

from dataclasses import dataclass
from typing import TYPE_CHECKING, Union

from ..routes.route import Route

if TYPE_CHECKING:
    from textual.screen import Screen
    from ..navigation.router import Router


@dataclass(frozen=True)
class Home(Route):
    def view(self, router: "Router") -> "Screen":
        from .screens import HomeScreen
        return HomeScreen(router, self)


@dataclass(frozen=True)
class Profile(Route):
    user_id: str

    def view(self, router: "Router") -> "Screen":
        from .screens import ProfileScreen
        return ProfileScreen(router, self)


@dataclass(frozen=True)
class Settings(Route):
    def view(self, router: "Router") -> "Screen":
        from .screens import SettingsScreen
        return SettingsScreen(router, self)


@dataclass(frozen=True)
class Detail(Route):
    item_id: int

    def view(self, router: "Router") -> "Screen":
        from .screens import DetailScreen
        return DetailScreen(router, self)


AppRoute = Union[Home, Profile, Settings, Detail]
