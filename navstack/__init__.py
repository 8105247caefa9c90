"""
navstack - typed navigation stacks for Textual applications

A router keeps an ordered stack of route values in lockstep with the screens
a Textual app shows. Routes are plain hashable values (usually frozen
dataclasses); navigating pushes a screen, popping removes it.
"""

__version__ = "0.1.0"

# Version tuple for programmatic comparison
VERSION_TUPLE = (0, 1, 0)

from .routes import Route
from .state import RouteStack
from .navigation import (
    NavigationPath,
    NavigationPathError,
    RoutedScreen,
    Router,
    RouterApp,
    ScreenPath,
)

__all__ = [
    "__version__",
    "VERSION_TUPLE",
    "Route",
    "RouteStack",
    "NavigationPath",
    "NavigationPathError",
    "RoutedScreen",
    "Router",
    "RouterApp",
    "ScreenPath",
]
