"""
Navigation management module.
"""

from .navigation_path import NavigationPath, NavigationPathError
from .router import Router
from .screen_path import ScreenPath
from .router_app import RoutedScreen, RouterApp

__all__ = [
    'NavigationPath',
    'NavigationPathError',
    'Router',
    'ScreenPath',
    'RoutedScreen',
    'RouterApp',
]
