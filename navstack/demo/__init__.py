"""Demo application for navstack."""

from .routes import AppRoute, Detail, Home, Profile, Settings
from .app import DemoApp, main

__all__ = [
    'AppRoute',
    'Detail',
    'Home',
    'Profile',
    'Settings',
    'DemoApp',
    'main',
]
