"""
Route values.
"""

from .route import Route, R

__all__ = [
    'Route',
    'R',
]
