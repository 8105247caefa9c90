"""
Navigation state containers.
"""

from .route_stack import RouteSnapshot, RouteStack

__all__ = [
    'RouteSnapshot',
    'RouteStack',
]
