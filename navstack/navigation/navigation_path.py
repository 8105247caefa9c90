"""
Opaque, append/truncate-only mirror of a route stack.
"""

from typing import Any, Hashable, List

from loguru import logger


class NavigationPathError(Exception):
    """Raised when a path is asked to remove more elements than it holds."""


class NavigationPath:
    """
    The path a host framework reads to drive screen transitions.

    Only two mutations exist: append one element, and remove the last ``k``
    elements. Elements are not exposed; hosts only need the count and the
    subclass hooks. The path is written by its :class:`Router` alone.
    """

    def __init__(self) -> None:
        self._elements: List[Hashable] = []

    def __len__(self) -> int:
        return len(self._elements)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(count={len(self)})"

    @property
    def count(self) -> int:
        return len(self._elements)

    @property
    def is_empty(self) -> bool:
        return not self._elements

    def append(self, element: Hashable) -> None:
        """Append one element to the path."""
        self._on_append(element)
        self._elements.append(element)

    def remove_last(self, k: int = 1) -> None:
        """
        Remove the last ``k`` elements.

        Args:
            k: Number of elements to remove, between 0 and ``count``

        Raises:
            NavigationPathError: If ``k`` is negative or larger than ``count``
        """
        if k < 0 or k > len(self._elements):
            raise NavigationPathError(
                f"Cannot remove {k} element(s) from a path of {len(self._elements)}"
            )
        if k == 0:
            return
        self._on_remove_last(k)
        del self._elements[-k:]
        logger.trace(f"Path truncated by {k} to {len(self._elements)}")

    # ------------------------------------------------------------------
    # Hooks for host-backed paths
    def _on_append(self, element: Any) -> None:
        """Called before ``element`` is recorded; raising aborts the append."""

    def _on_remove_last(self, k: int) -> None:
        """Called before the last ``k`` elements are dropped."""
