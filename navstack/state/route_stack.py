"""
Route stack state.
"""

from typing import Any, Generic, Iterator, List, Optional, Sequence, Tuple, Union, overload

from ..routes.route import R


class RouteSnapshot(Sequence[R]):
    """
    Read-only, immutable view of the first ``length`` routes of a stack.

    Taking a snapshot is O(1): it shares the stack's list. The stack only
    appends to a shared list; pops and truncations copy it first, so the
    prefix a snapshot sees never changes. Compares equal to tuples and lists
    holding the same routes.
    """

    __slots__ = ("_routes", "_length")

    def __init__(self, routes: List[R], length: int) -> None:
        self._routes = routes
        self._length = length

    def __len__(self) -> int:
        return self._length

    @overload
    def __getitem__(self, index: int) -> R: ...

    @overload
    def __getitem__(self, index: slice) -> Tuple[R, ...]: ...

    def __getitem__(self, index: Union[int, slice]) -> Union[R, Tuple[R, ...]]:
        if isinstance(index, slice):
            return tuple(self._routes[:self._length][index])
        if index < 0:
            index += self._length
        if not 0 <= index < self._length:
            raise IndexError("route snapshot index out of range")
        return self._routes[index]

    def __iter__(self) -> Iterator[R]:
        for index in range(self._length):
            yield self._routes[index]

    def __eq__(self, other: Any) -> bool:
        if isinstance(other, (RouteSnapshot, tuple, list)):
            return len(other) == self._length and all(a == b for a, b in zip(self, other))
        return NotImplemented

    def __hash__(self) -> int:
        return hash(tuple(self))

    def __repr__(self) -> str:
        return f"RouteSnapshot({list(self)!r})"


class RouteStack(Generic[R]):
    """
    Ordered navigation history, root at index 0 and the visible route last.

    The stack can only grow at the tail and shrink from the tail. Duplicate
    routes are allowed at different indices.
    """

    def __init__(self) -> None:
        self._routes: List[R] = []
        self._snapshot: Optional[RouteSnapshot[R]] = None
        # True while some snapshot may reference self._routes
        self._shared = False

    def __len__(self) -> int:
        return len(self._routes)

    def __iter__(self) -> Iterator[R]:
        return iter(self.snapshot())

    def __repr__(self) -> str:
        return f"RouteStack({self._routes!r})"

    # ------------------------------------------------------------------
    # Mutation
    def push(self, route: R) -> None:
        """Append ``route`` at the top of the stack."""
        self._routes.append(route)
        self._snapshot = None

    def pop(self) -> Optional[R]:
        """Remove and return the top route, or ``None`` when empty."""
        if not self._routes:
            return None
        top = self._routes[-1]
        self.truncate(len(self._routes) - 1)
        return top

    def truncate(self, length: int) -> List[R]:
        """
        Keep only the first ``length`` routes.

        Returns:
            The removed routes, bottom first
        """
        removed = self._routes[length:]
        if not removed:
            return removed
        if self._shared:
            self._routes = self._routes[:length]
            self._shared = False
        else:
            del self._routes[length:]
        self._snapshot = None
        return removed

    def clear(self) -> List[R]:
        """Remove every route and return them, bottom first."""
        return self.truncate(0)

    # ------------------------------------------------------------------
    # Inspection
    def first_index(self, route: R) -> Optional[int]:
        """Index of the occurrence of ``route`` closest to the root."""
        for index, candidate in enumerate(self._routes):
            if candidate == route:
                return index
        return None

    def snapshot(self) -> RouteSnapshot[R]:
        """O(1) read-only view of the stack as it is now."""
        if self._snapshot is None:
            self._snapshot = RouteSnapshot(self._routes, len(self._routes))
            self._shared = True
        return self._snapshot

    @property
    def top(self) -> Optional[R]:
        return self._routes[-1] if self._routes else None

    @property
    def root(self) -> Optional[R]:
        return self._routes[0] if self._routes else None

    @property
    def is_empty(self) -> bool:
        return not self._routes
