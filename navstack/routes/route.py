"""
Route values: hashable identifiers for navigation destinations.
"""

from typing import TYPE_CHECKING, Hashable, TypeVar

if TYPE_CHECKING:
    from textual.screen import Screen
    from ..navigation.router import Router


class Route:
    """
    Base class for application routes.

    Any hashable value can be pushed onto a :class:`~navstack.navigation.Router`;
    subclassing ``Route`` adds the ``view`` hook used by
    :class:`~navstack.navigation.RouterApp` as its default destination.

    Routes are usually frozen dataclasses, one per destination, so that two
    routes are equal only if they are the same kind and all their associated
    data match::

        @dataclass(frozen=True)
        class Profile(Route):
            user_id: str

            def view(self, router):
                return ProfileScreen(router, self)
    """

    __slots__ = ()

    def view(self, router: "Router") -> "Screen":
        """
        Build the screen shown for this route.

        Args:
            router: The router that pushed this route, for the screen to keep

        Returns:
            A Textual screen instance
        """
        raise NotImplementedError(
            f"{type(self).__name__} does not define view(); pass a destination to RouterApp instead"
        )


R = TypeVar("R", bound=Hashable)
