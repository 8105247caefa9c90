# test_router_properties.py
# Property-based tests for Router using Hypothesis

from hypothesis import given, strategies as st, settings, assume
from hypothesis.stateful import RuleBasedStateMachine, rule, precondition, invariant

from navstack.navigation import NavigationPath, Router


settings.register_profile(
    "navigation",
    max_examples=100,
    deadline=None,
)
settings.load_profile("navigation")


# A small alphabet so sequences contain plenty of duplicates
route_values = st.one_of(
    st.sampled_from(["home", "profile", "settings", "detail"]),
    st.tuples(st.just("detail"), st.integers(min_value=0, max_value=3)),
)
route_lists = st.lists(route_values, max_size=30)


def make_router(routes=()):
    router = Router(logging_enabled=False)
    for route in routes:
        router.navigate(route)
    return router


def assert_in_sync(router):
    assert len(router.path) == router.count == len(router.current_routes)
    assert router.is_empty == (router.count == 0) == router.path.is_empty


class TestRouterProperties:
    """Laws that hold for every sequence of routes"""

    @given(routes=route_lists)
    def test_navigate_preserves_order_and_count(self, routes):
        router = make_router(routes)

        assert router.count == len(routes)
        assert router.current_routes == tuple(routes)
        assert router.top == (routes[-1] if routes else None)
        assert_in_sync(router)

    @given(routes=route_lists)
    def test_pop_to_root_always_empties(self, routes):
        router = make_router(routes)

        router.pop_to_root()

        assert router.is_empty
        assert router.current_routes == ()
        assert_in_sync(router)

    @given(routes=route_lists, data=st.data())
    def test_pop_to_truncates_after_first_match(self, routes, data):
        assume(routes)
        target = data.draw(st.sampled_from(routes))
        first = routes.index(target)
        router = make_router(routes)

        router.pop_to(target)

        assert router.current_routes == tuple(routes[:first + 1])
        assert router.top == target
        assert_in_sync(router)

    @given(routes=route_lists, target=route_values)
    def test_pop_to_absent_route_is_noop(self, routes, target):
        assume(target not in routes)
        router = make_router(routes)
        before = router.current_routes

        router.pop_to(target)

        assert router.current_routes == before
        assert router.current_routes is before

    @given(routes=route_lists, route=route_values)
    def test_navigate_then_pop_restores_routes(self, routes, route):
        router = make_router(routes)
        before = router.current_routes

        router.navigate(route)
        router.pop()

        assert router.current_routes == before
        assert_in_sync(router)

    @given(routes=route_lists, pops=st.integers(min_value=0, max_value=40))
    def test_pops_never_go_below_zero(self, routes, pops):
        router = make_router(routes)

        for _ in range(pops):
            router.pop()

        assert router.current_routes == tuple(routes[:max(len(routes) - pops, 0)])
        assert_in_sync(router)

    @given(routes=route_lists, extra=route_lists)
    def test_snapshots_never_change(self, routes, extra):
        router = make_router(routes)
        snapshot = router.current_routes

        router.pop()
        for route in extra:
            router.navigate(route)
        router.pop_to_root()

        assert snapshot == tuple(routes)


class RouterStateMachine(RuleBasedStateMachine):
    """Drive a Router with random operations and compare against a plain list"""

    def __init__(self):
        super().__init__()
        self.router = Router(logging_enabled=False)
        self.expected = []
        self.notifications = 0
        self.router.subscribe(self._on_change)

    def _on_change(self, router):
        self.notifications += 1

    def _check_notified(self, before, changed):
        assert self.notifications == before + (1 if changed else 0)

    @rule(route=route_values)
    def navigate(self, route):
        before = self.notifications
        self.router.navigate(route)
        self.expected.append(route)
        self._check_notified(before, True)

    @rule()
    def pop(self):
        before = self.notifications
        changed = bool(self.expected)
        self.router.pop()
        if self.expected:
            self.expected.pop()
        self._check_notified(before, changed)

    @rule()
    def pop_to_root(self):
        before = self.notifications
        changed = bool(self.expected)
        self.router.pop_to_root()
        self.expected.clear()
        self._check_notified(before, changed)

    @rule(route=route_values)
    def pop_to(self, route):
        before = self.notifications
        if route in self.expected:
            keep = self.expected.index(route) + 1
            changed = keep < len(self.expected)
            del self.expected[keep:]
        else:
            changed = False
        self.router.pop_to(route)
        self._check_notified(before, changed)

    @precondition(lambda self: self.expected)
    @rule(data=st.data())
    def pop_to_existing(self, data):
        route = data.draw(st.sampled_from(self.expected))
        self.router.pop_to(route)
        del self.expected[self.expected.index(route) + 1:]
        assert self.router.top == route

    @rule()
    def rebind_path(self):
        path = NavigationPath()
        self.router.bind_path(path)
        assert self.router.path is path

    @invariant()
    def routes_match_reference(self):
        assert self.router.current_routes == tuple(self.expected)
        assert self.router.count == len(self.expected)

    @invariant()
    def path_matches_stack(self):
        assert len(self.router.path) == self.router.count
        assert self.router.is_empty == (not self.expected)


TestRouterStateMachine = RouterStateMachine.TestCase
TestRouterStateMachine.settings = settings(max_examples=50, stateful_step_count=30, deadline=None)
