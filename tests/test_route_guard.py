# tests/test_route_guard.py

"""
Tests for the route guard state machine and its redirect-loop throttle.
"""

import logging

import pytest

from core.route_guard import (
    AuthStatus,
    RedirectLoopState,
    RouteGuard,
    evaluate_route_guard,
    is_authorized,
)
from models.enums import GuardState


class FakeClock:
    def __init__(self, start: float = 10_000.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, ms: float):
        self.now += ms


@pytest.fixture
def navigations():
    return []


@pytest.fixture
def clock():
    return FakeClock()


ANONYMOUS = AuthStatus(is_authenticated=False)


def signed_in(role):
    return AuthStatus(is_authenticated=True, user={"role": role})


# -----------------------------------------------------
# Loading / public routes
# -----------------------------------------------------
def test_loading_takes_no_action(navigations, clock):
    guard = RouteGuard(navigations.append, clock=clock)
    decision = guard.evaluate(AuthStatus(is_loading=True), "/clients")

    assert decision.state == GuardState.loading
    assert decision.show_spinner
    assert navigations == []


@pytest.mark.parametrize("location", ["/login", "/", "/login?redirect=%2Fclients", "/auth/callback?code=x"])
def test_public_routes_render_for_anonymous_users(navigations, clock, location):
    guard = RouteGuard(navigations.append, clock=clock)
    decision = guard.evaluate(ANONYMOUS, location)

    assert decision.state == GuardState.unauthenticated_public
    assert decision.render_children
    assert navigations == []


# -----------------------------------------------------
# Unauthenticated redirects
# -----------------------------------------------------
def test_anonymous_user_is_sent_to_login_with_return_path(navigations, clock):
    guard = RouteGuard(navigations.append, clock=clock)
    decision = guard.evaluate(ANONYMOUS, "/clients/5?tab=pools")

    assert decision.state == GuardState.unauthenticated_redirect
    assert decision.show_spinner
    assert navigations == ["/login?redirect=%2Fclients%2F5%3Ftab%3Dpools"]
    assert guard.loop_state.count == 1


def test_fourth_redirect_within_window_is_throttled(navigations, clock, caplog):
    guard = RouteGuard(navigations.append, clock=clock)

    states = []
    with caplog.at_level(logging.WARNING, logger="poolops"):
        for _ in range(4):
            states.append(guard.evaluate(ANONYMOUS, "/invoices").state)
            clock.advance(1000)

    assert states[:3] == [GuardState.unauthenticated_redirect] * 3
    assert states[3] == GuardState.redirect_throttled
    assert len(navigations) == 3
    assert "Redirect loop detected" in caplog.text


def test_redirects_resume_after_window(navigations, clock):
    guard = RouteGuard(navigations.append, clock=clock)
    for _ in range(3):
        guard.evaluate(ANONYMOUS, "/invoices")
        clock.advance(100)

    clock.advance(4000)
    assert guard.evaluate(ANONYMOUS, "/invoices").state == GuardState.redirect_throttled

    clock.advance(1000)
    decision = guard.evaluate(ANONYMOUS, "/invoices")
    assert decision.state == GuardState.unauthenticated_redirect
    assert guard.loop_state.count == 1
    assert len(navigations) == 4


def test_authentication_resets_counter(navigations, clock):
    guard = RouteGuard(navigations.append, clock=clock)
    for _ in range(3):
        guard.evaluate(ANONYMOUS, "/invoices")

    guard.evaluate(signed_in("manager"), "/invoices")
    assert guard.loop_state.count == 0

    assert guard.evaluate(ANONYMOUS, "/invoices").state == GuardState.unauthenticated_redirect


def test_guards_do_not_share_state(navigations, clock):
    first = RouteGuard(navigations.append, clock=clock)
    second = RouteGuard(navigations.append, clock=clock)
    for _ in range(3):
        first.evaluate(ANONYMOUS, "/invoices")

    assert first.evaluate(ANONYMOUS, "/invoices").state == GuardState.redirect_throttled
    assert second.evaluate(ANONYMOUS, "/invoices").state == GuardState.unauthenticated_redirect


def test_explicit_state_struct_is_updated_in_place(navigations):
    state = RedirectLoopState()
    evaluate_route_guard(ANONYMOUS, "/reports", state, navigations.append, now_ms=20_000)

    assert state.count == 1
    assert state.last_redirect_ms == 20_000


# -----------------------------------------------------
# Authenticated
# -----------------------------------------------------
def test_authorized_user_sees_content(navigations, clock):
    guard = RouteGuard(navigations.append, permissions=[("maintenance", "create")], clock=clock)
    decision = guard.evaluate(signed_in("technician"), "/maintenance/new")

    assert decision.state == GuardState.authenticated_authorized
    assert decision.render_children
    assert navigations == []


def test_unauthorized_user_is_sent_to_unauthorized_page(navigations, clock):
    guard = RouteGuard(navigations.append, permissions=[("settings", "edit")], clock=clock)
    decision = guard.evaluate(signed_in("client"), "/settings")

    assert decision.state == GuardState.authenticated_unauthorized
    assert navigations == ["/unauthorized"]


@pytest.mark.parametrize(
    "role, landing",
    [
        ("org_admin", "/admin/dashboard"),
        ("manager", "/manager/dashboard"),
        ("technician", "/technician/dashboard"),
        ("client", "/client-portal"),
    ],
)
def test_root_sends_authorized_user_to_dashboard(navigations, clock, role, landing):
    guard = RouteGuard(navigations.append, clock=clock)
    decision = guard.evaluate(signed_in(role), "/")

    assert decision.state == GuardState.authenticated_authorized
    assert decision.redirect_to == landing
    assert not decision.render_children
    assert navigations == [landing]


def test_permissions_take_precedence_over_roles():
    user = {"role": "technician"}
    # roles alone would deny; permissions grant
    assert is_authorized(user, roles=["manager"], permissions=[("repairs", "view")]) is True
    # roles alone would grant; permissions deny
    assert is_authorized(user, roles=["technician"], permissions=[("users", "view")]) is False


def test_legacy_roles_used_when_no_permissions():
    assert is_authorized({"role": "manager"}, roles=["manager", "org_admin"]) is True
    assert is_authorized({"role": "client"}, roles=["manager", "org_admin"]) is False


def test_no_requirements_grants_access():
    assert is_authorized({"role": "client"}) is True


def test_malformed_permissions_deny_without_raising(navigations, clock):
    guard = RouteGuard(navigations.append, permissions=[("clients",)], clock=clock)
    decision = guard.evaluate(signed_in("manager"), "/clients")

    assert decision.state == GuardState.authenticated_unauthorized
    assert navigations == ["/unauthorized"]
