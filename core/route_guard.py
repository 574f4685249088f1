# core/route_guard.py

"""
Route guard for protected views.

Decides, from the authentication status and the route's requirements,
whether a view renders, waits, or navigates elsewhere. Each guard keeps a
small redirect counter so an unauthenticated visitor cannot be bounced
between routes forever: no more than REDIRECT_LOOP_MAX redirects fire
inside any trailing REDIRECT_LOOP_WINDOW_MS.
"""

import time
from dataclasses import dataclass
from typing import Any, Callable, List, Optional, Sequence, Tuple
from urllib.parse import quote

from core.config import settings
from core.logging_config import logger
from core.navigation import get_dashboard_route
from core.permission_helpers import can_access_route, get_user_role
from models.enums import GuardState


Navigate = Callable[[str], None]

# Same escaping as the browser's encodeURIComponent
_URI_SAFE = "-_.!~*'()"


@dataclass
class RedirectLoopState:
    """Per-guard redirect counter. Lives as long as the guard instance."""

    count: int = 0
    last_redirect_ms: float = 0.0


@dataclass
class AuthStatus:
    is_authenticated: bool = False
    is_loading: bool = False
    user: Any = None


@dataclass
class GuardDecision:
    state: GuardState
    render_children: bool = False
    redirect_to: Optional[str] = None

    @property
    def show_spinner(self) -> bool:
        return not self.render_children


def _now_ms() -> float:
    return time.time() * 1000


def _path(location: str) -> str:
    return (location or "").split("?", 1)[0]


def is_public_location(location: str) -> bool:
    """Login, root, and OAuth callback routes render without a session."""
    path = _path(location)
    if path in (settings.LOGIN_ROUTE, settings.ROOT_ROUTE):
        return True
    return any(path.startswith(route) for route in settings.OAUTH_CALLBACK_ROUTES)


def login_redirect_target(location: str) -> str:
    return f"{settings.LOGIN_ROUTE}?redirect={quote(location or '', safe=_URI_SAFE)}"


def is_authorized(
    user: Any,
    roles: Optional[Sequence[str]] = None,
    permissions: Optional[Sequence[Tuple[str, str]]] = None,
) -> bool:
    """
    permissions take precedence; roles are only consulted when no
    permissions are given. Neither given means open to any signed-in user.
    """
    if permissions:
        return can_access_route(user, permissions)

    if roles:
        role = get_user_role(user)
        return role is not None and role in [str(r) for r in roles]

    return True


def evaluate_route_guard(
    auth: AuthStatus,
    location: str,
    loop_state: RedirectLoopState,
    navigate: Navigate,
    roles: Optional[Sequence[str]] = None,
    permissions: Optional[Sequence[Tuple[str, str]]] = None,
    now_ms: Optional[float] = None,
) -> GuardDecision:
    """
    Run one evaluation pass. loop_state is updated in place and navigate is
    called at most once.
    """
    if auth.is_loading:
        logger.debug(f"Route guard: auth still loading at {location}")
        return GuardDecision(GuardState.loading)

    if not auth.is_authenticated:
        return _evaluate_unauthenticated(location, loop_state, navigate, now_ms)

    loop_state.count = 0

    user = auth.user
    if not is_authorized(user, roles, permissions):
        role = get_user_role(user)
        if permissions:
            required = ", ".join(map(str, permissions))
            logger.warning(f"Route access denied to {location}: role {role} lacks required permissions: {required}")
        else:
            logger.warning(f"Route access denied to {location}: role {role} needs one of: {', '.join(map(str, roles))}")
        navigate(settings.UNAUTHORIZED_ROUTE)
        return GuardDecision(
            GuardState.authenticated_unauthorized,
            redirect_to=settings.UNAUTHORIZED_ROUTE,
        )

    if _path(location) == settings.ROOT_ROUTE:
        landing = get_dashboard_route(get_user_role(user))
        logger.info(f"Route guard: authenticated on root, sending to {landing}")
        navigate(landing)
        return GuardDecision(GuardState.authenticated_authorized, redirect_to=landing)

    return GuardDecision(GuardState.authenticated_authorized, render_children=True)


def _evaluate_unauthenticated(
    location: str,
    loop_state: RedirectLoopState,
    navigate: Navigate,
    now_ms: Optional[float],
) -> GuardDecision:
    if is_public_location(location):
        return GuardDecision(GuardState.unauthenticated_public, render_children=True)

    now = _now_ms() if now_ms is None else now_ms
    elapsed = now - loop_state.last_redirect_ms

    if loop_state.count >= settings.REDIRECT_LOOP_MAX and elapsed < settings.REDIRECT_LOOP_WINDOW_MS:
        logger.warning(
            f"Redirect loop detected at {location}: {loop_state.count} redirects "
            f"in the last {settings.REDIRECT_LOOP_WINDOW_MS} ms, not redirecting"
        )
        return GuardDecision(GuardState.redirect_throttled)

    if elapsed >= settings.REDIRECT_LOOP_WINDOW_MS:
        loop_state.count = 0

    loop_state.count += 1
    loop_state.last_redirect_ms = now

    target = login_redirect_target(location)
    logger.info(f"Route guard: not authenticated, redirecting to login from {location}")
    navigate(target)
    return GuardDecision(GuardState.unauthenticated_redirect, redirect_to=target)


class RouteGuard:
    """
    One guard per protected view. Holds the redirect counter between
    evaluations; call evaluate() whenever auth status or location changes.
    """

    def __init__(
        self,
        navigate: Navigate,
        roles: Optional[List[str]] = None,
        permissions: Optional[List[Tuple[str, str]]] = None,
        clock: Callable[[], float] = _now_ms,
    ):
        self.navigate = navigate
        self.roles = list(roles or [])
        self.permissions = list(permissions or [])
        self.clock = clock
        self.loop_state = RedirectLoopState()

    def evaluate(self, auth: AuthStatus, location: str) -> GuardDecision:
        return evaluate_route_guard(
            auth,
            location,
            self.loop_state,
            self.navigate,
            roles=self.roles,
            permissions=self.permissions,
            now_ms=self.clock(),
        )
