from fastapi import APIRouter, Depends, HTTPException

from core.logging_config import logger
from core.navigation import get_dashboard_route, get_navigation_items
from core.permission_helpers import (
    can_access_route,
    get_role_permissions,
    has_permission,
    requires_permission,
)
from core.route_guard import AuthStatus, RedirectLoopState, evaluate_route_guard
from dependencies.auth import CurrentUser, get_current_user
from models.authz import (
    DecisionResponse,
    GuardEvaluateRequest,
    GuardEvaluateResponse,
    LoopState,
    MeResponse,
    PermissionCheckRequest,
    RolePermissionsResponse,
    RouteCheckRequest,
)
from models.enums import Role

router = APIRouter(
    prefix="/authz",
    tags=["Authorization"],
)


# ============================================================
# Decisions
# ============================================================
@router.post(
    "/check",
    summary="Check one permission",
    response_model=DecisionResponse,
)
def check_permission(payload: PermissionCheckRequest):
    allowed = has_permission(payload.role, payload.resource, payload.action)
    return DecisionResponse(allowed=allowed)


@router.post(
    "/route",
    summary="Check every permission a route requires",
    response_model=DecisionResponse,
)
def check_route(payload: RouteCheckRequest):
    user = payload.user.model_dump() if payload.user else None
    return DecisionResponse(allowed=can_access_route(user, payload.permissions))


# ============================================================
# Role grids
# ============================================================
@router.get("/roles", summary="List roles")
def list_roles():
    return {"roles": Role.list()}


@router.get(
    "/roles/{role}/permissions",
    summary="Full permission grid for a role",
    response_model=RolePermissionsResponse,
    dependencies=[Depends(requires_permission("users", "view"))],
)
def role_permissions(role: str):
    grid = get_role_permissions(role)
    if not grid:
        raise HTTPException(status_code=404, detail=f"Unknown role: {role}")
    return RolePermissionsResponse(role=role, permissions=grid)


@router.get(
    "/me",
    summary="Permissions and landing route of the signed-in user",
    response_model=MeResponse,
)
def me(current_user: CurrentUser = Depends(get_current_user)):
    return MeResponse(
        id=current_user.id,
        role=current_user.role,
        username=current_user.username,
        permissions=get_role_permissions(current_user.role),
        dashboard_route=get_dashboard_route(current_user.role),
        navigation=get_navigation_items(current_user.role),
    )


# ============================================================
# Route guard
# ============================================================
@router.post(
    "/guard/evaluate",
    summary="Run one route guard evaluation pass",
    response_model=GuardEvaluateResponse,
)
def evaluate_guard(payload: GuardEvaluateRequest):
    """
    Stateless form of the route guard. The caller keeps the redirect
    counter and sends it back on the next pass.
    """
    loop_state = RedirectLoopState(
        count=payload.loop_state.count,
        last_redirect_ms=payload.loop_state.last_redirect_ms,
    )
    auth = AuthStatus(
        is_authenticated=payload.auth.is_authenticated,
        is_loading=payload.auth.is_loading,
        user=payload.auth.user.model_dump() if payload.auth.user else None,
    )

    navigations = []
    decision = evaluate_route_guard(
        auth,
        payload.location,
        loop_state,
        navigations.append,
        roles=payload.roles,
        permissions=payload.permissions,
        now_ms=payload.now_ms,
    )
    logger.debug(f"Guard evaluated at {payload.location}: {decision.state} {navigations}")

    return GuardEvaluateResponse(
        state=decision.state,
        render_children=decision.render_children,
        redirect_to=decision.redirect_to,
        loop_state=LoopState(
            count=loop_state.count,
            last_redirect_ms=loop_state.last_redirect_ms,
        ),
    )
