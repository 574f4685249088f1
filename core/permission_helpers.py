from collections.abc import Mapping
from enum import Enum
from typing import Any, Iterable, Optional, Tuple

from fastapi import Depends, HTTPException, Request

from core.config import settings
from core.errors import UnauthorizedRedirect, ownership_denied, permission_denied
from core.logging_config import logger
from core.permissions import PERMISSIONS_BY_ROLE
from dependencies.auth import CurrentUser, get_optional_user

SUPERUSER_ROLES = ("system_admin", "admin")

# Roles that skip per-record ownership checks
OWNERSHIP_EXEMPT_ROLES = ("system_admin", "org_admin", "admin", "manager")


def _key(value):
    """Enum members and raw strings look up the same table entry."""
    if isinstance(value, Enum):
        return value.value
    return value


def get_user_role(user: Any) -> Optional[str]:
    """Role of a user object or mapping, or None when there is none."""
    if user is None:
        return None
    if isinstance(user, Mapping):
        role = user.get("role")
    else:
        role = getattr(user, "role", None)
    return _key(role) if role else None


def is_superuser(role) -> bool:
    return _key(role) in SUPERUSER_ROLES


# -----------------------------------------------------
# Permission evaluation
# -----------------------------------------------------
def has_permission(role, resource, action) -> bool:
    """
    Look up (role, resource, action) in the permission table.

    Fails closed: a missing role, an unknown role or resource, an unknown
    action, or any error during lookup resolves to False. Never raises.
    """
    if not role:
        return False

    try:
        role_key = _key(role)
        grid = PERMISSIONS_BY_ROLE.get(role_key)
        if grid is None:
            logger.warning(f"Unknown role: {role_key}")
            return False

        resource_key = _key(resource)
        actions = grid.get(resource_key)
        if actions is None:
            logger.warning(f"Unknown resource: {resource_key} for role: {role_key}")
            return False

        return actions.get(_key(action)) is True
    except Exception as e:
        logger.error(f"Error checking permissions: {e}")
        return False


def get_role_permissions(role) -> dict:
    """
    Full resource → action grid for a role.
    Unknown roles get an empty dict. The result is a copy.
    """
    try:
        grid = PERMISSIONS_BY_ROLE.get(_key(role))
    except TypeError:
        grid = None

    if grid is None:
        return {}

    return {resource: dict(actions) for resource, actions in grid.items()}


def can_access_route(user: Any, required_permissions: Optional[Iterable[Tuple[Any, Any]]]) -> bool:
    """
    True when the user satisfies every (resource, action) pair.

    An empty list grants access to any user with a role. system_admin and the
    legacy admin role pass without consulting the table.
    """
    role = get_user_role(user)
    if not role:
        return False

    if not required_permissions:
        return True

    if is_superuser(role):
        return True

    try:
        return all(
            has_permission(role, resource, action)
            for resource, action in required_permissions
        )
    except Exception as e:
        logger.warning(f"Malformed permission list for role {role}: {e}")
        return False


# -----------------------------------------------------
# Ownership
# -----------------------------------------------------
def check_resource_ownership(user: CurrentUser, resource_owner_id) -> None:
    """
    Use in addition to requires_permission for per-client data.

    Admin-level roles pass. A client passes only for records it owns.
    Raises 403 otherwise.
    """
    role = get_user_role(user)

    if role in OWNERSHIP_EXEMPT_ROLES:
        return

    if role == "client" and resource_owner_id is not None and str(user.id) == str(resource_owner_id):
        return

    logger.info(
        f"Resource ownership check failed for user {user.id} ({user.username}) "
        f"with role {role}: trying to access resource owned by {resource_owner_id}"
    )
    raise ownership_denied(user.id, role, resource_owner_id)


# -----------------------------------------------------
# FastAPI dependency wrapper
# -----------------------------------------------------
def _expects_json(request: Request) -> bool:
    if request.url.path.startswith(f"{settings.API_PREFIX}/"):
        return True
    return request.headers.get("X-Requested-With") == "XMLHttpRequest"


def requires_permission(resource, action):
    """
    Usage:
        @router.get("/", dependencies=[Depends(requires_permission("clients", "view"))])
    """

    def dependency(
        request: Request,
        current_user: Optional[CurrentUser] = Depends(get_optional_user),
    ) -> CurrentUser:
        if current_user is None:
            raise HTTPException(status_code=401, detail="Authentication required")

        if can_access_route(current_user, [(resource, action)]):
            return current_user

        logger.info(
            f"Permission denied for user {current_user.id} ({current_user.username}) "
            f"with role {current_user.role}: {_key(action)} {_key(resource)}"
        )

        if _expects_json(request):
            raise permission_denied(resource, action, current_user.role)

        raise UnauthorizedRedirect(settings.UNAUTHORIZED_ROUTE)

    return dependency
