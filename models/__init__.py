# -------------------------
# Enums
# -------------------------
from .enums import (
    Role,
    Resource,
    Action,
    GuardState,
)

# -------------------------
# Authorization Models
# -------------------------
from .authz import (
    PermissionCheckRequest,
    RouteCheckRequest,
    RouteUser,
    DecisionResponse,
    RolePermissionsResponse,
    NavigationItem,
    MeResponse,
    LoopState,
    GuardAuth,
    GuardEvaluateRequest,
    GuardEvaluateResponse,
)
