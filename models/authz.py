# models/authz.py

from typing import Dict, List, Optional, Tuple
from pydantic import BaseModel, Field

from models.enums import GuardState


# ===============================================================
# DECISION REQUESTS
# ===============================================================

class PermissionCheckRequest(BaseModel):
    """
    Raw strings on purpose: unknown roles or resources are denied
    by the decision function rather than rejected with a 422.
    """
    role: Optional[str] = None
    resource: str
    action: str


class RouteUser(BaseModel):
    role: Optional[str] = None


class RouteCheckRequest(BaseModel):
    user: Optional[RouteUser] = None
    permissions: List[Tuple[str, str]] = []


class DecisionResponse(BaseModel):
    allowed: bool


# ===============================================================
# ROLE GRIDS
# ===============================================================

class RolePermissionsResponse(BaseModel):
    role: str
    permissions: Dict[str, Dict[str, bool]]


class NavigationItem(BaseModel):
    label: str
    href: str


class MeResponse(BaseModel):
    id: str
    role: str
    username: Optional[str] = None
    permissions: Dict[str, Dict[str, bool]]
    dashboard_route: str
    navigation: List[NavigationItem]


# ===============================================================
# ROUTE GUARD
# ===============================================================

class LoopState(BaseModel):
    count: int = 0
    last_redirect_ms: float = 0.0


class GuardAuth(BaseModel):
    is_authenticated: bool = False
    is_loading: bool = False
    user: Optional[RouteUser] = None


class GuardEvaluateRequest(BaseModel):
    auth: GuardAuth
    location: str
    roles: List[str] = []
    permissions: List[Tuple[str, str]] = []
    loop_state: LoopState = Field(default_factory=LoopState)
    now_ms: Optional[float] = None


class GuardEvaluateResponse(BaseModel):
    state: GuardState
    render_children: bool
    redirect_to: Optional[str] = None
    loop_state: LoopState
