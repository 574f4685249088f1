# core/navigation.py

from typing import List

from core.permission_helpers import get_role_permissions

DEFAULT_DASHBOARD_ROUTE = "/dashboard"

DASHBOARD_ROUTES = {
    "system_admin": "/admin/dashboard",
    "org_admin": "/admin/dashboard",
    "admin": "/admin/dashboard",
    "manager": "/manager/dashboard",
    "office_staff": "/office/dashboard",
    "technician": "/technician/dashboard",
    "client": "/client-portal",
}

# (label, href, resource gating the entry)
NAVIGATION_ENTRIES = [
    ("Users", "/users", "users"),
    ("Clients", "/clients", "clients"),
    ("Technicians", "/technicians", "technicians"),
    ("Projects", "/projects", "projects"),
    ("Maintenance", "/maintenance", "maintenance"),
    ("Repairs", "/repairs", "repairs"),
    ("Invoices", "/invoices", "invoices"),
    ("Inventory", "/inventory", "inventory"),
    ("Vehicles", "/vehicles", "vehicles"),
    ("Communications", "/communications", "communications"),
    ("Reports", "/reports", "reports"),
    ("Settings", "/settings", "settings"),
]


def get_dashboard_route(role) -> str:
    """Landing view for an authenticated role."""
    if not role:
        return DEFAULT_DASHBOARD_ROUTE
    return DASHBOARD_ROUTES.get(str(role), DEFAULT_DASHBOARD_ROUTE)


def get_navigation_items(role) -> List[dict]:
    """
    Sidebar entries the role may open. Each entry is shown only when the
    role can view the underlying resource.
    """
    grid = get_role_permissions(role) if role else {}
    if not grid:
        return []

    items = [{"label": "Dashboard", "href": get_dashboard_route(role)}]
    for label, href, resource in NAVIGATION_ENTRIES:
        if grid.get(resource, {}).get("view"):
            items.append({"label": label, "href": href})

    return items
