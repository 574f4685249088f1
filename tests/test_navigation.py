# tests/test_navigation.py

from core.navigation import get_dashboard_route, get_navigation_items
from models.enums import Role


def test_dashboard_routes():
    assert get_dashboard_route("system_admin") == "/admin/dashboard"
    assert get_dashboard_route(Role.admin) == "/admin/dashboard"
    assert get_dashboard_route("office_staff") == "/office/dashboard"
    assert get_dashboard_route("client") == "/client-portal"
    assert get_dashboard_route("vendor") == "/dashboard"
    assert get_dashboard_route(None) == "/dashboard"


def test_navigation_follows_view_permissions():
    labels = [item["label"] for item in get_navigation_items("technician")]

    assert labels[0] == "Dashboard"
    assert "Maintenance" in labels
    assert "Settings" not in labels
    assert "Users" not in labels


def test_system_admin_sees_every_entry():
    items = get_navigation_items("system_admin")
    assert len(items) == 13
    assert items[0] == {"label": "Dashboard", "href": "/admin/dashboard"}


def test_unknown_role_has_no_navigation():
    assert get_navigation_items("vendor") == []
    assert get_navigation_items(None) == []
