# tests/test_permission_table.py

"""
Tests for the static role → resource → action table.
"""

import pytest

from core.permissions import PERMISSIONS_BY_ROLE
from models.enums import Action, Resource, Role


def test_every_role_has_a_row():
    assert set(PERMISSIONS_BY_ROLE) == set(Role.list())


@pytest.mark.parametrize("role", Role.list())
def test_rows_are_complete(role):
    """Each role defines every resource with exactly the four actions."""
    grid = PERMISSIONS_BY_ROLE[role]
    assert set(grid) == set(Resource.list())
    for resource, actions in grid.items():
        assert set(actions) == set(Action.list()), resource
        assert all(isinstance(v, bool) for v in actions.values())


def test_system_admin_has_everything():
    for actions in PERMISSIONS_BY_ROLE["system_admin"].values():
        assert all(actions.values())


def test_admin_row_matches_org_admin_but_is_independent():
    admin = PERMISSIONS_BY_ROLE["admin"]
    org_admin = PERMISSIONS_BY_ROLE["org_admin"]

    assert {r: dict(a) for r, a in admin.items()} == {r: dict(a) for r, a in org_admin.items()}
    assert admin is not org_admin
    assert admin["clients"] is not org_admin["clients"]


def test_org_admin_cannot_create_or_delete_organization():
    organization = PERMISSIONS_BY_ROLE["org_admin"]["organization"]
    assert organization["view"] and organization["edit"]
    assert not organization["create"]
    assert not organization["delete"]


def test_table_is_read_only():
    with pytest.raises(TypeError):
        PERMISSIONS_BY_ROLE["client"] = {}
    with pytest.raises(TypeError):
        PERMISSIONS_BY_ROLE["client"]["settings"] = {}
    with pytest.raises(TypeError):
        PERMISSIONS_BY_ROLE["client"]["settings"]["edit"] = True
