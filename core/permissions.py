# core/permissions.py

from types import MappingProxyType

# ============================================
# CENTRALIZED ROLE → RESOURCE → ACTION MAP
# ============================================
# Every role row is written out in full. Rows are never derived from one
# another, so editing one role cannot change what another role may do.
_PERMISSIONS_BY_ROLE = {

    # =====================================================
    # SYSTEM ADMIN - everything, across all organizations
    # =====================================================
    "system_admin": {
        "clients":        {"view": True, "create": True, "edit": True, "delete": True},
        "technicians":    {"view": True, "create": True, "edit": True, "delete": True},
        "projects":       {"view": True, "create": True, "edit": True, "delete": True},
        "maintenance":    {"view": True, "create": True, "edit": True, "delete": True},
        "repairs":        {"view": True, "create": True, "edit": True, "delete": True},
        "invoices":       {"view": True, "create": True, "edit": True, "delete": True},
        "inventory":      {"view": True, "create": True, "edit": True, "delete": True},
        "reports":        {"view": True, "create": True, "edit": True, "delete": True},
        "settings":       {"view": True, "create": True, "edit": True, "delete": True},
        "vehicles":       {"view": True, "create": True, "edit": True, "delete": True},
        "communications": {"view": True, "create": True, "edit": True, "delete": True},
        "users":          {"view": True, "create": True, "edit": True, "delete": True},
        "organization":   {"view": True, "create": True, "edit": True, "delete": True},
    },

    # =====================================================
    # ADMIN - legacy tag, same values as org_admin
    # =====================================================
    "admin": {
        "clients":        {"view": True, "create": True, "edit": True, "delete": True},
        "technicians":    {"view": True, "create": True, "edit": True, "delete": True},
        "projects":       {"view": True, "create": True, "edit": True, "delete": True},
        "maintenance":    {"view": True, "create": True, "edit": True, "delete": True},
        "repairs":        {"view": True, "create": True, "edit": True, "delete": True},
        "invoices":       {"view": True, "create": True, "edit": True, "delete": True},
        "inventory":      {"view": True, "create": True, "edit": True, "delete": True},
        "reports":        {"view": True, "create": True, "edit": True, "delete": True},
        "settings":       {"view": True, "create": True, "edit": True, "delete": True},
        "vehicles":       {"view": True, "create": True, "edit": True, "delete": True},
        "communications": {"view": True, "create": True, "edit": True, "delete": True},
        "users":          {"view": True, "create": True, "edit": True, "delete": True},
        "organization":   {"view": True, "create": False, "edit": True, "delete": False},
    },

    # =====================================================
    # ORG ADMIN - everything inside their organization
    # =====================================================
    "org_admin": {
        "clients":        {"view": True, "create": True, "edit": True, "delete": True},
        "technicians":    {"view": True, "create": True, "edit": True, "delete": True},
        "projects":       {"view": True, "create": True, "edit": True, "delete": True},
        "maintenance":    {"view": True, "create": True, "edit": True, "delete": True},
        "repairs":        {"view": True, "create": True, "edit": True, "delete": True},
        "invoices":       {"view": True, "create": True, "edit": True, "delete": True},
        "inventory":      {"view": True, "create": True, "edit": True, "delete": True},
        "reports":        {"view": True, "create": True, "edit": True, "delete": True},
        "settings":       {"view": True, "create": True, "edit": True, "delete": True},
        "vehicles":       {"view": True, "create": True, "edit": True, "delete": True},
        "communications": {"view": True, "create": True, "edit": True, "delete": True},
        "users":          {"view": True, "create": True, "edit": True, "delete": True},
        "organization":   {"view": True, "create": False, "edit": True, "delete": False},
    },

    # =====================================================
    # MANAGER - broad access, cannot delete critical records
    # =====================================================
    "manager": {
        "clients":        {"view": True, "create": True, "edit": True, "delete": True},
        "technicians":    {"view": True, "create": True, "edit": True, "delete": False},
        "projects":       {"view": True, "create": True, "edit": True, "delete": True},
        "maintenance":    {"view": True, "create": True, "edit": True, "delete": True},
        "repairs":        {"view": True, "create": True, "edit": True, "delete": True},
        "invoices":       {"view": True, "create": True, "edit": True, "delete": False},
        "inventory":      {"view": True, "create": True, "edit": True, "delete": True},
        "reports":        {"view": True, "create": True, "edit": True, "delete": True},
        "settings":       {"view": True, "create": False, "edit": True, "delete": False},
        "vehicles":       {"view": True, "create": True, "edit": True, "delete": False},
        "communications": {"view": True, "create": True, "edit": True, "delete": True},
        "users":          {"view": True, "create": True, "edit": True, "delete": False},
        "organization":   {"view": True, "create": False, "edit": False, "delete": False},
    },

    # =====================================================
    # OFFICE STAFF - administrative work, no deletes
    # =====================================================
    "office_staff": {
        "clients":        {"view": True, "create": True, "edit": True, "delete": False},
        "technicians":    {"view": True, "create": False, "edit": False, "delete": False},
        "projects":       {"view": True, "create": True, "edit": True, "delete": False},
        "maintenance":    {"view": True, "create": True, "edit": True, "delete": False},
        "repairs":        {"view": True, "create": True, "edit": True, "delete": False},
        "invoices":       {"view": True, "create": True, "edit": True, "delete": False},
        "inventory":      {"view": True, "create": True, "edit": True, "delete": False},
        "reports":        {"view": True, "create": True, "edit": True, "delete": False},
        "settings":       {"view": False, "create": False, "edit": False, "delete": False},
        "vehicles":       {"view": True, "create": False, "edit": False, "delete": False},
        "communications": {"view": True, "create": True, "edit": True, "delete": False},
        "users":          {"view": True, "create": False, "edit": False, "delete": False},
        "organization":   {"view": True, "create": False, "edit": False, "delete": False},
    },

    # =====================================================
    # TECHNICIAN - maintenance and repairs in the field
    # =====================================================
    "technician": {
        "clients":        {"view": True, "create": False, "edit": False, "delete": False},
        "technicians":    {"view": True, "create": False, "edit": False, "delete": False},
        "projects":       {"view": True, "create": False, "edit": True, "delete": False},
        "maintenance":    {"view": True, "create": True, "edit": True, "delete": False},
        "repairs":        {"view": True, "create": True, "edit": True, "delete": False},
        "invoices":       {"view": True, "create": False, "edit": False, "delete": False},
        "inventory":      {"view": True, "create": False, "edit": True, "delete": False},
        "reports":        {"view": True, "create": True, "edit": True, "delete": False},
        "settings":       {"view": False, "create": False, "edit": False, "delete": False},
        "vehicles":       {"view": True, "create": False, "edit": False, "delete": False},
        "communications": {"view": True, "create": True, "edit": False, "delete": False},
        "users":          {"view": False, "create": False, "edit": False, "delete": False},
        "organization":   {"view": False, "create": False, "edit": False, "delete": False},
    },

    # =====================================================
    # CLIENT - own data, service requests
    # =====================================================
    "client": {
        "clients":        {"view": True, "create": False, "edit": True, "delete": False},   # own profile
        "technicians":    {"view": True, "create": False, "edit": False, "delete": False},  # assigned techs
        "projects":       {"view": True, "create": False, "edit": False, "delete": False},
        "maintenance":    {"view": True, "create": False, "edit": False, "delete": False},
        "repairs":        {"view": True, "create": True, "edit": False, "delete": False},   # request repairs
        "invoices":       {"view": True, "create": False, "edit": False, "delete": False},
        "inventory":      {"view": False, "create": False, "edit": False, "delete": False},
        "reports":        {"view": True, "create": False, "edit": False, "delete": False},
        "settings":       {"view": False, "create": False, "edit": False, "delete": False},
        "vehicles":       {"view": False, "create": False, "edit": False, "delete": False},
        "communications": {"view": True, "create": True, "edit": False, "delete": False},
        "users":          {"view": False, "create": False, "edit": False, "delete": False},
        "organization":   {"view": False, "create": False, "edit": False, "delete": False},
    },
}


def _freeze(table: dict) -> MappingProxyType:
    return MappingProxyType({
        role: MappingProxyType({
            resource: MappingProxyType(dict(actions))
            for resource, actions in grid.items()
        })
        for role, grid in table.items()
    })


# Read-only view; the table is configuration, not runtime state.
PERMISSIONS_BY_ROLE = _freeze(_PERMISSIONS_BY_ROLE)
