from enum import Enum


class BaseStrEnum(str, Enum):
    """
    Base enum that serializes cleanly to a string
    and provides a .list() method for UI dropdowns.
    """

    def __str__(self):
        return str(self.value)

    @classmethod
    def list(cls):
        return [item.value for item in cls]


# -----------------------------------------------------
# USER ROLE
# -----------------------------------------------------
class Role(BaseStrEnum):
    """Class of access held by an authenticated user."""

    system_admin = "system_admin"      # every organization
    org_admin = "org_admin"            # everything inside one organization
    admin = "admin"                    # legacy, same grid as org_admin
    manager = "manager"
    office_staff = "office_staff"
    technician = "technician"
    client = "client"


# -----------------------------------------------------
# PROTECTED RESOURCE
# -----------------------------------------------------
class Resource(BaseStrEnum):
    """Domain object categories guarded by the permission table."""

    clients = "clients"
    technicians = "technicians"
    projects = "projects"
    maintenance = "maintenance"
    repairs = "repairs"
    invoices = "invoices"
    inventory = "inventory"
    reports = "reports"
    settings = "settings"
    vehicles = "vehicles"
    communications = "communications"
    users = "users"
    organization = "organization"


# -----------------------------------------------------
# ACTION
# -----------------------------------------------------
class Action(BaseStrEnum):
    """Operation classes a role may perform on a resource."""

    view = "view"
    create = "create"
    edit = "edit"
    delete = "delete"


# -----------------------------------------------------
# ROUTE GUARD STATE
# -----------------------------------------------------
class GuardState(BaseStrEnum):
    """Outcome of one route guard evaluation."""

    loading = "loading"
    unauthenticated_public = "unauthenticated_public"
    unauthenticated_redirect = "unauthenticated_redirect"
    authenticated_authorized = "authenticated_authorized"
    authenticated_unauthorized = "authenticated_unauthorized"
    redirect_throttled = "redirect_throttled"
