# core/errors.py

from enum import Enum

from fastapi import HTTPException


class UnauthorizedRedirect(Exception):
    """
    Raised when a browser (non-API) request is denied.
    main.py turns it into a 303 redirect to the unauthorized page.
    """

    def __init__(self, location: str):
        super().__init__(location)
        self.location = location


def _text(value) -> str:
    if isinstance(value, Enum):
        return str(value.value)
    return str(value)


def permission_denied(resource, action, role) -> HTTPException:
    """
    Build the 403 returned to API callers that lack a permission.
    Returns HTTPException (doesn't raise) so caller can customize or re-raise.
    """
    resource, action = _text(resource), _text(action)
    return HTTPException(
        status_code=403,
        detail={
            "message": "Forbidden",
            "details": f"You don't have permission to {action} {resource}",
            "role": _text(role) if role is not None else None,
            "requiredPermission": {"resource": resource, "action": action},
        },
    )


def ownership_denied(user_id, role, resource_owner_id) -> HTTPException:
    return HTTPException(
        status_code=403,
        detail={
            "message": "Forbidden",
            "details": "You can only access your own resources",
            "role": _text(role) if role is not None else None,
            "userId": user_id,
            "resourceOwnerId": resource_owner_id,
        },
    )
