"""
Custom permission classes for role based access control.
"""
from rest_framework.permissions import BasePermission, SAFE_METHODS

from .models import User


def _role(request):
    user = getattr(request, "user", None)
    if not (user and user.is_authenticated):
        return None
    if getattr(user, "is_superuser", False):
        return User.ROLE_ADMIN
    return getattr(user, "role", None)


def is_admin(user) -> bool:
    return bool(user and user.is_authenticated and (user.is_superuser or user.role == User.ROLE_ADMIN))


class IsAdminRole(BasePermission):
    """Allow access only to users with the administrator role."""
    def has_permission(self, request, view) -> bool:  # type: ignore[override]
        return _role(request) == User.ROLE_ADMIN


class IsClinician(BasePermission):
    """Doctors and administrators."""
    def has_permission(self, request, view) -> bool:  # type: ignore[override]
        return _role(request) in {User.ROLE_DOCTOR, User.ROLE_ADMIN}


class IsPharmacyStaff(BasePermission):
    """Pharmacists and administrators."""
    def has_permission(self, request, view) -> bool:  # type: ignore[override]
        return _role(request) in {User.ROLE_PHARMACIST, User.ROLE_ADMIN}


class ReadOnly(BasePermission):
    """Allow read‑only access (GET, HEAD, OPTIONS)."""
    def has_permission(self, request, view) -> bool:  # type: ignore[override]
        return request.method in SAFE_METHODS
