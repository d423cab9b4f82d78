"""
Role based permission classes.

Both classes expect to run after ``IsAuthenticated`` so an anonymous
request is answered with 401 before any role is inspected.
"""
from rest_framework.permissions import BasePermission

from students.services.tokens import require_admin, require_student


class IsAdminRole(BasePermission):
    """Allow access only to tokens carrying the admin role."""
    def has_permission(self, request, view) -> bool:  # type: ignore[override]
        user = getattr(request, "user", None)
        if not (user and user.is_authenticated):
            return False
        require_admin(user.claims)
        return True


class IsStudentRole(BasePermission):
    """Allow access only to student tokens; the token id is the acting student."""
    def has_permission(self, request, view) -> bool:  # type: ignore[override]
        user = getattr(request, "user", None)
        if not (user and user.is_authenticated):
            return False
        require_student(user.claims)
        return True
