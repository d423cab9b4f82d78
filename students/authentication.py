"""
Bearer token authentication.

Requests carry ``Authorization: Bearer <token>``.  The token is checked
by :func:`students.services.tokens.verify_token` and the request user
becomes a :class:`TokenPrincipal` built from the claims alone, without
a database lookup.  A request without a Bearer header stays anonymous
and is rejected later by the permission classes with 401.
"""
from __future__ import annotations

from rest_framework_simplejwt.authentication import JWTAuthentication

from students.services.tokens import ADMIN_ROLE, ID_CLAIM, verify_token


class TokenPrincipal:
    """The caller identified by a verified token."""

    is_authenticated = True
    is_anonymous = False

    def __init__(self, claims: dict):
        self.claims = claims
        self.id = claims[ID_CLAIM]
        self.role = claims.get('role')

    @property
    def is_admin(self) -> bool:
        return self.role == ADMIN_ROLE

    def __str__(self) -> str:
        return f"{self.role or 'student'}:{self.id}"


class BearerTokenAuthentication(JWTAuthentication):
    """simplejwt header parsing with the project's token verification."""

    def authenticate(self, request):
        header = self.get_header(request)
        if header is None:
            return None
        raw_token = self.get_raw_token(header)
        if raw_token is None:
            return None
        claims = verify_token(raw_token)
        return TokenPrincipal(claims), claims
