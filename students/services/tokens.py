"""
Bearer token issue and verification.

Tokens are simplejwt access tokens signed with the configured HS256
key.  The ``id`` claim carries the principal id; administrator tokens
add ``role: "admin"`` and student tokens carry no role at all.
"""
from __future__ import annotations

from typing import Any, Union

from rest_framework_simplejwt.exceptions import TokenError
from rest_framework_simplejwt.tokens import AccessToken

from students.exceptions import Forbidden, InvalidToken
from students.models import Admin

ADMIN_ROLE = 'admin'
ID_CLAIM = 'id'


def issue_token(principal_id: int, **claims: Any) -> str:
    token = AccessToken()
    token[ID_CLAIM] = principal_id
    for name, value in claims.items():
        token[name] = value
    return str(token)


def issue_for(principal) -> str:
    """Issue a token for a stored Student or Admin."""
    if isinstance(principal, Admin):
        return issue_token(principal.id, role=ADMIN_ROLE)
    return issue_token(principal.id)


def verify_token(raw: Union[str, bytes]) -> dict:
    """Check signature and expiry and return the claims."""
    try:
        token = AccessToken(raw)
    except TokenError as exc:
        raise InvalidToken() from exc
    if ID_CLAIM not in token:
        raise InvalidToken()
    return dict(token.payload)


def require_admin(claims: dict) -> None:
    if claims.get('role') != ADMIN_ROLE:
        raise Forbidden()


def require_student(claims: dict) -> None:
    if claims.get('role') is not None:
        raise Forbidden('Access forbidden. Students only.')
