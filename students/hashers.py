"""
Password hasher used for student and admin credentials.

Django's stock bcrypt hasher hard-codes its work factor; this subclass
reads it from ``settings.BCRYPT_ROUNDS`` so the cost stays part of the
service configuration.
"""
from django.conf import settings
from django.contrib.auth.hashers import BCryptPasswordHasher


class BCryptHasher(BCryptPasswordHasher):
    """Plain bcrypt (``bcrypt$`` prefix) with a configurable cost."""

    @property
    def rounds(self) -> int:  # type: ignore[override]
        return getattr(settings, 'BCRYPT_ROUNDS', 10)
