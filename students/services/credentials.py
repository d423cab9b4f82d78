"""
Credential store for students and administrators.

Both principal kinds keep an email and a bcrypt hash.  Email uniqueness
is enforced by the database constraint for each kind separately; the
insert itself is the check, so concurrent registrations cannot race
past it.
"""
from __future__ import annotations

from datetime import date
from typing import Optional, Union

from django.contrib.auth.hashers import check_password, make_password
from django.db import DatabaseError, IntegrityError, transaction

from students.exceptions import DuplicateEmail, StorageError, storage_errors
from students.models import Admin, Student

Principal = Union[Student, Admin]

PRINCIPAL_MODELS = {
    'student': Student,
    'admin': Admin,
}


def _model_for(kind: str):
    try:
        return PRINCIPAL_MODELS[kind]
    except KeyError:
        raise ValueError(f"unknown principal kind: {kind!r}") from None


def principal_kind(principal) -> str:
    if isinstance(principal, Admin):
        return 'admin'
    if isinstance(principal, Student):
        return 'student'
    return ''


def hash_password(password: str) -> str:
    return make_password(password)


def _insert(kind: str, email: str, **fields) -> Principal:
    model = _model_for(kind)
    try:
        with transaction.atomic():
            return model.objects.create(email=email, **fields)
    except IntegrityError as exc:
        with storage_errors():
            taken = model.objects.filter(email=email).exists()
        if taken:
            raise DuplicateEmail(kind, email) from exc
        raise StorageError(str(exc)) from exc
    except DatabaseError as exc:
        raise StorageError(str(exc)) from exc


def create_student(*, full_name: str, email: str, password_hash: str, phone_number: str,
                   parent_contact: str, dob: date, high_school: str) -> Student:
    return _insert(
        'student', email,
        full_name=full_name,
        password_hash=password_hash,
        phone_number=phone_number,
        parent_contact=parent_contact,
        dob=dob,
        high_school=high_school,
    )


def create_admin(*, email: str, password_hash: str) -> Admin:
    return _insert('admin', email, password_hash=password_hash)


def find_by_email(kind: str, email: str) -> Optional[Principal]:
    model = _model_for(kind)
    with storage_errors():
        return model.objects.filter(email=email).first()


def verify_password(principal: Principal, password: str) -> bool:
    return check_password(password, principal.password_hash)


def authenticate(kind: str, email: str, password: str) -> Optional[Principal]:
    """Return the principal when email and password match, else ``None``."""
    principal = find_by_email(kind, email)
    if principal is None:
        # Hash anyway so a missing account costs the same as a wrong password.
        make_password(password)
        return None
    if not verify_password(principal, password):
        return None
    return principal
