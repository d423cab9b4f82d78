import pytest
from django.core.management import call_command
from django.core.management.base import CommandError
from django.db import DatabaseError

from students.models import Admin
from students.services import credentials

pytestmark = pytest.mark.django_db


def test_ensure_admin_creates_then_resets():
    call_command('ensure_admin', 'ops@example.com', 'first-pass')
    assert credentials.authenticate('admin', 'ops@example.com', 'first-pass') is not None

    call_command('ensure_admin', 'ops@example.com', 'second-pass')
    assert Admin.objects.count() == 1
    assert credentials.authenticate('admin', 'ops@example.com', 'first-pass') is None
    assert credentials.authenticate('admin', 'ops@example.com', 'second-pass') is not None


def test_ensure_admin_requires_values():
    with pytest.raises(CommandError):
        call_command('ensure_admin', ' ', 'pw')


def test_ensure_admin_reports_failed_reset(monkeypatch):
    credentials.create_admin(email='ops@example.com', password_hash=credentials.hash_password('pw'))

    def fail_save(self, *args, **kwargs):
        raise DatabaseError('disk I/O error')

    monkeypatch.setattr(Admin, 'save', fail_save)
    with pytest.raises(CommandError, match='disk I/O error'):
        call_command('ensure_admin', 'ops@example.com', 'new-pass')
