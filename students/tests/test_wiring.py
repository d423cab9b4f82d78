import pytest
from django.core.management import call_command
from django.urls import resolve, reverse

from students import auth_views
from students.views import health, records, statistics

ROUTES = [
    ('healthz', '/healthz', health.healthz),
    ('register', '/register', auth_views.register_view),
    ('login', '/login', auth_views.login_view),
    ('admin', '/admin', auth_views.admin_view),
    ('statistics', '/statistics', statistics.statistics),
    ('add_project', '/add_project', records.add_project),
    ('assign_project', '/assign_project', records.assign_project),
    ('report_income', '/report_income', records.report_income),
    ('add_coding_score', '/add_coding_score', records.add_coding_score),
    ('coding_scores', '/coding_scores', records.coding_scores),
    ('projects', '/projects', records.projects),
]


def test_system_checks_pass():
    call_command('check')


@pytest.mark.parametrize('name,path,view', ROUTES)
def test_urlconf_maps_every_route(name, path, view):
    assert reverse(name) == path
    assert resolve(path).func is view
