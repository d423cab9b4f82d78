"""
URL mappings for the admissions API.

Paths keep the names existing clients already call.  Trailing slashes
are deliberately omitted.
"""
from django.urls import path

from .auth_views import admin_view, login_view, register_view
from .views import health
from .views.records import (
    add_coding_score,
    add_project,
    assign_project,
    coding_scores,
    projects,
    report_income,
)
from .views.statistics import statistics


urlpatterns = [
    path('healthz', health.healthz, name='healthz'),
    # Authentication
    path('register', register_view, name='register'),
    path('login', login_view, name='login'),
    path('admin', admin_view, name='admin'),
    # Admin
    path('statistics', statistics, name='statistics'),
    # Student records
    path('add_project', add_project, name='add_project'),
    path('assign_project', assign_project, name='assign_project'),
    path('report_income', report_income, name='report_income'),
    path('add_coding_score', add_coding_score, name='add_coding_score'),
    path('coding_scores', coding_scores, name='coding_scores'),
    path('projects', projects, name='projects'),
]
