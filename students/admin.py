"""
Django admin registrations for the admissions models.

Staff users can inspect rows through ``/django-admin/``.  Password
hashes are shown read-only and never editable from the admin.
"""

from django.contrib import admin

from .models import Admin, AuditEvent, CodingTestScore, Project, Student


@admin.register(Student)
class StudentAdmin(admin.ModelAdmin):
    list_display = ('id', 'full_name', 'email', 'high_school', 'reported_income', 'expression_of_interest_date')
    search_fields = ('full_name', 'email', 'high_school')
    readonly_fields = ('password_hash', 'created_at', 'updated_at')


@admin.register(Admin)
class AdminAccountAdmin(admin.ModelAdmin):
    list_display = ('id', 'email', 'created_at')
    search_fields = ('email',)
    readonly_fields = ('password_hash', 'created_at', 'updated_at')


@admin.register(CodingTestScore)
class CodingTestScoreAdmin(admin.ModelAdmin):
    list_display = ('id', 'student_id', 'score', 'date')
    list_filter = ('date',)


@admin.register(Project)
class ProjectAdmin(admin.ModelAdmin):
    list_display = ('id', 'student_id', 'project_name')
    search_fields = ('project_name',)


@admin.register(AuditEvent)
class AuditEventAdmin(admin.ModelAdmin):
    list_display = ('action', 'principal_kind', 'principal_id', 'created_at')
    list_filter = ('action', 'principal_kind')
