"""
Database models for the admissions backend.

The models only describe the schema: students, administrators, coding
test scores, projects and the audit trail.  Queries live in
``students.services`` so views never talk to the ORM directly.  JSON
field names (camelCase) are mapped in the serializers.
"""
from __future__ import annotations

from django.db import models
from django.utils import timezone


class TimestampedModel(models.Model):
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        abstract = True


class Student(TimestampedModel):
    """A prospective student who registered through the API.

    ``reported_income`` is the only field updated after creation; the
    latest report simply overwrites the previous one.
    """
    full_name = models.CharField(max_length=255)
    email = models.CharField(max_length=255, unique=True)
    password_hash = models.CharField(max_length=255)
    phone_number = models.CharField(max_length=64)
    parent_contact = models.CharField(max_length=255)
    dob = models.DateField()
    high_school = models.CharField(max_length=255)
    expression_of_interest_date = models.DateTimeField(default=timezone.now)
    psychometric_scores = models.CharField(max_length=255, blank=True, null=True)
    skill_rating = models.FloatField(blank=True, null=True)
    reported_income = models.FloatField(blank=True, null=True)

    class Meta:
        db_table = 'students'

    def __str__(self) -> str:
        return f"{self.full_name} <{self.email}>"


class Admin(TimestampedModel):
    """An administrator allowed to read aggregate statistics.

    Admin emails are unique among admins only; a student may share the
    same address.
    """
    email = models.CharField(max_length=255, unique=True)
    password_hash = models.CharField(max_length=255)

    class Meta:
        db_table = 'admins'

    def __str__(self) -> str:
        return self.email


class CodingTestScore(TimestampedModel):
    # Plain integer reference; rows outlive their student.
    student_id = models.IntegerField(db_index=True)
    score = models.FloatField()
    date = models.DateTimeField(default=timezone.now)

    class Meta:
        db_table = 'coding_test_scores'

    def __str__(self) -> str:
        return f"student {self.student_id}: {self.score}"


class Project(TimestampedModel):
    student_id = models.IntegerField(db_index=True)
    project_name = models.CharField(max_length=255)
    description = models.CharField(max_length=1024, blank=True, null=True)

    class Meta:
        db_table = 'projects'

    def __str__(self) -> str:
        return f"{self.project_name} (student {self.student_id})"


class AuditEvent(models.Model):
    PRINCIPAL_KIND_CHOICES = [
        ('student', 'Student'),
        ('admin', 'Admin'),
    ]
    principal_kind = models.CharField(max_length=10, choices=PRINCIPAL_KIND_CHOICES, blank=True)
    principal_id = models.IntegerField(blank=True, null=True)
    action = models.CharField(max_length=64)
    detail = models.JSONField(default=dict, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'audit_events'
        indexes = [
            models.Index(fields=['action', 'created_at'], name='audit_action_created_idx'),
            models.Index(fields=['principal_kind', 'principal_id', 'created_at'], name='audit_principal_created_idx'),
        ]

    def __str__(self) -> str:
        return f"{self.action} by {self.principal_kind or 'anonymous'}:{self.principal_id}"
