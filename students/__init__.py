"""Students application for the admissions backend.

This package contains models, serializers, services, views and route
registrations implementing the student registration and admissions
tracking API.
"""
