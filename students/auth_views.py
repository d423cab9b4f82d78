"""
Registration and login endpoints.

Students register once and log in with email and password.  The
``/admin`` endpoint doubles as admin registration and admin login: an
unknown email creates the admin, a known one must present the right
password.  Every successful call returns a bearer token.
"""
from __future__ import annotations

import logging

from rest_framework.decorators import (
    api_view, authentication_classes, permission_classes, throttle_classes,
)
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.throttling import AnonRateThrottle

from students.exceptions import DuplicateEmail, StorageError
from students.serializers.auth import AdminAccessSerializer, LoginSerializer, RegisterSerializer
from students.services import credentials
from students.services.audit import log_action
from students.services.tokens import issue_for

logger = logging.getLogger(__name__)


class LoginRateThrottle(AnonRateThrottle):
    """Per-IP limit shared by the credential checking endpoints."""
    scope = 'login'


def _client_ip(request):
    return request.META.get('REMOTE_ADDR')


# ---------------------------------------------------------------------
# Student registration
# ---------------------------------------------------------------------
@api_view(['POST'])
@authentication_classes([])
@permission_classes([AllowAny])
def register_view(request):
    s = RegisterSerializer(data=request.data)
    s.is_valid(raise_exception=True)
    v = s.validated_data
    try:
        student = credentials.create_student(
            full_name=v['fullName'],
            email=v['email'],
            password_hash=credentials.hash_password(v['password']),
            phone_number=v['phoneNumber'],
            parent_contact=v['parentContact'],
            dob=v['dob'],
            high_school=v['highSchool'],
        )
    except DuplicateEmail:
        logger.info("registration rejected: email already registered")
        return Response({'error': 'Error registering student'}, status=500)
    except StorageError:
        logger.exception("registration failed")
        return Response({'error': 'Error registering student'}, status=500)

    log_action(principal=student, action='register', detail={'ip': _client_ip(request)})
    return Response({'message': 'Student registered successfully'}, status=201)


# ---------------------------------------------------------------------
# Student login
# ---------------------------------------------------------------------
@api_view(['POST'])
@authentication_classes([])
@permission_classes([AllowAny])
@throttle_classes([LoginRateThrottle])
def login_view(request):
    s = LoginSerializer(data=request.data)
    s.is_valid(raise_exception=True)
    vd = s.validated_data
    try:
        student = credentials.authenticate('student', vd['email'], vd['password'])
    except StorageError:
        logger.exception("login failed")
        return Response({'error': 'Error logging in'}, status=500)

    if student is None:
        log_action(action='login', detail={'result': 'fail', 'ip': _client_ip(request)})
        return Response({'message': 'Invalid credentials'}, status=401)

    log_action(principal=student, action='login', detail={'result': 'ok', 'ip': _client_ip(request)})
    return Response({'accessToken': issue_for(student)}, status=200)


# ---------------------------------------------------------------------
# Admin login-or-register
# ---------------------------------------------------------------------
@api_view(['POST'])
@authentication_classes([])
@permission_classes([AllowAny])
@throttle_classes([LoginRateThrottle])
def admin_view(request):
    s = AdminAccessSerializer(data=request.data)
    s.is_valid(raise_exception=True)
    email = s.validated_data['email']
    password = s.validated_data['password']
    ip = _client_ip(request)

    try:
        admin = credentials.find_by_email('admin', email)
        if admin is not None:
            if not credentials.verify_password(admin, password):
                log_action(principal=admin, action='admin_login', detail={'result': 'fail', 'ip': ip})
                return Response({'message': 'Invalid credentials'}, status=401)
            log_action(principal=admin, action='admin_login', detail={'result': 'ok', 'ip': ip})
            return Response({'accessToken': issue_for(admin)}, status=200)

        admin = credentials.create_admin(email=email, password_hash=credentials.hash_password(password))
    except StorageError:
        # includes losing a race against a concurrent registration of the same email
        logger.exception("admin access failed")
        return Response({'error': 'Error processing request'}, status=500)

    log_action(principal=admin, action='admin_register', detail={'ip': ip})
    return Response(
        {'accessToken': issue_for(admin), 'message': 'Admin registered successfully'},
        status=201,
    )
