"""
Student-scoped record endpoints.

Each route requires a student bearer token; the acting student is the
token's ``id`` claim, never a value from the request body.  Every
handler performs a single store call.
"""
from __future__ import annotations

import logging

from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response

from ..exceptions import StorageError
from ..permissions import IsStudentRole
from ..serializers.records import CodingScoreSerializer, IncomeSerializer, ProjectSerializer
from ..services import records

logger = logging.getLogger(__name__)


def _create_project(request, ok_message, error_message):
    s = ProjectSerializer(data=request.data)
    s.is_valid(raise_exception=True)
    try:
        records.add_project(
            request.user.id,
            s.validated_data['projectName'],
            s.validated_data.get('description'),
        )
    except StorageError:
        logger.exception("project insert failed for student %s", request.user.id)
        return Response({'error': error_message}, status=500)
    return Response({'message': ok_message}, status=201)


@api_view(['POST'])
@permission_classes([IsAuthenticated, IsStudentRole])
def add_project(request):
    return _create_project(request, 'Project added successfully', 'Error adding project')


@api_view(['POST'])
@permission_classes([IsAuthenticated, IsStudentRole])
def assign_project(request):
    return _create_project(request, 'Project assigned successfully', 'Error assigning project')


@api_view(['POST'])
@permission_classes([IsAuthenticated, IsStudentRole])
def report_income(request):
    s = IncomeSerializer(data=request.data)
    s.is_valid(raise_exception=True)
    try:
        updated = records.report_income(request.user.id, s.validated_data['income'])
    except StorageError:
        logger.exception("income report failed for student %s", request.user.id)
        return Response({'error': 'Error reporting income'}, status=500)
    if not updated:
        logger.warning("income reported for unknown student %s", request.user.id)
    return Response({'message': 'Income reported successfully'}, status=200)


@api_view(['POST'])
@permission_classes([IsAuthenticated, IsStudentRole])
def add_coding_score(request):
    s = CodingScoreSerializer(data=request.data)
    s.is_valid(raise_exception=True)
    try:
        records.add_coding_score(request.user.id, s.validated_data['score'])
    except StorageError:
        logger.exception("coding score insert failed for student %s", request.user.id)
        return Response({'error': 'Error adding coding score'}, status=500)
    return Response({'message': 'Coding score added successfully'}, status=201)


@api_view(['GET'])
@permission_classes([IsAuthenticated, IsStudentRole])
def coding_scores(request):
    """List the calling student's coding test scores, oldest first."""
    try:
        entries = records.list_coding_scores(request.user.id)
    except StorageError:
        logger.exception("coding score listing failed for student %s", request.user.id)
        return Response({'error': 'Error fetching coding scores'}, status=500)
    return Response([records.format_score(e) for e in entries])


@api_view(['GET'])
@permission_classes([IsAuthenticated, IsStudentRole])
def projects(request):
    try:
        entries = records.list_projects(request.user.id)
    except StorageError:
        logger.exception("project listing failed for student %s", request.user.id)
        return Response({'error': 'Error fetching projects'}, status=500)
    return Response([records.format_project(p) for p in entries])
