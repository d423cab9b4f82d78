"""
Administrative statistics endpoint.

Only tokens carrying the admin role may read the aggregate numbers.
"""
from __future__ import annotations

import logging

from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response

from ..exceptions import StorageError
from ..permissions import IsAdminRole
from ..services.records import aggregate_statistics

logger = logging.getLogger(__name__)


@api_view(['GET'])
@permission_classes([IsAuthenticated, IsAdminRole])
def statistics(request):
    """Return the number of students and the sum of reported incomes.

    Students who never reported income do not contribute to the sum,
    and an empty table reports ``0`` rather than ``null``.
    """
    try:
        payload = aggregate_statistics()
    except StorageError:
        logger.exception("Error fetching statistics")
        return Response({'message': 'Internal Server Error'}, status=500)
    return Response(payload, status=200)
