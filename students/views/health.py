import logging

from django.db import DatabaseError, connection
from rest_framework.decorators import api_view, authentication_classes, permission_classes
from rest_framework.permissions import AllowAny
from rest_framework.response import Response

logger = logging.getLogger(__name__)


@api_view(['GET'])
@authentication_classes([])
@permission_classes([AllowAny])
def healthz(request):
    """Liveness plus a round trip to the admissions database."""
    try:
        with connection.cursor() as cursor:
            cursor.execute('SELECT 1')
            db_ok = cursor.fetchone() == (1,)
    except DatabaseError as exc:
        logger.warning("health check could not reach the database: %s", exc)
        return Response({'ok': False, 'error': str(exc)}, status=500)
    return Response({'ok': True, 'db': db_ok})
