import logging
from typing import Any, Dict, Optional

from django.db import DatabaseError

from students.models import AuditEvent
from students.services.credentials import principal_kind

logger = logging.getLogger(__name__)


def log_action(*, principal=None, action: str, detail: Optional[Dict[str, Any]] = None) -> Optional[AuditEvent]:
    """Append an audit row; a failed write is logged and never raised."""
    try:
        return AuditEvent.objects.create(
            principal_kind=principal_kind(principal),
            principal_id=getattr(principal, 'id', None),
            action=action,
            detail=detail or {},
        )
    except DatabaseError:
        logger.warning("audit write failed for action=%s", action, exc_info=True)
        return None
