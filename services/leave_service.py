"""
Leave Service - apply, approve, reject
"""

import logging
import math
from datetime import date, datetime
from typing import Optional, Union

from sqlalchemy.orm import Session

from models import Leave
from utils import utc_now

logger = logging.getLogger(__name__)


# DAY COUNT
# ============================================================================

def count_leave_days(
    from_date: Union[date, datetime],
    to_date: Union[date, datetime]
) -> int:
    """
    Inclusive number of days between two dates.

    Partial days round up, so 2024-01-01 -> 2024-01-03 is 3 days and a
    datetime span of 1.5 days counts as 2 + 1.
    """
    seconds = (to_date - from_date).total_seconds()
    return math.ceil(seconds / 86400) + 1


# APPLY
# ============================================================================

def create_leave(
    db: Session,
    employee_id: int,
    leave_type: str,
    from_date: date,
    to_date: date,
    reason: Optional[str] = None
) -> Leave:
    leave = Leave(
        employee_id=employee_id,
        leave_type=leave_type,
        from_date=from_date,
        to_date=to_date,
        number_of_days=count_leave_days(from_date, to_date),
        reason=reason,
        status="pending",
    )
    db.add(leave)
    db.commit()
    db.refresh(leave)

    logger.info(f"Leave {leave.id} applied for employee {employee_id} ({leave.number_of_days} days)")
    return leave


# APPROVE / REJECT
# ============================================================================
# Transitions are unconditional: a rejected leave may be approved and the
# other way round. A missing leave yields None.

def approve_leave(
    db: Session,
    leave_id: int,
    approved_by: Optional[int]
) -> Optional[Leave]:
    leave = db.query(Leave).filter(Leave.id == leave_id).first()
    if not leave:
        return None

    leave.status = "approved"
    leave.approved_by = approved_by
    leave.updated_at = utc_now()

    db.commit()
    db.refresh(leave)

    logger.info(f"Leave {leave_id} approved by {approved_by}")
    return leave


def reject_leave(
    db: Session,
    leave_id: int,
    rejection_reason: Optional[str],
    approved_by: Optional[int]
) -> Optional[Leave]:
    """Reject leave and record the reason."""
    leave = db.query(Leave).filter(Leave.id == leave_id).first()
    if not leave:
        return None

    leave.status = "rejected"
    leave.rejection_reason = rejection_reason
    leave.approved_by = approved_by
    leave.updated_at = utc_now()

    db.commit()
    db.refresh(leave)

    logger.info(f"Leave {leave_id} rejected by {approved_by}")
    return leave
