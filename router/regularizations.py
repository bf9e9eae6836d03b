import logging

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from typing import List, Optional

from models import Regularization, Employee
from schemas import (
    RegularizationApply,
    RegularizationApprove,
    RegularizationOut,
    RegularizationListItem,
)
from db import get_db
from utils import utc_now

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/regularizations", tags=["Regularizations"])


@router.post("/apply", response_model=RegularizationOut, status_code=status.HTTP_201_CREATED)
def apply_regularization(request: RegularizationApply, db: Session = Depends(get_db)):
    db_reg = Regularization(
        employee_id=request.employee_id,
        attendance_id=request.attendance_id,
        reason=request.reason,
        status="pending",
    )
    db.add(db_reg)
    db.commit()
    db.refresh(db_reg)
    return db_reg


@router.get("", response_model=List[RegularizationListItem])
def list_regularizations(
    company_id: Optional[int] = None,
    status: Optional[str] = None,
    db: Session = Depends(get_db)
):
    """
    List regularizations with the requesting employee's name and code.

    Filters apply only when company_id and status are both given; a single
    filter on its own returns every request.
    """
    query = (
        db.query(Regularization, Employee.name, Employee.employee_id_string)
        .join(Employee, Regularization.employee_id == Employee.id)
    )
    if company_id is not None and status is not None:
        query = query.filter(
            Employee.company_id == company_id,
            Regularization.status == status,
        )

    result = []
    for reg, name, employee_id_string in query.order_by(Regularization.created_at.desc(), Regularization.id.desc()).all():
        item = RegularizationListItem.model_validate(reg)
        item.name = name
        item.employee_id_string = employee_id_string
        result.append(item)
    return result


@router.patch("/{reg_id}/approve", response_model=Optional[RegularizationOut])
def approve_regularization(reg_id: int, review: RegularizationApprove, db: Session = Depends(get_db)):
    reg = db.query(Regularization).filter(Regularization.id == reg_id).first()
    if not reg:
        return None

    reg.status = "approved"
    reg.approved_by = review.approved_by
    reg.updated_at = utc_now()
    db.commit()
    db.refresh(reg)

    logger.info(f"Regularization {reg_id} approved by {review.approved_by}")
    return reg
