"""
Leave Router
============
Apply for leave, list an employee's leaves, approve or reject.
"""
from fastapi import APIRouter, Depends, Path, status
from sqlalchemy.orm import Session
from typing import List, Optional

from models import Leave
from schemas import LeaveApply, LeaveApprove, LeaveReject, LeaveOut
from db import get_db

from services.leave_service import create_leave, approve_leave, reject_leave


router = APIRouter(prefix="/api/leaves", tags=["Leaves"])


@router.post("/apply", response_model=LeaveOut, status_code=status.HTTP_201_CREATED)
def apply_leave(leave: LeaveApply, db: Session = Depends(get_db)):
    """
    Create a pending leave request.

    number_of_days is the inclusive span between from_date and to_date.
    No balance or overlap checks are made.
    """
    return create_leave(
        db=db,
        employee_id=leave.employee_id,
        leave_type=leave.leave_type,
        from_date=leave.from_date,
        to_date=leave.to_date,
        reason=leave.reason,
    )


@router.get("/{employee_id}", response_model=List[LeaveOut])
def list_leaves(employee_id: int, db: Session = Depends(get_db)):
    return (
        db.query(Leave)
        .filter(Leave.employee_id == employee_id)
        .order_by(Leave.from_date.desc(), Leave.id.desc())
        .all()
    )


@router.patch("/{leave_id}/approve", response_model=Optional[LeaveOut])
def approve(
    leave_id: int = Path(...),
    review: LeaveApprove = ...,
    db: Session = Depends(get_db)
):
    return approve_leave(db=db, leave_id=leave_id, approved_by=review.approved_by)


@router.patch("/{leave_id}/reject", response_model=Optional[LeaveOut])
def reject(
    leave_id: int = Path(...),
    review: LeaveReject = ...,
    db: Session = Depends(get_db)
):
    return reject_leave(
        db=db,
        leave_id=leave_id,
        rejection_reason=review.rejection_reason,
        approved_by=review.approved_by,
    )
