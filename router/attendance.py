from fastapi import APIRouter, Depends, status
from sqlalchemy import case, extract, func
from sqlalchemy.orm import Session
from models import Attendance
from schemas import AttendanceMark, AttendanceOut, AttendanceSummaryOut
from db import get_db
from utils import utc_now, server_today
from typing import List, Optional

router = APIRouter(prefix="/api/attendance", tags=["Attendance"])


@router.post("/mark", response_model=AttendanceOut, status_code=status.HTTP_201_CREATED)
def mark_attendance(attendance: AttendanceMark, db: Session = Depends(get_db)):
    # Every call inserts a new row, including repeat marks on the same day
    db_attendance = Attendance(
        employee_id=attendance.employee_id,
        date=server_today(),
        time_in=utc_now(),
        status=attendance.status,
        mode=attendance.mode,
        remarks=attendance.remarks,
    )

    db.add(db_attendance)
    db.commit()
    db.refresh(db_attendance)

    return db_attendance


# Registered before /{employee_id} so "summary" is not parsed as an id
@router.get("/summary/{employee_id}", response_model=AttendanceSummaryOut)
def attendance_summary(employee_id: int, year: Optional[int] = None, db: Session = Depends(get_db)):
    """Count present/absent/leave days and WFH records for one calendar year."""
    if year is None:
        year = server_today().year

    row = (
        db.query(
            func.count(Attendance.id).label("total_days"),
            func.count(case((Attendance.status == "present", 1))).label("present_days"),
            func.count(case((Attendance.status == "absent", 1))).label("absent_days"),
            func.count(case((Attendance.status == "leave", 1))).label("leave_days"),
            func.count(case((Attendance.mode == "wfh", 1))).label("wfh_days"),
        )
        .filter(
            Attendance.employee_id == employee_id,
            extract("year", Attendance.date) == year,
        )
        .one()
    )

    return {
        "employee_id": employee_id,
        "year": year,
        "total_days": row.total_days,
        "present_days": row.present_days,
        "absent_days": row.absent_days,
        "leave_days": row.leave_days,
        "wfh_days": row.wfh_days,
    }


@router.get("/{employee_id}", response_model=List[AttendanceOut])
def list_attendance(
    employee_id: int,
    month: Optional[int] = None,
    year: Optional[int] = None,
    db: Session = Depends(get_db)
):
    query = db.query(Attendance).filter(Attendance.employee_id == employee_id)
    if month is not None:
        query = query.filter(extract("month", Attendance.date) == month)
    if year is not None:
        query = query.filter(extract("year", Attendance.date) == year)
    return query.order_by(Attendance.date.desc(), Attendance.time_in.desc()).all()
