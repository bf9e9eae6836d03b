# employees.py
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from models import Employee
from schemas import EmployeeCreate, EmployeeOut
from db import get_db
from services.employee_codes import generate_employee_code
from typing import List, Optional


router = APIRouter(prefix="/api/employees", tags=["Employees"])


@router.get("", response_model=List[EmployeeOut])
def list_employees(company_id: Optional[int] = None, db: Session = Depends(get_db)):
    """List employees newest first, optionally for one company."""
    query = db.query(Employee)
    if company_id is not None:
        query = query.filter(Employee.company_id == company_id)
    return query.order_by(Employee.created_at.desc(), Employee.id.desc()).all()


@router.get("/{employee_id}", response_model=Optional[EmployeeOut])
def get_employee(employee_id: int, db: Session = Depends(get_db)):
    # Missing employee answers 200 with a null body
    return db.query(Employee).filter(Employee.id == employee_id).first()


@router.post("", response_model=EmployeeOut, status_code=status.HTTP_201_CREATED)
def create_employee(employee: EmployeeCreate, db: Session = Depends(get_db)):
    db_employee = Employee(
        name=employee.name,
        email=employee.email,
        phone=employee.phone,
        position=employee.position,
        department=employee.department,
        company_id=employee.company_id,
        user_id=employee.user_id,
        employee_id_string=generate_employee_code(),
    )
    db.add(db_employee)
    db.commit()
    db.refresh(db_employee)
    return db_employee
