from pydantic import BaseModel
from typing import Optional
from datetime import datetime, date
import datetime as dt

# Auth schemas
class RegisterRequest(BaseModel):
    email: str
    password: str
    name: str
    company_id: Optional[int] = None
    role: str = "employee"

    class Config:
        json_schema_extra = {
            "example": {
                "email": "john@company.com",
                "password": "SecurePass123!",
                "name": "John Doe",
                "company_id": 1,
                "role": "employee"
            }
        }

class LoginRequest(BaseModel):
    email: str
    password: str

class UserOut(BaseModel):
    """Public view of a user row. The password hash is never serialized."""
    id: int
    email: str
    name: Optional[str] = None
    company_id: Optional[int] = None
    role: str
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True

class AuthResponse(BaseModel):
    user: UserOut
    token: str


# Company schemas
class CompanyCreate(BaseModel):
    name: str
    email: Optional[str] = None
    phone: Optional[str] = None
    address: Optional[str] = None
    industry: Optional[str] = None

class CompanyOut(BaseModel):
    id: int
    name: str
    email: Optional[str] = None
    phone: Optional[str] = None
    address: Optional[str] = None
    industry: Optional[str] = None
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True


# Employee schemas
class EmployeeCreate(BaseModel):
    name: str
    email: Optional[str] = None
    phone: Optional[str] = None
    position: Optional[str] = None
    department: Optional[str] = None
    company_id: Optional[int] = None
    user_id: Optional[int] = None

class EmployeeOut(BaseModel):
    id: int
    name: str
    email: Optional[str] = None
    phone: Optional[str] = None
    position: Optional[str] = None
    department: Optional[str] = None
    company_id: Optional[int] = None
    user_id: Optional[int] = None
    employee_id_string: str
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True


# Attendance schemas
class AttendanceMark(BaseModel):
    employee_id: int
    status: str = "present"
    mode: str = "office"
    remarks: Optional[str] = None

class AttendanceOut(BaseModel):
    id: int
    employee_id: int
    date: dt.date
    time_in: datetime
    status: str
    mode: str
    remarks: Optional[str] = None

    class Config:
        from_attributes = True

class AttendanceSummaryOut(BaseModel):
    employee_id: int
    year: int
    total_days: int
    present_days: int
    absent_days: int
    leave_days: int
    wfh_days: int


# Leave schemas
class LeaveApply(BaseModel):
    employee_id: int
    leave_type: str
    from_date: date
    to_date: date
    reason: Optional[str] = None

class LeaveApprove(BaseModel):
    approved_by: Optional[int] = None

class LeaveReject(BaseModel):
    rejection_reason: Optional[str] = None
    approved_by: Optional[int] = None

class LeaveOut(BaseModel):
    id: int
    employee_id: int
    leave_type: str
    from_date: date
    to_date: date
    number_of_days: int
    reason: Optional[str] = None
    status: str
    approved_by: Optional[int] = None
    rejection_reason: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True


# Regularization schemas
class RegularizationApply(BaseModel):
    employee_id: int
    attendance_id: Optional[int] = None
    reason: Optional[str] = None

class RegularizationApprove(BaseModel):
    approved_by: Optional[int] = None

class RegularizationOut(BaseModel):
    id: int
    employee_id: int
    attendance_id: Optional[int] = None
    reason: Optional[str] = None
    status: str
    approved_by: Optional[int] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True

class RegularizationListItem(RegularizationOut):
    """Regularization row joined with the requesting employee."""
    name: Optional[str] = None
    employee_id_string: Optional[str] = None
