from sqlalchemy import (
    Column,
    Date,
    DateTime,
    ForeignKey,
    Index,
    Integer,
    String,
    Text,
)
from sqlalchemy.orm import relationship, DeclarativeBase

from utils import utc_now

# TIMESTAMP NOTES:
# =================================
# - created_at / updated_at / time_in store UTC as naive datetime
# - attendance.date is the server's calendar date at insert time

class Base(DeclarativeBase):
    pass

# ============================================================================
# COMPANY MODEL
# ============================================================================

class Company(Base):
    __tablename__ = 'companies'

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), nullable=False)
    email = Column(String(255), nullable=True)
    phone = Column(String(50), nullable=True)
    address = Column(Text, nullable=True)
    industry = Column(String(100), nullable=True)
    created_at = Column(DateTime, nullable=False, default=utc_now)

    users = relationship("User", back_populates="company")
    employees = relationship("Employee", back_populates="company")

    def __repr__(self):
        return f"<Company {self.name}>"


# ============================================================================
# USER MODEL
# ============================================================================

class User(Base):
    __tablename__ = 'users'

    id = Column(Integer, primary_key=True, index=True)
    email = Column(String(255), unique=True, index=True, nullable=False)
    password = Column(String(255), nullable=False)  # bcrypt hash
    name = Column(String(255), nullable=True)
    company_id = Column(Integer, ForeignKey('companies.id'), nullable=True)
    role = Column(String(50), nullable=False, default="employee")
    created_at = Column(DateTime, nullable=False, default=utc_now)

    company = relationship("Company", back_populates="users")
    employee = relationship("Employee", back_populates="user", uselist=False)

    def __repr__(self):
        return f"<User {self.email} ({self.role})>"


# ============================================================================
# EMPLOYEE MODEL
# ============================================================================

class Employee(Base):
    __tablename__ = 'employees'

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), nullable=False)
    email = Column(String(255), nullable=True)
    phone = Column(String(50), nullable=True)
    position = Column(String(100), nullable=True)
    department = Column(String(100), nullable=True)
    company_id = Column(Integer, ForeignKey('companies.id'), nullable=True, index=True)
    user_id = Column(Integer, ForeignKey('users.id'), nullable=True)
    employee_id_string = Column(String(50), nullable=False)
    created_at = Column(DateTime, nullable=False, default=utc_now)

    company = relationship("Company", back_populates="employees")
    user = relationship("User", back_populates="employee")
    attendance_records = relationship("Attendance", back_populates="employee")
    leaves = relationship("Leave", back_populates="employee")

    def __repr__(self):
        return f"<Employee {self.name} ({self.employee_id_string})>"


# ============================================================================
# ATTENDANCE MODEL
# ============================================================================

class Attendance(Base):
    __tablename__ = 'attendance'

    id = Column(Integer, primary_key=True, index=True)
    employee_id = Column(Integer, ForeignKey('employees.id'), nullable=False)
    date = Column(Date, nullable=False)
    time_in = Column(DateTime, nullable=False, default=utc_now)
    status = Column(String(20), nullable=False, default="present")  # present, absent, leave, half_day
    mode = Column(String(20), nullable=False, default="office")     # office, wfh, field
    remarks = Column(Text, nullable=True)
    created_at = Column(DateTime, nullable=False, default=utc_now)

    employee = relationship("Employee", back_populates="attendance_records")

    # No unique (employee_id, date): several marks per day are allowed
    __table_args__ = (
        Index('idx_attendance_employee_date', 'employee_id', 'date'),
    )


# ============================================================================
# LEAVE MODEL
# ============================================================================

class Leave(Base):
    __tablename__ = "leaves"

    id = Column(Integer, primary_key=True, index=True)
    employee_id = Column(Integer, ForeignKey("employees.id"), nullable=False, index=True)
    leave_type = Column(String(50), nullable=False)
    from_date = Column(Date, nullable=False)
    to_date = Column(Date, nullable=False)
    number_of_days = Column(Integer, nullable=False)
    reason = Column(Text, nullable=True)

    status = Column(String(20), nullable=False, default="pending")  # pending, approved, rejected
    approved_by = Column(Integer, nullable=True)
    rejection_reason = Column(Text, nullable=True)

    created_at = Column(DateTime, nullable=False, default=utc_now)
    updated_at = Column(DateTime, nullable=True)

    employee = relationship("Employee", back_populates="leaves")


# ============================================================================
# REGULARIZATION MODEL
# ============================================================================

class Regularization(Base):
    __tablename__ = "regularizations"

    id = Column(Integer, primary_key=True, index=True)
    employee_id = Column(Integer, ForeignKey("employees.id"), nullable=False, index=True)
    attendance_id = Column(Integer, ForeignKey("attendance.id"), nullable=True)
    reason = Column(Text, nullable=True)

    status = Column(String(20), nullable=False, default="pending")  # pending, approved
    approved_by = Column(Integer, nullable=True)

    created_at = Column(DateTime, nullable=False, default=utc_now)
    updated_at = Column(DateTime, nullable=True)

    employee = relationship("Employee")
    attendance = relationship("Attendance")
