"""
employee_api.db.models

Persistence schema.

Responsibilities:
- Department: organizational unit, unique by name.
- Employee: person record, unique by email, belongs to a department.
"""

from __future__ import annotations

from datetime import date

from sqlalchemy import BigInteger, CheckConstraint, Date, Float, ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from employee_api.db.base import Base

EMPLOYEE_NAME_MAX = 70
EMPLOYEE_EMAIL_MAX = 30
DEPARTMENT_NAME_MAX = 30

# Primary keys are 32-bit INTEGER columns on every supported backend.
MAX_ROW_ID = 2**31 - 1


def is_storable_id(value: int) -> bool:
    return -MAX_ROW_ID - 1 <= value <= MAX_ROW_ID


class Department(Base):
    __tablename__ = "departments"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(DEPARTMENT_NAME_MAX), nullable=False, unique=True)

    # Not an ownership relation: deleting a department does not cascade to employees.
    employees: Mapped[list[Employee]] = relationship(back_populates="department")

    def __repr__(self) -> str:
        return f"<Department(id={self.id}, name={self.name!r})>"


class Employee(Base):
    __tablename__ = "employees"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(EMPLOYEE_NAME_MAX), nullable=False)
    email: Mapped[str] = mapped_column(String(EMPLOYEE_EMAIL_MAX), nullable=False, unique=True)
    salary: Mapped[float] = mapped_column(Float, nullable=False)
    date_of_birth: Mapped[date] = mapped_column(Date, nullable=False)
    mobile_number: Mapped[int] = mapped_column(BigInteger, nullable=False)
    department_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("departments.id"), nullable=False, index=True
    )

    department: Mapped[Department] = relationship(back_populates="employees")

    __table_args__ = (CheckConstraint("salary >= 1", name="salary_min"),)

    def __repr__(self) -> str:
        return f"<Employee(id={self.id}, email={self.email!r})>"
