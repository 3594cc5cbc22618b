"""
employee_api.schemas

Request/response models for the HTTP boundary.

Responsibilities:
- Validate inbound payloads (shape, lengths, formats) before they reach services.
- Expose camelCase field names on the wire; snake_case in Python.
- Describe partial updates so services can merge only supplied fields.
"""

from __future__ import annotations

import re
from datetime import date, datetime
from typing import Annotated, Any

from pydantic import AfterValidator, BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel
from pydantic.networks import validate_email

from employee_api.db.models import DEPARTMENT_NAME_MAX, EMPLOYEE_EMAIL_MAX, EMPLOYEE_NAME_MAX

_MOBILE = re.compile(r"^\d{10}$")


def parse_iso_date(value: str) -> date:
    """
    Accepts a calendar date ("1990-01-15") or a full ISO-8601 timestamp.
    """
    try:
        return date.fromisoformat(value)
    except ValueError:
        return datetime.fromisoformat(value).date()


def _check_date_string(value: str) -> str:
    try:
        parse_iso_date(value)
    except ValueError as e:
        raise ValueError("dateOfBirth must be an ISO-8601 date string") from e
    return value


def _check_mobile(value: int) -> int:
    if not _MOBILE.match(str(value)):
        raise ValueError("Mobile number must be 10 digits")
    return value


def _check_email(value: str) -> str:
    # Format check only; the address is stored exactly as sent.
    validate_email(value)
    if len(value) > EMPLOYEE_EMAIL_MAX:
        raise ValueError(f"email must be at most {EMPLOYEE_EMAIL_MAX} characters")
    return value


DateString = Annotated[str, AfterValidator(_check_date_string)]
MobileNumber = Annotated[int, AfterValidator(_check_mobile)]
EmployeeEmail = Annotated[str, AfterValidator(_check_email)]


class _Input(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="forbid")

    def changes(self) -> dict[str, Any]:
        # Only fields the caller actually sent; explicit nulls count as absent.
        return {k: v for k, v in self.model_dump(exclude_unset=True).items() if v is not None}


class _Output(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, from_attributes=True
    )


class EmployeeCreate(_Input):
    name: str = Field(min_length=1, max_length=EMPLOYEE_NAME_MAX)
    email: EmployeeEmail
    salary: float = Field(ge=1)
    date_of_birth: DateString
    mobile_number: MobileNumber
    department_id: int


class EmployeeUpdate(_Input):
    name: str | None = Field(default=None, min_length=1, max_length=EMPLOYEE_NAME_MAX)
    email: EmployeeEmail | None = None
    salary: float | None = Field(default=None, ge=1)
    date_of_birth: DateString | None = None
    mobile_number: MobileNumber | None = None
    department_id: int | None = None


class EmployeeResponse(_Output):
    id: int
    name: str
    email: str
    salary: float
    date_of_birth: date
    mobile_number: int
    department_id: int


class DepartmentCreate(_Input):
    name: str = Field(min_length=1, max_length=DEPARTMENT_NAME_MAX)


class DepartmentUpdate(_Input):
    name: str | None = Field(default=None, min_length=1, max_length=DEPARTMENT_NAME_MAX)


class DepartmentResponse(_Output):
    id: int
    name: str
