"""
employee_api.utils.salary

Salary arithmetic helpers.
"""

from __future__ import annotations

MONTHS_PER_YEAR = 12


def calculate_annual_salary(monthly_salary: float) -> float:
    if monthly_salary < 0:
        raise ValueError("Invalid salary")
    return monthly_salary * MONTHS_PER_YEAR


# --- Module Notes -----------------------------------------------------------
# Standalone helper: no route or service calls it. It is kept as part of the
# package's public utilities and covered by `tests/test_schemas_and_utils.py`.
