"""
employee_api.services

Service layer package.

Responsibilities:
- Apply business rules (uniqueness, existence) around repositories.
- Own transaction boundaries (commit) for each mutation.
"""

# Package marker.
