"""
employee_api.api

HTTP API package (FastAPI).

Responsibilities:
- App factory and dependency wiring.
- Routers for employees, departments, health and dev tooling.
"""

# Package marker.
