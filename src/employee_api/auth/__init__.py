"""
employee_api.auth

Authentication/authorization package.

Responsibilities:
- Identity token verification (provider JWKS and shared-secret).
- Request guards and their FastAPI dependencies (Principal + group check).
"""

# Package marker.
