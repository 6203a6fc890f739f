"""
API routes package.

Exports all API routers for easy inclusion in the main application.
"""
from app.api import people, duties, reports

__all__ = [
    "people",
    "duties",
    "reports"
]
