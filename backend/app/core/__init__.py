"""
Core services package for the Stargate duty tracker.

This package provides:
- Person directory (create, rename, lookup)
- Duty assignment engine
- Duty history queries
- Audit trail
- Roster reports
"""

from . import errors
from . import audit
from . import person_directory
from . import duty_history
from . import duty_assignment
from . import reports

__all__ = [
    'errors',
    'audit',
    'person_directory',
    'duty_history',
    'duty_assignment',
    'reports',
]
