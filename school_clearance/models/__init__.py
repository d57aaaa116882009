"""
Database models initialization
"""

from school_clearance.models.student import db, Student
from school_clearance.models.clearance import Department, ClearanceItem, StudentClearance
from school_clearance.models.records import (
    ClearanceStatus, DepartmentStatus, DepartmentRecord, ClearanceItemRecord,
    DepartmentClearanceRecord, StudentClearanceRecord, DepartmentStatusResult
)
from school_clearance.models.store import SQLAlchemyRecordStore

# Export all models
__all__ = [
    'db', 'Student', 'Department', 'ClearanceItem', 'StudentClearance',
    'ClearanceStatus', 'DepartmentStatus', 'DepartmentRecord', 'ClearanceItemRecord',
    'DepartmentClearanceRecord', 'StudentClearanceRecord', 'DepartmentStatusResult',
    'SQLAlchemyRecordStore'
]
