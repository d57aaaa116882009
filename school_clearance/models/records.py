"""
Plain record types passed between the clearance service and its callers.

The record store hands back dicts; these types give them a fixed shape
so the service never works on free-form strings or untyped documents.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional


class ClearanceStatus(str, Enum):
    """Decision an officer records for one department"""
    CLEARED = 'cleared'
    NOT_CLEARED = 'not_cleared'


class DepartmentStatus(str, Enum):
    """Status of one department for one student; PENDING means no decision yet"""
    PENDING = 'pending'
    CLEARED = 'cleared'
    NOT_CLEARED = 'not_cleared'


@dataclass
class DepartmentRecord:
    id: int
    name: str
    officer_name: str
    officer_title: str
    description: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'DepartmentRecord':
        return cls(
            id=data['id'],
            name=data['name'],
            officer_name=data['officer_name'],
            officer_title=data['officer_title'],
            description=data.get('description'),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            'id': self.id,
            'name': self.name,
            'description': self.description,
            'officer_name': self.officer_name,
            'officer_title': self.officer_title,
        }


@dataclass
class ClearanceItemRecord:
    id: int
    department_id: int
    name: str
    description: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'ClearanceItemRecord':
        return cls(
            id=data['id'],
            department_id=data['department_id'],
            name=data['name'],
            description=data.get('description'),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            'id': self.id,
            'department_id': self.department_id,
            'name': self.name,
            'description': self.description,
        }


@dataclass
class DepartmentClearanceRecord:
    """One department's decision, embedded in a StudentClearanceRecord"""
    department_id: int
    status: ClearanceStatus
    officer_name: str
    officer_title: str
    date: str
    remarks: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'DepartmentClearanceRecord':
        return cls(
            department_id=data['department_id'],
            status=ClearanceStatus(data['status']),
            officer_name=data['officer_name'],
            officer_title=data['officer_title'],
            date=data['date'],
            remarks=data.get('remarks'),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            'department_id': self.department_id,
            'status': self.status.value,
            'remarks': self.remarks,
            'officer_name': self.officer_name,
            'officer_title': self.officer_title,
            'date': self.date,
        }


@dataclass
class StudentClearanceRecord:
    id: int
    student_id: int
    academic_year: str
    department_clearances: List[DepartmentClearanceRecord] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'StudentClearanceRecord':
        return cls(
            id=data['id'],
            student_id=data['student_id'],
            academic_year=data['academic_year'],
            department_clearances=[
                DepartmentClearanceRecord.from_dict(entry)
                for entry in data.get('department_clearances') or []
            ],
        )

    def find_entry(self, department_id: int) -> Optional[DepartmentClearanceRecord]:
        for entry in self.department_clearances:
            if entry.department_id == department_id:
                return entry
        return None

    def to_dict(self) -> Dict[str, Any]:
        return {
            'id': self.id,
            'student_id': self.student_id,
            'academic_year': self.academic_year,
            'department_clearances': [entry.to_dict() for entry in self.department_clearances],
        }


@dataclass
class DepartmentStatusResult:
    """Three-valued department status plus the decision behind it, if any"""
    status: DepartmentStatus
    record: Optional[DepartmentClearanceRecord] = None

    @property
    def remarks(self) -> Optional[str]:
        return self.record.remarks if self.record else None

    def to_dict(self) -> Dict[str, Any]:
        return {
            'status': self.status.value,
            'record': self.record.to_dict() if self.record else None,
        }
