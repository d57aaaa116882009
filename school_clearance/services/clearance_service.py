"""
Clearance service: departments, checklist items and student clearance decisions
"""

from collections import Counter
from datetime import datetime, timezone
from typing import Any, Callable, Dict, List, Optional
from school_clearance.models.records import (
    ClearanceStatus, DepartmentRecord, ClearanceItemRecord,
    DepartmentClearanceRecord, StudentClearanceRecord, DepartmentStatusResult
)
from school_clearance.services import clearance_status
from school_clearance.utils.exceptions import ValidationError, NotFoundError, InvariantViolation
from school_clearance.utils.helpers import log_info, log_warning
from school_clearance.utils.validators import (
    validate_name_field, validate_optional_text, validate_record_id,
    validate_academic_year
)

DEPARTMENTS = 'departments'
ITEMS = 'clearance_items'
CLEARANCES = 'student_clearances'
STUDENTS = 'students'


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class ClearanceService:
    """
    Clearance workflow over a record store

    The store must provide insert, patch, delete, get and collect for the
    departments, clearance_items, student_clearances and students kinds.
    """

    def __init__(self, store, clock: Optional[Callable[[], datetime]] = None):
        self.store = store
        self.clock = clock or _utc_now

    # Departments

    def list_departments(self) -> List[DepartmentRecord]:
        """List all departments in insertion order"""
        return [DepartmentRecord.from_dict(row) for row in self.store.collect(DEPARTMENTS)]

    def get_department(self, department_id: int) -> DepartmentRecord:
        """Get a department or raise NotFoundError"""
        department_id = validate_record_id(department_id, 'Department id')
        row = self.store.get(DEPARTMENTS, department_id)
        if row is None:
            raise NotFoundError(f"Department {department_id} not found")
        return DepartmentRecord.from_dict(row)

    @staticmethod
    def _department_fields(name, officer_name, officer_title, description) -> Dict[str, Any]:
        return {
            'name': validate_name_field(name, 'Department name'),
            'description': validate_optional_text(description, 'Description'),
            'officer_name': validate_name_field(officer_name, 'Officer name'),
            'officer_title': validate_name_field(officer_title, 'Officer title'),
        }

    def create_department(self, name: str, officer_name: str, officer_title: str,
                          description: Optional[str] = None) -> int:
        """
        Create a department

        Duplicate names are allowed.

        Returns:
            Id of the new department
        """
        fields = self._department_fields(name, officer_name, officer_title, description)
        department_id = self.store.insert(DEPARTMENTS, fields)
        log_info(f"Created department {department_id} ({fields['name']})")
        return department_id

    def update_department(self, department_id: int, fields: Dict[str, Any]) -> int:
        """
        Replace all editable fields of a department

        Args:
            department_id: Department to update
            fields: name, officer_name, officer_title and optional description

        Returns:
            The department id
        """
        department_id = validate_record_id(department_id, 'Department id')
        new_fields = self._department_fields(
            fields.get('name'), fields.get('officer_name'),
            fields.get('officer_title'), fields.get('description')
        )
        if self.store.get(DEPARTMENTS, department_id) is None:
            raise NotFoundError(f"Department {department_id} not found")
        self.store.patch(DEPARTMENTS, department_id, new_fields)
        return department_id

    def delete_department(self, department_id: int) -> int:
        """
        Delete a department and every checklist item that belongs to it

        Items go first, then the department, each as a separate store call.
        Decisions already recorded against the department are left in place.
        """
        department_id = validate_record_id(department_id, 'Department id')
        items = self.store.collect(ITEMS, department_id=department_id)
        for item in items:
            self.store.delete(ITEMS, item['id'])

        if self.store.get(DEPARTMENTS, department_id) is None:
            log_warning(f"Department {department_id} already gone, removed {len(items)} orphaned item(s)")
        else:
            self.store.delete(DEPARTMENTS, department_id)
            log_info(f"Deleted department {department_id} and {len(items)} item(s)")
        return department_id

    # Checklist items

    def list_items(self, department_id: Optional[int] = None) -> List[ClearanceItemRecord]:
        """List checklist items, optionally for one department"""
        if department_id is None:
            rows = self.store.collect(ITEMS)
        else:
            department_id = validate_record_id(department_id, 'Department id')
            rows = self.store.collect(ITEMS, department_id=department_id)
        return [ClearanceItemRecord.from_dict(row) for row in rows]

    def _item_fields(self, department_id, name, description) -> Dict[str, Any]:
        fields = {
            'department_id': validate_record_id(department_id, 'Department id'),
            'name': validate_name_field(name, 'Item name'),
            'description': validate_optional_text(description, 'Description'),
        }
        if self.store.get(DEPARTMENTS, fields['department_id']) is None:
            raise NotFoundError(f"Department {fields['department_id']} not found")
        return fields

    def create_item(self, department_id: int, name: str, description: Optional[str] = None) -> int:
        """Create a checklist item for an existing department"""
        return self.store.insert(ITEMS, self._item_fields(department_id, name, description))

    def update_item(self, item_id: int, fields: Dict[str, Any]) -> int:
        """Replace all editable fields of a checklist item"""
        item_id = validate_record_id(item_id, 'Item id')
        new_fields = self._item_fields(
            fields.get('department_id'), fields.get('name'), fields.get('description')
        )
        if self.store.get(ITEMS, item_id) is None:
            raise NotFoundError(f"Clearance item {item_id} not found")
        self.store.patch(ITEMS, item_id, new_fields)
        return item_id

    def delete_item(self, item_id: int) -> int:
        """Delete a checklist item; an id that is already gone is a no-op"""
        item_id = validate_record_id(item_id, 'Item id')
        if self.store.get(ITEMS, item_id) is None:
            log_warning(f"Clearance item {item_id} already gone")
        else:
            self.store.delete(ITEMS, item_id)
        return item_id

    # Students (read only)

    def list_students(self) -> List[Dict[str, Any]]:
        return self.store.collect(STUDENTS)

    def get_student(self, student_id: int) -> Dict[str, Any]:
        student_id = validate_record_id(student_id, 'Student id')
        student = self.store.get(STUDENTS, student_id)
        if student is None:
            raise NotFoundError(f"Student {student_id} not found")
        return student

    # Student clearances

    def list_student_clearances(self) -> List[StudentClearanceRecord]:
        return [StudentClearanceRecord.from_dict(row) for row in self.store.collect(CLEARANCES)]

    def get_student_clearance(self, student_id: int) -> Optional[StudentClearanceRecord]:
        """
        Get the clearance record for a student

        If the store holds more than one, the first one wins.
        """
        student_id = validate_record_id(student_id, 'Student id')
        rows = self.store.collect(CLEARANCES, student_id=student_id)
        if not rows:
            return None
        if len(rows) > 1:
            log_warning(f"Student {student_id} has {len(rows)} clearance records, using the first")
        return StudentClearanceRecord.from_dict(rows[0])

    def record_decision(self, student_id: int, department_id: int, status: str,
                        remarks: Optional[str] = None, officer_name: Optional[str] = None,
                        officer_title: Optional[str] = None,
                        academic_year: Optional[str] = None) -> StudentClearanceRecord:
        """
        Record a department's decision for a student

        Replaces the department's existing entry in place, appends a new
        entry, or creates the student's clearance record on the first
        decision. Officer name and title are copied from the department as
        it is now; the arguments only fill in what the department lacks.

        Args:
            student_id: Student being cleared
            department_id: Department making the decision
            status: 'cleared' or 'not_cleared'
            remarks: Optional officer remarks
            officer_name: Fallback officer name
            officer_title: Fallback officer title
            academic_year: Year for a newly created record, defaults to the current year

        Returns:
            The clearance record as written
        """
        student_id = validate_record_id(student_id, 'Student id')
        department_id = validate_record_id(department_id, 'Department id')
        if not clearance_status.is_valid_status(status):
            raise ValidationError("Status must be 'cleared' or 'not_cleared'")
        remarks = validate_optional_text(remarks, 'Remarks')
        if academic_year is not None:
            academic_year = validate_academic_year(academic_year)

        department = self.get_department(department_id)
        self.get_student(student_id)

        now = self.clock()
        entry = DepartmentClearanceRecord(
            department_id=department_id,
            status=ClearanceStatus(status),
            remarks=remarks,
            officer_name=department.officer_name or officer_name,
            officer_title=department.officer_title or officer_title,
            date=now.isoformat(),
        )

        existing = self.get_student_clearance(student_id)
        if existing is None:
            record = StudentClearanceRecord(
                id=0,
                student_id=student_id,
                academic_year=academic_year or str(now.year),
                department_clearances=[entry],
            )
            fields = record.to_dict()
            del fields['id']
            record.id = self.store.insert(CLEARANCES, fields)
            log_info(f"Created clearance {record.id} for student {student_id}")
        else:
            record = existing
            entries = list(record.department_clearances)
            for index, current in enumerate(entries):
                if current.department_id == department_id:
                    entries[index] = entry
                    break
            else:
                entries.append(entry)
            record.department_clearances = entries
            # No concurrency control: a concurrent decision for this student may be overwritten
            self.store.patch(CLEARANCES, record.id, {
                'department_clearances': [e.to_dict() for e in entries]
            })

        log_info(f"Department {department_id} marked student {student_id} {entry.status.value}")
        return record

    def get_department_status(self, student_clearance: Optional[StudentClearanceRecord],
                              department_id: int) -> DepartmentStatusResult:
        return clearance_status.get_department_status(student_clearance, department_id)

    def is_fully_cleared(self, student_clearance: Optional[StudentClearanceRecord],
                         departments: List[DepartmentRecord]) -> bool:
        return clearance_status.is_fully_cleared(student_clearance, departments)

    def get_clearance_summary(self, student_id: int) -> Dict[str, Any]:
        """
        Collect everything needed to render a student's clearance form

        Returns:
            Dictionary with the student, the clearance record (or None)
            and the status breakdown from summarize_clearance
        """
        student = self.get_student(student_id)
        clearance = self.get_student_clearance(student['id'])
        summary = clearance_status.summarize_clearance(clearance, self.list_departments())
        summary['student'] = student
        summary['clearance'] = clearance.to_dict() if clearance else None
        summary['academic_year'] = clearance.academic_year if clearance else None
        return summary

    # Audit

    def find_duplicate_clearances(self) -> Dict[int, int]:
        """
        Find students with more than one clearance record

        Returns:
            Mapping of student id to number of records
        """
        counts = Counter(row['student_id'] for row in self.store.collect(CLEARANCES))
        return {student_id: count for student_id, count in counts.items() if count > 1}

    def assert_unique_clearances(self) -> None:
        """Raise InvariantViolation if any student has more than one clearance record"""
        duplicates = self.find_duplicate_clearances()
        if duplicates:
            students = ', '.join(str(student_id) for student_id in sorted(duplicates))
            raise InvariantViolation(f"Duplicate clearance records for student(s): {students}")
