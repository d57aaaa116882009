"""
Clearance status computation

Pure functions over explicit records. Nothing here is persisted;
callers recompute status on every read.
"""

from typing import Any, Dict, Iterable, List, Optional
from school_clearance.models.records import (
    ClearanceStatus, DepartmentStatus, DepartmentRecord,
    StudentClearanceRecord, DepartmentStatusResult
)

UNKNOWN_DEPARTMENT = 'Unknown department'


def get_department_status(student_clearance: Optional[StudentClearanceRecord],
                          department_id: int) -> DepartmentStatusResult:
    """
    Get one department's status for a student

    Args:
        student_clearance: The student's clearance record, or None if none exists yet
        department_id: Department to look up

    Returns:
        PENDING when no decision was recorded, otherwise the recorded decision
    """
    if student_clearance is None:
        return DepartmentStatusResult(DepartmentStatus.PENDING)

    entry = student_clearance.find_entry(department_id)
    if entry is None:
        return DepartmentStatusResult(DepartmentStatus.PENDING)

    return DepartmentStatusResult(DepartmentStatus(entry.status.value), entry)


def is_fully_cleared(student_clearance: Optional[StudentClearanceRecord],
                     departments: Iterable[DepartmentRecord]) -> bool:
    """
    Check whether every configured department has cleared the student

    An empty department list is never fully cleared.
    """
    departments = list(departments)
    if not departments or student_clearance is None:
        return False

    return all(
        get_department_status(student_clearance, department.id).status == DepartmentStatus.CLEARED
        for department in departments
    )


def summarize_clearance(student_clearance: Optional[StudentClearanceRecord],
                        departments: Iterable[DepartmentRecord]) -> Dict[str, Any]:
    """
    Build the per-department breakdown shown on a clearance form

    Args:
        student_clearance: The student's clearance record, or None
        departments: All configured departments

    Returns:
        Dictionary with per-department rows, counts, pending and rejected
        department names, entries for deleted departments and the
        fully cleared flag
    """
    departments = list(departments)
    rows: List[Dict[str, Any]] = []
    pending: List[str] = []
    rejected: List[str] = []
    cleared_count = 0

    for department in departments:
        result = get_department_status(student_clearance, department.id)
        rows.append({
            'department': department.to_dict(),
            'status': result.status.value,
            'record': result.record.to_dict() if result.record else None
        })
        if result.status == DepartmentStatus.CLEARED:
            cleared_count += 1
        elif result.status == DepartmentStatus.NOT_CLEARED:
            rejected.append(department.name)
        else:
            pending.append(department.name)

    # Decisions left behind by deleted departments
    known_ids = {department.id for department in departments}
    unknown = []
    if student_clearance is not None:
        for entry in student_clearance.department_clearances:
            if entry.department_id not in known_ids:
                unknown.append({
                    'department_name': UNKNOWN_DEPARTMENT,
                    'record': entry.to_dict()
                })

    return {
        'departments': rows,
        'unknown_departments': unknown,
        'total_departments': len(departments),
        'cleared_count': cleared_count,
        'not_cleared_count': len(rejected),
        'pending_count': len(pending),
        'pending_departments': pending,
        'rejected_departments': rejected,
        'fully_cleared': is_fully_cleared(student_clearance, departments)
    }


def is_valid_status(value: Any) -> bool:
    """Check whether value names a ClearanceStatus"""
    try:
        ClearanceStatus(value)
    except ValueError:
        return False
    return True
