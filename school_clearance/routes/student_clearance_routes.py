"""
Student clearance routes
"""

from flask import Blueprint, request, jsonify
from school_clearance.services import AuthService, get_clearance_service
from school_clearance.utils import create_response, get_json_body

student_clearance_bp = Blueprint('student_clearance', __name__)


@student_clearance_bp.before_request
def require_login():
    AuthService.require_auth()


@student_clearance_bp.route('/student-clearances', methods=['GET'])
def list_student_clearances():
    """List every student clearance record"""
    clearances = get_clearance_service().list_student_clearances()
    return jsonify(create_response(True, "Clearances retrieved", [c.to_dict() for c in clearances]))


@student_clearance_bp.route('/student-clearances/audit', methods=['GET'])
def audit_student_clearances():
    """Report students with more than one clearance record"""
    service = get_clearance_service()
    if request.args.get('strict', '').lower() in ['true', '1', 'on']:
        service.assert_unique_clearances()
    duplicates = service.find_duplicate_clearances()
    data = [{"student_id": student_id, "records": count} for student_id, count in duplicates.items()]
    message = "No duplicate clearances" if not data else f"{len(data)} student(s) with duplicate clearances"
    return jsonify(create_response(True, message, data))


@student_clearance_bp.route('/students/<int:student_id>/clearance', methods=['GET'])
def get_clearance_summary(student_id):
    """Get a student's clearance form data"""
    summary = get_clearance_service().get_clearance_summary(student_id)
    if summary['total_departments'] == 0:
        message = "No clearance departments configured"
    elif summary['fully_cleared']:
        message = "All departments cleared"
    elif summary['pending_departments']:
        message = f"Waiting for {summary['pending_count']} department(s): {', '.join(summary['pending_departments'])}"
    else:
        message = f"Not cleared by: {', '.join(summary['rejected_departments'])}"
    return jsonify(create_response(True, message, summary))


@student_clearance_bp.route('/students/<int:student_id>/clearance/decisions', methods=['POST'])
def record_decision(student_id):
    """Record a department decision for a student"""
    data = get_json_body()
    clearance = get_clearance_service().record_decision(
        student_id=student_id,
        department_id=data.get('department_id'),
        status=data.get('status'),
        remarks=data.get('remarks'),
        academic_year=data.get('academic_year')
    )
    return jsonify(create_response(True, "Decision recorded", clearance.to_dict()))


@student_clearance_bp.route('/students/<int:student_id>/clearance/departments/<int:department_id>',
                            methods=['GET'])
def get_department_status(student_id, department_id):
    """Get one department's status for a student"""
    service = get_clearance_service()
    clearance = service.get_student_clearance(student_id)
    result = service.get_department_status(clearance, department_id)
    return jsonify(create_response(True, "Department status retrieved", result.to_dict()))


@student_clearance_bp.route('/students', methods=['GET'])
def list_students():
    """List students available for clearance"""
    students = get_clearance_service().list_students()
    return jsonify(create_response(True, "Students retrieved", students))
