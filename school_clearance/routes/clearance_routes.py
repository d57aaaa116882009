"""
Department and clearance item routes
"""

from flask import Blueprint, request, jsonify
from school_clearance.services import AuthService, get_clearance_service
from school_clearance.utils import create_response, get_json_body

clearance_bp = Blueprint('clearance', __name__)


@clearance_bp.before_request
def require_login():
    AuthService.require_auth()


@clearance_bp.route('/departments', methods=['GET'])
def list_departments():
    """List all departments"""
    departments = get_clearance_service().list_departments()
    return jsonify(create_response(True, "Departments retrieved", [d.to_dict() for d in departments]))


@clearance_bp.route('/departments', methods=['POST'])
def create_department():
    """Create a department"""
    data = get_json_body()
    department_id = get_clearance_service().create_department(
        name=data.get('name'),
        officer_name=data.get('officer_name'),
        officer_title=data.get('officer_title'),
        description=data.get('description')
    )
    return jsonify(create_response(True, "Department created", {"id": department_id})), 201


@clearance_bp.route('/departments/<int:department_id>', methods=['GET'])
def get_department(department_id):
    """Get one department"""
    department = get_clearance_service().get_department(department_id)
    return jsonify(create_response(True, "Department retrieved", department.to_dict()))


@clearance_bp.route('/departments/<int:department_id>', methods=['PUT'])
def update_department(department_id):
    """Replace a department's editable fields"""
    get_clearance_service().update_department(department_id, get_json_body())
    return jsonify(create_response(True, "Department updated", {"id": department_id}))


@clearance_bp.route('/departments/<int:department_id>', methods=['DELETE'])
def delete_department(department_id):
    """Delete a department and its checklist items"""
    get_clearance_service().delete_department(department_id)
    return jsonify(create_response(True, "Department deleted", {"id": department_id}))


@clearance_bp.route('/departments/<int:department_id>/items', methods=['GET'])
def list_department_items(department_id):
    """List one department's checklist"""
    items = get_clearance_service().list_items(department_id)
    return jsonify(create_response(True, "Items retrieved", [item.to_dict() for item in items]))


@clearance_bp.route('/items', methods=['GET'])
def list_items():
    """List checklist items, optionally filtered by department_id"""
    department_id = request.args.get('department_id')
    items = get_clearance_service().list_items(department_id)
    return jsonify(create_response(True, "Items retrieved", [item.to_dict() for item in items]))


@clearance_bp.route('/items', methods=['POST'])
def create_item():
    """Create a checklist item"""
    data = get_json_body()
    item_id = get_clearance_service().create_item(
        department_id=data.get('department_id'),
        name=data.get('name'),
        description=data.get('description')
    )
    return jsonify(create_response(True, "Item created", {"id": item_id})), 201


@clearance_bp.route('/items/<int:item_id>', methods=['PUT'])
def update_item(item_id):
    get_clearance_service().update_item(item_id, get_json_body())
    return jsonify(create_response(True, "Item updated", {"id": item_id}))


@clearance_bp.route('/items/<int:item_id>', methods=['DELETE'])
def delete_item(item_id):
    get_clearance_service().delete_item(item_id)
    return jsonify(create_response(True, "Item deleted", {"id": item_id}))
