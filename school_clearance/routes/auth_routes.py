"""
Authentication routes
"""

from flask import Blueprint, jsonify
from school_clearance.services import AuthService
from school_clearance.utils import ValidationError, AuthenticationError, log_error, create_response, get_json_body

auth_bp = Blueprint('auth', __name__)

@auth_bp.route('/login', methods=['POST'])
def login():
    """Handle admin login"""
    try:
        data = get_json_body(allow_form=True)
        AuthService.login(data.get('email'), data.get('password'))

        response = jsonify(create_response(True, "Login successful", {"redirect": "/dashboard"}))
        return AuthService.set_auth_cookie(response)

    except ValidationError as e:
        return jsonify(create_response(False, str(e))), 400
    except AuthenticationError as e:
        return jsonify(create_response(False, str(e))), 401
    except Exception as e:
        log_error("Login error", e)
        return jsonify(create_response(False, "Login failed. Please try again.")), 500


@auth_bp.route('/logout', methods=['POST'])
def logout():
    """Handle logout"""
    response = jsonify(create_response(True, "Logged out successfully"))
    return AuthService.clear_auth_cookie(response)


@auth_bp.route('/check', methods=['GET'])
def check():
    """Report whether the caller is logged in"""
    return jsonify(create_response(True, "Auth status", {"authenticated": AuthService.is_authenticated()}))
