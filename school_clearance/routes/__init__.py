"""
Routes package initialization
"""

from school_clearance.routes.auth_routes import auth_bp
from school_clearance.routes.clearance_routes import clearance_bp
from school_clearance.routes.student_clearance_routes import student_clearance_bp
from school_clearance.routes.errors import register_error_handlers

__all__ = ['auth_bp', 'clearance_bp', 'student_clearance_bp', 'register_error_handlers']
