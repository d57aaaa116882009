"""
Services package initialization
"""

from flask import current_app
from school_clearance.services.auth_service import AuthService
from school_clearance.services.clearance_service import ClearanceService


def get_clearance_service() -> ClearanceService:
    """Get the clearance service registered on the current app"""
    return current_app.extensions['clearance_service']


__all__ = ['AuthService', 'ClearanceService', 'get_clearance_service']
