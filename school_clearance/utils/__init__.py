"""
Utilities package initialization
"""

from school_clearance.utils.exceptions import (
    SchoolClearanceException, ValidationError, NotFoundError,
    StoreError, InvariantViolation, AuthenticationError
)
from school_clearance.utils.validators import (
    validate_email, validate_required, validate_string_length,
    validate_name_field, validate_optional_text, validate_record_id,
    validate_academic_year
)
from school_clearance.utils.helpers import (
    setup_logging, log_error, log_warning, log_info, create_response, get_json_body
)

__all__ = [
    'SchoolClearanceException', 'ValidationError', 'NotFoundError',
    'StoreError', 'InvariantViolation', 'AuthenticationError',
    'validate_email', 'validate_required', 'validate_string_length',
    'validate_name_field', 'validate_optional_text', 'validate_record_id',
    'validate_academic_year',
    'setup_logging', 'log_error', 'log_warning', 'log_info', 'create_response',
    'get_json_body'
]
