"""
Helper utilities
"""

import logging
from typing import Optional, Dict, Any
from flask import current_app, has_app_context, request
from school_clearance.utils.exceptions import ValidationError

logger = logging.getLogger('school_clearance')


def setup_logging() -> None:
    """Setup application logging"""
    if not current_app.debug:
        # Production logging
        logging.basicConfig(
            level=logging.INFO,
            format='%(asctime)s %(levelname)s %(name)s %(message)s'
        )
    else:
        # Development logging
        logging.basicConfig(
            level=logging.DEBUG,
            format='%(asctime)s %(levelname)s %(name)s %(message)s'
        )


def _get_logger() -> logging.Logger:
    # Outside a request or app context the engine still logs
    if has_app_context():
        return current_app.logger
    return logger


def log_error(message: str, exception: Optional[Exception] = None) -> None:
    """
    Log error message
    
    Args:
        message: Error message
        exception: Exception object
    """
    if exception:
        _get_logger().error(f"{message}: {str(exception)}")
    else:
        _get_logger().error(message)


def log_warning(message: str) -> None:
    """
    Log warning message
    
    Args:
        message: Warning message
    """
    _get_logger().warning(message)


def log_info(message: str) -> None:
    """
    Log info message
    
    Args:
        message: Info message
    """
    _get_logger().info(message)


def create_response(success: bool, message: str, data: Optional[Any] = None) -> Dict[str, Any]:
    """
    Create standardized API response
    
    Args:
        success: Whether operation was successful
        message: Response message
        data: Optional data to include
        
    Returns:
        Standardized response dictionary
    """
    response = {
        'ok': success,
        'message': message
    }
    
    if data is not None:
        response['data'] = data
    
    return response


def get_json_body(allow_form: bool = False) -> Dict[str, Any]:
    """
    Get the request body as a dictionary
    
    Args:
        allow_form: Fall back to form data when the body is not JSON
        
    Returns:
        Request fields, empty if no body was sent
        
    Raises:
        ValidationError: If the JSON body is not an object
    """
    data = request.get_json(silent=True)
    if data is None:
        return request.form.to_dict() if allow_form else {}
    if not isinstance(data, dict):
        raise ValidationError("Request body must be a JSON object")
    return data
