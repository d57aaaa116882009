"""
Validation utilities
"""

import re
from typing import Any, Optional
from school_clearance.utils.exceptions import ValidationError


def validate_email(email: str) -> bool:
    """
    Validate email format
    
    Args:
        email: Email to validate
        
    Returns:
        True if valid email
    """
    if not email or not isinstance(email, str):
        return False
    
    pattern = r'^[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}$'
    return bool(re.match(pattern, email.strip()))


def validate_required(value: Any, field_name: str) -> None:
    """
    Validate required field
    
    Args:
        value: Value to validate
        field_name: Name of the field for error message
        
    Raises:
        ValidationError: If value is empty or None
    """
    if value is None or (isinstance(value, str) and not value.strip()):
        raise ValidationError(f"{field_name} is required")


def validate_string_length(value: str, min_length: int = 1, max_length: Optional[int] = None, 
                          field_name: str = "Field") -> None:
    """
    Validate string length
    
    Args:
        value: String to validate
        min_length: Minimum length
        max_length: Maximum length
        field_name: Name of the field for error message
        
    Raises:
        ValidationError: If length is invalid
    """
    if not isinstance(value, str):
        raise ValidationError(f"{field_name} must be a string")
    
    if len(value.strip()) < min_length:
        raise ValidationError(f"{field_name} must be at least {min_length} characters")
    
    if max_length and len(value) > max_length:
        raise ValidationError(f"{field_name} must be no more than {max_length} characters")


def validate_name_field(value: Any, field_name: str, max_length: int = 200) -> str:
    """
    Validate a required name-like field and return it stripped
    
    Args:
        value: Value to validate
        field_name: Name of the field for error message
        max_length: Maximum length
        
    Returns:
        The stripped value
        
    Raises:
        ValidationError: If value is missing or shorter than 2 characters
    """
    validate_required(value, field_name)
    validate_string_length(value, min_length=2, max_length=max_length, field_name=field_name)
    return value.strip()


def validate_optional_text(value: Any, field_name: str) -> Optional[str]:
    """Return stripped text, or None for missing or blank values."""
    if value is None:
        return None
    if not isinstance(value, str):
        raise ValidationError(f"{field_name} must be a string")
    value = value.strip()
    return value or None


def validate_record_id(value: Any, field_name: str) -> int:
    """
    Validate a record id
    
    Args:
        value: Id as int or numeric string
        field_name: Name of the field for error message
        
    Returns:
        The id as an int
        
    Raises:
        ValidationError: If value is not a positive integer
    """
    if isinstance(value, bool):
        raise ValidationError(f"{field_name} must be a valid id")
    if isinstance(value, str) and re.fullmatch(r'[0-9]+', value.strip()):
        value = int(value.strip())
    if not isinstance(value, int) or value < 1:
        raise ValidationError(f"{field_name} must be a valid id")
    return value


def validate_academic_year(value: Any) -> str:
    """
    Validate academic year, e.g. "2024" or "2024/2025"
    
    Raises:
        ValidationError: If format is invalid
    """
    if isinstance(value, int) and not isinstance(value, bool):
        value = str(value)
    validate_required(value, 'Academic year')
    if not isinstance(value, str):
        raise ValidationError("Academic year must be a string")
    value = value.strip()
    if not re.match(r'^\d{4}([/-]\d{4})?$', value):
        raise ValidationError("Academic year must look like 2024 or 2024/2025")
    return value
