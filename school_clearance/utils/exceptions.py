"""
Custom exceptions for the school clearance application
"""

class SchoolClearanceException(Exception):
    """Base exception for the school clearance application"""
    pass

class ValidationError(SchoolClearanceException):
    """Malformed or missing input, raised before any store call"""
    pass

class NotFoundError(SchoolClearanceException):
    """Referenced record does not exist"""
    pass

class StoreError(SchoolClearanceException):
    """Underlying record store read or write failed"""
    pass

class InvariantViolation(SchoolClearanceException):
    """Stored data breaks an invariant the store does not enforce"""
    pass

class AuthenticationError(SchoolClearanceException):
    """Authentication error"""
    pass
