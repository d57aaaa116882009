"""
Authentication service
"""

import hmac
from typing import Any
from flask import current_app, request, Response
from school_clearance.utils.validators import validate_email
from school_clearance.utils.exceptions import ValidationError, AuthenticationError
from school_clearance.utils.helpers import log_error

AUTH_COOKIE_VALUE = 'authenticated'


class AuthService:
    """Single shared admin login stored as a cookie flag"""

    @staticmethod
    def validate_admin_credentials(email: str, password: str) -> bool:
        """
        Check credentials against the configured admin account

        Args:
            email: Submitted email
            password: Submitted password

        Returns:
            True if both match, False if they differ or no admin is configured
        """
        admin_email = current_app.config.get('ADMIN_EMAIL')
        admin_password = current_app.config.get('ADMIN_PASSWORD')

        if not admin_email or not admin_password:
            log_error("Admin credentials not set in environment variables")
            return False

        email_ok = hmac.compare_digest(email.encode(), admin_email.strip().lower().encode())
        password_ok = hmac.compare_digest(password.encode(), admin_password.encode())
        return email_ok and password_ok

    @staticmethod
    def login(email: Any, password: Any) -> None:
        """
        Authenticate the admin

        Raises:
            ValidationError: If input is malformed
            AuthenticationError: If credentials do not match
        """
        if not email or not password:
            raise ValidationError("Please enter both email and password.")

        if not isinstance(email, str) or not isinstance(password, str):
            raise ValidationError("Email and password must be text.")

        email = email.strip().lower()

        if not validate_email(email):
            raise ValidationError("Invalid email format")

        if not AuthService.validate_admin_credentials(email, password):
            raise AuthenticationError("Invalid credentials")

    @staticmethod
    def set_auth_cookie(response: Response) -> Response:
        """Mark the response's client as logged in"""
        response.set_cookie(
            current_app.config['AUTH_COOKIE_NAME'],
            AUTH_COOKIE_VALUE,
            max_age=current_app.config['AUTH_COOKIE_MAX_AGE'],
            httponly=True,
            secure=current_app.config.get('AUTH_COOKIE_SECURE', False),
            samesite='Lax',
            path='/'
        )
        return response

    @staticmethod
    def clear_auth_cookie(response: Response) -> Response:
        """Log the response's client out"""
        response.delete_cookie(current_app.config['AUTH_COOKIE_NAME'], path='/')
        return response

    @staticmethod
    def is_authenticated() -> bool:
        """Check whether the current request carries the auth cookie"""
        return bool(request.cookies.get(current_app.config['AUTH_COOKIE_NAME']))

    @staticmethod
    def require_auth() -> None:
        """Require authentication - raise exception if not authenticated"""
        if not AuthService.is_authenticated():
            raise AuthenticationError("Authentication required")
