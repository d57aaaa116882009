"""
Error handlers shared by all blueprints
"""

from flask import jsonify
from werkzeug.exceptions import HTTPException
from school_clearance.utils import (
    ValidationError, AuthenticationError, NotFoundError, StoreError,
    InvariantViolation, log_error, create_response
)

STATUS_CODES = (
    (ValidationError, 400),
    (AuthenticationError, 401),
    (NotFoundError, 404),
    (InvariantViolation, 409),
    (StoreError, 503),
)


def register_error_handlers(app):
    """Translate service exceptions into the standard JSON response"""

    def make_handler(status_code):
        def handler(error):
            if status_code >= 500:
                log_error("Record store error", error)
            return jsonify(create_response(False, str(error))), status_code
        return handler

    for exception_class, status_code in STATUS_CODES:
        app.register_error_handler(exception_class, make_handler(status_code))

    @app.errorhandler(HTTPException)
    def handle_http_error(error):
        return jsonify(create_response(False, error.description)), error.code

    @app.errorhandler(Exception)
    def handle_unexpected_error(error):
        log_error("Unexpected error", error)
        return jsonify(create_response(False, "Request failed. Please try again.")), 500
