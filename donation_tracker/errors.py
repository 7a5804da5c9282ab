"""
Error Hierarchy and JSON Error Handlers

Services raise these exceptions; the handlers registered by the application
factory turn them into ``{"success": false, "message": ...}`` bodies with the
matching HTTP status.

    DonationTrackerError (base)     500
    ├── ValidationError             400
    ├── UnauthorizedError           401
    ├── ForbiddenError              403
    ├── NotFoundError               404
    └── ConflictError               409
"""

import logging

from flask import jsonify
from werkzeug.exceptions import HTTPException

from donation_tracker.extensions import db

logger = logging.getLogger(__name__)


class DonationTrackerError(Exception):
    """Base exception for all application errors.

    Attributes:
        message: User-facing error description (safe to return to clients)
        status_code: HTTP status used when rendering the error
    """

    status_code = 500

    def __init__(self, message='Server error'):
        self.message = message
        super().__init__(message)


class ValidationError(DonationTrackerError):
    """Client input is missing or malformed."""

    status_code = 400

    def __init__(self, message='Validation failed', field=None):
        super().__init__(message)
        self.field = field


class UnauthorizedError(DonationTrackerError):
    status_code = 401

    def __init__(self, message='Unauthorized. Please log in.'):
        super().__init__(message)


class ForbiddenError(DonationTrackerError):
    status_code = 403

    def __init__(self, message='Forbidden'):
        super().__init__(message)


class NotFoundError(DonationTrackerError):
    """A donor, donation or account does not exist."""

    status_code = 404

    def __init__(self, resource='Resource'):
        super().__init__(f'{resource} not found')


class ConflictError(DonationTrackerError):
    """Duplicate username or a concurrent write on the same donor."""

    status_code = 409


def error_response(message, status_code, **extra):
    return jsonify(success=False, message=message, **extra), status_code


def register_error_handlers(app):
    """Attach JSON error handlers to the Flask app."""

    @app.errorhandler(DonationTrackerError)
    def handle_app_error(error):
        if error.status_code >= 500:
            logger.error('Application error: %s', error.message)
        extra = {}
        if getattr(error, 'field', None):
            extra['field'] = error.field
        return error_response(error.message, error.status_code, **extra)

    @app.errorhandler(HTTPException)
    def handle_http_error(error):
        return error_response(error.description, error.code)

    @app.errorhandler(Exception)
    def handle_unexpected_error(error):
        logger.exception('Unhandled error while processing request')
        db.session.rollback()
        return error_response('Server error', 500)
