"""
Access Control

The login guard runs before every protected blueprint route. Role checks
live inline on the routes that need them (only registration).
"""

from functools import wraps

from flask import current_app
from flask_login import current_user

from donation_tracker.errors import ForbiddenError, UnauthorizedError


def require_login():
    """Blueprint ``before_request`` hook: reject requests without a session user."""
    if not current_user.is_authenticated:
        raise UnauthorizedError()


def admin_required(f):
    """Decorator to ensure the request comes from a logged-in admin account.

    Anonymous callers get the same 403 as non-admin accounts.
    """
    @wraps(f)
    def wrapper(*args, **kwargs):
        admin_role = current_app.config['ADMIN_ROLE']
        if not current_user.is_authenticated or current_user.role != admin_role:
            raise ForbiddenError('Only admin can create accounts.')
        return f(*args, **kwargs)
    return wrapper
