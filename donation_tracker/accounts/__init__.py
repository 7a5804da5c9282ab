"""
Accounts Blueprint

Account listing and maintenance. Any logged-in account may use these routes;
only registration is restricted to admins.
"""

from flask import Blueprint

from donation_tracker.auth.decorators import require_login

accounts_bp = Blueprint('accounts', __name__)
accounts_bp.before_request(require_login)

from donation_tracker.accounts import routes  # noqa: E402, F401
