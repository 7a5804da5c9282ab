"""
Donors Blueprint

Donor listing with totals, donor deletion and donation line-item editing.
Every route requires a logged-in account.
"""

from flask import Blueprint

from donation_tracker.auth.decorators import require_login

donors_bp = Blueprint('donors', __name__)
donors_bp.before_request(require_login)

from donation_tracker.donors import routes  # noqa: E402, F401
