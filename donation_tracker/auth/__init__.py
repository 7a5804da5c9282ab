"""
Auth Blueprint

Registration, login and logout for administrative accounts.
"""

from flask import Blueprint

auth_bp = Blueprint('auth', __name__)

from donation_tracker.auth import routes  # noqa: E402, F401
