"""
Auth Routes

Account registration (admin only), login and logout using Flask-Login.
"""

import logging

from flask import current_app, jsonify, session
from flask_login import current_user, login_user, logout_user

from donation_tracker.auth import auth_bp
from donation_tracker.auth.decorators import admin_required
from donation_tracker.auth.services import authenticate, register_account, revoke_sessions
from donation_tracker.errors import ValidationError
from donation_tracker.utils import request_data

logger = logging.getLogger(__name__)


@auth_bp.route('/register', methods=['POST'])
@admin_required
def register():
    """Create an account; only an admin session may do this."""
    data = request_data()
    fields = {}
    for name in ('role', 'username', 'password'):
        value = data.get(name)
        if not isinstance(value, str) or not value.strip():
            raise ValidationError('All fields are required.')
        fields[name] = value

    register_account(fields['role'].strip(), fields['username'].strip(), fields['password'],
                     rounds=current_app.config['BCRYPT_ROUNDS'])
    return jsonify(success=True, message='Account created successfully.'), 201


@auth_bp.route('/login', methods=['POST'])
def login():
    """Log in with username/password and start a session."""
    data = request_data()
    username = data.get('username')
    password = data.get('password')

    if not isinstance(username, str) or not isinstance(password, str) \
            or not username.strip() or not password:
        raise ValidationError('Please provide both username and password.')

    account = authenticate(username, password)

    session.clear()
    login_user(account)
    logger.info('Account %s logged in', account.username)
    return jsonify(success=True, message='Login successful', user=account.to_dict())


@auth_bp.route('/logout', methods=['POST'])
def logout():
    """End the session; succeeds whether or not anyone was logged in."""
    if current_user.is_authenticated:
        revoke_sessions(current_user._get_current_object())
    logout_user()
    session.clear()
    return jsonify(success=True, message='Logged out')
