"""
Account authentication services: password hashing, registration, login.
"""

import logging

import bcrypt
from sqlalchemy.exc import IntegrityError

from donation_tracker.errors import ConflictError, UnauthorizedError, ValidationError
from donation_tracker.extensions import db
from donation_tracker.models import Account

logger = logging.getLogger(__name__)


def hash_password(password, rounds=10):
    return bcrypt.hashpw(password.encode(), bcrypt.gensalt(rounds=rounds)).decode()


def verify_password(password, hashed):
    try:
        return bcrypt.checkpw(password.encode(), hashed.encode())
    except ValueError:
        # stored value is not a bcrypt hash
        return False


def register_account(role, username, password, rounds=10):
    """Create a new account with a hashed password.

    Raises:
        ValidationError: a field is missing
        ConflictError: the username is already taken
    """
    if not role or not username or not password:
        raise ValidationError('All fields are required.')

    if Account.query.filter_by(username=username).first():
        raise ConflictError('Username already exists.')

    account = Account(role=role, username=username,
                      password=hash_password(password, rounds))
    try:
        db.session.add(account)
        db.session.commit()
    except IntegrityError:
        db.session.rollback()
        raise ConflictError('Username already exists.')

    logger.info('Registered account %s with role %s', username, role)
    return account


def authenticate(username, password):
    """Return the account matching the credentials or raise UnauthorizedError."""
    account = Account.query.filter_by(username=username.strip()).first()
    if account is None or not verify_password(password, account.password):
        logger.warning('Failed login attempt for %s', username)
        raise UnauthorizedError('Invalid credentials')
    return account


def revoke_sessions(account):
    """Rotate the account's session token so previously issued cookies stop working."""
    account.revoke_sessions()
    db.session.commit()
    logger.info('Ended sessions for account %s', account.username)
