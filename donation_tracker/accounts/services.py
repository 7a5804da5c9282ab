"""
Account maintenance services. Unknown ids are silent no-ops.
"""

import logging

from sqlalchemy.exc import IntegrityError

from donation_tracker.errors import ConflictError
from donation_tracker.extensions import db
from donation_tracker.models import Account

logger = logging.getLogger(__name__)


def list_accounts():
    return Account.query.order_by(Account.id).all()


def update_account(account_id, username=None, role=None):
    """Update the supplied fields of an account; returns None if it does not exist."""
    account = db.session.get(Account, account_id)
    if account is None:
        logger.info('Update of unknown account %s ignored', account_id)
        return None

    if username is not None and username != account.username:
        clash = Account.query.filter_by(username=username).first()
        if clash is not None:
            raise ConflictError('Username already exists.')
        account.username = username
    if role is not None:
        account.role = role

    try:
        db.session.commit()
    except IntegrityError:
        db.session.rollback()
        raise ConflictError('Username already exists.')

    logger.info('Updated account %s', account_id)
    return account


def delete_account(account_id):
    """Delete an account; returns False if there was nothing to delete."""
    account = db.session.get(Account, account_id)
    if account is None:
        return False
    db.session.delete(account)
    db.session.commit()
    logger.info('Deleted account %s (%s)', account_id, account.username)
    return True
