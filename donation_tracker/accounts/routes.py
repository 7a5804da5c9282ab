"""
Account Routes
"""

from flask import jsonify

from donation_tracker.accounts import accounts_bp
from donation_tracker.accounts import services
from donation_tracker.utils import optional_text, request_data


@accounts_bp.route('', methods=['GET'])
def list_accounts():
    """All accounts, without password hashes."""
    accounts = [account.to_dict() for account in services.list_accounts()]
    return jsonify(success=True, accounts=accounts)


@accounts_bp.route('/<int:account_id>', methods=['PUT'])
def update_account(account_id):
    data = request_data()
    services.update_account(account_id,
                            username=optional_text(data, 'username'),
                            role=optional_text(data, 'role'))
    return jsonify(success=True, message='Account updated successfully.')


@accounts_bp.route('/<int:account_id>', methods=['DELETE'])
def delete_account(account_id):
    services.delete_account(account_id)
    return jsonify(success=True, message='Account deleted successfully.')
