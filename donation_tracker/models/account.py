"""
Account Model
"""

import secrets

from flask_login import UserMixin

from donation_tracker.extensions import db


def new_session_token():
    return secrets.token_urlsafe(32)


class Account(UserMixin, db.Model):
    """Login credential with a role used for administrative access

    The session cookie carries ``session_token`` rather than the primary key,
    so rotating the token on the server revokes every cookie issued for it.
    """
    __tablename__ = 'accounts'

    id = db.Column(db.Integer, primary_key=True)
    role = db.Column(db.String(50), nullable=False)
    username = db.Column(db.String(80), unique=True, nullable=False, index=True)
    # bcrypt hash, never serialized
    password = db.Column(db.String(255), nullable=False)
    session_token = db.Column(db.String(64), unique=True, nullable=False, index=True,
                              default=new_session_token)

    def get_id(self):
        return self.session_token

    def revoke_sessions(self):
        self.session_token = new_session_token()

    def to_dict(self):
        return {'id': self.id, 'username': self.username, 'role': self.role}

    def __repr__(self):
        return f'<Account {self.username} ({self.role})>'
