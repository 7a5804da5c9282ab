"""
Flask Extensions

Account sessions are cookie-based and managed by Flask-Login.
"""

from flask_sqlalchemy import SQLAlchemy
from flask_login import LoginManager

# Database instance
db = SQLAlchemy()

# Login manager for account sessions
login_manager = LoginManager()
