"""
Donation Tracker - Application Factory

This module provides the Flask application factory pattern for creating
and configuring the application instance.
"""

import logging
import os

from flask import Flask

from donation_tracker.config import Config
from donation_tracker.errors import register_error_handlers
from donation_tracker.extensions import db, login_manager

logger = logging.getLogger(__name__)


def create_app(config_class=Config):
    """Create and configure the Flask application.

    Args:
        config_class: Configuration class to use (default: Config)

    Returns:
        Configured Flask application instance
    """
    app = Flask(__name__)
    app.config.from_object(config_class)

    logging.basicConfig(
        level=app.config['LOG_LEVEL'],
        format='%(asctime)s %(levelname)s %(name)s: %(message)s',
    )

    # Initialize extensions
    db.init_app(app)
    login_manager.init_app(app)

    # Register blueprints
    from donation_tracker.auth import auth_bp
    from donation_tracker.donors import donors_bp
    from donation_tracker.accounts import accounts_bp

    app.register_blueprint(auth_bp, url_prefix='/api')
    app.register_blueprint(donors_bp, url_prefix='/api/donors')
    app.register_blueprint(accounts_bp, url_prefix='/api/accounts')

    register_error_handlers(app)

    @app.route('/')
    def index():
        """Serve the static entry page."""
        return app.send_static_file('donation.html')

    # Session loader for Flask-Login
    @login_manager.user_loader
    def load_account(session_token):
        from donation_tracker.models import Account
        return Account.query.filter_by(session_token=session_token).first()

    # Create database tables
    with app.app_context():
        if app.config['SQLALCHEMY_DATABASE_URI'].startswith('sqlite:///') and not app.testing:
            os.makedirs(os.path.join(config_class.basedir, 'instance'), exist_ok=True)
        db.create_all()
        logger.info('Database ready at %s', db.engine.url.render_as_string(hide_password=True))

    return app
