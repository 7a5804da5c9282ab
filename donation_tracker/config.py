"""
Configuration settings for the Donation Tracker backend
"""
import os


class Config:
    """Flask application configuration"""

    # Flask secret key for signing the session cookie
    SECRET_KEY = os.environ.get('SESSION_SECRET') or os.environ.get('SECRET_KEY') or \
        'dev-secret-key-change-in-production-12345'

    # Database configuration
    basedir = os.path.abspath(os.path.dirname(os.path.dirname(__file__)))
    SQLALCHEMY_DATABASE_URI = os.environ.get('DATABASE_URL') or \
        'sqlite:///' + os.path.join(basedir, 'instance', 'donations.db')
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    # bcrypt cost factor for account passwords
    BCRYPT_ROUNDS = int(os.environ.get('BCRYPT_ROUNDS', 10))

    # Application settings
    PORT = int(os.environ.get('PORT', 3000))
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO')
    ADMIN_ROLE = 'admin'


class TestConfig(Config):
    """Testing configuration"""
    TESTING = True
    SQLALCHEMY_DATABASE_URI = 'sqlite:///:memory:'
    BCRYPT_ROUNDS = 4
