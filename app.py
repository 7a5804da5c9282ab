"""
Donation Tracker
Application Entry Point

This file serves as the entry point for the Flask application.
It uses the application factory pattern defined in the donation_tracker package.
"""

from dotenv import load_dotenv

load_dotenv()

from donation_tracker import create_app  # noqa: E402

# Create the Flask application using the factory
app = create_app()

if __name__ == '__main__':
    app.run(host='0.0.0.0', port=app.config['PORT'])
