#!/usr/bin/env python3
"""
Kredible - candidate credential verification for recruiters.
A Flask application: recruiters invite candidates by email, candidates submit
their profile links through a tokenized form, recruiters review the results.
"""

import os
from dotenv import load_dotenv
from flask import Flask
from flask_migrate import Migrate

# Import our modules
from models import db
from services import mail, init_storage
from utils.banner import print_startup_banner
from routes import register_blueprints, register_error_handlers

# Load environment variables from .env file
load_dotenv()

def _env_flag(name, default='false'):
    return os.environ.get(name, default).lower() in ('1', 'true', 'yes')

def create_app(test_config=None):
    """Application factory pattern"""
    # Print startup banner (will show in both dev and production)
    print_startup_banner()

    app = Flask(__name__)

    # Configuration
    app.config['SECRET_KEY'] = os.environ.get('SECRET_KEY', 'dev-secret-key-change-in-production')
    app.config['SQLALCHEMY_DATABASE_URI'] = os.environ.get('DATABASE_URL', 'sqlite:///kredible.db')
    app.config['SQLALCHEMY_TRACK_MODIFICATIONS'] = False

    # Storage backend: database, file or memory
    app.config['STORAGE_BACKEND'] = os.environ.get('STORAGE_BACKEND', 'database')
    app.config['STORAGE_FILE'] = os.environ.get('STORAGE_FILE', '.kredible-temp-storage.json')

    # Public URL used in candidate links and emails
    app.config['BASE_URL'] = os.environ.get('BASE_URL', 'http://localhost:5000')

    # Email: SendGrid API first, SMTP (Flask-Mail) second, otherwise simulation
    app.config['SENDGRID_API_KEY'] = os.environ.get('SENDGRID_API_KEY', '')
    app.config['FROM_EMAIL'] = os.environ.get('FROM_EMAIL', 'noreply@kredible.dev')
    app.config['FROM_NAME'] = os.environ.get('FROM_NAME', 'Kredible Platform')
    app.config['EMAIL_TIMEOUT'] = int(os.environ.get('EMAIL_TIMEOUT', '30'))
    app.config['MAIL_SERVER'] = os.environ.get('MAIL_SERVER')
    app.config['MAIL_PORT'] = int(os.environ.get('MAIL_PORT', '587'))
    app.config['MAIL_USE_TLS'] = _env_flag('MAIL_USE_TLS', 'true')
    app.config['MAIL_USERNAME'] = os.environ.get('MAIL_USERNAME')
    app.config['MAIL_PASSWORD'] = os.environ.get('MAIL_PASSWORD')
    app.config['MAIL_DEFAULT_SENDER'] = app.config['FROM_EMAIL']

    # Operational endpoints
    app.config['DASHBOARD_API_KEY'] = os.environ.get('DASHBOARD_API_KEY', '')
    app.config['ENABLE_DEBUG_ROUTES'] = _env_flag('ENABLE_DEBUG_ROUTES', 'true' if app.debug else 'false')

    if test_config:
        app.config.update(test_config)

    # Handle PostgreSQL URL format for SQLAlchemy 2.0+
    if app.config['SQLALCHEMY_DATABASE_URI'].startswith('postgres://'):
        app.config['SQLALCHEMY_DATABASE_URI'] = (
            app.config['SQLALCHEMY_DATABASE_URI'].replace('postgres://', 'postgresql://', 1)
        )

    # Initialize extensions
    db.init_app(app)
    mail.init_app(app)
    Migrate(app, db)
    init_storage(app)

    # Register blueprints
    register_blueprints(app)
    register_error_handlers(app)

    # Database migrations are handled by Flask-Migrate
    # Run: flask db upgrade (in production)

    return app

# Create the application
app = create_app()

if __name__ == '__main__':
    app.run(debug=True, host='0.0.0.0', port=5000)
