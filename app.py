#!/usr/bin/env python3
"""
Party Platform - registration service
A Flask application for invite-gated registration of cadre, leader and admin accounts.
"""

import os
from dotenv import load_dotenv
from flask import Flask, jsonify
from flask_migrate import Migrate

# Import our modules
from models import db
from utils.i18n import t
from utils.banner import print_startup_banner
from routes import register_blueprints
from services.seed import seed_database

# Load environment variables from .env file
load_dotenv()


def create_app(config=None):
    """Application factory pattern"""
    app = Flask(__name__)

    # Configuration
    app.config['SECRET_KEY'] = os.environ.get('SECRET_KEY', 'dev-secret-key-change-in-production')
    app.config['SQLALCHEMY_DATABASE_URI'] = os.environ.get('DATABASE_URL', 'sqlite:///party_platform.db')
    app.config['SQLALCHEMY_TRACK_MODIFICATIONS'] = False

    if config:
        app.config.update(config)

    # Handle PostgreSQL URL format for SQLAlchemy 2.0+
    if app.config['SQLALCHEMY_DATABASE_URI'].startswith('postgres://'):
        app.config['SQLALCHEMY_DATABASE_URI'] = (
            app.config['SQLALCHEMY_DATABASE_URI'].replace('postgres://', 'postgresql://', 1)
        )

    if not app.testing:
        print_startup_banner(app.config['SQLALCHEMY_DATABASE_URI'])

    # Initialize extensions
    db.init_app(app)
    Migrate(app, db)

    # Register blueprints
    register_blueprints(app)

    @app.errorhandler(500)
    def internal_error(error):
        return jsonify({'error': t('internal_error')}), 500

    @app.cli.command('seed')
    def seed_command():
        """Create the super admin account and sample invite codes."""
        seed_database()

    # Database migrations are handled by Flask-Migrate
    # Run: flask db upgrade (in production)

    return app


if __name__ == '__main__':
    create_app().run(debug=True, host='0.0.0.0', port=5000)
