from .register import register_bp
from .account import account_bp
from .admin import admin_bp
from .leaders import leaders_bp

def register_blueprints(app):
    """Register all blueprints with the Flask app"""
    app.register_blueprint(register_bp)
    app.register_blueprint(account_bp)
    app.register_blueprint(admin_bp)
    app.register_blueprint(leaders_bp)
