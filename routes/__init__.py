"""
Flask route blueprints for the print shop.

This module contains all route handlers organized by functionality:
- main: Health check
- pricing: Page range parsing, price previews, store pricing tables
- orders: Order placement, status and store queues
- upload: Document upload and page counting

Each blueprint is registered with the Flask app in create_app().
"""

from flask import Blueprint

from .main import main_bp
from .pricing import pricing_bp
from .orders import orders_bp
from .upload import upload_bp

__all__ = [
    "main_bp",
    "pricing_bp",
    "orders_bp",
    "upload_bp",
]


def register_blueprints(app):
    """
    Register all blueprints with the Flask app.

    Args:
        app: Flask application instance
    """
    app.register_blueprint(main_bp)
    app.register_blueprint(pricing_bp)
    app.register_blueprint(orders_bp)
    app.register_blueprint(upload_bp)
