"""
Configuration for the print shop service.

Values come from the environment (a .env file is loaded first), with
defaults suitable for local development.
"""

import os
from pathlib import Path

from dotenv import load_dotenv

# Load .env file early so environment variables are available for Config class
# This must happen before the Config class is defined
load_dotenv(override=True)

# Base directory (where this file lives)
BASE_DIR = Path(__file__).resolve().parent


class Config:
    """Default configuration for the Flask application."""

    # Flask settings
    SECRET_KEY = os.environ.get("FLASK_SECRET_KEY", "dev-secret-key")
    UPLOAD_FOLDER = os.environ.get(
        "UPLOAD_FOLDER", str(BASE_DIR / "static" / "uploads")
    )
    MAX_CONTENT_LENGTH = 16 * 1024 * 1024  # 16 MB uploads
    ENVIRONMENT = os.environ.get("FLASK_ENV", "development")

    # Optional JSON file of {storeId: pricing} registered at startup
    STORE_PRICING_FILE = os.environ.get("STORE_PRICING_FILE", "")

    # Debug mode
    DEBUG = os.environ.get("FLASK_DEBUG", "1") == "1"
    TESTING = False

    # ==========================================================================
    # Order limits
    # ==========================================================================
    MAX_COPIES = int(os.environ.get("MAX_COPIES", "1000"))
    MAX_REQUIREMENTS_LENGTH = int(os.environ.get("MAX_REQUIREMENTS_LENGTH", "1000"))
    MAX_DOCUMENT_NAME_LENGTH = int(os.environ.get("MAX_DOCUMENT_NAME_LENGTH", "200"))

    # Shown in front of formatted prices
    CURRENCY_SYMBOL = os.environ.get("CURRENCY_SYMBOL", "₹")

    # ==========================================================================
    # Delivery estimate
    # ==========================================================================
    # estimated hours = base + hours_per_batch × (pending orders // batch_size)
    # e.g. 12 pending orders → 24 + 2 × 2 = 28 hours → "2 days"
    # ==========================================================================
    DELIVERY_BASE_HOURS = int(os.environ.get("DELIVERY_BASE_HOURS", "24"))
    DELIVERY_HOURS_PER_BATCH = int(os.environ.get("DELIVERY_HOURS_PER_BATCH", "2"))
    DELIVERY_BATCH_SIZE = int(os.environ.get("DELIVERY_BATCH_SIZE", "5"))


class ProductionConfig(Config):
    """Production configuration."""
    DEBUG = False
    TESTING = False
    SESSION_COOKIE_SECURE = True
    SESSION_COOKIE_HTTPONLY = True
    SESSION_COOKIE_SAMESITE = 'Lax'


class DevelopmentConfig(Config):
    """Development configuration."""
    DEBUG = True
    TESTING = False


class TestingConfig(Config):
    """Testing configuration."""
    DEBUG = False
    TESTING = True
    ENVIRONMENT = "testing"
