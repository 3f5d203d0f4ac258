"""
Print shop - Flask application entry point.

This is a slim app factory that:
1. Loads configuration (.env aware) and logging
2. Creates the pricing and order services
3. Seeds store pricing from STORE_PRICING_FILE when configured
4. Registers route blueprints
5. Sets up JSON error handlers

ARCHITECTURE:
    Request threads
    └── routes → OrderService → validate → PricingService → price calculator

The calculator holds no state; the two services each guard their own
registry with a lock.
"""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path

from dotenv import load_dotenv
from flask import Flask
from werkzeug.exceptions import HTTPException, RequestEntityTooLarge

from logging_config import setup_logging, get_logger
from core.exceptions import PrintShopError
from modules.page_estimator import PageCountEstimator
from services.pricing_service import PricingService
from services.order_service import OrderService
from routes import register_blueprints


# Module logger (configured after setup_logging)
logger = get_logger(__name__)


def _load_store_pricing(pricing_service: PricingService, path: Path) -> None:
    """Register every store found in a JSON file of {storeId: pricing}."""
    with open(path, "r", encoding="utf-8") as f:
        stores = json.load(f)

    for store_id, pricing in stores.items():
        pricing_service.set_pricing(store_id, pricing)

    logger.info(f"Loaded pricing for {len(stores)} store(s) from {path}")


def create_app(config_object: str = "config.Config") -> Flask:
    """
    Application factory - creates and configures Flask app.

    Args:
        config_object: Import path of the configuration class

    Returns:
        Configured Flask application
    """
    load_dotenv(override=True)

    app = Flask(__name__)
    app.config.from_object(config_object)

    # Configure logging
    log_level = logging.DEBUG if app.config.get("DEBUG") else logging.INFO
    enable_file_logging = app.config.get("ENVIRONMENT") == "production"

    root_logger = setup_logging(
        log_level=log_level,
        enable_file_logging=enable_file_logging
    )
    app.logger.handlers = root_logger.handlers
    app.logger.setLevel(log_level)

    logger.info(f"Starting print shop in {app.config.get('ENVIRONMENT')} mode")

    # =========================================================================
    # SERVICES INITIALIZATION
    # =========================================================================

    pricing_service = PricingService()
    app.config["PRICING_SERVICE"] = pricing_service

    pricing_file = app.config.get("STORE_PRICING_FILE")
    if pricing_file:
        pricing_path = Path(pricing_file)
        if pricing_path.exists():
            _load_store_pricing(pricing_service, pricing_path)
        else:
            logger.warning(f"STORE_PRICING_FILE not found: {pricing_path}")

    app.config["ORDER_SERVICE"] = OrderService(
        pricing_service,
        max_copies=app.config.get("MAX_COPIES"),
        max_requirements_length=app.config.get("MAX_REQUIREMENTS_LENGTH", 1000),
        max_document_name_length=app.config.get("MAX_DOCUMENT_NAME_LENGTH", 200),
        delivery_base_hours=app.config.get("DELIVERY_BASE_HOURS", 24),
        delivery_hours_per_batch=app.config.get("DELIVERY_HOURS_PER_BATCH", 2),
        delivery_batch_size=app.config.get("DELIVERY_BATCH_SIZE", 5),
    )
    app.config["PAGE_ESTIMATOR"] = PageCountEstimator()

    # =========================================================================
    # REGISTER BLUEPRINTS
    # =========================================================================

    register_blueprints(app)

    # =========================================================================
    # ERROR HANDLERS
    # =========================================================================

    @app.errorhandler(PrintShopError)
    def handle_print_shop_error(e: PrintShopError):
        return e.to_dict(), e.status_code

    @app.errorhandler(RequestEntityTooLarge)
    def handle_file_too_large(e):
        max_mb = app.config.get("MAX_CONTENT_LENGTH", 16 * 1024 * 1024) / (1024 * 1024)
        return {
            "error": f"File too large. Maximum upload size is {max_mb:.0f} MB.",
            "details": {},
        }, 413

    @app.errorhandler(HTTPException)
    def handle_http_error(e: HTTPException):
        return {"error": e.description, "details": {"code": e.code}}, e.code

    @app.errorhandler(Exception)
    def handle_server_error(e):
        logger.error(f"500 error: {e}", exc_info=True)
        return {"error": "An unexpected error occurred. Please try again.", "details": {}}, 500

    logger.info("Application initialized successfully")
    return app


if __name__ == "__main__":
    app = create_app()
    debug_mode = os.environ.get("FLASK_DEBUG", "1") == "1"
    app.run(debug=debug_mode)
