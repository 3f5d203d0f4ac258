"""
Main routes (health).
"""

from flask import Blueprint, current_app

main_bp = Blueprint("main", __name__)


@main_bp.route("/health", methods=["GET"])
def health():
    """Health check endpoint with service status."""
    health_status = {
        "status": "ok",
        "environment": current_app.config.get("ENVIRONMENT", "unknown"),
        "checks": {}
    }

    pricing_service = current_app.config.get("PRICING_SERVICE")
    if pricing_service:
        health_status["checks"]["pricing"] = f"{len(pricing_service.list_stores())} store(s)"
    else:
        health_status["checks"]["pricing"] = "not_available"
        health_status["status"] = "degraded"

    order_service = current_app.config.get("ORDER_SERVICE")
    if order_service:
        health_status["checks"]["orders"] = f"{order_service.order_book.count()} order(s)"
    else:
        health_status["checks"]["orders"] = "not_available"
        health_status["status"] = "degraded"

    status_code = 200 if health_status["status"] == "ok" else 503
    return health_status, status_code
