"""
Order routes (JSON).

Handles:
- POST  /api/orders                  - Place an order
- GET   /api/orders/<id>             - Order details
- GET   /api/orders/<id>/price       - Price again at the store's current pricing
- PATCH /api/orders/<id>/status      - Update fulfilment status (store admin)
- GET   /api/stores/<id>/orders      - Store's orders, newest first (?status=Pending)
- GET   /api/stores/<id>/queue       - Pending orders and delivery estimate

Validation errors raised by the order service are turned into JSON
responses by the app's PrintShopError handler.
"""

from flask import Blueprint, current_app, request

from logging_config import get_logger
from routes.pricing import files_from_payload, json_object_body, payload_text


# Module logger
logger = get_logger(__name__)

orders_bp = Blueprint("orders", __name__)


@orders_bp.route("/api/orders", methods=["POST"])
def create_order():
    """
    Place an order.

    Body: {"documentName", "storeId", "files": [...], "description", "customerName"}
    """
    payload = json_object_body()
    order_service = current_app.config["ORDER_SERVICE"]

    order = order_service.submit_order(
        document_name=payload_text(payload, "documentName"),
        store_id=payload_text(payload, "storeId") or None,
        files=files_from_payload(payload),
        description=payload_text(payload, "description"),
        customer_name=payload_text(payload, "customerName"),
    )
    return order.to_dict(), 201


@orders_bp.route("/api/orders/<order_id>", methods=["GET"])
def get_order(order_id: str):
    order_service = current_app.config["ORDER_SERVICE"]
    return order_service.get_order(order_id).to_dict()


@orders_bp.route("/api/orders/<order_id>/price", methods=["GET"])
def reprice_order(order_id: str):
    order_service = current_app.config["ORDER_SERVICE"]
    breakdown = order_service.reprice(order_id)
    return breakdown.to_dict(current_app.config.get("CURRENCY_SYMBOL", "₹"))


@orders_bp.route("/api/orders/<order_id>/status", methods=["PATCH"])
def update_status(order_id: str):
    """Body: {"status": "Processing"}"""
    payload = json_object_body()
    order_service = current_app.config["ORDER_SERVICE"]

    order = order_service.update_status(order_id, payload_text(payload, "status"))
    return order.to_dict()


@orders_bp.route("/api/stores/<store_id>/orders", methods=["GET"])
def list_store_orders(store_id: str):
    order_service = current_app.config["ORDER_SERVICE"]
    orders = order_service.list_orders(store_id=store_id, status=request.args.get("status"))
    return {"storeId": store_id, "orders": [o.to_dict() for o in orders]}


@orders_bp.route("/api/stores/<store_id>/queue", methods=["GET"])
def store_queue(store_id: str):
    order_service = current_app.config["ORDER_SERVICE"]
    return {
        "storeId": store_id,
        "pendingOrders": order_service.pending_count(store_id),
        "estimatedDelivery": order_service.estimated_delivery_time(store_id),
        "queueStatus": order_service.queue_status(store_id),
    }
