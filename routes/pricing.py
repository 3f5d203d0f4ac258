"""
Pricing routes (JSON).

Handles:
- /api/page-range/parse         - Normalise a color page list
- /api/pricing/preview          - Live price while an order is being edited
- /api/stores/<id>/pricing      - Read, replace or remove a store's pricing table
"""

from typing import Any, List, Optional

from flask import Blueprint, current_app, request
from werkzeug.exceptions import BadRequest

from logging_config import get_logger
from models.file_spec import FileSpec
from modules.page_range import (
    format_page_intervals,
    interval_page_count,
    parse_page_intervals,
    parse_page_range,
)


# Module logger
logger = get_logger(__name__)

pricing_bp = Blueprint("pricing", __name__)


def json_object_body() -> dict:
    """
    The request body as a JSON object.

    A missing or unparsable body reads as {}. Any other JSON value (a list,
    a string, a number) is a 400.
    """
    payload = request.get_json(silent=True)
    if payload is None:
        return {}
    if not isinstance(payload, dict):
        raise BadRequest("Request body must be a JSON object.")
    return payload


def payload_text(payload: dict, key: str) -> str:
    """String field of a JSON body; anything that is not a string reads as ""."""
    value = payload.get(key)
    return value if isinstance(value, str) else ""


def files_from_payload(payload: dict) -> List[FileSpec]:
    """Build FileSpecs from the ``files`` list of a JSON body, skipping non-objects."""
    files = payload.get("files") or []
    if not isinstance(files, list):
        return []
    return [FileSpec.from_dict(item) for item in files if isinstance(item, dict)]


def _optional_int(value: Any) -> Optional[int]:
    if value is None or isinstance(value, bool):
        return None
    try:
        return int(value)
    except (TypeError, ValueError):
        return None


@pricing_bp.route("/api/page-range/parse", methods=["POST"])
def parse_pages():
    """
    Parse a page range the way the calculator will.

    Body: {"spec": "1,3-5", "maxPages": 10}

    ``count`` and ``canonical`` cover the whole range. ``pages`` lists at
    most MAX_PAGE_NUMBER pages; ``truncated`` is set when it stops short.
    """
    payload = json_object_body()
    spec = payload_text(payload, "spec")
    max_pages = _optional_int(payload.get("maxPages"))

    intervals = parse_page_intervals(spec, max_pages=max_pages)
    count = interval_page_count(intervals)
    pages = parse_page_range(spec, max_pages=max_pages)
    return {
        "pages": pages,
        "count": count,
        "canonical": format_page_intervals(intervals),
        "truncated": len(pages) < count,
    }


@pricing_bp.route("/api/pricing/preview", methods=["POST"])
def preview():
    """
    Price files without placing an order.

    Body: {"files": [...], "storeId": "optional"}
    Without a storeId the default table is used.
    """
    payload = json_object_body()
    files = files_from_payload(payload)
    store_id = payload_text(payload, "storeId") or None

    pricing_service = current_app.config["PRICING_SERVICE"]
    breakdown = pricing_service.preview(files, store_id=store_id)

    return breakdown.to_dict(current_app.config.get("CURRENCY_SYMBOL", "₹"))


@pricing_bp.route("/api/stores/<store_id>/pricing", methods=["GET"])
def get_store_pricing(store_id: str):
    """Return the store's own table and the effective (resolved) table."""
    pricing_service = current_app.config["PRICING_SERVICE"]
    store_table = pricing_service.get_store_table(store_id)
    return {
        "storeId": store_id,
        "pricing": store_table.to_dict(),
        "effective": pricing_service.get_pricing(store_id).to_dict(),
    }


@pricing_bp.route("/api/stores/<store_id>/pricing", methods=["PUT"])
def put_store_pricing(store_id: str):
    """Replace a store's pricing table. Bad prices are clamped to 0."""
    payload = request.get_json(silent=True)
    if not isinstance(payload, dict):
        return {"error": "Pricing must be a JSON object.", "details": {}}, 400

    pricing_service = current_app.config["PRICING_SERVICE"]
    table = pricing_service.set_pricing(store_id, payload.get("pricing", payload))

    return {
        "storeId": store_id,
        "pricing": table.to_dict(),
        "effective": pricing_service.get_pricing(store_id).to_dict(),
    }


@pricing_bp.route("/api/stores/<store_id>/pricing", methods=["DELETE"])
def delete_store_pricing(store_id: str):
    """Stop taking orders for a store. Placed orders are kept."""
    current_app.config["PRICING_SERVICE"].remove_store(store_id)
    return "", 204
