"""Tests for the JSON API through the Flask test client."""

import io

import pytest
from pypdf import PdfWriter

from modules.page_range import MAX_PAGE_NUMBER


def _order_payload(**overrides):
    payload = {
        "documentName": "Lab manual",
        "storeId": "store-1",
        "customerName": "Sam",
        "files": [
            {"name": "manual.pdf", "pageCount": 10, "copies": 1, "printType": "blackAndWhite"},
        ],
    }
    payload.update(overrides)
    return payload


@pytest.fixture
def placed_order(client):
    response = client.post("/api/orders", json=_order_payload())
    assert response.status_code == 201
    return response.get_json()


class TestHealth:

    def test_health_ok(self, client):
        response = client.get("/health")
        assert response.status_code == 200
        data = response.get_json()
        assert data["status"] == "ok"
        assert data["environment"] == "testing"
        assert data["checks"]["pricing"] == "1 store(s)"

    def test_unknown_route_is_json(self, client):
        response = client.get("/nope")
        assert response.status_code == 404
        assert "error" in response.get_json()


class TestPageRangeEndpoint:

    def test_parse(self, client):
        response = client.post("/api/page-range/parse", json={"spec": "5,1-3,2", "maxPages": 4})
        assert response.get_json() == {
            "pages": [1, 2, 3], "count": 3, "canonical": "1-3", "truncated": False,
        }

    def test_parse_without_limit(self, client):
        response = client.post("/api/page-range/parse", json={"spec": "9,x"})
        assert response.get_json()["pages"] == [9]

    def test_empty_body(self, client):
        response = client.post("/api/page-range/parse", data="not json")
        assert response.status_code == 200
        assert response.get_json()["count"] == 0


class TestPreviewEndpoint:

    def test_default_pricing(self, client):
        response = client.post("/api/pricing/preview", json={"files": [
            {"name": "a.pdf", "pageCount": 10, "printType": "mixed", "colorPages": "1-3"},
        ]})
        data = response.get_json()
        assert response.status_code == 200
        assert data["total"] == 29
        assert data["display"] == "₹29.00"
        assert data["files"][0]["colorPages"] == "1-3"

    def test_store_pricing(self, client):
        response = client.post("/api/pricing/preview", json={
            "storeId": "store-1",
            "files": [{"pageCount": 10}],
        })
        assert response.get_json()["total"] == 15

    def test_unknown_store(self, client):
        response = client.post("/api/pricing/preview", json={"storeId": "x", "files": []})
        assert response.status_code == 404
        assert response.get_json()["details"]["store_id"] == "x"

    def test_malformed_files_priced_at_zero(self, client):
        response = client.post("/api/pricing/preview", json={"files": [{"copies": "lots"}, "junk"]})
        data = response.get_json()
        assert len(data["files"]) == 1
        assert data["total"] == 0


class TestStorePricingEndpoints:

    def test_get(self, client):
        data = client.get("/api/stores/store-1/pricing").get_json()
        assert data["pricing"]["binding"] == {"spiralBinding": 30}
        assert data["effective"]["binding"]["hardcoverBinding"] == 50

    def test_get_unknown(self, client):
        assert client.get("/api/stores/ghost/pricing").status_code == 404

    def test_put_registers_store(self, client):
        response = client.put(
            "/api/stores/store-7/pricing",
            json={"pricing": {"color": {"singleSided": -2, "doubleSided": 7}}},
        )
        data = response.get_json()
        assert response.status_code == 200
        assert data["pricing"]["color"] == {"singleSided": 0, "doubleSided": 7}
        assert data["effective"]["blackAndWhite"]["singleSided"] == 2

    def test_put_bare_table(self, client):
        client.put("/api/stores/store-1/pricing", json={"blackAndWhite": {"singleSided": 1}})
        preview = client.post("/api/pricing/preview", json={
            "storeId": "store-1", "files": [{"pageCount": 4}],
        })
        assert preview.get_json()["total"] == 4

    def test_put_rejects_non_object(self, client):
        response = client.put("/api/stores/store-1/pricing", json=[1, 2])
        assert response.status_code == 400


class TestOrderEndpoints:

    def test_create(self, placed_order):
        assert placed_order["status"] == "Pending"
        assert placed_order["totalPrice"] == 15
        assert placed_order["customerName"] == "Sam"
        assert len(placed_order["orderId"]) == 32

    def test_get(self, client, placed_order):
        response = client.get(f"/api/orders/{placed_order['orderId']}")
        assert response.get_json()["documentName"] == "Lab manual"

    def test_get_unknown(self, client):
        response = client.get("/api/orders/unknown")
        assert response.status_code == 404
        assert response.get_json()["error"] == "Order not found: unknown"

    def test_reprice(self, client, placed_order):
        client.put("/api/stores/store-1/pricing", json={"blackAndWhite": {"singleSided": 3}})
        response = client.get(f"/api/orders/{placed_order['orderId']}/price")
        assert response.get_json()["total"] == 30

    @pytest.mark.parametrize("overrides,title", [
        ({"storeId": ""}, "No Store Selected"),
        ({"files": []}, "No Files Selected"),
        ({"files": [{"pageCount": 3, "printType": "mixed", "colorPages": ""}]}, "Invalid Color Pages"),
        ({"files": [{"pageCount": 3, "copies": 5000}]}, "Invalid Copies"),
    ])
    def test_validation_errors(self, client, overrides, title):
        response = client.post("/api/orders", json=_order_payload(**overrides))
        assert response.status_code == 400
        assert response.get_json()["details"]["title"] == title

    def test_unknown_store(self, client):
        response = client.post("/api/orders", json=_order_payload(storeId="store-404"))
        assert response.status_code == 404

    def test_update_status(self, client, placed_order):
        order_id = placed_order["orderId"]
        response = client.patch(f"/api/orders/{order_id}/status", json={"status": "Shipped"})
        assert response.status_code == 200
        assert response.get_json()["status"] == "Shipped"

    def test_update_status_invalid(self, client, placed_order):
        order_id = placed_order["orderId"]
        response = client.patch(f"/api/orders/{order_id}/status", json={"status": "Teleported"})
        assert response.status_code == 400
        assert "Pending" in response.get_json()["details"]["allowed"]

    def test_list_store_orders(self, client, placed_order):
        client.post("/api/orders", json=_order_payload(documentName="Second"))
        client.patch(f"/api/orders/{placed_order['orderId']}/status", json={"status": "Completed"})

        all_orders = client.get("/api/stores/store-1/orders").get_json()["orders"]
        pending = client.get("/api/stores/store-1/orders?status=Pending").get_json()["orders"]
        assert len(all_orders) == 2
        assert [o["documentName"] for o in pending] == ["Second"]

    def test_list_with_bad_status(self, client):
        assert client.get("/api/stores/store-1/orders?status=Soon").status_code == 400

    def test_queue(self, client, placed_order):
        data = client.get("/api/stores/store-1/queue").get_json()
        assert data == {
            "storeId": "store-1",
            "pendingOrders": 1,
            "estimatedDelivery": "24 hours",
            "queueStatus": "Short queue",
        }


class TestUploadEndpoint:

    def _pdf_bytes(self, pages):
        writer = PdfWriter()
        for _ in range(pages):
            writer.add_blank_page(width=612, height=792)
        buffer = io.BytesIO()
        writer.write(buffer)
        return buffer.getvalue()

    def test_upload_pdf(self, client, app):
        response = client.post(
            "/api/uploads",
            data={"file": (io.BytesIO(self._pdf_bytes(4)), "My Thesis.pdf", "application/pdf")},
            content_type="multipart/form-data",
        )
        data = response.get_json()
        assert response.status_code == 201
        assert data["storedFilename"].endswith("_My_Thesis.pdf")
        assert data["file"]["name"] == "My Thesis.pdf"
        assert data["file"]["pageCount"] == 4
        assert data["file"]["doubleSided"] is True

    def test_upload_estimates_other_types(self, client):
        response = client.post(
            "/api/uploads",
            data={"file": (io.BytesIO(b"x" * 7000), "notes.txt", "text/plain")},
            content_type="multipart/form-data",
        )
        assert response.status_code == 201
        assert response.get_json()["file"]["pageCount"] == 3

    def test_upload_requires_file(self, client):
        response = client.post("/api/uploads", data={}, content_type="multipart/form-data")
        assert response.status_code == 400

    def test_upload_rejects_unsupported_type(self, client):
        response = client.post(
            "/api/uploads",
            data={"file": (io.BytesIO(b"MZ"), "setup.exe", "application/x-msdownload")},
            content_type="multipart/form-data",
        )
        assert response.status_code == 415
        assert response.get_json()["details"]["mime_type"] == "application/x-msdownload"


class TestRequestBodies:
    """JSON bodies that are not objects, and oversized page ranges."""

    @pytest.mark.parametrize("method,url", [
        ("post", "/api/page-range/parse"),
        ("post", "/api/pricing/preview"),
        ("post", "/api/orders"),
        ("patch", "/api/orders/any/status"),
    ])
    @pytest.mark.parametrize("body", [[1, 2], "text", 7])
    def test_non_object_body_is_bad_request(self, client, method, url, body):
        response = getattr(client, method)(url, json=body)
        assert response.status_code == 400
        assert response.get_json()["error"] == "Request body must be a JSON object."

    def test_non_string_fields_ignored(self, client):
        response = client.post("/api/orders", json=_order_payload(storeId=["store-1"]))
        assert response.status_code == 400
        assert response.get_json()["details"]["title"] == "No Store Selected"

        response = client.post("/api/pricing/preview", json={"storeId": {"x": 1}, "files": []})
        assert response.status_code == 200

    def test_unbounded_range_parse(self, client):
        response = client.post("/api/page-range/parse", json={"spec": "1-1000000000"})
        data = response.get_json()
        assert data["count"] == 1000000000
        assert data["canonical"] == "1-1000000000"
        assert data["truncated"] is True
        assert len(data["pages"]) == MAX_PAGE_NUMBER

    def test_huge_page_count_preview(self, client):
        response = client.post("/api/pricing/preview", json={"files": [{
            "pageCount": 20000000, "printType": "mixed", "colorPages": "1-20000000",
        }]})
        data = response.get_json()
        assert data["files"][0]["colorPages"] == "1-20000000"
        assert data["files"][0]["colorPageCount"] == 20000000
        assert data["total"] == 20000000 * 5

    def test_mixed_order_with_unknown_page_count(self, client):
        payload = _order_payload(files=[{"printType": "mixed", "colorPages": "1-1000000000"}])
        response = client.post("/api/orders", json=payload)
        assert response.status_code == 201
        assert response.get_json()["totalPrice"] == 0


class TestDeleteStorePricing:

    def test_delete(self, client, placed_order):
        assert client.delete("/api/stores/store-1/pricing").status_code == 204
        assert client.get("/api/stores/store-1/pricing").status_code == 404
        # Placed orders survive, new ones are refused
        assert client.get(f"/api/orders/{placed_order['orderId']}").status_code == 200
        assert client.post("/api/orders", json=_order_payload()).status_code == 404

    def test_delete_unknown(self, client):
        assert client.delete("/api/stores/ghost/pricing").status_code == 404
