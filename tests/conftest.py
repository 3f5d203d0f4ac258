"""Shared fixtures for the print shop tests."""

import pytest

from app import create_app
from models.file_spec import BindingChoice, FileSpec
from models.print_options import BindingType, PaperType, PrintType
from services.order_service import OrderService
from services.pricing_service import PricingService


STORE_PRICING = {
    "blackAndWhite": {"singleSided": 1.5, "doubleSided": 2.5},
    "color": {"singleSided": 6, "doubleSided": 9},
    "binding": {"spiralBinding": 30},
    "paperTypes": {"glossy": 4},
}


def make_file(**overrides) -> FileSpec:
    """Single-sided B&W file of 10 pages unless overridden."""
    values = {
        "name": "notes.pdf",
        "page_count": 10,
        "copies": 1,
        "print_type": PrintType.BLACK_AND_WHITE,
        "double_sided": False,
    }
    values.update(overrides)
    return FileSpec(**values)


@pytest.fixture
def bw_file():
    return make_file()


@pytest.fixture
def mixed_file():
    return make_file(name="report.pdf", print_type=PrintType.MIXED, color_pages="1-3")


@pytest.fixture
def bound_glossy_file():
    return make_file(
        name="brochure.pdf",
        page_count=5,
        copies=2,
        special_paper=PaperType.GLOSSY,
        binding=BindingChoice(needed=True, type=BindingType.SPIRAL),
    )


@pytest.fixture
def pricing_service():
    service = PricingService()
    service.set_pricing("store-1", STORE_PRICING)
    return service


@pytest.fixture
def order_service(pricing_service):
    return OrderService(pricing_service, max_copies=50)


@pytest.fixture
def app(tmp_path, monkeypatch):
    monkeypatch.setenv("UPLOAD_FOLDER", str(tmp_path / "uploads"))
    application = create_app("config.TestingConfig")
    application.config["UPLOAD_FOLDER"] = str(tmp_path / "uploads")
    application.config["PRICING_SERVICE"].set_pricing("store-1", STORE_PRICING)
    return application


@pytest.fixture
def client(app):
    return app.test_client()
