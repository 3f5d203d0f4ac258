"""Unit tests for the order price calculator."""

import itertools

import pytest

from conftest import make_file
from models.file_spec import BindingChoice, FileSpec
from models.pricing import DEFAULT_PRICING_TABLE, PricingTable, SidedRates
from models.print_options import BindingType, PaperType, PrintType
from modules.price_calculator import calculate_order_price, price_file, price_order


class TestBasePrice:
    """Per-page pricing at the default table."""

    def test_empty_order(self):
        assert calculate_order_price([]) == 0

    def test_black_and_white_single_sided(self):
        assert calculate_order_price([make_file(page_count=10)]) == 20

    def test_color_double_sided_with_copies(self):
        spec = make_file(page_count=4, copies=2, print_type=PrintType.COLOR, double_sided=True)
        assert calculate_order_price([spec]) == 64

    def test_mixed(self, mixed_file):
        # 3 color pages at 5, 7 B&W pages at 2
        assert calculate_order_price([mixed_file]) == 29

    def test_mixed_double_sided_uses_double_sided_rates(self):
        spec = make_file(print_type=PrintType.MIXED, color_pages="1-3", double_sided=True)
        assert calculate_order_price([spec]) == 3 * 8 + 7 * 3

    def test_mixed_copies_multiply_both_parts(self):
        spec = make_file(print_type=PrintType.MIXED, color_pages="2,4", copies=3)
        assert calculate_order_price([spec]) == (2 * 5 + 8 * 2) * 3

    def test_mixed_color_pages_clipped_to_page_count(self):
        spec = make_file(page_count=4, print_type=PrintType.MIXED, color_pages="3-10")
        breakdown = price_order([spec]).files[0]
        assert breakdown.color_pages == "3-4"
        assert breakdown.bw_page_count == 2
        assert breakdown.total == 2 * 5 + 2 * 2

    def test_huge_color_range_counted_without_listing_pages(self):
        spec = make_file(
            page_count=20_000_000, print_type=PrintType.MIXED, color_pages="1-20000000,5"
        )
        breakdown = price_order([spec]).files[0]
        assert breakdown.color_page_count == 20_000_000
        assert breakdown.bw_page_count == 0
        assert breakdown.color_pages == "1-20000000"

    def test_mixed_without_color_pages_prices_as_black_and_white(self):
        spec = make_file(print_type=PrintType.MIXED, color_pages="")
        assert calculate_order_price([spec]) == 20

    def test_color_pages_ignored_unless_mixed(self):
        spec = make_file(print_type=PrintType.BLACK_AND_WHITE, color_pages="1-10")
        assert calculate_order_price([spec]) == 20


class TestSurcharges:
    """Paper (per page) and binding (per file) surcharges."""

    def test_glossy_surcharge(self):
        spec = FileSpec(page_count=5, copies=2, special_paper=PaperType.GLOSSY)
        breakdown = price_order([spec]).files[0]
        assert breakdown.paper_cost == 50
        assert breakdown.total == 5 * 2 * 2 + 50

    def test_binding_is_flat(self):
        spec = make_file(copies=3, binding=BindingChoice(needed=True, type=BindingType.SPIRAL))
        breakdown = price_order([spec]).files[0]
        assert breakdown.binding_cost == 25
        assert breakdown.total == 10 * 2 * 3 + 25

    def test_binding_not_needed(self):
        spec = make_file(binding=BindingChoice(needed=False, type=BindingType.HARDCOVER))
        assert calculate_order_price([spec]) == 20

    def test_binding_needed_without_type(self):
        spec = make_file(binding=BindingChoice(needed=True, type=BindingType.NONE))
        assert calculate_order_price([spec]) == 20

    def test_unknown_paper_and_binding_add_nothing(self):
        spec = FileSpec.from_dict({
            "pageCount": 10,
            "specialPaper": "velvet",
            "binding": {"needed": True, "type": "goldLeaf"},
        })
        assert calculate_order_price([spec]) == 20

    def test_all_components(self, bound_glossy_file):
        breakdown = price_order([bound_glossy_file]).files[0]
        assert breakdown.base_price == 5 * 2 * 2
        assert breakdown.paper_cost == 5 * 5 * 2
        assert breakdown.binding_cost == 25
        assert breakdown.total == 20 + 50 + 25


class TestPageCount:
    """The calculator never estimates pages."""

    @pytest.mark.parametrize("page_count", [None, 0, -3])
    def test_missing_page_count_prices_only_binding(self, page_count):
        spec = FileSpec(
            page_count=page_count,
            print_type=PrintType.COLOR,
            special_paper=PaperType.MATTE,
            binding=BindingChoice(needed=True, type=BindingType.STAPLING),
        )
        assert calculate_order_price([spec]) == 10

    def test_non_positive_copies_count_as_one(self):
        spec = make_file(copies=0)
        assert calculate_order_price([spec]) == 20


class TestPricingTables:
    """Store tables and fallback."""

    def test_store_table_overrides_defaults(self):
        table = PricingTable.from_dict({"blackAndWhite": {"singleSided": 1}})
        assert calculate_order_price([make_file()], table) == 10

    def test_partial_store_table_falls_back_per_leaf(self):
        table = PricingTable.from_dict({"color": {"doubleSided": 10}})
        spec = make_file(page_count=2, print_type=PrintType.COLOR)
        assert calculate_order_price([spec], table) == 2 * 5

    def test_explicit_defaults_parameter(self):
        defaults = PricingTable.from_dict({
            "blackAndWhite": {"singleSided": 4, "doubleSided": 4},
        })
        assert calculate_order_price([make_file()], defaults=defaults) == 40

    def test_directly_built_negative_tables_are_clamped(self):
        table = PricingTable(color=SidedRates(single_sided=-1))
        defaults = PricingTable(black_and_white=SidedRates(single_sided=-3, double_sided=-3))
        spec = make_file(print_type=PrintType.MIXED, color_pages="1-4")
        breakdown = price_order([spec], table, defaults=defaults).files[0]
        assert breakdown.color_rate == 0
        assert breakdown.bw_rate == 0
        assert breakdown.total == 0

    def test_zero_priced_store_is_honoured(self):
        table = PricingTable.from_dict({"blackAndWhite": {"singleSided": 0}})
        assert calculate_order_price([make_file()], table) == 0


class TestOrderTotals:
    """Aggregation across files."""

    def test_total_is_sum_of_files(self, bw_file, mixed_file, bound_glossy_file):
        breakdown = price_order([bw_file, mixed_file, bound_glossy_file])
        assert [f.total for f in breakdown.files] == [20, 29, 95]
        assert breakdown.total == 144

    def test_order_of_files_preserved(self, bw_file, mixed_file):
        names = [f.name for f in price_order([mixed_file, bw_file]).files]
        assert names == ["report.pdf", "notes.pdf"]

    def test_repeatable(self, mixed_file, bound_glossy_file):
        files = [mixed_file, bound_glossy_file]
        assert calculate_order_price(files) == calculate_order_price(files)

    def test_accepts_generator(self, bw_file):
        assert calculate_order_price(f for f in [bw_file, bw_file]) == 40

    def test_to_dict_rounds_for_display(self):
        table = PricingTable.from_dict({"blackAndWhite": {"singleSided": 0.333}})
        data = price_order([make_file(page_count=1)], table).to_dict()
        assert data["total"] == 0.33
        assert data["display"] == "₹0.33"

    def test_never_negative(self):
        table = PricingTable.from_dict({
            "blackAndWhite": {"singleSided": -1, "doubleSided": -1},
            "color": {"singleSided": -1, "doubleSided": -1},
            "binding": {"spiralBinding": -5},
            "paperTypes": {"glossy": -2},
        })
        combos = itertools.product(
            list(PrintType), [True, False], [PaperType.NONE, PaperType.GLOSSY], [None, 0, 7]
        )
        for print_type, double_sided, paper, pages in combos:
            spec = FileSpec(
                page_count=pages,
                print_type=print_type,
                color_pages="1,3",
                double_sided=double_sided,
                special_paper=paper,
                binding=BindingChoice(needed=True, type=BindingType.SPIRAL),
            )
            assert calculate_order_price([spec], table) >= 0
            assert calculate_order_price([spec]) >= 0


def test_price_file_uses_given_table_as_is():
    breakdown = price_file(make_file(), PricingTable())
    assert breakdown.total == 0
    assert price_file(make_file(), DEFAULT_PRICING_TABLE).total == 20
