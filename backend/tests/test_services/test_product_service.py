"""
Unit tests for ProductService
"""
from decimal import Decimal

import pytest

from kiosk.core.exceptions import ConflictError, NotFoundError, ValidationError
from kiosk.domain import Product


class TestPriceAndStockRules:
    """Test boundary values for price and stock"""

    def test_price_zero_is_accepted(self, product_service):
        product = product_service.create_product("Freebie", None, Decimal("0"), 1)
        assert product.price == Decimal("0")

    def test_negative_price_is_rejected(self, product_service, product_repository):
        with pytest.raises(ValidationError) as exc_info:
            product_service.create_product("Widget", None, Decimal("-0.01"), 1)

        assert exc_info.value.field == "price"
        assert product_repository.writes == 0

    def test_negative_stock_is_rejected(self, product_service):
        with pytest.raises(ValidationError) as exc_info:
            product_service.create_product("Widget", None, Decimal("1.00"), -1)

        assert exc_info.value.field == "stock_quantity"

    def test_float_price_keeps_two_decimals(self, product_service):
        product = product_service.create_product("Widget", None, 19.99, 50)
        assert product.price == Decimal("19.99")

    def test_blank_name_is_rejected(self, product_service):
        with pytest.raises(ValidationError) as exc_info:
            product_service.create_product(" ", None, Decimal("1.00"), 1)

        assert exc_info.value.field == "name"

    def test_price_finer_than_a_cent_is_rejected(self, product_service, product_repository):
        with pytest.raises(ValidationError) as exc_info:
            product_service.create_product("Widget", None, "19.999", 1)

        assert exc_info.value.field == "price"
        assert product_repository.writes == 0

    def test_update_to_price_finer_than_a_cent_is_rejected(self, product_service, product_repository):
        product = product_service.create_product("Widget", None, "19.99", 1)
        product.price = Decimal("0.001")

        with pytest.raises(ValidationError) as exc_info:
            product_service.update_product(product)

        assert exc_info.value.field == "price"
        assert product_repository.updates == 0

    def test_non_integer_stock_is_a_validation_error(self, product_service, product_repository):
        with pytest.raises(ValidationError) as exc_info:
            product_service.create_product("Widget", None, "1.00", "lots")

        assert exc_info.value.field == "stock_quantity"
        assert product_repository.writes == 0


class TestSkuUniqueness:
    """Test SKU uniqueness (only when a SKU is given)"""

    def test_products_without_sku_never_conflict(self, product_service):
        product_service.create_product("A", None, Decimal("1.00"), 1)
        product_service.create_product("B", None, Decimal("1.00"), 1)

        assert product_service.get_product_count() == 2

    def test_blank_sku_is_stored_as_no_sku(self, product_service):
        a = product_service.create_product("A", None, Decimal("1.00"), 1, sku="")
        b = product_service.create_product("B", None, Decimal("1.00"), 1, sku="   ")

        assert a.sku is None
        assert b.sku is None
        assert product_service.get_product_by_id(a.id).sku is None

    def test_update_to_blank_sku_clears_it(self, product_service):
        product = product_service.create_product("A", None, Decimal("1.00"), 1, sku="SKU-A")
        product.sku = ""

        product_service.update_product(product)

        assert product_service.get_product_by_id(product.id).sku is None

    def test_update_to_existing_sku_conflicts(self, product_service):
        product_service.create_product("A", None, Decimal("1.00"), 1, sku="SKU-A")
        b = product_service.create_product("B", None, Decimal("1.00"), 1, sku="SKU-B")
        b.sku = "SKU-A"

        with pytest.raises(ConflictError) as exc_info:
            product_service.update_product(b)

        assert exc_info.value.value == "SKU-A"

    def test_update_missing_product_raises_not_found(self, product_service):
        with pytest.raises(NotFoundError):
            product_service.update_product(Product(name="Ghost", price=Decimal("1.00")))


class TestWidgetScenario:
    """End-to-end: create, conflict, low stock in and out"""

    def test_widget_lifecycle(self, product_service):
        widget = product_service.create_product("Widget", None, 19.99, 50, "WDG-001")
        assert widget.id is not None

        with pytest.raises(ConflictError) as exc_info:
            product_service.create_product("Gadget", "Other", Decimal("5.00"), 3, sku="WDG-001")
        assert "WDG-001" in str(exc_info.value)

        widget.stock_quantity = 5
        product_service.update_product(widget)
        assert widget.id in [p.id for p in product_service.get_low_stock_products(threshold=10)]

        widget.stock_quantity = 15
        product_service.update_product(widget)
        assert widget.id not in [p.id for p in product_service.get_low_stock_products(threshold=10)]


class TestProductQueries:
    """Test search and range helpers"""

    @pytest.fixture
    def catalog(self, product_service):
        product_service.create_product("Coffee", "Hot drink", Decimal("2.50"), 40, "BEV-001")
        product_service.create_product("Tea", "Green leaves", Decimal("2.00"), 8, "BEV-002")
        product_service.create_product("Sandwich", None, Decimal("6.75"), 3, None)

    def test_price_range_is_inclusive(self, product_service, catalog):
        names = [p.name for p in product_service.get_products_by_price_range(Decimal("2.00"), Decimal("2.50"))]
        assert names == ["Coffee", "Tea"]

    def test_price_range_min_greater_than_max_is_rejected(self, product_service, catalog):
        with pytest.raises(ValidationError):
            product_service.get_products_by_price_range(10, 1)

    def test_search_covers_description_and_sku(self, product_service, catalog):
        assert [p.name for p in product_service.search_products("LEAVES")] == ["Tea"]
        assert [p.name for p in product_service.search_products("bev-")] == ["Coffee", "Tea"]

    def test_low_stock_default_threshold(self, product_service, catalog):
        assert [p.name for p in product_service.get_low_stock_products()] == ["Sandwich", "Tea"]
