"""
Tests for request validation rules
"""
import pytest

from ivacalc.core.exceptions import ValidationError
from ivacalc.application.services.validation import (
    coerce_price,
    coerce_quantity,
    validate_line_items,
    validate_lookup_name,
    validate_product_registration,
)


@pytest.mark.unit
class TestValidateLineItems:

    def test_five_valid_items(self, five_products):
        items = validate_line_items(five_products)
        assert [i.name for i in items] == ["Milk", "Bread", "Eggs", "Cheese", "Butter"]
        assert [i.price for i in items] == [2.0, 1.5, 3.0, 4.5, 2.5]

    @pytest.mark.parametrize("count", [0, 4, 6])
    def test_wrong_count(self, five_products, count):
        products = (five_products * 2)[:count]
        with pytest.raises(ValidationError, match="exactly 5 products required"):
            validate_line_items(products)

    @pytest.mark.parametrize("products", [None, "Milk", {"name": "Milk"}, 5])
    def test_not_a_list(self, products):
        with pytest.raises(ValidationError, match="exactly 5 products required"):
            validate_line_items(products)

    @pytest.mark.parametrize("entry", [
        {"price": 1.0},
        {"name": "", "price": 1.0},
        {"name": "   ", "price": 1.0},
        {"name": "Milk"},
        {"name": "Milk", "price": None},
        {"name": "Milk", "price": "abc"},
        {"name": "Milk", "price": True},
        {"name": "Milk", "price": float("nan")},
        "Milk",
    ])
    def test_bad_entry(self, five_products, entry):
        five_products[2] = entry
        with pytest.raises(ValidationError, match="name and price required"):
            validate_line_items(five_products)

    def test_negative_price(self, five_products):
        five_products[0]["price"] = -1
        with pytest.raises(ValidationError, match="non-negative"):
            validate_line_items(five_products)

    def test_price_strings_are_coerced(self, five_products):
        five_products[0]["price"] = "2.25"
        items = validate_line_items(five_products)
        assert items[0].price == 2.25

    def test_names_are_stripped(self, five_products):
        five_products[0]["name"] = "  Milk "
        assert validate_line_items(five_products)[0].name == "Milk"


@pytest.mark.unit
class TestValidateLookupName:

    def test_valid(self):
        assert validate_lookup_name("  milk ") == "milk"

    @pytest.mark.parametrize("name", [None, "", "   ", 12])
    def test_blank(self, name):
        with pytest.raises(ValidationError, match="name required"):
            validate_lookup_name(name)


@pytest.mark.unit
class TestValidateProductRegistration:

    def test_valid(self):
        product = validate_product_registration({"name": " Milk ", "price": "2.00", "quantity": "10"})
        assert product.name == "Milk"
        assert product.price == 2.0
        assert product.quantity == 10

    @pytest.mark.parametrize("payload", [
        {"price": 2.0, "quantity": 1},
        {"name": "Milk", "quantity": 1},
        {"name": "Milk", "price": 2.0},
        {"name": "", "price": 2.0, "quantity": 1},
        {"name": "Milk", "price": None, "quantity": 1},
        {"name": "Milk", "price": 2.0, "quantity": None},
    ])
    def test_missing_fields(self, payload):
        with pytest.raises(ValidationError, match="name, price and quantity required"):
            validate_product_registration(payload)

    def test_zero_quantity_is_rejected(self):
        with pytest.raises(ValidationError, match="name, price and quantity required"):
            validate_product_registration({"name": "Milk", "price": 2.0, "quantity": 0})

    def test_zero_price_is_allowed(self):
        assert validate_product_registration({"name": "Bag", "price": 0, "quantity": 1}).price == 0.0

    @pytest.mark.parametrize("price", ["abc", -0.5, True])
    def test_bad_price(self, price):
        with pytest.raises(ValidationError, match="price must be a non-negative number"):
            validate_product_registration({"name": "Milk", "price": price, "quantity": 1})

    @pytest.mark.parametrize("quantity", ["ten", 1.5, -3])
    def test_bad_quantity(self, quantity):
        with pytest.raises(ValidationError, match="quantity must be a non-negative integer"):
            validate_product_registration({"name": "Milk", "price": 1.0, "quantity": quantity})


@pytest.mark.unit
def test_coercions():
    assert coerce_price("3.5") == 3.5
    assert coerce_price(float("inf")) is None
    assert coerce_quantity(4.0) == 4
    assert coerce_quantity("7") == 7
    assert coerce_quantity(False) is None


@pytest.mark.unit
class TestPriceCeiling:

    def test_line_item_above_ceiling(self, five_products):
        five_products[0]["price"] = 1e301
        with pytest.raises(ValidationError, match="price must be a non-negative number"):
            validate_line_items(five_products)

    def test_registration_above_ceiling(self):
        with pytest.raises(ValidationError, match="price must be a non-negative number"):
            validate_product_registration({"name": "Planet", "price": 1e301, "quantity": 1})

    def test_large_price_below_ceiling_is_accepted(self):
        assert validate_product_registration({"name": "Yacht", "price": 1e27, "quantity": 1}).price == 1e27
