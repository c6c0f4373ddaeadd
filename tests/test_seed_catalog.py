"""
Tests for the starter catalog script
"""
import pytest

from ivacalc.scripts.seed_catalog import STARTER_PRODUCTS, seed_catalog


@pytest.mark.unit
def test_seed_inserts_starter_products(product_repo):
    assert seed_catalog(product_repo) == len(STARTER_PRODUCTS)
    assert {p.name for p in product_repo.list_all()} == {p["name"] for p in STARTER_PRODUCTS}


@pytest.mark.unit
def test_seed_is_idempotent(product_repo):
    seed_catalog(product_repo)
    assert seed_catalog(product_repo) == 0
    assert len(product_repo.list_all()) == len(STARTER_PRODUCTS)


@pytest.mark.unit
def test_seed_skips_existing_names(product_repo):
    product_repo.create({"name": "MILK", "price": 9.99, "quantity": 1})
    assert seed_catalog(product_repo) == len(STARTER_PRODUCTS) - 1
    assert product_repo.get_by_name("milk").price == 9.99
