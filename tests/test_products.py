import pytest

from pantry import create_app
from pantry.config import TestConfig
from pantry.errors import NotFoundError, ValidationError
from pantry.model import Product
from pantry.services import catalog_service


def test_seed_inserts_default_catalog_once(app):
    assert catalog_service.seed_default_products() == 3
    assert catalog_service.seed_default_products() == 0
    names = [p.name for p in catalog_service.list_products()]
    assert names == ["Organic Health Mix", "Organic Snacks Pack 1", "Organic Snacks Pack 2"]
    assert catalog_service.list_products()[0].price == 299


def test_seed_skipped_when_catalog_not_empty(app):
    catalog_service.create_product({"name": "Ragi Malt", "price": 150})
    assert catalog_service.seed_default_products() == 0
    assert Product.query.count() == 1


def test_app_seeds_on_startup():
    class SeedingConfig(TestConfig):
        SEED_DEFAULT_PRODUCTS = True

    app = create_app(SeedingConfig)
    with app.app_context():
        assert Product.query.count() == 3
        from pantry.extensions import db
        db.session.remove()
        db.drop_all()


def test_create_requires_name_and_price(app):
    with pytest.raises(ValidationError):
        catalog_service.create_product({"name": "Ragi Malt"})
    with pytest.raises(ValidationError):
        catalog_service.create_product({"price": 10})
    with pytest.raises(ValidationError):
        catalog_service.create_product({"name": "Ragi Malt", "price": -1})


def test_product_crud_api(client):
    r = client.post("/api/products", json={"name": "Ragi Malt", "price": 150, "image": "ragi.jpg"})
    assert r.status_code == 201
    pid = r.get_json()["data"]["id"]

    r = client.put(f"/api/products/{pid}", json={"name": "Ragi Malt", "price": 175})
    assert r.get_json()["data"]["price"] == 175

    items = client.get("/api/products").get_json()["data"]["items"]
    assert [p["id"] for p in items] == [pid]

    assert client.delete(f"/api/products/{pid}").status_code == 200
    assert client.get(f"/api/products/{pid}").status_code == 404


def test_delete_missing_product(app):
    with pytest.raises(NotFoundError):
        catalog_service.delete_product(5)


def test_seed_products_cli(runner):
    result = runner.invoke(args=["seed-products"])
    assert "3 default products inserted" in result.output
    result = runner.invoke(args=["seed-products"])
    assert "nothing to do" in result.output


def test_health(client):
    assert client.get("/").get_json() == {"ok": True, "msg": "API running"}
