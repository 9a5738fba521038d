import pytest

from pantry import create_app
from pantry.config import TestConfig
from pantry.extensions import db


@pytest.fixture
def app():
    app = create_app(TestConfig)
    with app.app_context():
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def runner(app):
    return app.test_cli_runner()


HEALTH_MIX = {"product_id": 1, "name": "Organic Health Mix", "unit_price": 299, "quantity": 2}


@pytest.fixture
def health_mix_line():
    return dict(HEALTH_MIX)
