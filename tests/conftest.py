import pytest

from barcodes import clear_registry
from main import create_app
from tests.factories import ProductFactory


@pytest.fixture(autouse=True)
def _fresh_registry():
    """Every test starts with an empty internal-code registry."""
    clear_registry()
    yield
    clear_registry()


@pytest.fixture
def app():
    """Flask app on a private in-memory database."""
    app = create_app("sqlite:///:memory:")
    app.config.update(TESTING=True)
    return app


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def session(app):
    """Session bound to the app's database, also used by the factories."""
    from db import get_session

    s = get_session()
    ProductFactory._meta.sqlalchemy_session = s
    yield s
    ProductFactory._meta.sqlalchemy_session = None
    s.close()
