
import pytest
from flask_jwt_extended import create_access_token

from license_manager import create_app
from license_manager.config import TestConfig
from license_manager.extensions import db
from license_manager.models.license import License
from license_manager.utils.dates import today_in


@pytest.fixture
def app():
    app = create_app(TestConfig)
    with app.app_context():
        db.create_all()
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


def _headers(app, roles):
    with app.app_context():
        token = create_access_token(identity="user-1", additional_claims={"roles": roles, "email": "me@infn.test"})
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def admin_headers(app):
    return _headers(app, ["administrator"])


@pytest.fixture
def user_headers(app):
    return _headers(app, ["viewer"])


@pytest.fixture
def make_license(app):
    def _make(**overrides):
        fields = {
            "manufacturer": "Acme",
            "product": "Widget Pro",
            "license_type": "subscription",
            "license_count": 5,
            "bundle_count": 1,
            "borrowable": False,
            "contract": "C-1",
            "reseller": "Acme Corp",
            "reseller_email": "ops@acme.test",
            "expiration_date": today_in("UTC"),
        }
        fields.update(overrides)
        lic = License(**fields)
        db.session.add(lic)
        db.session.commit()
        return lic
    return _make
