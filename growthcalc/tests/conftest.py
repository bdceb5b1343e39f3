from __future__ import annotations

import pytest
from flask.testing import FlaskClient

from growthcalc.app import create_app
from growthcalc.core.config import AppConfig


@pytest.fixture()
def client() -> FlaskClient:
    app = create_app(AppConfig(environment="test", max_workers=2))
    app.config["TESTING"] = True
    with app.test_client() as test_client:
        yield test_client
