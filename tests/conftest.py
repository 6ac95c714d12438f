from __future__ import annotations

from datetime import date

import pytest
from flask.testing import FlaskClient

from wealthplanner.app import create_app
from wealthplanner.config import Settings


@pytest.fixture()
def settings() -> Settings:
    return Settings(
        env="test",
        log_level="WARNING",
        host="127.0.0.1",
        port=4000,
        cors_origins=("http://localhost:5173",),
    )


@pytest.fixture()
def app(settings):
    return create_app(settings, today=lambda: date(2024, 3, 10))


@pytest.fixture()
def client(app) -> FlaskClient:
    with app.test_client() as test_client:
        yield test_client
