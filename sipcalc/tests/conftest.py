from __future__ import annotations

import pytest
from flask import Flask
from flask.testing import FlaskClient

from sipcalc.app import create_app
from sipcalc.config import AppSettings


@pytest.fixture()
def settings() -> AppSettings:
    return AppSettings(
        app_env="test",
        log_level="debug",
        cors_origins="http://localhost:5173",
        max_years=50,
    )


@pytest.fixture()
def app(settings: AppSettings) -> Flask:
    flask_app = create_app(settings)
    flask_app.config.update(TESTING=True)
    return flask_app


@pytest.fixture()
def client(app: Flask) -> FlaskClient:
    with app.test_client() as test_client:
        yield test_client
