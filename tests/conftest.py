from __future__ import annotations

import pytest
from flask.testing import FlaskClient

from compound_calc_web.app import app as flask_app


@pytest.fixture()
def client() -> FlaskClient:
    flask_app.config["TESTING"] = True
    with flask_app.test_client() as test_client:
        yield test_client


@pytest.fixture()
def one_year_form() -> dict:
    return {
        "initial_principal": "10000000",
        "monthly_deposit": "1000000",
        "period": "1",
        "period_unit": "years",
        "rate": "12",
        "rate_unit": "annual",
    }
