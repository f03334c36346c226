from __future__ import annotations

import pytest
from flask import Flask
from flask.testing import FlaskClient

from sip_backend.app import create_app
from sip_backend.core.sip import SipParams


@pytest.fixture()
def app() -> Flask:
    return create_app({"TESTING": True})


@pytest.fixture()
def client(app: Flask) -> FlaskClient:
    with app.test_client() as test_client:
        yield test_client


@pytest.fixture()
def default_params() -> SipParams:
    # the calculator form's starting values
    return SipParams(monthlyInvestment=5000, years=10, expectedReturnRate=12)

