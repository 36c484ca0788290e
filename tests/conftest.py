"""Shared fixtures for the rupeewise test-suite."""

import sys
from pathlib import Path

# Running ``pytest`` from a plain checkout should not require an editable
# install.
ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from collections.abc import Callable  # noqa: E402
from typing import Any  # noqa: E402

import pytest  # noqa: E402
from flask import Flask  # noqa: E402
from flask.testing import FlaskClient  # noqa: E402
from werkzeug.test import TestResponse  # noqa: E402

from rupeewise.backend.app import create_app  # noqa: E402

TEST_ORIGIN = "https://calculators.test"


@pytest.fixture()
def app(monkeypatch: pytest.MonkeyPatch) -> Flask:
    """Flask app with a single allowed origin so CORS stays configured."""

    monkeypatch.setenv("RUPEEWISE_ALLOWED_ORIGINS", TEST_ORIGIN)
    application = create_app()
    application.config.update(TESTING=True)
    return application


@pytest.fixture()
def client(app: Flask) -> FlaskClient:
    return app.test_client()


@pytest.fixture()
def post_calculation(client: FlaskClient) -> Callable[..., TestResponse]:
    """POST ``fields`` (and optional ``options``) to an instrument endpoint."""

    def _post(instrument: str, fields: dict[str, Any], **extra: Any) -> TestResponse:
        body = {"fields": fields, **extra}
        return client.post(f"/api/v1/calculations/{instrument}", json=body)

    return _post
