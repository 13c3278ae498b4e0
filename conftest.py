from __future__ import annotations

from datetime import date

import pytest


@pytest.fixture
def work_date() -> date:
    return date(2026, 1, 5)


@pytest.fixture
def app(monkeypatch):
    monkeypatch.setenv("APP_ENV", "testing")
    from src.shift_pay.shift_pay.main import create_app

    return create_app()


@pytest.fixture
def client(app):
    return app.test_client()
