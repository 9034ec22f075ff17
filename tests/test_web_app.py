"""Mini README: Tests for the dashboard routes.

Runs the FastAPI app against an in-memory store and checks that edits persist,
bad input answers 400, unknown cards answer 404 and the export downloads as
an attachment.
"""

from __future__ import annotations

import inspect
from datetime import date

import pytest
from fastapi.routing import APIRoute
from fastapi.testclient import TestClient

from budgetboard.budget import BudgetState, CreditCard, dumps_state, loads_state
from budgetboard.interface import create_application
from budgetboard.storage import STORAGE_KEY, BudgetStore, InMemoryBackend


@pytest.fixture()
def backend() -> InMemoryBackend:
    return InMemoryBackend()


@pytest.fixture()
def client(backend: InMemoryBackend) -> TestClient:
    return TestClient(create_application(BudgetStore(backend)))


def test_dashboard_renders_summary(client: TestClient) -> None:
    response = client.get("/")

    assert response.status_code == 200
    assert "Budget Dashboard" in response.text
    assert "674.03" in response.text
    assert "Chase" in response.text


def test_state_includes_summary(client: TestClient) -> None:
    payload = client.get("/state").json()

    assert payload["income"] == 2200.0
    assert payload["summary"]["total_recurring"] == pytest.approx(1525.97)
    assert client.get("/summary").json()["discretionary_remaining"] == pytest.approx(674.03)


def test_recurring_upsert_and_delete(client: TestClient, backend: InMemoryBackend) -> None:
    client.post("/recurring", data={"label": "Netflix", "amount": "10"})
    response = client.post("/recurring", data={"label": "Netflix", "amount": "15.49"})

    assert response.status_code == 200
    assert response.json()["recurring"]["Netflix"] == 15.49
    assert loads_state(backend.get(STORAGE_KEY)).recurring["Netflix"] == 15.49

    for _ in range(2):
        response = client.post("/recurring/delete", data={"label": "Netflix"})
        assert response.status_code == 200
    assert "Netflix" not in response.json()["recurring"]


def test_invalid_input_returns_400(client: TestClient) -> None:
    before = client.get("/state").json()

    assert client.post("/recurring", data={"label": "", "amount": "10"}).status_code == 400
    assert client.post("/pending", data={"label": "Trip", "amount": "nan"}).status_code == 400
    assert client.post("/extras", data={"description": "Coffee", "amount": "-1"}).status_code == 400
    assert client.post("/income", data={"amount": "lots"}).status_code == 400

    assert client.get("/state").json() == before


def test_card_balance_update_and_unknown_card(client: TestClient) -> None:
    response = client.post("/credit-cards", data={"name": "Chase", "amount": "50"})

    assert response.status_code == 200
    assert response.json()["creditCards"]["Chase"] == {"balance": 50.0, "due": "2025-08-24"}
    assert client.post("/credit-cards", data={"name": "Unknown", "amount": "50"}).status_code == 404
    assert "Unknown" not in client.get("/state").json()["creditCards"]


def test_card_name_with_slash_is_updated() -> None:
    """Card names travel in the form body, so slashes in them are fine."""

    state = BudgetState(credit_cards={"Amex 1/2": CreditCard(balance=5.0, due_date=date(2025, 9, 1))})
    client = TestClient(create_application(BudgetStore(InMemoryBackend({STORAGE_KEY: dumps_state(state)}))))

    response = client.post("/credit-cards", data={"name": "Amex 1/2", "amount": "75"})

    assert response.status_code == 200
    assert response.json()["creditCards"]["Amex 1/2"] == {"balance": 75.0, "due": "2025-09-01"}
    assert 'name="name" value="Amex 1/2"' in client.get("/").text


def test_extras_append_with_and_without_date(client: TestClient) -> None:
    client.post("/extras", data={"description": "Coffee", "amount": "4.50", "date": "2025-01-05"})
    response = client.post("/extras", data={"description": "Lunch", "amount": "12"})

    extras = response.json()["extras"]
    assert extras[0] == {"date": "2025-01-05", "description": "Coffee", "amount": 4.5}
    assert extras[1]["date"] == date.today().isoformat()
    assert response.json()["summary"]["total_extras"] == pytest.approx(16.5)


def test_export_downloads_csv(client: TestClient) -> None:
    response = client.get("/export.csv")

    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/csv")
    expected = f'attachment; filename="budget_{date.today():%Y-%m}.csv"'
    assert response.headers["content-disposition"] == expected
    lines = response.text.split("\n")
    assert lines[0] == "Date,Description,Amount"
    assert len(lines) == 18


def test_route_handlers_run_in_threadpool(client: TestClient) -> None:
    """Handlers touch blocking storage, so none of them is a coroutine."""

    handlers = [route.endpoint for route in client.app.routes if isinstance(route, APIRoute)]

    assert handlers
    assert not any(inspect.iscoroutinefunction(handler) for handler in handlers)
