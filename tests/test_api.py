import pytest
from fastapi.testclient import TestClient

from cashflow.core.config import settings
from cashflow.main import app

client = TestClient(app)


def batch(*rows):
    return {"transactions": [{"from": f, "to": t, "amount": a} for f, t, a in rows]}


def test_root():
    res = client.get("/")
    assert res.status_code == 200
    assert res.json() == {"message": f"{settings.APP_NAME} is live"}


def test_health():
    res = client.get("/api/v1/system/health")
    assert res.status_code == 200
    assert res.json() == {"status": "ok"}


def test_info():
    res = client.get("/api/v1/system/info")
    assert res.status_code == 200
    assert res.json()["max_transactions"] == settings.MAX_TRANSACTIONS


def test_minimize_triangle():
    res = client.post(
        "/api/v1/settlements/minimize",
        json=batch(("A", "B", 40), ("B", "C", 20), ("C", "A", 10)),
    )
    assert res.status_code == 200
    body = res.json()
    assert body["net"] == {"A": -30, "B": 20, "C": 10}
    assert body["count"] == 2
    assert body["settlements"] == [
        {"from": "A", "to": "B", "amount": 20, "description": "A pays 20 to B"},
        {"from": "A", "to": "C", "amount": 10, "description": "A pays 10 to C"},
    ]


def test_minimize_empty():
    res = client.post("/api/v1/settlements/minimize", json=batch())
    assert res.status_code == 200
    assert res.json() == {"net": {}, "settlements": [], "count": 0}


def test_balances():
    res = client.post(
        "/api/v1/settlements/balances",
        json=batch(("A", "B", 100), ("B", "C", 100)),
    )
    assert res.status_code == 200
    assert res.json() == {"net": {"A": -100, "B": 0, "C": 100}, "settled": False}


def test_balances_settled_when_debts_cancel():
    res = client.post(
        "/api/v1/settlements/balances",
        json=batch(("A", "B", 25), ("B", "A", 25)),
    )
    assert res.json()["settled"] is True


@pytest.mark.parametrize(
    "row",
    [("A", "B", -5), ("", "B", 5), ("A", "B", "5")],
)
def test_malformed_record_rejected(row):
    res = client.post("/api/v1/settlements/minimize", json=batch(row))
    assert res.status_code == 422


def test_overflow_rejected():
    big = settings.AMOUNT_LIMIT
    res = client.post(
        "/api/v1/settlements/minimize",
        json=batch(("A", "B", big), ("C", "B", big)),
    )
    assert res.status_code == 422
    assert "out of range" in res.json()["detail"]


def test_too_many_transactions(monkeypatch):
    monkeypatch.setattr(settings, "MAX_TRANSACTIONS", 1)
    res = client.post(
        "/api/v1/settlements/minimize",
        json=batch(("A", "B", 1), ("B", "C", 1)),
    )
    assert res.status_code == 413
