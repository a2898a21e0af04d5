"""Integration tests for the rate histogram endpoints."""
from __future__ import annotations

from types import SimpleNamespace

import pytest

from marketplace_api.routers import rates


def test_post_histogram_marks_selection(test_client):
    response = test_client.post(
        "/api/rates/histogram",
        json={"rates": [0.5, 100, 0, -3], "min_rate": "15", "max_rate": "45"},
    )

    assert response.status_code == 200
    payload = response.json()
    assert payload["min_value"] == 0
    assert payload["max_value"] == 100
    assert payload["selected_min"] == 15
    assert payload["selected_max"] == 45
    assert len(payload["buckets"]) == 10
    assert [b["in_range"] for b in payload["buckets"]].count(True) == 2
    assert payload["buckets"][-1]["height"] == 100
    assert payload["buckets"][0]["label"] == "$0-$10: 1 VA"
    assert [p["label"] for p in payload["presets"]] == ["Any", "$5-15", "$15-25", "$25+"]
    assert not any(p["active"] for p in payload["presets"])


def test_post_histogram_without_valid_rates(test_client):
    response = test_client.post("/api/rates/histogram", json={"rates": [0, -1]})

    assert response.status_code == 200
    payload = response.json()
    assert payload["buckets"] == []
    assert payload["selected_min"] == 0
    assert payload["selected_max"] == 100
    assert [p["label"] for p in payload["presets"] if p["active"]] == ["Any"]


def test_post_histogram_rejects_bad_body(test_client):
    response = test_client.post("/api/rates/histogram", json={"rates": "cheap"})
    assert response.status_code == 400
    assert response.json() == {"error": "Invalid request body"}


def test_get_histogram_reads_active_vas(monkeypatch: pytest.MonkeyPatch, test_client):
    rows = [{"hourly_rate": 12}, {"hourly_rate": None}, {"hourly_rate": 20}]
    queries = []

    class FakeQuery:
        def __init__(self, table: str):
            self.table = table
            self.filters = []

        def select(self, columns: str):
            self.columns = columns
            return self

        def eq(self, column: str, value):
            self.filters.append((column, value))
            return self

        def execute(self):
            queries.append(self)
            return SimpleNamespace(data=rows)

    monkeypatch.setattr(
        rates,
        "get_supabase_admin",
        lambda: SimpleNamespace(table=FakeQuery),
    )

    response = test_client.get("/api/rates/histogram", params={"min_rate": "15", "max_rate": "25"})

    assert response.status_code == 200
    payload = response.json()
    assert payload["min_value"] == 12
    assert payload["max_value"] == 20
    assert sum(b["count"] for b in payload["buckets"]) == 2
    assert [p["label"] for p in payload["presets"] if p["active"]] == ["$15-25"]
    assert queries[0].table == "vas"
    assert queries[0].columns == "hourly_rate"
    assert queries[0].filters == [("is_active", True)]


def test_get_histogram_reports_database_errors(monkeypatch: pytest.MonkeyPatch, test_client):
    def broken():
        raise RuntimeError("database unavailable")

    monkeypatch.setattr(rates, "get_supabase_admin", broken)

    response = test_client.get("/api/rates/histogram")

    assert response.status_code == 500
    assert response.json() == {"error": "database unavailable"}


def test_post_histogram_ignores_overflowing_numbers(test_client):
    response = test_client.post(
        "/api/rates/histogram",
        content=b'{"rates": [5, 1e309], "max_rate": "inf"}',
        headers={"Content-Type": "application/json"},
    )

    assert response.status_code == 200
    payload = response.json()
    assert payload["min_value"] == 5
    assert payload["max_value"] == 5
    assert payload["selected_max"] == 5
    assert sum(b["count"] for b in payload["buckets"]) == 1
