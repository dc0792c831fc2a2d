"""Repair Quote — GET /api/quote/{partId}.

Invariants:
    - Present part → 200 with exactly the five projected columns
    - Absent part → 404 "Part not found in inventory."
    - Datastore failure → 500 generic message
"""

import pytest


async def test_existing_part_returns_projection(client):
    res = await client.get("/api/quote/PRT-ANT-01")
    assert res.status_code == 200
    body = res.json()
    assert set(body) == {
        "part_id", "part_name", "base_price",
        "stock_quantity", "compatibility_notes",
    }
    assert body["part_id"] == "PRT-ANT-01"
    assert body["part_name"] == "External Antenna"
    assert float(body["base_price"]) == pytest.approx(19.99)
    assert body["stock_quantity"] == 42
    assert body["compatibility_notes"] == "Router X1, Router X2"


async def test_out_of_stock_part_still_quoted(client):
    res = await client.get("/api/quote/PRT-PSU-12")
    assert res.status_code == 200
    assert res.json()["stock_quantity"] == 0
    assert res.json()["compatibility_notes"] is None


async def test_unknown_part_returns_404(client):
    res = await client.get("/api/quote/PRT-NOPE-00")
    assert res.status_code == 404
    assert res.json() == {"error": "Part not found in inventory."}


async def test_part_id_injection_returns_404(client, recording_provider):
    res = await client.get("/api/quote/' OR '1'='1")
    assert res.status_code == 404
    assert recording_provider.calls[-1][1] == {"part_id": "' OR '1'='1"}


async def test_one_query_per_request(client, recording_provider):
    await client.get("/api/quote/PRT-ANT-01")
    assert len(recording_provider.calls) == 1
    assert "FROM parts_pricing" in recording_provider.calls[0][0]


async def test_repeated_quote_is_identical(client):
    first = await client.get("/api/quote/PRT-ANT-01")
    second = await client.get("/api/quote/PRT-ANT-01")
    assert first.json() == second.json()


async def test_datastore_down_returns_generic_500(failing_client):
    res = await failing_client.get("/api/quote/PRT-ANT-01")
    assert res.status_code == 500
    assert res.json() == {
        "error": "Internal server error while fetching repair quote.",
    }
