from __future__ import annotations

from math import isclose

from flask.testing import FlaskClient


def projection_payload() -> dict:
    return {
        "initialValue": 100000,
        "interestRate": 0.04,
        "projectionYears": 5,
        "events": [
            {
                "kind": "INCOME",
                "amount": "5000.00",
                "recurrence": "MONTHLY",
                "startDate": "2024-01-01",
                "description": "Salary",
            },
            {
                "kind": "EXPENSE",
                "amount": 3000,
                "recurrence": "MONTHLY",
                "startDate": "2024-01-01",
                "endDate": "2026-12-31",
            },
        ],
    }


def test_projection_endpoint_returns_curve_parameters_and_metrics(client: FlaskClient):
    resp = client.post("/api/projection", json=projection_payload())

    assert resp.status_code == 200
    body = resp.get_json()

    points = body["projectionData"]
    assert len(points) == 6
    # app is pinned to 2024-03-10 in conftest
    assert [p["year"] for p in points] == list(range(2024, 2030))
    assert points[0]["projectedValue"] == 100000
    assert all(b["projectedValue"] > a["projectedValue"] for a, b in zip(points, points[1:]))

    assert body["parameters"] == {
        "initialValue": 100000,
        "interestRate": 0.04,
        "projectionYears": 5,
        "eventsCount": 2,
    }
    assert body["metrics"]["projectionYears"] == 5
    assert isclose(body["metrics"]["finalValue"], points[-1]["projectedValue"], abs_tol=0.01)


def test_projection_defaults(client: FlaskClient):
    resp = client.post("/api/projection", json={"initialValue": 1000})

    assert resp.status_code == 200
    body = resp.get_json()
    assert body["parameters"]["interestRate"] == 0.04
    assert body["parameters"]["projectionYears"] == 40
    assert len(body["projectionData"]) == 41


def test_projection_rejects_invalid_payload(client: FlaskClient):
    resp = client.post("/api/projection", json={"initialValue": -1, "projectionYears": 51})

    assert resp.status_code == 400
    body = resp.get_json()
    fields = {tuple(err["loc"]) for err in body["detail"]}
    assert ("initialValue",) in fields
    assert ("projectionYears",) in fields


def test_projection_rejects_unknown_event_kind(client: FlaskClient):
    payload = projection_payload()
    payload["events"][0]["kind"] = "SALARY"

    resp = client.post("/api/projection", json=payload)

    assert resp.status_code == 400
    assert "detail" in resp.get_json()


def test_non_json_body_returns_400(client: FlaskClient):
    resp = client.post("/api/projection", data="not json", content_type="application/json")

    assert resp.status_code == 400


def test_metrics_endpoint(client: FlaskClient):
    payload = {
        "initialValue": 100000,
        "projectionData": [
            {"year": 2024, "projectedValue": 100000},
            {"year": 2025, "projectedValue": 110000},
            {"year": 2026, "projectedValue": 121000},
        ],
    }

    resp = client.post("/api/projection/metrics", json=payload)

    assert resp.status_code == 200
    metrics = resp.get_json()["metrics"]
    assert metrics["finalValue"] == 121000
    assert metrics["totalGain"] == 21000
    assert metrics["totalGainPercent"] == 21
    assert isclose(metrics["cagr"], 10.0, abs_tol=0.005)


def test_metrics_endpoint_with_empty_curve_returns_null(client: FlaskClient):
    resp = client.post("/api/projection/metrics", json={"initialValue": 100, "projectionData": []})

    assert resp.status_code == 200
    assert resp.get_json() == {"metrics": None}


def test_suggestions_endpoint(client: FlaskClient):
    resp = client.post(
        "/api/suggestions",
        json={
            "currentPatrimony": 200000,
            "targetPatrimony": 1000000,
            "timeHorizonYears": 15,
            "currentMonthlyContribution": 1000,
        },
    )

    assert resp.status_code == 200
    types = [s["type"] for s in resp.get_json()["suggestions"]]
    assert types == ["INCREASE_CONTRIBUTION", "INCREASE_CONTRIBUTION", "ADJUST_ALLOCATION"]


def test_suggestions_endpoint_requires_horizon(client: FlaskClient):
    resp = client.post(
        "/api/suggestions",
        json={"currentPatrimony": 1, "targetPatrimony": 2, "timeHorizonYears": 0},
    )

    assert resp.status_code == 400


def test_alignment_endpoint(client: FlaskClient):
    resp = client.post(
        "/api/alignment",
        json={"wallets": [{"currentValue": 95000, "totalPatrimony": 100000}]},
    )

    assert resp.status_code == 200
    assert resp.get_json() == {
        "currentPatrimony": 95000,
        "plannedPatrimony": 100000,
        "alignmentPercent": 95,
        "category": "EXCELLENT",
    }


def test_event_summary_endpoint(client: FlaskClient):
    resp = client.post("/api/events/summary", json={"events": projection_payload()["events"]})

    assert resp.status_code == 200
    body = resp.get_json()
    assert body["totalEvents"] == 2
    assert body["totalIncome"] == 5000
    assert body["totalExpenses"] == 3000
    assert body["netFlow"] == 2000


def test_metrics_endpoint_rejects_negative_points(client: FlaskClient):
    payload = {
        "initialValue": 100,
        "projectionData": [
            {"year": 2024, "projectedValue": 100},
            {"year": 2025, "projectedValue": 100},
            {"year": 2026, "projectedValue": -50},
        ],
    }

    resp = client.post("/api/projection/metrics", json=payload)

    assert resp.status_code == 400
    locs = [tuple(err["loc"]) for err in resp.get_json()["detail"]]
    assert ("projectionData", 2, "projectedValue") in locs
