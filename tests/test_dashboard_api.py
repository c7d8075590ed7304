"""Test dashboard statistics and the reference endpoints."""

from datetime import datetime, timedelta

from conftest import create_client


async def add_note(http, provider, **fields):
    body = {"client_name": "Sarah Johnson", **fields}
    response = await http.post("/api/soap-notes", json=body, headers=provider.headers)
    assert response.status_code == 201, response.text


async def test_empty_dashboard(client, provider_a):
    stats = (await client.get("/api/dashboard/stats", headers=provider_a.headers)).json()
    assert stats == {
        "total_notes": 0,
        "active_clients": 0,
        "notes_last_30_days": 0,
        "risk_alerts": 0,
        "average_phq9": 0,
        "average_phq9_severity": "Minimal",
        "average_gad7": 0,
        "average_gad7_severity": "Minimal",
        "cpt_breakdown": [],
        "diagnosis_breakdown": [],
    }


async def test_dashboard_aggregates_own_data(client, provider_a, provider_b):
    recent = datetime.utcnow().isoformat()
    old = (datetime.utcnow() - timedelta(days=90)).isoformat()
    gad = {"code": "F41.1", "name": "Generalized Anxiety Disorder"}
    mdd = {"code": "F32.1", "name": "Major Depressive Disorder, Moderate"}

    await add_note(
        client, provider_a, session_date=recent, phq9_items=[3, 2, 1, 0, 2, 1, 0, 1, 2],
        gad7_items=[2, 2, 2, 2, 2, 2, 2], risk_suicidal="Passive", diagnoses=[gad, mdd],
    )
    await add_note(
        client, provider_a, session_date=recent, phq9_items=[3] * 9, cpt_code="90834", diagnoses=[gad],
    )
    await add_note(client, provider_a, session_date=old, cpt_code="90834")

    await create_client(client, provider_a)
    await create_client(client, provider_a, first_name="Marcus", status="discharged")

    # Another provider's data never leaks in
    await add_note(client, provider_b, phq9_items=[3] * 9, risk_homicidal="Active")
    await create_client(client, provider_b)

    stats = (await client.get("/api/dashboard/stats", headers=provider_a.headers)).json()

    assert stats["total_notes"] == 3
    assert stats["active_clients"] == 1
    assert stats["notes_last_30_days"] == 2
    assert stats["risk_alerts"] == 1
    assert stats["average_phq9"] == 13  # (12 + 27 + 0) / 3
    assert stats["average_phq9_severity"] == "Moderate"
    assert stats["average_gad7"] == 5  # (14 + 0 + 0) / 3 rounds to 5
    assert stats["average_gad7_severity"] == "Mild"
    assert stats["cpt_breakdown"] == [{"code": "90834", "count": 2}, {"code": "90837", "count": 1}]
    assert stats["diagnosis_breakdown"] == [{"code": "F41.1", "count": 2}, {"code": "F32.1", "count": 1}]


async def test_dashboard_requires_provider(client):
    assert (await client.get("/api/dashboard/stats")).status_code == 401


async def test_reference_data(client, provider_a):
    codes = (await client.get("/api/reference/cpt-codes", headers=provider_a.headers)).json()
    assert "90837" in [c["code"] for c in codes]

    diagnoses = (await client.get("/api/reference/diagnoses", headers=provider_a.headers)).json()
    assert "F41.1" in [d["code"] for d in diagnoses]

    instruments = {i["key"]: i for i in (await client.get("/api/reference/instruments", headers=provider_a.headers)).json()}
    assert instruments["phq9"]["item_count"] == 9
    assert len(instruments["phq9"]["questions"]) == 9
    assert instruments["gad7"]["max_score"] == 21
    assert instruments["gad7"]["bands"][-1]["label"] == "Severe"
