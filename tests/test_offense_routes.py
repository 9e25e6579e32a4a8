"""
Tests for catalog, helper and health routes
"""
from datetime import date, timedelta

from ia_console.catalog import OFFENSE_CATALOG
from ia_console.routes.tool_routes import days_since, parse_date


def test_list_offenses(client):
    r = client.get("/offenses")
    assert r.status_code == 200
    offenses = r.json()
    assert len(offenses) == len(OFFENSE_CATALOG)
    assert set(offenses[0]) == {"id", "code", "description", "punishment", "category"}
    assert offenses[0]["code"] == "0.1"


def test_list_offenses_search(client):
    r = client.get("/offenses", params={"search": "troll"})
    assert r.status_code == 200
    assert [o["code"] for o in r.json()] == ["2.1"]


def test_list_offenses_by_category(client):
    r = client.get("/offenses", params={"category": "Category 4 - Severe Offenses"})
    assert r.status_code == 200
    assert {o["code"] for o in r.json()} == {"4.1", "4.2", "4.3", "4.4"}


def test_offense_categories(client):
    r = client.get("/offenses/categories")
    assert r.status_code == 200
    groups = r.json()
    names = [g["category"] for g in groups]
    assert names == sorted(names)
    assert sum(len(g["offenses"]) for g in groups) == len(OFFENSE_CATALOG)


def test_offense_categories_search(client):
    r = client.get("/offenses/categories", params={"search": "termination"})
    assert r.status_code == 200
    assert r.json() == []  # punishment text is not searched

    r = client.get("/offenses/categories", params={"search": "patrol"})
    groups = r.json()
    assert [g["category"] for g in groups] == ["Category 0 - Logged Warnings", "Category 3 - Major Offenses"]


def test_days_since_formats(client):
    ten_days_ago = date.today() - timedelta(days=10)
    for value in (ten_days_ago.strftime("%m/%d/%Y"), ten_days_ago.isoformat()):
        r = client.get("/tools/days-since", params={"date": value})
        assert r.status_code == 200
        assert r.json() == {"date": ten_days_ago.isoformat(), "days": 10}


def test_days_since_rejects_garbage(client):
    r = client.get("/tools/days-since", params={"date": "next tuesday"})
    assert r.status_code == 400
    assert r.json()["field"] == "date"


def test_days_since_missing_param(client):
    r = client.get("/tools/days-since")
    assert r.status_code == 400
    assert r.json()["field"] == "date"


def test_date_helpers():
    assert parse_date(" 2024-02-29 ") == date(2024, 2, 29)
    assert parse_date("02/30/2024") is None
    assert days_since(date(2024, 1, 1), today=date(2024, 1, 31)) == 30
    assert days_since(date(2024, 2, 1), today=date(2024, 1, 31)) == -1


def test_health(client):
    r = client.get("/health")
    assert r.status_code == 200
    assert r.json() == {"status": "ok", "offenses": len(OFFENSE_CATALOG)}
