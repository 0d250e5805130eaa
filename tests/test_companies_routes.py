import uuid

import pytest
from sqlalchemy.exc import OperationalError

from app.api.routes import companies_routes
from app.services import company_service

COMPANY_ID = str(uuid.uuid4())
COMPANY = {"id": COMPANY_ID, "name": "Solstice", "industry": "Analytics"}


@pytest.fixture
def seeding(monkeypatch):
    calls = []
    monkeypatch.setattr(companies_routes, "ensure_curated_jobs_seeded", lambda: calls.append(1))
    return calls


def test_list_seeds_empty_directory(client, monkeypatch, seeding):
    monkeypatch.setattr(company_service, "count_companies", lambda: 0)
    monkeypatch.setattr(company_service, "list_companies", lambda *args: ([COMPANY], 1))

    resp = client.get("/api/companies")

    assert resp.status_code == 200
    assert resp.json()["companies"] == [COMPANY]
    assert resp.json()["pagination"]["hasMore"] is False
    assert seeding == [1]


def test_list_skips_seed_when_populated(client, monkeypatch, seeding):
    monkeypatch.setattr(company_service, "count_companies", lambda: 4)
    monkeypatch.setattr(company_service, "list_companies", lambda *args: ([], 4))
    client.get("/api/companies")
    assert seeding == []


def test_seed_check_failure_is_not_fatal(client, monkeypatch, seeding):
    def broken():
        raise OperationalError("SELECT COUNT(*)", {}, Exception("timeout"))

    monkeypatch.setattr(company_service, "count_companies", broken)
    monkeypatch.setattr(company_service, "list_companies", lambda *args: ([COMPANY], 1))

    resp = client.get("/api/companies")
    assert resp.status_code == 200
    assert seeding == []


def test_list_passes_filters(client, monkeypatch, seeding):
    captured = {}
    monkeypatch.setattr(company_service, "count_companies", lambda: 1)

    def fake_list(search, industry, limit, offset):
        captured.update(search=search, industry=industry, limit=limit, offset=offset)
        return [], 0

    monkeypatch.setattr(company_service, "list_companies", fake_list)
    client.get("/api/companies", params={"search": "sol", "industry": "Analytics", "limit": 5, "offset": 10})
    assert captured == {"search": "sol", "industry": "Analytics", "limit": 5, "offset": 10}


def _detail_fakes(monkeypatch, following):
    monkeypatch.setattr(company_service, "get_company", lambda cid: dict(COMPANY) if cid == COMPANY_ID else None)
    monkeypatch.setattr(company_service, "list_company_jobs", lambda cid: [{"id": "j1"}, {"id": "j2"}])
    monkeypatch.setattr(company_service, "is_following", lambda user_id, cid: following)


def test_company_detail_anonymous(client, monkeypatch):
    _detail_fakes(monkeypatch, following=True)
    resp = client.get(f"/api/companies/{COMPANY_ID}")
    assert resp.status_code == 200
    company = resp.json()["company"]
    assert company["job_count"] == 2
    assert company["is_following"] is False
    assert len(resp.json()["jobs"]) == 2


def test_company_detail_signed_in(client, auth_headers, monkeypatch):
    _detail_fakes(monkeypatch, following=True)
    resp = client.get(f"/api/companies/{COMPANY_ID}", headers=auth_headers)
    assert resp.json()["company"]["is_following"] is True


def test_company_detail_not_found(client, monkeypatch):
    _detail_fakes(monkeypatch, following=False)
    resp = client.get(f"/api/companies/{uuid.uuid4()}")
    assert resp.status_code == 404
    assert resp.json() == {"error": "Company not found"}


def test_follow_and_unfollow(client, auth_headers, user, monkeypatch):
    follows = []
    monkeypatch.setattr(company_service, "get_company", lambda cid: COMPANY)
    monkeypatch.setattr(company_service, "follow_company", lambda uid, cid: follows.append(("follow", uid)))
    monkeypatch.setattr(company_service, "unfollow_company", lambda uid, cid: follows.append(("unfollow", uid)))

    resp = client.post(f"/api/companies/{COMPANY_ID}/follow", headers=auth_headers)
    assert resp.status_code == 201
    assert resp.json() == {"message": "Company followed successfully"}

    resp = client.delete(f"/api/companies/{COMPANY_ID}/follow", headers=auth_headers)
    assert resp.status_code == 200
    assert follows == [("follow", user["id"]), ("unfollow", user["id"])]


def test_follow_unknown_company(client, auth_headers, monkeypatch):
    monkeypatch.setattr(company_service, "get_company", lambda cid: None)
    resp = client.post(f"/api/companies/{COMPANY_ID}/follow", headers=auth_headers)
    assert resp.status_code == 404


def test_following_list(client, auth_headers, monkeypatch):
    monkeypatch.setattr(company_service, "list_followed_companies", lambda uid: [COMPANY])
    resp = client.get("/api/companies/user/following", headers=auth_headers)
    assert resp.status_code == 200
    assert resp.json() == {"companies": [COMPANY]}
