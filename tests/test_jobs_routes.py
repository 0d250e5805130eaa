import uuid

import pytest
from sqlalchemy.exc import IntegrityError

from app.api.routes import jobs_routes
from app.core.errors import SESSION_EXPIRED_MESSAGE
from app.services import job_service, resume_service
from tests.conftest import FakePgError

JOB_ID = str(uuid.uuid4())


@pytest.fixture(autouse=True)
def no_seeding(monkeypatch):
    calls = []
    monkeypatch.setattr(jobs_routes, "ensure_curated_jobs_seeded", lambda: calls.append("ensure"))
    monkeypatch.setattr(jobs_routes, "seed_curated_jobs", lambda: calls.append("seed") or 12)
    return calls


def _job(title="Backend Engineer"):
    return {"id": JOB_ID, "title": title, "company_name": "Orbit Labs", "is_active": True}


def test_list_jobs_paginates_and_seeds(client, monkeypatch, no_seeding):
    captured = {}

    def fake_list(search, location, job_type, experience_level, limit, offset):
        captured.update(search=search, location=location, limit=limit, offset=offset)
        return [_job(), _job("Data Engineer")], 5

    monkeypatch.setattr(job_service, "list_jobs", fake_list)

    resp = client.get("/api/jobs", params={"search": "engineer", "location": "Remote", "limit": 2, "offset": 0})

    assert resp.status_code == 200
    body = resp.json()
    assert len(body["jobs"]) == 2
    assert body["pagination"] == {"total": 5, "limit": 2, "offset": 0, "hasMore": True}
    assert captured == {"search": "engineer", "location": "Remote", "limit": 2, "offset": 0}
    assert no_seeding == ["ensure"]


def test_list_jobs_last_page(client, monkeypatch):
    monkeypatch.setattr(job_service, "list_jobs", lambda *args: ([_job()], 3))
    resp = client.get("/api/jobs", params={"limit": 2, "offset": 2})
    assert resp.json()["pagination"]["hasMore"] is False


@pytest.mark.parametrize("params", [{"limit": 0}, {"limit": 101}, {"offset": -1}])
def test_list_jobs_rejects_bad_paging(client, params):
    resp = client.get("/api/jobs", params=params)
    assert resp.status_code == 400
    assert resp.json()["error"].startswith("Validation error")


def test_get_job(client, monkeypatch):
    monkeypatch.setattr(job_service, "get_job", lambda job_id: _job() if job_id == JOB_ID else None)
    resp = client.get(f"/api/jobs/{JOB_ID}")
    assert resp.status_code == 200
    assert resp.json()["job"]["title"] == "Backend Engineer"


def test_get_job_not_found(client, monkeypatch):
    monkeypatch.setattr(job_service, "get_job", lambda job_id: None)
    resp = client.get(f"/api/jobs/{uuid.uuid4()}")
    assert resp.status_code == 404
    assert resp.json() == {"error": "Job not found"}


def test_get_job_invalid_id(client):
    resp = client.get("/api/jobs/not-a-uuid")
    assert resp.status_code == 400


def test_sync_jobs(client, no_seeding):
    resp = client.post("/api/jobs/sync")
    assert resp.status_code == 200
    assert resp.json() == {"message": "Curated jobs refreshed"}
    assert no_seeding == ["seed"]


def test_save_job_requires_auth(client):
    resp = client.post(f"/api/jobs/{JOB_ID}/save")
    assert resp.status_code == 401


def test_save_job_unknown(client, auth_headers, monkeypatch):
    monkeypatch.setattr(job_service, "job_exists", lambda job_id: False)
    resp = client.post(f"/api/jobs/{JOB_ID}/save", headers=auth_headers)
    assert resp.status_code == 404


def test_save_job_with_notes(client, auth_headers, user, monkeypatch):
    saved = {}
    monkeypatch.setattr(job_service, "job_exists", lambda job_id: True)
    monkeypatch.setattr(job_service, "save_job", lambda user_id, job_id, notes: saved.update(
        user_id=user_id, job_id=job_id, notes=notes))

    resp = client.post(f"/api/jobs/{JOB_ID}/save", json={"notes": "apply next week"}, headers=auth_headers)

    assert resp.status_code == 201
    assert resp.json() == {"message": "Job saved successfully"}
    assert saved == {"user_id": user["id"], "job_id": JOB_ID, "notes": "apply next week"}


def test_save_job_without_body(client, auth_headers, monkeypatch):
    saved = {}
    monkeypatch.setattr(job_service, "job_exists", lambda job_id: True)
    monkeypatch.setattr(job_service, "save_job", lambda user_id, job_id, notes: saved.update(notes=notes))
    resp = client.post(f"/api/jobs/{JOB_ID}/save", headers=auth_headers)
    assert resp.status_code == 201
    assert saved == {"notes": None}


def test_unsave_job(client, auth_headers, monkeypatch):
    removed = []
    monkeypatch.setattr(job_service, "unsave_job", lambda user_id, job_id: removed.append(job_id))
    resp = client.delete(f"/api/jobs/{JOB_ID}/save", headers=auth_headers)
    assert resp.status_code == 200
    assert removed == [JOB_ID]


def test_saved_jobs_route_not_shadowed_by_job_id(client, auth_headers, monkeypatch):
    monkeypatch.setattr(job_service, "list_saved_jobs", lambda user_id: [_job()])
    resp = client.get("/api/jobs/user/saved", headers=auth_headers)
    assert resp.status_code == 200
    assert resp.json()["jobs"][0]["id"] == JOB_ID


def test_apply_to_job(client, auth_headers, monkeypatch):
    resume_id = str(uuid.uuid4())
    captured = {}

    def fake_apply(user_id, job_id, resume, cover_letter):
        captured.update(resume=resume, cover_letter=cover_letter)
        return "app-1"

    monkeypatch.setattr(job_service, "job_exists", lambda job_id: True)
    monkeypatch.setattr(job_service, "apply_to_job", fake_apply)
    monkeypatch.setattr(resume_service, "get_resume", lambda user_id, rid: {"id": rid, "user_id": user_id})

    resp = client.post(
        f"/api/jobs/{JOB_ID}/apply",
        json={"resume_id": resume_id, "cover_letter": "Hello"},
        headers=auth_headers,
    )

    assert resp.status_code == 201
    assert resp.json() == {"message": "Application submitted successfully", "application_id": "app-1"}
    assert captured == {"resume": resume_id, "cover_letter": "Hello"}


def test_apply_with_someone_elses_resume(client, auth_headers, monkeypatch):
    lookups = []

    def fake_get_resume(user_id, resume_id):
        lookups.append((user_id, resume_id))
        return None

    def never(*args):
        raise AssertionError("application should not be inserted")

    monkeypatch.setattr(job_service, "job_exists", lambda job_id: True)
    monkeypatch.setattr(resume_service, "get_resume", fake_get_resume)
    monkeypatch.setattr(job_service, "apply_to_job", never)

    resume_id = str(uuid.uuid4())
    resp = client.post(f"/api/jobs/{JOB_ID}/apply", json={"resume_id": resume_id}, headers=auth_headers)

    assert resp.status_code == 404
    assert resp.json() == {"error": "Resume not found"}
    assert lookups[0][1] == resume_id


def test_apply_with_deleted_account(client, auth_headers, monkeypatch):
    def fail(*args):
        raise IntegrityError("INSERT INTO job_applications", {}, FakePgError("23503"))

    monkeypatch.setattr(job_service, "job_exists", lambda job_id: True)
    monkeypatch.setattr(job_service, "apply_to_job", fail)

    resp = client.post(f"/api/jobs/{JOB_ID}/apply", headers=auth_headers)
    assert resp.status_code == 401
    assert resp.json() == {"error": SESSION_EXPIRED_MESSAGE}


def test_applications(client, auth_headers, monkeypatch):
    monkeypatch.setattr(job_service, "list_applications", lambda user_id: [{"id": "a1", "status": "applied"}])
    resp = client.get("/api/jobs/user/applications", headers=auth_headers)
    assert resp.json() == {"applications": [{"id": "a1", "status": "applied"}]}


def test_unexpected_error_is_opaque(error_client, monkeypatch):
    def boom(*args):
        raise RuntimeError("connection refused")

    monkeypatch.setattr(job_service, "list_jobs", boom)
    resp = error_client.get("/api/jobs")
    assert resp.status_code == 500
    assert resp.json() == {"error": "Internal server error"}
