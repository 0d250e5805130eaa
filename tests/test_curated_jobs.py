import threading
import time
from contextlib import contextmanager
from datetime import datetime, timezone

import pytest

from app.data.curated_jobs import CURATED_JOB_SEEDS
from app.services import curated_job_service


class RecordingDB:
    """Records statements; SELECTs find rows only for names/ids listed in `existing`."""

    def __init__(self, existing=()):
        self.existing = set(existing)
        self.statements = []

    def execute(self, statement, params=None):
        sql = " ".join(str(statement).split())
        self.statements.append((sql, params or {}))
        row = None
        if sql.startswith("SELECT id FROM companies"):
            row = ("company-1",) if params["name"] in self.existing else None
        elif sql.startswith("SELECT id FROM jobs"):
            row = ("job-1",) if params["external_id"] in self.existing else None
        return _Result(row)

    def matching(self, prefix):
        return [params for sql, params in self.statements if sql.startswith(prefix)]


class _Result:
    def __init__(self, row):
        self.row = row

    def fetchone(self):
        return self.row


def _patch_db(monkeypatch, db):
    @contextmanager
    def fake_session():
        yield db

    monkeypatch.setattr(curated_job_service, "get_db_session", fake_session)


def test_seed_data_is_well_formed():
    external_ids = [seed["external_id"] for seed in CURATED_JOB_SEEDS]
    assert len(external_ids) == len(set(external_ids)) == 12

    for seed in CURATED_JOB_SEEDS:
        job = seed["job"]
        assert seed["company"]["name"] and seed["company"]["website_url"]
        assert job["title"] and job["location"] and job["description"] and job["application_url"]
        assert job["source"] in ("curated", "dummy")
        assert seed["external_id"].startswith(job["source"])
        assert job["posted_days_ago"] >= 0


def test_seed_inserts_everything_on_empty_database(monkeypatch):
    db = RecordingDB()
    _patch_db(monkeypatch, db)

    assert curated_job_service.seed_curated_jobs() == 12

    inserted_jobs = db.matching("INSERT INTO jobs")
    assert len(inserted_jobs) == 12
    assert len(db.matching("INSERT INTO companies")) == 12
    assert db.matching("UPDATE") == []

    google = inserted_jobs[0]
    assert google["external_id"] == "curated-google-frontend-001"
    age = datetime.now(timezone.utc) - google["posted_date"]
    assert 5.9 < age.total_seconds() / 86400 < 6.1


def test_seed_updates_existing_rows(monkeypatch):
    db = RecordingDB(existing={"Google", "curated-google-frontend-001"})
    _patch_db(monkeypatch, db)

    curated_job_service.seed_curated_jobs()

    company_updates = db.matching("UPDATE companies")
    job_updates = db.matching("UPDATE jobs")
    assert [p["name"] for p in company_updates] == ["Google"]
    assert [p["external_id"] for p in job_updates] == ["curated-google-frontend-001"]
    assert job_updates[0]["company_id"] == "company-1"
    assert len(db.matching("INSERT INTO jobs")) == 11


def test_concurrent_callers_share_one_seed_run(monkeypatch):
    runs = []
    started = threading.Event()
    release = threading.Event()

    def slow_seed():
        runs.append(1)
        started.set()
        release.wait(timeout=5)
        return 12

    monkeypatch.setattr(curated_job_service, "seed_curated_jobs", slow_seed)

    first = threading.Thread(target=curated_job_service.ensure_curated_jobs_seeded)
    first.start()
    assert started.wait(timeout=5)

    second = threading.Thread(target=curated_job_service.ensure_curated_jobs_seeded)
    second.start()
    time.sleep(0.05)
    assert second.is_alive()

    release.set()
    first.join(timeout=5)
    second.join(timeout=5)
    assert runs == [1]

    # Once the run is over the next caller refreshes again
    curated_job_service.ensure_curated_jobs_seeded()
    assert runs == [1, 1]


def test_failed_seed_releases_lock(monkeypatch):
    def broken():
        raise RuntimeError("db down")

    monkeypatch.setattr(curated_job_service, "seed_curated_jobs", broken)
    with pytest.raises(RuntimeError):
        curated_job_service.ensure_curated_jobs_seeded()
    assert not curated_job_service._seed_lock.locked()
