from __future__ import annotations

import os
from dataclasses import asdict, replace
from datetime import date, datetime, time
from typing import Mapping, Optional

import pytest

os.environ["APP_ENV"] = "testing"

from front_desk.container import Container
from front_desk.dashboard.controller import SESSION_FLAG
from front_desk.main import create_app
from front_desk.sweeps.service import AutoSignOutSweep
from front_desk.visitors.model import NewVisitor, Visitor
from front_desk.visitors.service import VisitorService


class InMemoryVisitors:
    def __init__(self, visitors: tuple[Visitor, ...] = ()):
        self._rows: dict[int, Visitor] = {v.id: v for v in visitors}
        self._id = max(self._rows, default=0)

    def list_all(self):
        return sorted(self._rows.values(), key=lambda v: v.id, reverse=True)

    def get_by_id(self, visitor_id: int) -> Optional[Visitor]:
        return self._rows.get(int(visitor_id))

    def search_by_name(self, term: str):
        needle = term.lower()
        return [
            v
            for v in self.list_all()
            if needle in v.name.lower() or needle in v.surname.lower() or needle in v.full_name.lower()
        ]

    def create(self, visitor: NewVisitor) -> Visitor:
        self._id += 1
        rec = Visitor(id=self._id, **asdict(visitor))
        self._rows[rec.id] = rec
        return rec

    def update_fields(self, visitor_id: int, fields: Mapping[str, object]) -> Optional[Visitor]:
        current = self._rows.get(int(visitor_id))
        if not current:
            return None
        updated = replace(current, **fields)
        self._rows[updated.id] = updated
        return updated

    def delete(self, visitor_id: int) -> bool:
        return self._rows.pop(int(visitor_id), None) is not None

    def sign_out_all_open(self, *, time_out: str) -> int:
        count = 0
        for v in list(self._rows.values()):
            if v.time_in and not v.time_out:
                self._rows[v.id] = replace(v, time_out=time_out)
                count += 1
        return count


class InMemoryJobRuns:
    def __init__(self):
        self.last_runs: dict[str, date] = {}

    def get_last_run_date(self, job_name: str) -> Optional[date]:
        return self.last_runs.get(job_name)

    def set_last_run_date(self, job_name: str, run_date: date) -> None:
        self.last_runs[job_name] = run_date


class FakeConn:
    def __init__(self, healthy: bool = True):
        self.healthy = healthy

    def ping(self) -> bool:
        if not self.healthy:
            raise ConnectionError("database unreachable")
        return True


@pytest.fixture
def fixed_now() -> datetime:
    return datetime(2026, 2, 2, 9, 30, 0)


@pytest.fixture
def visitors_repo() -> InMemoryVisitors:
    return InMemoryVisitors()


@pytest.fixture
def job_runs_repo() -> InMemoryJobRuns:
    return InMemoryJobRuns()


@pytest.fixture
def visitor_service(visitors_repo, fixed_now) -> VisitorService:
    return VisitorService(visitors_repo, clock=lambda: fixed_now)


@pytest.fixture
def container(visitors_repo, job_runs_repo, visitor_service, fixed_now) -> Container:
    return Container(
        conn=FakeConn(),
        visitors_repo=visitors_repo,
        job_runs_repo=job_runs_repo,
        visitor_service=visitor_service,
        auto_signout_sweep=AutoSignOutSweep(
            visitors_repo, job_runs_repo, trigger=time(15, 45), clock=lambda: fixed_now
        ),
    )


@pytest.fixture
def app(container):
    return create_app(container=container)


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def admin_client(client):
    with client.session_transaction() as sess:
        sess[SESSION_FLAG] = True
    return client
