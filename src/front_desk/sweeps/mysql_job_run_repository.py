from __future__ import annotations

from datetime import date
from typing import Optional

from ..common.datetime_utils import format_date, parse_iso_date
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchone
from .repository import JobRunRepository


class MySQLJobRunRepository(JobRunRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_last_run_date(self, job_name: str) -> Optional[date]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT last_run_date FROM job_runs WHERE job_name=%s", (job_name,))
            r = fetchone(cur)
            return parse_iso_date(r["last_run_date"]) if r else None

    def set_last_run_date(self, job_name: str, run_date: date) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO job_runs(job_name, last_run_date)
                VALUES(%s,%s)
                ON DUPLICATE KEY UPDATE last_run_date=VALUES(last_run_date)
                """,
                (job_name, format_date(run_date)),
            )
