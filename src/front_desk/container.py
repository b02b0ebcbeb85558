from __future__ import annotations

from dataclasses import dataclass

from .common.datetime_utils import parse_clock
from .core.constants import DEFAULT_AUTO_SIGNOUT_TIME
from .database.connection import DBConfig, DatabaseConnection
from .sweeps.mysql_job_run_repository import MySQLJobRunRepository
from .sweeps.service import AutoSignOutSweep
from .visitors.mysql_visitor_repository import MySQLVisitorRepository
from .visitors.service import VisitorService


@dataclass(frozen=True)
class Container:
    conn: DatabaseConnection

    visitors_repo: MySQLVisitorRepository
    job_runs_repo: MySQLJobRunRepository

    visitor_service: VisitorService
    auto_signout_sweep: AutoSignOutSweep


def build_container(*, db_config: dict, auto_signout_time: str = DEFAULT_AUTO_SIGNOUT_TIME) -> Container:
    conn = DatabaseConnection.get_instance(DBConfig.from_dict(db_config))

    visitors_repo = MySQLVisitorRepository(conn)
    job_runs_repo = MySQLJobRunRepository(conn)

    visitor_service = VisitorService(visitors_repo)
    auto_signout_sweep = AutoSignOutSweep(
        visitors_repo,
        job_runs_repo,
        trigger=parse_clock(auto_signout_time),
    )

    return Container(
        conn=conn,
        visitors_repo=visitors_repo,
        job_runs_repo=job_runs_repo,
        visitor_service=visitor_service,
        auto_signout_sweep=auto_signout_sweep,
    )
