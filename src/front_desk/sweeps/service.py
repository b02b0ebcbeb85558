from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime, time
from typing import Callable, Optional

from ..common.datetime_utils import format_time, now_local
from ..core.constants import AUTO_SIGNOUT_JOB
from ..visitors.repository import VisitorRepository
from .repository import JobRunRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SweepResult:
    ran: bool
    signed_out: int = 0


class AutoSignOutSweep:
    """End-of-day pass that signs out every visitor still checked in.

    Runs at most once per calendar day; the last run date is persisted so a
    restart neither repeats nor skips the day's pass.
    """

    def __init__(
        self,
        visitors: VisitorRepository,
        runs: JobRunRepository,
        *,
        trigger: time,
        job_name: str = AUTO_SIGNOUT_JOB,
        clock: Callable[[], datetime] = now_local,
    ):
        self._visitors = visitors
        self._runs = runs
        self._trigger = trigger.replace(second=0, microsecond=0)
        self._job_name = job_name
        self._clock = clock

    @property
    def trigger(self) -> time:
        return self._trigger

    def is_due(self, now: datetime) -> bool:
        if (now.hour, now.minute) < (self._trigger.hour, self._trigger.minute):
            return False
        return self._runs.get_last_run_date(self._job_name) != now.date()

    def run_if_due(self, now: Optional[datetime] = None) -> SweepResult:
        now = now or self._clock()
        if not self.is_due(now):
            return SweepResult(ran=False)

        count = self._visitors.sign_out_all_open(time_out=format_time(now))
        self._runs.set_last_run_date(self._job_name, now.date())
        logger.info("Auto sign-out at %s closed %d visit(s)", now.strftime("%Y-%m-%d %H:%M"), count)
        return SweepResult(ran=True, signed_out=count)
