from __future__ import annotations

from datetime import date
from typing import Optional, Protocol


class JobRunRepository(Protocol):
    def get_last_run_date(self, job_name: str) -> Optional[date]:
        raise NotImplementedError

    def set_last_run_date(self, job_name: str, run_date: date) -> None:
        raise NotImplementedError
