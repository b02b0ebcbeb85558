from __future__ import annotations

import logging
import time as _time
from typing import Callable, Optional

from ..core.constants import DEFAULT_SWEEP_POLL_SECONDS
from .service import AutoSignOutSweep, SweepResult

logger = logging.getLogger(__name__)


def run_once(sweep: AutoSignOutSweep) -> SweepResult:
    return sweep.run_if_due()


def run_forever(
    sweep: AutoSignOutSweep,
    *,
    interval_seconds: int = DEFAULT_SWEEP_POLL_SECONDS,
    sleep: Callable[[float], None] = _time.sleep,
    max_ticks: Optional[int] = None,
) -> None:
    """Poll the sweep once per interval until interrupted.

    A failed tick is logged and polling continues; the run date is only
    persisted after a successful pass, so the day stays due.
    """
    logger.info("Auto sign-out runner started (trigger %s)", sweep.trigger.strftime("%H:%M"))
    ticks = 0
    while max_ticks is None or ticks < max_ticks:
        ticks += 1
        try:
            sweep.run_if_due()
        except Exception:
            logger.exception("Auto sign-out tick failed")
        sleep(interval_seconds)
