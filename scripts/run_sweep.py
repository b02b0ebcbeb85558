"""Run the end-of-day auto sign-out.

Polls once a minute by default; ``--once`` checks a single time (for cron).
"""

from __future__ import annotations

import argparse

from front_desk.container import build_container
from front_desk.core.constants import DEFAULT_AUTO_SIGNOUT_TIME, DEFAULT_SWEEP_POLL_SECONDS
from front_desk.main import configure_logging, load_settings
from front_desk.sweeps.runner import run_forever, run_once


def main() -> None:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--once", action="store_true", help="check once and exit")
    parser.add_argument("--interval", type=int, default=DEFAULT_SWEEP_POLL_SECONDS, help="poll interval in seconds")
    args = parser.parse_args()

    settings = load_settings()
    configure_logging(getattr(settings, "LOG_LEVEL", "INFO"))
    container = build_container(
        db_config=dict(settings.DB_CONFIG),
        auto_signout_time=getattr(settings, "AUTO_SIGNOUT_TIME", DEFAULT_AUTO_SIGNOUT_TIME),
    )

    if args.once:
        result = run_once(container.auto_signout_sweep)
        print(f"ran={result.ran} signed_out={result.signed_out}")
        return

    try:
        run_forever(container.auto_signout_sweep, interval_seconds=args.interval)
    except KeyboardInterrupt:
        pass


if __name__ == "__main__":
    main()
