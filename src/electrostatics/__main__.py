# MIT License (see LICENSE)
"""
Run the worked examples.

    python -m electrostatics

Takes no arguments; prints every default scenario and exits with status 0.
"""
from __future__ import annotations

from .logging_config import setup_logging
from .report import print_scenarios
from .scenarios import DEFAULT_SCENARIOS


def main() -> int:
    setup_logging()
    print_scenarios(DEFAULT_SCENARIOS)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
