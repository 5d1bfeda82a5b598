#!/usr/bin/env python3
"""
Titan Security drill console

Builds a hub from configuration, prints the initial report, runs the
standard drills and prints the final report after the fire drill, ahead
of the Day mode drill.

Usage:
    python -m titan_security
    # or
    titan-security --log-file /tmp/alarms.txt --legacy-arming
"""

import argparse
import logging
import sys
from typing import Optional, Sequence

from . import __version__
from .config import load_config
from .domain.enums import ArmingPolicy
from .services.drill_runner import DrillRunner, STANDARD_DRILLS
from .services.output_sinks import OperatorConsole
from .services.security_hub import SecurityHub
from .utils.logging import setup_logging

log = logging.getLogger(__name__)


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Titan Security drill console")
    parser.add_argument("--config", help="Path to JSON config file")
    parser.add_argument("--log-file", help="Alarm log destination (overrides config)")
    parser.add_argument("--legacy-arming", action="store_true",
                        help="Keep the system armed after leaving Away (v1.0 behaviour)")
    parser.add_argument("--strict-index", action="store_true",
                        help="Fail on out-of-range simulated sensor input")
    parser.add_argument("--log-level", help="Diagnostic log level (overrides config)")
    return parser.parse_args(argv)


def run(args: argparse.Namespace, console: OperatorConsole) -> int:
    config = load_config(
        args.config,
        log_path=args.log_file,
        arming_policy=ArmingPolicy.LATCHING if args.legacy_arming else None,
        strict_sensor_index=True if args.strict_index else None,
        log_level=args.log_level,
    )
    setup_logging(config.log_level)

    hub = SecurityHub.from_config(config, console=console)

    console.line(f"--- Titan Security System v{__version__} ---")
    console.line()
    console.line("[INITIAL STATE]")
    hub.generate_report()

    runner = DrillRunner(hub)
    # Report once the fire drill is done, before the switch to Day mode
    results = runner.run_all(STANDARD_DRILLS[:-1])

    console.line()
    console.line("[FINAL STATE]")
    hub.generate_report()

    results += runner.run_all(STANDARD_DRILLS[-1:])

    console.line()
    failed = [r for r in results if not r.passed]
    for r in results:
        console.line(f"Drill {r.case_id}: {'PASS' if r.passed else 'FAIL'}")
        for failure in r.failures:
            console.line(f"    {failure}")
    console.line("--- System Test Complete ---")

    if failed:
        log.error("%d of %d drills failed", len(failed), len(results))
        return 1
    return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = parse_args(argv)
    console = OperatorConsole()
    try:
        return run(args, console)
    except Exception as e:
        console.line(f"CRITICAL ERROR: {e}")
        log.exception("Unhandled error during startup")
        return 1


if __name__ == "__main__":
    sys.exit(main())
