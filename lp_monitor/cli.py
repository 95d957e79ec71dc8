"""``lp-monitor`` command line: one report, or a report rewritten on a timer."""
from __future__ import annotations

import argparse
import asyncio
import sys

from .config import load_config
from .logging_setup import configure_logging
from .services import Monitor

EPILOG = (
    "Settings come from config.yaml; ${VAR} references in it are filled from "
    "the environment or a .env file (ADDRESS, RPC_URL, CMC_API_KEY, "
    "COMPARE_TOKEN, FILE)."
)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="lp-monitor",
        description=(
            "Value a wallet's Uniswap V3 positions and uncollected fees in a "
            "reference currency and write them to a report file."
        ),
        epilog=EPILOG,
    )
    parser.add_argument(
        "--config",
        metavar="PATH",
        default=None,
        help="settings file to read instead of the bundled config.yaml",
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="verbosity of the log on stderr (default: %(default)s)",
    )

    sub = parser.add_subparsers(dest="command", metavar="{report,monitor}")
    sub.add_parser("report", help="value every position once, write the file, exit")

    loop = sub.add_parser(
        "monitor", help="rewrite the report file until interrupted or a read fails"
    )
    loop.add_argument(
        "interval",
        nargs="?",
        type=float,
        default=None,
        metavar="SECONDS",
        help="pause between reports (default: report.refresh_interval_seconds)",
    )
    return parser


async def _run(args: argparse.Namespace) -> None:
    configure_logging(args.log_level)
    monitor = Monitor(load_config(args.config))

    if args.command == "monitor":
        await monitor.run_continuous(args.interval)
    else:
        await monitor.run_once()


def main() -> None:
    parser = build_parser()
    args = parser.parse_args()

    if args.command is None:
        parser.print_help()
        sys.exit(1)

    asyncio.run(_run(args))
