#!/usr/bin/env python3
"""
Trigger webhook events by replaying fixed API call chains

Usage:
  python -m scripts.trigger list
  python -m scripts.trigger [--scenarios-dir <dir>] trigger <event>
  python -m scripts.trigger resend <event_id>
  python -m scripts.trigger webhooks

Examples:
  python -m scripts.trigger trigger charge.captured
  python -m scripts.trigger resend evt_1HAbCdEfGh
  STRIPE_API_KEY=sk_test_... python -m scripts.trigger --log-level DEBUG trigger invoice.payment_failed

Credentials come from STRIPE_API_KEY / STRIPE_API_BASE / STRIPE_API_VERSION /
STRIPE_PROFILE, read from the environment or a .env file.
"""
from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import List, Optional

from application.ports.logger import LoggerPort
from application.trigger_engine import TriggerEngine
from domain.exceptions import TriggerError
from infrastructure.config.env_credentials import EnvCredentialsProvider
from infrastructure.http.requests_executor import RequestsApiExecutor
from infrastructure.logging.console_logger import ConsoleLogger
from infrastructure.logging.log_setup import setup_console_logging
from infrastructure.logging.loguru_logger import LoguruLogger
from infrastructure.scenario.catalog import ScenarioCatalog
from infrastructure.scenario.yaml_loader import ScenarioLoadError

DEFAULT_TIMEOUT_SEC = 30


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Trigger webhook events for local testing")
    parser.add_argument("--log-level", type=str, default="INFO")
    parser.add_argument("--log-format", type=str, choices=["text", "json"], default="text")
    parser.add_argument("--scenarios-dir", type=str)
    parser.add_argument("--env-file", type=str)
    parser.add_argument("--timeout-sec", type=int, default=DEFAULT_TIMEOUT_SEC)
    subparsers = parser.add_subparsers(dest="command")

    subparsers.add_parser("list", help="List supported trigger events")

    trigger_parser = subparsers.add_parser("trigger", help="Trigger one event")
    trigger_parser.add_argument("event", type=str)

    resend_parser = subparsers.add_parser("resend", help="Resend a delivered event")
    resend_parser.add_argument("event_id", type=str)

    subparsers.add_parser("webhooks", help="List webhook endpoints on the account")

    return parser


def _build_logger(args: argparse.Namespace) -> LoggerPort:
    if args.log_format == "json":
        return ConsoleLogger(level=args.log_level)
    setup_console_logging(level=args.log_level)
    return LoguruLogger()


def _build_catalog(args: argparse.Namespace) -> ScenarioCatalog:
    return ScenarioCatalog(Path(args.scenarios_dir) if args.scenarios_dir else None)


def _build_engine(args: argparse.Namespace, catalog: ScenarioCatalog) -> TriggerEngine:
    env_path = Path(args.env_file) if args.env_file else None
    credentials = EnvCredentialsProvider(env_path=env_path).get()
    return TriggerEngine(
        credentials=credentials,
        executor=RequestsApiExecutor(timeout_sec=args.timeout_sec),
        catalog=catalog,
        logger=_build_logger(args),
    )


def _list(catalog: ScenarioCatalog) -> int:
    names = catalog.names()
    print("Supported events:")
    for name in names:
        print(f"  {name}")
    return 0


def _trigger(args: argparse.Namespace, catalog: ScenarioCatalog) -> int:
    engine = _build_engine(args, catalog)
    print(f"Setting up fixture for: {args.event}")
    engine.trigger(args.event)
    print("Trigger succeeded! Check dashboard for event details.")
    return 0


def _resend(args: argparse.Namespace, catalog: ScenarioCatalog) -> int:
    engine = _build_engine(args, catalog)
    engine.resend_event(args.event_id)
    print(f"Resent event: {args.event_id}")
    return 0


def _webhooks(args: argparse.Namespace, catalog: ScenarioCatalog) -> int:
    engine = _build_engine(args, catalog)
    endpoints = engine.webhook_endpoints_list()
    print(json.dumps(endpoints.model_dump(), indent=2, ensure_ascii=False))
    return 0


def main(argv: Optional[List[str]] = None) -> None:
    parser = _build_parser()
    args = parser.parse_args(sys.argv[1:] if argv is None else argv)

    if not args.command:
        parser.print_help()
        sys.exit(1)

    catalog = _build_catalog(args)
    try:
        if args.command == "list":
            exit_code = _list(catalog)
        elif args.command == "trigger":
            exit_code = _trigger(args, catalog)
        elif args.command == "resend":
            exit_code = _resend(args, catalog)
        elif args.command == "webhooks":
            exit_code = _webhooks(args, catalog)
        else:
            raise ValueError(f"Unknown command: {args.command}")
    except TriggerError as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        sys.exit(1)
    except (ScenarioLoadError, ValueError) as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        sys.exit(2)
    sys.exit(exit_code)


if __name__ == "__main__":
    main()
