from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any

from pydantic import ValidationError
from shared.config.loader import load_app_settings, load_writer_config
from shared.contracts.v1.results import QueryResult
from shared.errors import ConfigurationError, ProcessLaunchError

from apps.gmetric_writer.compose import build_writer


def _parse_results(text: str) -> list[QueryResult]:
    """Accept a JSON array of results, or one result object per line."""
    stripped = text.strip()
    if not stripped:
        return []
    raw: list[Any]
    if stripped.startswith("["):
        raw = json.loads(stripped)
    else:
        raw = [json.loads(line) for line in stripped.splitlines() if line.strip()]
    return [QueryResult.model_validate(r) for r in raw]


def _read_input(path: str) -> str:
    if path == "-":
        return sys.stdin.read()
    return Path(path).read_text("utf-8")


def main(argv: list[str] | None = None) -> int:
    ap = argparse.ArgumentParser(prog="gmetric-writer")
    ap.add_argument(
        "--input", default="-", help="JSON query results (array or JSON lines); '-' for stdin."
    )
    ap.add_argument("--profile", default=None, help="Config profile under configs/profiles/.")
    ap.add_argument("--dry-run", action="store_true", help="Print gmetric commands, run nothing.")
    ap.add_argument("--quiet", action="store_true", help="Reduce console output.")
    args = ap.parse_args(argv)

    try:
        settings = load_app_settings(profile=args.profile)
        logging.basicConfig(
            level=settings.log_level,
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        )
        config = load_writer_config(profile=args.profile)
    except (ConfigurationError, ValidationError, RuntimeError, ValueError) as ex:
        # RuntimeError: unparsable profile TOML
        print(f"[gmetric] config error: {ex}", file=sys.stderr)
        return 2

    if args.dry_run:
        settings = settings.model_copy(update={"runner_impl": "dryrun"})

    try:
        results = _parse_results(_read_input(args.input))
    except (OSError, UnicodeDecodeError, json.JSONDecodeError, ValidationError) as ex:
        print(f"[gmetric] bad input: {ex}", file=sys.stderr)
        return 2

    writer = build_writer(settings, config)
    if not args.quiet:
        print(
            f"[gmetric] runner_impl={settings.runner_impl} "
            f"gmetric_path={config.gmetric_path} results={len(results)}",
            file=sys.stderr,
        )

    try:
        summary = writer.write(results)
    except ProcessLaunchError as ex:
        print(f"[gmetric] {ex}", file=sys.stderr)
        return 1

    if not args.quiet:
        print(
            f"[gmetric] submitted={summary.succeeded} failed={summary.failed} "
            f"skipped={summary.skipped}",
            file=sys.stderr,
        )
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
