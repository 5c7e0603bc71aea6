"""CLI entrypoint for the Bristol green-space catalogue."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from greenspace.catalogue import ParkCatalogue
from greenspace.common.config_loader import load_all_configs
from greenspace.common.constants import ALL_FACET, EXIT_FALLBACK, EXIT_HARD_FAIL, EXIT_SUCCESS
from greenspace.common.errors import GreenspaceError
from greenspace.common.fs import dump_json, write_text
from greenspace.common.http import HttpClient
from greenspace.common.ids import generate_run_id
from greenspace.common.logging import build_logger, log_event

COMMANDS = ("load", "search", "facets", "stats", "export")


def parse_args(argv: list[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("command", choices=COMMANDS)
    parser.add_argument("--source", default=None, help="CSV path or URL; defaults to the configured dataset")
    parser.add_argument("--search", default="")
    parser.add_argument("--facet", default=ALL_FACET)
    parser.add_argument("--pages", type=int, default=1, help="number of pages to reveal for search")
    parser.add_argument("--output", default=None, help="write export CSV here instead of stdout")
    parser.add_argument("--config-dir", default="./config")
    parser.add_argument("--overlay-config-dir", default=None)
    parser.add_argument("--log-dir", default=None)
    parser.add_argument("--run-id", default=None)
    parser.add_argument("--log-level", default="INFO", choices=["DEBUG", "INFO", "WARN", "ERROR"])
    return parser.parse_args(argv)


def render(command: str, catalogue: ParkCatalogue, args: argparse.Namespace) -> str:
    snapshot = catalogue.snapshot
    if command == "load":
        return dump_json(
            {
                "source": snapshot.source if snapshot else None,
                "used_fallback": snapshot.used_fallback if snapshot else False,
                "parks": [park.to_dict() for park in catalogue.parks],
            }
        )
    if command == "facets":
        return dump_json([facet.to_dict() for facet in catalogue.facets])
    if command == "stats":
        return dump_json(catalogue.stats.to_dict())
    if command == "search":
        for _ in range(max(args.pages, 1) - 1):
            catalogue.load_more()
        return dump_json(
            {
                "search": args.search,
                "facet": args.facet,
                "total": catalogue.filtered_count,
                "visible_count": catalogue.query_state.visible_count,
                "has_more": catalogue.has_more,
                "parks": [park.to_dict() for park in catalogue.visible()],
            }
        )
    if command == "export":
        return catalogue.export_csv()
    raise ValueError(f"Unknown command: {command}")


def run_command(args: argparse.Namespace, stdout=None) -> int:
    stdout = stdout or sys.stdout
    run_id = args.run_id or generate_run_id()
    config_dir = Path(args.config_dir)
    overlay_config_dir = Path(args.overlay_config_dir) if args.overlay_config_dir else None
    log_dir = Path(args.log_dir) if args.log_dir else None

    logger = build_logger(run_id, log_dir=log_dir, level=args.log_level)
    try:
        bundle = load_all_configs(config_dir, overlay_config_dir=overlay_config_dir)
    except GreenspaceError as exc:
        log_event(logger, f"config failed: {exc}", run_id=run_id, stage="config", event="CONFIG_FAIL", status="error", error_code=exc.error_code)
        return EXIT_HARD_FAIL

    with HttpClient() as client:
        catalogue = ParkCatalogue(bundle=bundle, client=client, logger=logger, run_id=run_id)
        catalogue.reload(args.source)

    catalogue.set_search(args.search)
    catalogue.set_facet(args.facet)

    output = render(args.command, catalogue, args)
    if args.command == "export" and args.output:
        write_text(Path(args.output), output)
    else:
        stdout.write(output)
        if not output.endswith("\n"):
            stdout.write("\n")

    snapshot = catalogue.snapshot
    if snapshot is not None and snapshot.used_fallback:
        return EXIT_FALLBACK
    return EXIT_SUCCESS


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv if argv is not None else sys.argv[1:])
    try:
        return run_command(args)
    except GreenspaceError:
        return EXIT_HARD_FAIL


if __name__ == "__main__":
    raise SystemExit(main())
