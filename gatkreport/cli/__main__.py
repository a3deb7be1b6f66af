from __future__ import annotations

import argparse
import sys
from pathlib import Path

from gatkreport.codec.writer import write_report
from gatkreport.config.loader import ConfigError, ReportConfig, load_config
from gatkreport.errors import ReportError
from gatkreport.logging.error_log import ErrorLogBuffer
from gatkreport.logging.init import log_summary, set_level, setup_logging
from gatkreport.models.error_record import ErrorRecord
from gatkreport.services.gather import GatherError, error_type_of, gather_reports, read_report_file
from gatkreport.services.summary import render_summary_line

"""CLI entrypoint.

Subcommands:
- gather: merge shard report files into one report file
- inspect: print the tables of one or more report files

Exit codes: 0 success, 1 fatal (bad config, gather failure), 2 when inspect
could not read one or more files.
"""

EXIT_SUCCESS_ALL = 0
EXIT_FATAL = 1
EXIT_PARTIAL_FAILURE = 2


def _parse_args(argv: list[str]) -> argparse.Namespace:
    p = argparse.ArgumentParser(prog="gatkreport", description="Report table gather / inspect tool")
    p.add_argument("--debug", action="store_true", help="Enable debug logging")
    p.add_argument("--config", type=Path, default=None, help="Settings file (default: config/gatkreport.yml)")
    sub = p.add_subparsers(dest="command", required=True)

    g = sub.add_parser("gather", help="Concatenate shard reports into one report")
    g.add_argument("-o", "--output", type=Path, required=True, help="Merged report file")
    g.add_argument("shards", nargs="+", type=Path, help="Shard report files, in merge order")

    i = sub.add_parser("inspect", help="Print table names, shapes and columns")
    i.add_argument("files", nargs="+", type=Path, help="Report files")
    return p.parse_args(argv)


def _gather(args: argparse.Namespace, cfg: ReportConfig, error_log: ErrorLogBuffer) -> int:
    logger = setup_logging()
    try:
        report, result = gather_reports(args.shards, cfg, error_log)
    except GatherError as e:
        logger.error(f"gather: {e}")
        return EXIT_FATAL

    args.output.parent.mkdir(parents=True, exist_ok=True)
    try:
        with args.output.open("w", encoding="utf-8") as out:
            write_report(report, out)
    except (OSError, ReportError) as e:
        logger.error(f"write: {e}")
        error_log.append(ErrorRecord.create(str(args.output), "", -1, "WRITE_ERROR", str(e)))
        return EXIT_FATAL

    logger.info(f"wrote {args.output}")
    log_summary(render_summary_line(result)[len("SUMMARY "):])
    return EXIT_SUCCESS_ALL


def _inspect(args: argparse.Namespace, cfg: ReportConfig, error_log: ErrorLogBuffer) -> int:
    logger = setup_logging()
    failed = 0
    for path in args.files:
        try:
            report = read_report_file(path, strict=cfg.strict_parsing)
        except (OSError, ReportError) as e:
            failed += 1
            logger.error(f"{path}: {e}")
            line = getattr(e, "line", -1)
            error_log.append(ErrorRecord.create(str(path), "", line, error_type_of(e), str(e)))
            continue
        print(f"FILE: {path.name} tables={len(report)}")
        for table in report.tables:
            print(f"  TABLE: {table.name} rows={table.num_rows} cols={table.num_columns} desc={table.description!r}")
            for column in table.columns:
                print(f"    {column.name} {column.fmt} {column.data_type}")

    return EXIT_PARTIAL_FAILURE if failed else EXIT_SUCCESS_ALL


def main(argv: list[str] | None = None) -> int:
    logger = setup_logging()

    # None only: an empty list from tests must not pick up pytest's own argv
    if argv is None:
        argv = sys.argv[1:]
    args = _parse_args(argv)

    try:
        cfg = load_config(args.config)
    except ConfigError as e:
        logger.error(f"config: {e}")
        return EXIT_FATAL

    set_level("DEBUG" if args.debug else cfg.log_level)
    logger.debug("debug mode enabled")

    error_log = ErrorLogBuffer(Path(cfg.error_log_dir))
    if args.command == "gather":
        code = _gather(args, cfg, error_log)
    else:
        code = _inspect(args, cfg, error_log)

    log_path = error_log.flush()
    if log_path is not None:
        logger.info(f"error log: {log_path}")
    return code


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
