"""CLI entrypoints for reactrefactor commands."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from .config import CONFIG_FILENAME, default_config, resolve_config_path, save_config
from .logging import configure_logging
from .orchestrator import RefactorTool
from .refactor import FormatterError, RefactorError
from .report import OUTPUT_FORMATS, check_format, render_report


def _add_log_options(
    parser: argparse.ArgumentParser, *, suppress_default: bool = False
) -> None:
    default: object = argparse.SUPPRESS if suppress_default else False
    group = parser.add_mutually_exclusive_group()
    group.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        default=default,
        help="Increase log verbosity for troubleshooting.",
    )
    group.add_argument(
        "-q",
        "--quiet",
        action="store_true",
        default=default,
        help="Only log warnings and errors.",
    )


def _add_analysis_options(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("path", help="Path to the React project root.")
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help=f"Path to a config file (defaults to <path>/{CONFIG_FILENAME}).",
    )
    parser.add_argument(
        "--format",
        dest="output_format",
        choices=OUTPUT_FORMATS,
        default="json",
        help="Report format (default: json).",
    )
    parser.add_argument(
        "--log-file",
        type=Path,
        default=None,
        help="Also write debug logs to this file.",
    )


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="reactrefactor",
        description="Analyze React components and apply mechanical refactorings.",
        epilog="Example: reactrefactor refactor ./my-react-app --config ./config.yml",
    )
    _add_log_options(parser)
    subparsers = parser.add_subparsers(dest="command", required=True)

    analyze_parser = subparsers.add_parser(
        "analyze",
        help="Report suggestions without modifying any file.",
    )
    _add_log_options(analyze_parser, suppress_default=True)
    _add_analysis_options(analyze_parser)

    refactor_parser = subparsers.add_parser(
        "refactor",
        help="Report suggestions, rewrite components in place and run prettier.",
    )
    _add_log_options(refactor_parser, suppress_default=True)
    _add_analysis_options(refactor_parser)
    refactor_parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Run analysis without applying changes.",
    )
    refactor_parser.add_argument(
        "--skip-format",
        action="store_true",
        help="Do not run the external formatter after rewriting.",
    )

    init_parser = subparsers.add_parser(
        "init-config",
        help="Write the default configuration file.",
    )
    _add_log_options(init_parser, suppress_default=True)
    init_parser.add_argument(
        "path",
        nargs="?",
        default=".",
        help=f"Target file or directory (defaults to ./{CONFIG_FILENAME}).",
    )
    init_parser.add_argument(
        "--force",
        action="store_true",
        help="Overwrite an existing configuration file.",
    )

    return parser


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint for reactrefactor commands."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    configure_logging(
        verbose=bool(args.verbose),
        quiet=bool(args.quiet),
        log_file=getattr(args, "log_file", None),
    )

    if args.command == "init-config":
        _run_init_config(parser, args)
    elif args.command in {"analyze", "refactor"}:
        _run_pipeline(parser, args)
    else:  # pragma: no cover - argparse enforces choices
        parser.exit(1, "Unknown command\n")


def _run_init_config(parser: argparse.ArgumentParser, args: argparse.Namespace) -> None:
    target = resolve_config_path(Path(args.path))
    if target.exists() and not args.force:
        parser.exit(1, f"Config file already exists: {target} (use --force to overwrite)\n")
    try:
        written = save_config(default_config(), target)
    except OSError as exc:
        parser.exit(1, f"reactrefactor init-config failed: {exc}\n")
    print(f"Default configuration written to {written}")


def _run_pipeline(parser: argparse.ArgumentParser, args: argparse.Namespace) -> None:
    try:
        fmt = check_format(args.output_format)
    except ValueError as exc:
        parser.exit(2, f"{exc}\n")

    project_path = Path(args.path)
    if not project_path.exists():
        parser.exit(1, f"Project path does not exist: {args.path}\n")

    tool = RefactorTool(project_path)
    tool.load_config(args.config if args.config is not None else project_path)

    try:
        report = tool.analyze_project()
    except (FileNotFoundError, NotADirectoryError) as exc:
        parser.exit(1, f"{exc}\n")
    except OSError as exc:
        parser.exit(1, f"Error finding React files: {exc}\n")

    sys.stdout.write(render_report(report, fmt))

    if args.command == "analyze" or args.dry_run:
        return

    try:
        tool.apply_refactoring(run_formatter=not args.skip_format)
    except RefactorError as exc:
        parser.exit(1, f"Error applying refactoring: {exc}\n")
    except FormatterError as exc:
        parser.exit(1, f"Error applying refactoring: error formatting code: {exc}\n")
    print("\nRefactoring completed successfully!")


if __name__ == "__main__":
    main(sys.argv[1:])
