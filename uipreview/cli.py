"""CLI entrypoints for uipreview commands."""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

from .config import ConfigError, PreviewConfig, load_config
from .logging import configure_logging, get_logger
from .prompting import RepairPromptBuilder, strip_code_fences
from .transform import SourceTransformer
from .validators import validate_source


def _add_logging_options(
    parser: argparse.ArgumentParser, *, suppress_default: bool = False
) -> None:
    verbose_default: object = argparse.SUPPRESS if suppress_default else False
    log_file_default: object = argparse.SUPPRESS if suppress_default else None
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        default=verbose_default,
        help="Increase log verbosity for troubleshooting.",
    )
    parser.add_argument(
        "--log-file",
        type=Path,
        default=log_file_default,
        help="Also write DEBUG-level logs to this file.",
    )


def _add_source_options(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "source",
        help="Path to the component source file, or '-' to read from stdin.",
    )
    parser.add_argument(
        "--config",
        default=None,
        help="Path to .uipreview.yml or its directory (defaults to the current directory).",
    )
    parser.add_argument(
        "--strip-fences",
        action="store_true",
        help="Remove markdown code fences around generated code before processing.",
    )


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="uipreview",
        description="Build sandboxed previews of generated React components and lint them.",
    )
    _add_logging_options(parser)
    subparsers = parser.add_subparsers(dest="command", required=True)

    build_parser = subparsers.add_parser(
        "build",
        help="Transform a component into a standalone preview document.",
    )
    _add_logging_options(build_parser, suppress_default=True)
    _add_source_options(build_parser)
    build_parser.add_argument(
        "-o",
        "--output",
        default=None,
        help="Write the document to this file instead of stdout.",
    )

    check_parser = subparsers.add_parser(
        "check",
        help="Run the static validator over a component.",
    )
    _add_logging_options(check_parser, suppress_default=True)
    _add_source_options(check_parser)
    check_parser.add_argument(
        "--json",
        action="store_true",
        help="Print the result as JSON.",
    )

    repair_parser = subparsers.add_parser(
        "repair-prompt",
        help="Print the auto-repair prompt for the validator findings.",
    )
    _add_logging_options(repair_parser, suppress_default=True)
    _add_source_options(repair_parser)

    serve_parser = subparsers.add_parser(
        "serve",
        help="Run the HTTP service.",
    )
    _add_logging_options(serve_parser, suppress_default=True)
    serve_parser.add_argument("--host", default="127.0.0.1", help="Interface to bind.")
    serve_parser.add_argument("--port", type=int, default=8000, help="Port to listen on.")
    serve_parser.add_argument(
        "--config",
        default=None,
        help="Path to .uipreview.yml or its directory (defaults to the current directory).",
    )

    return parser


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint for uipreview commands."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    configure_logging(verbose=bool(args.verbose), log_file=args.log_file)
    logger = get_logger("cli")

    try:
        config = _load(args.config)
    except ConfigError as exc:
        parser.exit(1, f"{exc}\n")

    if args.command == "serve":
        from .service import run_service

        run_service(host=args.host, port=args.port, config=config)
        return

    try:
        source = _read_source(args.source)
    except OSError as exc:
        parser.exit(1, f"Cannot read {args.source}: {exc}\n")
    if args.strip_fences:
        source = strip_code_fences(source)

    if args.command == "build":
        artifact = SourceTransformer(config).transform(source)
        if args.output:
            Path(args.output).write_text(artifact.document, encoding="utf-8")
            logger.info("Preview written to %s", args.output)
        else:
            sys.stdout.write(artifact.document)
        if not artifact.ok:
            parser.exit(1, f"Build error: {artifact.error}\n")
    elif args.command == "check":
        result = validate_source(source, config.validation.enabled)
        if args.json:
            print(json.dumps(result.to_dict(), ensure_ascii=False, indent=2))
        elif result.valid:
            print("No issues found")
        else:
            for message in result.messages:
                print(message)
        if not result.valid:
            sys.exit(1)
    elif args.command == "repair-prompt":
        result = validate_source(source, config.validation.enabled)
        if result.valid:
            print("No issues found; nothing to repair")
            return
        builder = RepairPromptBuilder(modules=list(config.transform.tracked_modules))
        request = builder.build(source, result.messages)
        for message in request.messages:
            print(f"[{message.role}]")
            print(message.content)
            print()
    else:  # pragma: no cover - argparse enforces choices
        parser.exit(1, "Unknown command\n")


def _load(config_path: str | None) -> PreviewConfig:
    return load_config(Path(config_path) if config_path else Path.cwd())


def _read_source(path: str) -> str:
    if path == "-":
        return sys.stdin.read()
    return Path(path).read_text(encoding="utf-8")


if __name__ == "__main__":
    main(sys.argv[1:])
