"""
Command-line entry point: dtcg-validate validate|count.

Exit codes: 0 when every file is valid, 1 when any file is invalid (or has
warnings under --strict), 2 for unreadable files or a bad config.
"""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any

from dtcg_validator.components.analysis import analyze_errors
from dtcg_validator.components.config import ConfigError, ValidatorConfig, load_config
from dtcg_validator.components.config.adapters import default_filesystem
from dtcg_validator.components.validation import (
    ValidationResult,
    count_tokens,
    parse_document,
    validate_tokens,
)

logger = logging.getLogger("cli")

EXIT_OK = 0
EXIT_INVALID = 1
EXIT_FAILURE = 2


def read_file(path: Path) -> str | None:
    try:
        return default_filesystem.read_text(path)
    except (OSError, UnicodeDecodeError) as e:
        logger.error(f"Cannot read {path}: {e}")
        return None


def render_text(path: Path, result: ValidationResult, analyze: bool) -> str:
    status = "valid" if result.valid else "invalid"
    lines = [
        f"{path}: {status} ({result.token_count} tokens, "
        f"{len(result.errors)} errors, {len(result.warnings)} warnings)"
    ]
    lines.extend(f"  error: {message}" for message in result.errors)
    lines.extend(f"  warning: {message}" for message in result.warnings)

    if analyze and result.errors:
        report = analyze_errors(result)
        lines.append(f"  {report.summary}")
        for insight in report.insights:
            if insight.suggestion:
                lines.append(f"  [{insight.category.value}] #{insight.number}: {insight.suggestion}")

    return "\n".join(lines)


def render_json(path: Path, result: ValidationResult, analyze: bool) -> dict[str, Any]:
    payload = analyze_errors(result).to_dict() if analyze else result.to_dict()
    return {"file": str(path), **payload}


def is_failure(result: ValidationResult, config: ValidatorConfig) -> bool:
    return not result.valid or (config.fail_on_warnings and bool(result.warnings))


def handle_validate(config: ValidatorConfig, args: argparse.Namespace) -> int:
    exit_code = EXIT_OK
    json_results: list[dict[str, Any]] = []

    for path in args.files:
        text = read_file(path)
        if text is None:
            exit_code = EXIT_FAILURE
            continue

        result = validate_tokens(text)
        logger.info(f"{path}: {len(result.errors)} errors, {len(result.warnings)} warnings")

        if config.output_format == "json":
            json_results.append(render_json(path, result, config.analyze))
        else:
            print(render_text(path, result, config.analyze))

        if is_failure(result, config) and exit_code == EXIT_OK:
            exit_code = EXIT_INVALID

    if config.output_format == "json":
        print(json.dumps(json_results, indent=2))

    return exit_code


def handle_count(config: ValidatorConfig, args: argparse.Namespace) -> int:
    exit_code = EXIT_OK

    for path in args.files:
        text = read_file(path)
        if text is None:
            exit_code = EXIT_FAILURE
            continue

        try:
            document = parse_document(text)
        except (ValueError, RecursionError) as e:
            logger.error(f"{path} is not valid JSON: {e}")
            exit_code = EXIT_FAILURE
            continue

        count = count_tokens(document) if isinstance(document, dict) else 0
        print(f"{path}: {count} tokens")

    return exit_code


def apply_overrides(config: ValidatorConfig, args: argparse.Namespace) -> ValidatorConfig:
    updates: dict[str, Any] = {}
    if getattr(args, "json", False):
        updates["output_format"] = "json"
    if getattr(args, "no_analysis", False):
        updates["analyze"] = False
    if getattr(args, "strict", False):
        updates["fail_on_warnings"] = True
    return config.model_copy(update=updates)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="dtcg-validate", description="Validate W3C design token files"
    )
    parser.add_argument("--config", type=Path, help="Path to a dtcg-validator.yaml file")
    # --config is also accepted after the subcommand
    config_option = argparse.ArgumentParser(add_help=False)
    config_option.add_argument("--config", type=Path, default=argparse.SUPPRESS)
    subparsers = parser.add_subparsers(dest="command", required=True)

    # validate
    validate_parser = subparsers.add_parser(
        "validate", help="Validate token files", parents=[config_option]
    )
    validate_parser.add_argument("files", nargs="+", type=Path, help="Token JSON files")
    validate_parser.add_argument("--json", action="store_true", help="Print results as JSON")
    validate_parser.add_argument(
        "--no-analysis", action="store_true", help="Skip error categories and suggestions"
    )
    validate_parser.add_argument(
        "--strict", action="store_true", help="Treat warnings as failures"
    )

    # count
    count_parser = subparsers.add_parser(
        "count", help="Count tokens in files", parents=[config_option]
    )
    count_parser.add_argument("files", nargs="+", type=Path, help="Token JSON files")

    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        config = load_config(args.config)
    except ConfigError as e:
        logging.basicConfig(level=logging.WARNING)
        logger.error(str(e))
        return EXIT_FAILURE

    logging.basicConfig(
        level=config.log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    config = apply_overrides(config, args)

    if args.command == "validate":
        return handle_validate(config, args)
    if args.command == "count":
        return handle_count(config, args)

    parser.print_help()
    return EXIT_FAILURE


if __name__ == "__main__":
    sys.exit(main())
