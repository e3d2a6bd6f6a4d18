"""
CLI entrypoint for phrase classification.

This script performs the following steps:
- loads .env and configs/settings.yaml
- configures console (and optional rotating file) logging
- loads the taxonomy (JSON or YAML)
- classifies the phrase at the requested depth
- prints the "word = count" and "group = total" lines (or JSON)
- logs timing diagnostics when --verbose is given
"""

import argparse
import logging
import sys
import uuid
from datetime import datetime
from pathlib import Path

from dotenv import load_dotenv

from application import log_timing_summary, render_json_report, render_text_report, run_classification
from application.constants import FORMAT_JSON, FORMAT_TEXT, OUTPUT_FORMATS
from domain.errors import ClassifierError, InvalidDepthError
from infrastructure.config import load_settings
from infrastructure.constants import ENV_FILE, SETTINGS_FILE
from infrastructure.io import ensure_exists
from infrastructure.observability import configure_logging, make_run_tag, set_log_context

logger = logging.getLogger(__name__)

EXIT_USAGE_ERROR = 2


def _positive_int(value: str) -> int:
    try:
        depth = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"depth must be a positive integer, got {value!r}") from None
    if depth <= 0:
        raise argparse.ArgumentTypeError(f"depth must be a positive integer, got {value!r}")
    return depth


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Classify the words of a phrase against a taxonomy")
    p.add_argument("phrase", type=str, help="Phrase to analyse")
    p.add_argument(
        "--depth",
        type=_positive_int,
        default=None,
        help="Taxonomy depth to match at (1 = top-level groups). Defaults to settings.default_depth.",
    )
    p.add_argument(
        "--verbose",
        action="store_true",
        help="Log load and classification timings.",
    )
    p.add_argument(
        "--format",
        type=str,
        default=FORMAT_TEXT,
        choices=list(OUTPUT_FORMATS),
        help="Output format (default: text)",
    )
    p.add_argument(
        "--taxonomy",
        type=str,
        default=None,
        help="Path to the taxonomy JSON/YAML file (overrides settings and TAXONOMY_FILE)",
    )
    p.add_argument(
        "--config",
        type=str,
        default=str(SETTINGS_FILE),
        help="Path to settings.yaml (default: configs/settings.yaml)",
    )
    p.add_argument(
        "--env",
        type=str,
        default=None,
        help="Path to .env file (default: .env, if present)",
    )
    p.add_argument(
        "--console-level",
        type=str,
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Console log level (default: from settings)",
    )
    p.add_argument(
        "--log-file",
        type=str,
        default=None,
        help="Write a rotating DEBUG log to this file",
    )
    return p.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = _parse_args(argv)

    try:
        if args.env is not None:
            env_file = Path(args.env)
            ensure_exists(env_file, "environment variables file")
            load_dotenv(env_file, override=True)
        elif ENV_FILE.exists():
            load_dotenv(ENV_FILE, override=False)

        settings = load_settings(Path(args.config), required=args.config != str(SETTINGS_FILE))
    except (FileNotFoundError, ValueError) as e:
        # logging is not configured yet; the last-resort handler writes to stderr
        logger.error("Invalid configuration: %s", e)
        return EXIT_USAGE_ERROR

    console_level = logging.getLevelName(args.console_level) if args.console_level else settings.console_level_no
    if args.verbose:
        console_level = min(console_level, logging.INFO)
    log_file = Path(args.log_file) if args.log_file else settings.log_file
    configure_logging(log_file=log_file, console_level=console_level, file_level=settings.file_level_no)

    depth = args.depth if args.depth is not None else settings.default_depth
    taxonomy_path = Path(args.taxonomy) if args.taxonomy else settings.taxonomy_file

    run_id = f"{datetime.now().strftime('%Y%m%d_%H%M%S')}_{uuid.uuid4().hex[:6]}"
    set_log_context(run_id_full=run_id, depth=depth)
    logger.info("Starting run: run_id=%s (run_tag=%s)", run_id, make_run_tag(run_id))
    logger.info("Phrase: %s", args.phrase)
    logger.info("Depth: %s", depth)

    try:
        if depth is None:
            raise InvalidDepthError(depth)
        result = run_classification(args.phrase, depth, taxonomy_path)
    except ClassifierError as e:
        logger.error("%s", e)
        return EXIT_USAGE_ERROR

    if args.format == FORMAT_JSON:
        print(render_json_report(result))
    else:
        for line in render_text_report(result):
            print(line)

    if args.verbose:
        log_timing_summary(result)

    return 0


if __name__ == "__main__":
    sys.exit(main())
