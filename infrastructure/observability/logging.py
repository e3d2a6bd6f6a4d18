"""
Logging for classification runs.

Each line carries the short run tag and the requested depth, read from
contextvars. The console handler writes to stderr; an optional rotating file
handler keeps a DEBUG trace of the run.
"""

import contextvars
import hashlib
import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

# Printed on every line
cv_run_tag = contextvars.ContextVar("run_tag", default="-")
cv_depth = contextvars.ContextVar("depth", default="-")

# Kept for get_log_context only
cv_run_id_full = contextvars.ContextVar("run_id_full", default="-")


def make_run_tag(run_id_full: str, length: int = 8) -> str:
    """Short hex tag identifying a run in log lines (BLAKE2s of the run id)."""
    h = hashlib.blake2s(run_id_full.encode("utf-8"), digest_size=8).hexdigest()
    return h[:length]


class ContextInjectFilter(logging.Filter):
    """Copy the run tag and depth onto each record."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.run = cv_run_tag.get() or "-"
        record.depth = cv_depth.get() or "-"
        return True


def set_log_context(
    *,
    run_id_full: str | None = None,
    depth: int | None = None,
) -> None:
    """Set the run id and/or depth shown in subsequent log lines."""
    if run_id_full is not None:
        cv_run_id_full.set(str(run_id_full))
        cv_run_tag.set(make_run_tag(str(run_id_full)))

    if depth is not None:
        cv_depth.set(str(int(depth)))


def get_log_context() -> dict[str, str]:
    """Current run tag, run id and depth."""
    return {
        "run_tag": str(cv_run_tag.get() or "-"),
        "run_id_full": str(cv_run_id_full.get() or "-"),
        "depth": str(cv_depth.get() or "-"),
    }


def configure_logging(
    *,
    log_file: Path | None = None,
    console_level: int = logging.WARNING,
    file_level: int = logging.DEBUG,
    max_bytes: int = 10_000_000,  # 10MB
    backup_count: int = 5,
) -> None:
    """
    Install the console handler and, when log_file is set, a rotating file handler.

    Console output goes to stderr so stdout carries only the report.

    Args:
        log_file: Path to log file (None for console only)
        console_level: Minimum level for console output (default: WARNING)
        file_level: Minimum level for file output (default: DEBUG)
        max_bytes: Max log file size before rotation
        backup_count: Number of backup files to keep
    """
    # reconfiguring replaces handlers rather than stacking them
    root = logging.getLogger()
    root.handlers.clear()
    root.setLevel(logging.DEBUG)

    console_fmt = "%(asctime)s [%(levelname)s] r=%(run)s d=%(depth)s | %(message)s"
    file_fmt = "%(asctime)s [%(levelname)s] %(name)s | r=%(run)s d=%(depth)s | %(message)s"

    console_formatter = logging.Formatter(console_fmt, datefmt="%H:%M:%S")
    file_formatter = logging.Formatter(file_fmt, datefmt="%Y-%m-%d %H:%M:%S")

    ctx_filter = ContextInjectFilter()

    ch = logging.StreamHandler()
    ch.setLevel(console_level)
    ch.setFormatter(console_formatter)
    ch.addFilter(ctx_filter)
    root.addHandler(ch)

    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        fh = RotatingFileHandler(
            log_file,
            maxBytes=max_bytes,
            backupCount=backup_count,
            encoding="utf-8",
        )
        fh.setLevel(file_level)
        fh.setFormatter(file_formatter)
        fh.addFilter(ctx_filter)
        root.addHandler(fh)

    logging.getLogger(__name__).debug(
        "Logging configured (console_level=%s, file=%s)",
        logging.getLevelName(console_level),
        str(log_file) if log_file is not None else "None",
    )
