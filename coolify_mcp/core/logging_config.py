from pathlib import Path
import logging
import sys
from typing import Optional
from datetime import datetime


LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"


def resolve_logs_dir(logs_dir: Optional[str | Path] = None) -> Path:
    """Directory log files go to: `logs_dir`, or ./logs under the working directory."""
    if logs_dir is None:
        return (Path.cwd() / "logs").resolve()
    return Path(logs_dir).resolve()


def setup_logging(logs_dir: Optional[str | Path] = None, log_file_name: str = "server.log",
                  level: str | int = logging.INFO) -> logging.Logger:
    """Configure root logging to stderr and a timestamped file under `logs_dir`.

    stdout is reserved for the MCP stdio transport, so nothing is ever logged there.
    Idempotent: calling multiple times won't add duplicate handlers.
    Returns the package logger for callers to use.
    """
    logs_dir = resolve_logs_dir(logs_dir)

    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    formatter = logging.Formatter(LOG_FORMAT)

    # one file handler per process; each run writes to its own timestamped file
    if not any(isinstance(h, logging.FileHandler) for h in root_logger.handlers):
        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        base = Path(log_file_name).stem
        ext = Path(log_file_name).suffix or ".log"
        log_file = logs_dir / f"{base}_{timestamp}{ext}"
        try:
            logs_dir.mkdir(parents=True, exist_ok=True)
            fh = logging.FileHandler(log_file, encoding="utf-8")
            fh.setFormatter(formatter)
            fh.setLevel(level)
            root_logger.addHandler(fh)
        except OSError:
            # read-only install location: stderr only
            pass

    stream_stderr_exists = any(
        isinstance(h, logging.StreamHandler) and getattr(h, "stream", None) is sys.stderr
        for h in root_logger.handlers
    )
    if not stream_stderr_exists:
        sh = logging.StreamHandler(sys.stderr)
        sh.setFormatter(formatter)
        sh.setLevel(level)
        root_logger.addHandler(sh)

    return logging.getLogger("coolify_mcp")
