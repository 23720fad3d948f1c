import logging
import logging.handlers
import os
from datetime import datetime
from pathlib import Path

LEVEL_WIDTH = 8


def clean_old_logs(log_dir: Path, max_files: int = 5) -> list[Path]:
    """Delete the oldest `*.log` files in `log_dir` until at most `max_files` are left.

    Age is judged by modification time. Files with other suffixes are left alone.

    Returns:
        list[Path]: The files that were deleted, oldest first.
    """
    by_age = sorted(log_dir.glob("*.log"), key=os.path.getmtime)
    stale = by_age[: max(len(by_age) - max_files, 0)]
    for path in stale:
        path.unlink()
    return stale


class PaddedLevelFormatter(logging.Formatter):
    """Pads the level name so messages line up in the log file."""

    def format(self, record):
        record.levelname = f"{record.levelname:<{LEVEL_WIDTH}}"
        return super().format(record)


def configure_logger(
    log_level: int = logging.DEBUG, log_dir: Path | None = None, max_log_files: int = 5
) -> list[logging.Handler]:
    """Configures the logger with format and level, and optionally a log file

    A console handler is always installed. Its format leaves out the date and time
    since the console just wants a quick overview. When `log_dir` is given, a rotating
    log file named after the current date and time is added as well, holding the
    detailed timestamps. The emitter never picks a log directory on its own.

    Loggers already known to the logging module lose their own handlers and take the
    same level, so their records propagate to the root handlers configured here.

    Args:
        log_level (int): The log level to log at. logging.[DEBUG | INFO | ERROR | CRITICAL | WARN ].
            Defaults to logging.DEBUG.
        log_dir (Path | None): Where to store the logs. Defaults to no log file.
        max_log_files (int): Keeps only the previous (n) number of log files. Defaults to 5.

    Returns:
        list[logging.Handler]: The handlers that were installed.
    """
    stream_handler = logging.StreamHandler()
    stream_handler.setFormatter(logging.Formatter("%(levelname)s %(message)s", datefmt="%H:%M:%S"))
    handlers: list[logging.Handler] = [stream_handler]

    if log_dir is not None:
        log_dir = Path(log_dir)
        log_dir.mkdir(exist_ok=True, parents=True)
        # Leave room for the file created below
        clean_old_logs(log_dir=log_dir, max_files=max(max_log_files - 1, 0))

        log_filename = log_dir / datetime.now().strftime("%Y-%m-%d_%H-%M-%S.log")
        file_handler = logging.handlers.RotatingFileHandler(
            log_filename, maxBytes=10 * 1024**2, backupCount=5
        )
        file_handler.setFormatter(
            PaddedLevelFormatter("[%(asctime)s] %(levelname)s %(message)s", datefmt="%d.%m.%Y %H:%M:%S")
        )
        handlers.append(file_handler)

    logging.basicConfig(level=log_level, handlers=handlers, force=True)

    for name in logging.root.manager.loggerDict:
        logger = logging.getLogger(name)
        if isinstance(logger, logging.Logger):
            logger.handlers.clear()
            logger.setLevel(log_level)

    return handlers
