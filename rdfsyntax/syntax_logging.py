import logging
import sys
from datetime import datetime
from pathlib import Path

LOG_FORMAT = "%(asctime)s.%(msecs)03d [%(levelname)s] %(name)s: %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _log_file(log_dir: str) -> Path:
    # ':' is not allowed in Windows file names
    stamp = datetime.now().replace(microsecond=0).isoformat().replace(":", "-")
    logfile = Path(log_dir) / f"rdfsyntax-{stamp}.log"
    logfile.parent.mkdir(parents=True, exist_ok=True)
    return logfile


def setup_logger(settings) -> logging.Logger:
    """Configures the 'rdfsyntax' logger from log_level, log_output and log_dir in settings."""
    logger = logging.getLogger("rdfsyntax")
    logger.setLevel(settings.log_level)

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=LOG_DATE_FORMAT)

    handlers: list[logging.Handler] = []
    if settings.log_output in ("file", "both"):
        handlers.append(logging.FileHandler(filename=_log_file(settings.log_dir)))
    if settings.log_output in ("stdout", "both"):
        handlers.append(logging.StreamHandler(stream=sys.stdout))
    for handler in handlers:
        handler.setFormatter(formatter)

    for old_handler in logger.handlers:
        old_handler.close()
    logger.handlers = handlers
    logger.propagate = False
    return logger
