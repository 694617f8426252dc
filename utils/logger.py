# utils/logger.py
import logging
from logging.handlers import TimedRotatingFileHandler
from pathlib import Path

LOGGER_NAME = "inventory_tracker"


def setup_logger(log_dir: str | Path = "data/logs", level: int = logging.INFO, console: bool = True):
    """
    Configure the logger shared by the inventory tracker.

    Features:
    - Daily rotating log files (one file per day, 7 kept)
    - Console + file output
    - Unified log format with timestamp and level
    - Creates directories automatically

    Library code only calls logging.getLogger("inventory_tracker..."),
    this function is meant for entry points such as main.py.
    """

    log_dir = Path(log_dir)
    log_dir.mkdir(parents=True, exist_ok=True)
    log_file = log_dir / "inventory.log"

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)

    # Avoid duplicate handlers if setup_logger() is called multiple times
    if logger.handlers:
        return logger

    formatter = logging.Formatter(
        fmt="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S"
    )

    file_handler = TimedRotatingFileHandler(
        filename=log_file,
        when="midnight",
        interval=1,
        backupCount=7,
        encoding="utf-8"
    )
    file_handler.setFormatter(formatter)
    logger.addHandler(file_handler)

    if console:
        console_handler = logging.StreamHandler()
        console_handler.setFormatter(formatter)
        logger.addHandler(console_handler)

    logger.info("Logger initialized (daily rotation enabled)")
    return logger
