"""Logger configuration for the PLAR credit engine.

Every record carries a `catalog` extra naming the syllabus a session
edits. Records logged outside a session show "-".
"""

import sys
from pathlib import Path

from loguru import logger

from plar.config.settings import settings

NO_CATALOG = "-"

CONSOLE_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | "
    "<magenta>{extra[catalog]}</magenta> | <cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - "
    "<level>{message}</level>"
)
FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {extra[catalog]} | {name}:{function}:{line} - {message}"


def setup_logger(
    level: str = "INFO",
    log_file: str | None = None,
    rotation: str = "10 MB",
    retention: str = "7 days",
) -> None:
    """Configure loguru sinks for credit sessions.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Optional path to log file. If None, only console logging.
        rotation: Log rotation size (e.g., "10 MB", "1 day")
        retention: Log retention period (e.g., "7 days", "1 month")
    """
    logger.remove()
    logger.configure(extra={"catalog": NO_CATALOG})

    logger.add(sys.stderr, format=CONSOLE_FORMAT, level=level, colorize=True)

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)

        logger.add(
            log_path,
            format=FILE_FORMAT,
            level=level,
            rotation=rotation,
            retention=retention,
            compression="zip",
            backtrace=True,
            diagnose=True,
        )

    logger.debug(f"Credit engine logging at level={level}, file={log_file or 'none'}")


def catalog_logger(catalog_name: str):
    """Logger bound to one syllabus catalog.

    Args:
        catalog_name: Catalog name; blank names log as "-"

    Returns:
        A loguru logger whose records carry extra["catalog"]
    """
    return logger.bind(catalog=catalog_name or NO_CATALOG)


setup_logger(level=settings.log_level, log_file=settings.log_file)
