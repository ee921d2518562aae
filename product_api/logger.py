# product_api/logger.py
import sys
from pathlib import Path
from typing import Optional, Union

from loguru import logger

DEFAULT_MODULE = "product_api"
CONSOLE_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | "
    "<cyan>{extra[module]}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> | <level>{message}</level>"
)
FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {extra[module]}:{function}:{line} | {message}"


def setup_logging(level: str = "INFO", log_dir: Optional[Union[str, Path]] = None):
    """Route application logs to stdout and, when ``log_dir`` is set, to rotating files."""
    logger.remove()
    # records from the bare loguru logger fall back to the package name
    logger.configure(extra={"module": DEFAULT_MODULE})
    logger.add(sys.stdout, colorize=True, format=CONSOLE_FORMAT, level=level)

    if log_dir:
        log_path = Path(log_dir)
        log_path.mkdir(parents=True, exist_ok=True)
        logger.add(
            log_path / "app.log",
            rotation="500 MB",
            retention="10 days",
            compression="zip",
            format=FILE_FORMAT,
            level=level,
        )
        logger.add(
            log_path / "error.log",
            rotation="100 MB",
            retention="30 days",
            compression="zip",
            format=FILE_FORMAT,
            level="ERROR",
        )


def get_logger(name: Union[str, None] = None):
    return logger.bind(module=name if name else DEFAULT_MODULE)
