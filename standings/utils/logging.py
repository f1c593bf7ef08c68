import inspect
import logging
import sys

from loguru import logger

from standings.core.config import settings


class InterceptHandler(logging.Handler):
    """Forward standard library log records (uvicorn, fastapi) to loguru."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            level: str | int = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        # Find the caller that issued the record, skipping the logging module itself
        frame, depth = inspect.currentframe(), 0
        while frame and (depth == 0 or frame.f_code.co_filename == logging.__file__):
            frame = frame.f_back
            depth += 1

        logger.opt(depth=depth, exception=record.exc_info).log(level, record.getMessage())


def setup_logging(log_file: str) -> None:
    logger.remove()
    logger.add(sys.stderr, level=settings.log_level)
    logger.add(
        f"logs/{log_file}",
        level="DEBUG" if settings.is_dev else settings.log_level,
        rotation="10 MB",
        retention="14 days",
        encoding="utf-8",
    )

    logging.basicConfig(handlers=[InterceptHandler()], level=0, force=True)
    for name in ("uvicorn", "uvicorn.error", "uvicorn.access", "fastapi"):
        std_logger = logging.getLogger(name)
        std_logger.handlers = [InterceptHandler()]
        std_logger.propagate = False
