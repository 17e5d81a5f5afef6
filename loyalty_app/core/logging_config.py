"""
Logging setup - console plus optional rotating file
"""
import logging
from logging.handlers import RotatingFileHandler
import os

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(name)s - %(message)s"

def setup_logging(settings) -> None:
    """Configure root logger once at startup"""
    handlers = []

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt="%H:%M:%S"))
    handlers.append(console_handler)

    if settings.LOGS_PATH:
        os.makedirs(settings.LOGS_PATH, exist_ok=True)
        # 5MB per file, keep 7
        file_handler = RotatingFileHandler(
            os.path.join(settings.LOGS_PATH, "loyalty_app.log"),
            maxBytes=5 * 1024 * 1024,
            backupCount=7,
            encoding="utf-8",
        )
        file_handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
        handlers.append(file_handler)

    # Driver chatter
    logging.getLogger("pymongo").setLevel(logging.WARNING)

    logging.basicConfig(level=settings.LOG_LEVEL.upper(), handlers=handlers, force=True)
