from .config import Settings, get_settings
from .database import MongoStore, get_db
from .logging_config import setup_logging

__all__ = ["Settings", "get_settings", "MongoStore", "get_db", "setup_logging"]
