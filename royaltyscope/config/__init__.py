"""Configuration module for royaltyscope.

Public API:
----------
settings: Settings instance
    Pydantic settings object with nested configuration

get_config(key: str, default=None) -> Any
    Flat-key configuration access

get_logger(name: str) -> Logger
    Get a context-aware logger for your module

setup_loguru_logger(verbose: bool = False) -> None
    Configure Loguru logger for the application

log_startup_info() -> None
    Log the active configuration at debug level

Usage:
------
```python
from royaltyscope.config import settings
floor = settings.matching.auto_link_min_confidence

from royaltyscope.config import get_logger
logger = get_logger(__name__)
logger.info("Starting reconciliation")
```
"""

from .logging import get_logger, log_startup_info, setup_loguru_logger
from .settings import get_config, settings

__all__ = [
    "get_config",
    "get_logger",
    "log_startup_info",
    "settings",
    "setup_loguru_logger",
]
