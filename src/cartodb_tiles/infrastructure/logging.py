"""Logging configuration"""
import logging
import sys
from typing import Dict, Any, Optional

from cartodb_tiles.exceptions.cartodb_exceptions import ConfigurationError

DEFAULT_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

# Third-party loggers that would repeat what RequestService already logs
QUIET_LOGGERS = ('urllib3', 'requests')


class LoggingManager:
    """Applies the 'logging' section of the settings.

    ``level`` and ``format`` configure the root logger. ``loggers`` maps a
    logger name to its own level, e.g. ``{"RequestService": "DEBUG"}`` to see
    Maps API response bodies without debugging everything else.
    """
    
    @staticmethod
    def resolve_level(name: Any) -> int:
        """Numeric level for a name such as 'debug'; unknown names are errors"""
        level = logging.getLevelName(str(name).upper())
        if not isinstance(level, int):
            raise ConfigurationError(f"Unknown log level: {name}")
        return level
    
    @staticmethod
    def setup_logging(logging_config: Dict[str, Any], level_override: Optional[str] = None) -> None:
        """Configure the root logger, then any per-logger levels"""
        logging_config = logging_config or {}
        
        loggers = logging_config.get('loggers', {})
        if not isinstance(loggers, dict):
            raise ConfigurationError("logging.loggers must be a dictionary")
        
        root_level = LoggingManager.resolve_level(level_override or logging_config.get('level', 'INFO'))
        logger_levels = {name: LoggingManager.resolve_level(level) for name, level in loggers.items()}
        
        logging.basicConfig(
            level=root_level,
            format=logging_config.get('format', DEFAULT_FORMAT),
            stream=sys.stdout,
            force=True
        )
        
        for name in QUIET_LOGGERS:
            logging.getLogger(name).setLevel(max(logging.WARNING, root_level))
        for name, level in logger_levels.items():
            logging.getLogger(name).setLevel(level)
