"""
Brick Break Logging

Console logging with per-module log levels.

Usage:
    from brickbreak.logging import get_logger

    log = get_logger('game_mode')
    log.debug("Ball bounced at %.1f", x)
    log.info("Game started")

Configuration:
    Environment variables:
        BRICKBREAK_LOG_LEVEL=DEBUG          # Global default level
        BRICKBREAK_LOG_GAME_MODE=TRACE      # Module-specific level
        BRICKBREAK_LOG_LAYOUT_LOADER=WARN

    The same variables may be set in brickbreak/.env.

    Or programmatically:
        from brickbreak.logging import configure_logging
        configure_logging(level='DEBUG', modules={'physics': 'TRACE'})
"""

import os
from enum import IntEnum
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, Optional

from dotenv import dotenv_values

ENV_PREFIX = 'BRICKBREAK_LOG_'


class LogLevel(IntEnum):
    """Log levels matching Python's logging module."""
    TRACE = 5      # Per-frame detail
    DEBUG = 10
    INFO = 20
    WARNING = 30
    ERROR = 40
    OFF = 100      # Disable logging


_config: Dict[str, Any] = {
    'default_level': LogLevel.INFO,
    'module_levels': {},
}


def _format_message(module: str, level: str, msg: str) -> str:
    """Format a log message."""
    return f"[{module}] {level}: {msg}"


def _level_from_string(level_str: str) -> LogLevel:
    """Convert string to LogLevel, defaulting to INFO."""
    mapping = {
        'TRACE': LogLevel.TRACE,
        'DEBUG': LogLevel.DEBUG,
        'INFO': LogLevel.INFO,
        'WARNING': LogLevel.WARNING,
        'WARN': LogLevel.WARNING,
        'ERROR': LogLevel.ERROR,
        'OFF': LogLevel.OFF,
    }
    return mapping.get(level_str.upper(), LogLevel.INFO)


def _module_key(module: str) -> str:
    return module.lower().replace('.', '_').replace('/', '_')


def configure_logging(
    level: str = 'INFO',
    modules: Optional[Dict[str, str]] = None,
) -> None:
    """
    Configure the logging system.

    Args:
        level: Default log level for all modules
        modules: Dict of module_name -> level for per-module configuration
    """
    _config['default_level'] = _level_from_string(level)

    if modules:
        for mod, mod_level in modules.items():
            _config['module_levels'][_module_key(mod)] = _level_from_string(mod_level)


_env_path = Path(__file__).parent / '.env'


def _load_env_config(env_path: Optional[Path] = _env_path) -> None:
    """Load configuration from the .env file and environment variables.

    BRICKBREAK_LOG_LEVEL sets the default, any other BRICKBREAK_LOG_<MODULE>
    sets the level of that module (BRICKBREAK_LOG_GAME_MODE -> game_mode).
    Variables already in the environment win over the .env file.
    """
    env: Dict[str, Optional[str]] = {}
    if env_path is not None and env_path.is_file():
        env.update(dotenv_values(env_path))
    env.update(os.environ)

    level_key = ENV_PREFIX + 'LEVEL'
    if env.get(level_key):
        _config['default_level'] = _level_from_string(env[level_key])

    for key, value in env.items():
        if key.startswith(ENV_PREFIX) and key != level_key and value:
            module_name = key[len(ENV_PREFIX):].lower()
            _config['module_levels'][module_name] = _level_from_string(value)


# Load env config on import
_load_env_config()


class BrickBreakLogger:
    """Logger for a specific module."""

    def __init__(self, module: str):
        self.module = module
        self._module_key = _module_key(module)

    @property
    def level(self) -> LogLevel:
        """Get effective log level for this module."""
        if self._module_key in _config['module_levels']:
            return _config['module_levels'][self._module_key]
        return _config['default_level']

    def is_enabled_for(self, level: LogLevel) -> bool:
        """Check if message at given level would be logged."""
        return level >= self.level

    def _log(self, level: LogLevel, level_name: str, msg: str, *args) -> None:
        if not self.is_enabled_for(level):
            return

        if args:
            try:
                msg = msg % args
            except (TypeError, ValueError):
                msg = f"{msg} {args}"

        print(_format_message(self.module, level_name, msg))

    def trace(self, msg: str, *args) -> None:
        """Log at TRACE level (per-frame detail)."""
        self._log(LogLevel.TRACE, 'TRACE', msg, *args)

    def debug(self, msg: str, *args) -> None:
        """Log at DEBUG level."""
        self._log(LogLevel.DEBUG, 'DEBUG', msg, *args)

    def info(self, msg: str, *args) -> None:
        """Log at INFO level."""
        self._log(LogLevel.INFO, 'INFO', msg, *args)

    def warning(self, msg: str, *args) -> None:
        """Log at WARNING level."""
        self._log(LogLevel.WARNING, 'WARN', msg, *args)

    def error(self, msg: str, *args) -> None:
        """Log at ERROR level."""
        self._log(LogLevel.ERROR, 'ERROR', msg, *args)


@lru_cache(maxsize=64)
def get_logger(module: str) -> BrickBreakLogger:
    """
    Get a logger for the specified module.

    Loggers are cached, so calling get_logger('foo') multiple times
    returns the same logger instance.

    Args:
        module: Module name (e.g., 'game_mode', 'layout_loader')

    Returns:
        BrickBreakLogger instance for the module
    """
    return BrickBreakLogger(module)


def disable_logging() -> None:
    """Disable all logging."""
    _config['default_level'] = LogLevel.OFF
    _config['module_levels'].clear()
