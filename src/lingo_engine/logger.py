
import logging
import os
from pathlib import Path
from typing import Optional

LOG_MODE_ENV = "LINGODOTDEV_LOG_MODE"
LOG_FILE_ENV = "LINGODOTDEV_LOG_FILE"

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

# Cache for log mode to avoid repeated environment reads
_log_mode_cache = None

def _get_log_mode():
    """Get log mode from the environment (off, info or debug)."""
    global _log_mode_cache
    if _log_mode_cache is not None:
        return _log_mode_cache

    log_mode = os.environ.get(LOG_MODE_ENV, 'off').strip().lower()
    if log_mode not in ('off', 'info', 'debug'):
        log_mode = 'info'
    _log_mode_cache = log_mode
    return log_mode

def _get_log_file() -> Optional[Path]:
    log_file = os.environ.get(LOG_FILE_ENV)
    if not log_file:
        return None
    path = Path(log_file)
    path.parent.mkdir(parents=True, exist_ok=True)
    return path

def _levels_for_mode(log_mode: str):
    """Return (logger_level, console_level) for a log mode."""
    if log_mode == 'debug':
        return logging.DEBUG, logging.DEBUG
    if log_mode == 'off':
        # Off mode: disable all logging
        return logging.CRITICAL + 1, logging.CRITICAL + 1
    return logging.INFO, logging.INFO

def _apply_mode(logger: logging.Logger, log_mode: str) -> None:
    logger_level, console_level = _levels_for_mode(log_mode)
    logger.setLevel(logger_level)

    log_format = logging.Formatter(LOG_FORMAT)
    log_file = _get_log_file()

    file_handlers = [h for h in logger.handlers if isinstance(h, logging.FileHandler)]
    if log_mode != 'off' and log_file is not None and not file_handlers:
        f_handler = logging.FileHandler(log_file, encoding='utf-8')
        f_handler.setLevel(logging.DEBUG)
        f_handler.setFormatter(log_format)
        logger.addHandler(f_handler)
    elif (log_mode == 'off' or log_file is None) and file_handlers:
        for handler in file_handlers:
            handler.close()
            logger.removeHandler(handler)

    has_console = any(
        isinstance(h, logging.StreamHandler) and not isinstance(h, logging.FileHandler)
        for h in logger.handlers
    )
    if not has_console:
        c_handler = logging.StreamHandler()
        c_handler.setFormatter(log_format)
        logger.addHandler(c_handler)

    for handler in logger.handlers:
        if isinstance(handler, logging.StreamHandler) and not isinstance(handler, logging.FileHandler):
            handler.setLevel(console_level)

def _clear_log_mode_cache():
    """Clear the log mode cache and update all loggers created by get_logger."""
    global _log_mode_cache
    _log_mode_cache = None

    log_mode = _get_log_mode()
    for logger_name in list(logging.Logger.manager.loggerDict.keys()):
        if not logger_name.startswith('lingo_engine'):
            continue
        logger = logging.getLogger(logger_name)
        if logger.handlers:
            _apply_mode(logger, log_mode)

def get_logger(name: str) -> logging.Logger:
    logger = logging.getLogger(name)
    _apply_mode(logger, _get_log_mode())
    return logger
