import logging
import logging.handlers
import sys
from pathlib import Path
from typing import Any, Dict, Optional

from ..core.config_loader import ConfigLoader

DEFAULT_LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(module)s - %(funcName)s - %(message)s'
DEFAULT_MAX_BYTES = 5 * 1024 * 1024
DEFAULT_BACKUP_COUNT = 5


def _level(name: Any, fallback: int) -> int:
    return getattr(logging, str(name).upper(), fallback)


def _file_handler(config: Dict[str, Any], settings_dir: Path) -> Optional[logging.Handler]:
    """File handler for the ``logging.file_handler`` block, None if its directory is unusable."""
    log_path = Path(config.get('path', 'webhead.log')).expanduser()
    if not log_path.is_absolute():
        log_path = settings_dir / log_path
    try:
        log_path.parent.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        # no handler is installed yet to report this
        print(f"webhead: file logging disabled, cannot create {log_path.parent}: {e}", file=sys.stderr)
        return None
    if config.get('rotation_type') == 'size':
        return logging.handlers.RotatingFileHandler(
            log_path,
            maxBytes=int(config.get('max_bytes', DEFAULT_MAX_BYTES)),
            backupCount=int(config.get('backup_count', DEFAULT_BACKUP_COUNT)),
            encoding='utf-8',
        )
    return logging.FileHandler(log_path, encoding='utf-8')


def setup_logger(config_loader: Optional[ConfigLoader] = None, logger_name: Optional[str] = None):
    """
    Configures *logger_name* (the root logger by default) from the ``logging``
    settings block. Meant to be called once at startup; calling it again
    replaces the handlers it installed before.
    """
    if config_loader is None:
        config_loader = ConfigLoader()

    level = _level(config_loader.get_logging_setting('level', 'INFO'), logging.INFO)
    log_format = config_loader.get_logging_setting('format', DEFAULT_LOG_FORMAT)

    logger = logging.getLogger(logger_name)
    logger.setLevel(level)
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)
        handler.close()
    if logger_name is not None:
        logger.propagate = bool(config_loader.get_logging_setting('propagate', False))

    handlers = []
    console_config = config_loader.get_logging_setting('console_handler', {})
    if console_config.get('enabled', True):
        # stdout is reserved for the browser listing of the CLI
        handlers.append((logging.StreamHandler(sys.stderr), console_config))
    file_config = config_loader.get_logging_setting('file_handler', {})
    if file_config.get('enabled', False):
        file_handler = _file_handler(file_config, config_loader.settings_file.parent)
        if file_handler is not None:
            handlers.append((file_handler, file_config))

    for handler, handler_config in handlers:
        handler.setLevel(_level(handler_config.get('level', ''), level))
        handler.setFormatter(logging.Formatter(handler_config.get('format', log_format)))
        logger.addHandler(handler)

    if not logger.handlers:
        logger.addHandler(logging.NullHandler())
