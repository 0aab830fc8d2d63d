import logging
import logging.handlers
import os
from datetime import datetime
from typing import Optional, Union


def setup_logging(
    log_dir: Optional[str] = "logs",
    log_level: Union[int, str] = logging.INFO,
    node_id: Optional[str] = None
) -> None:
    """Configure logging for a StarChain node

    Args:
        log_dir: Directory for log files, or None to log to console only
        log_level: Logging level, as a number or a level name
        node_id: Node identifier used in log file names
    """
    if isinstance(log_level, str):
        log_level = logging.getLevelName(log_level.upper())
        if not isinstance(log_level, int):
            raise ValueError(f"Unknown log level: {log_level}")

    handlers = []

    console_handler = logging.StreamHandler()
    console_handler.setLevel(log_level)
    console_handler.setFormatter(logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    ))
    handlers.append(console_handler)

    if log_dir:
        os.makedirs(log_dir, exist_ok=True)

        base_filename = datetime.now().strftime("%Y%m%d")
        if node_id:
            base_filename = f"{base_filename}_{node_id}"

        file_formatter = logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(pathname)s:%(lineno)d - %(message)s'
        )

        # General log
        file_handler = logging.handlers.RotatingFileHandler(
            filename=os.path.join(log_dir, f"{base_filename}.log"),
            maxBytes=10*1024*1024,  # 10MB
            backupCount=5
        )
        file_handler.setLevel(log_level)
        file_handler.setFormatter(file_formatter)
        handlers.append(file_handler)

        # Errors only
        error_handler = logging.handlers.RotatingFileHandler(
            filename=os.path.join(log_dir, f"{base_filename}_error.log"),
            maxBytes=10*1024*1024,  # 10MB
            backupCount=5
        )
        error_handler.setLevel(logging.ERROR)
        error_handler.setFormatter(file_formatter)
        handlers.append(error_handler)

    logging.basicConfig(
        level=log_level,
        handlers=handlers,
        force=True
    )

    logging.getLogger('starchain').setLevel(log_level)

    logging.info(f"Logging initialized for node {node_id}")
    if log_dir:
        logging.info(f"Log directory: {os.path.abspath(log_dir)}")
    logging.info(f"Log level: {logging.getLevelName(log_level)}")


def get_logger(name: str) -> logging.Logger:
    """Return a logger under the starchain namespace"""
    return logging.getLogger(f"starchain.{name}")


class LoggerAdapter(logging.LoggerAdapter):
    """Adds component context to log messages"""

    def process(self, msg, kwargs):
        context = {
            'node_id': self.extra.get('node_id'),
            'component': self.extra.get('component')
        }

        context_str = ' '.join(f'[{k}={v}]' for k, v in context.items() if v)

        if context_str:
            msg = f"{context_str} {msg}"

        return msg, kwargs


def get_component_logger(component: str, node_id: Optional[str] = None) -> LoggerAdapter:
    """Return a logger that tags every message with the component name

    Args:
        component: Component name
        node_id: Node identifier

    Returns:
        Logger adapter with context
    """
    logger = get_logger(component)
    return LoggerAdapter(logger, {'component': component, 'node_id': node_id})
