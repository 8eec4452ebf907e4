import logging
import sys
from datetime import datetime
from pathlib import Path

from scoreboard.config import Config

def _console_level(debug: bool) -> int:
    if debug or Config.DEBUG:
        return logging.DEBUG
    return getattr(logging, Config.LOG_LEVEL, logging.WARNING)

def setup_logger(name: str, debug: bool = False) -> logging.Logger:
    """Setup a logger with consistent formatting"""

    logger = logging.getLogger(name)

    if logger.handlers:
        # Console level and stream follow the current call
        for handler in logger.handlers:
            if type(handler) is logging.StreamHandler:
                handler.stream = sys.stderr
                handler.setLevel(_console_level(debug))
        return logger

    logger.setLevel(logging.DEBUG)

    # Create formatter
    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    # Console handler; stdout is reserved for the ranking itself
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(_console_level(debug))
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    # File handler
    if Config.LOG_DIR:
        log_dir = Path(Config.LOG_DIR)
        log_dir.mkdir(parents=True, exist_ok=True)

        file_handler = logging.FileHandler(
            log_dir / f'game_ranking_{datetime.now().strftime("%Y%m%d")}.log',
            encoding='utf-8'
        )
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    return logger
