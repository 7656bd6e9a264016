# /app/logging_config.py

import os
import logging
from pathlib import Path
from typing import Optional


def setup_logging(level: Optional[str] = None, log_dir: Optional[str] = None) -> logging.Logger:
    """Configures the root logger once at start-up and returns the app logger."""
    logger = logging.getLogger("app")
    # basicConfig is a no-op once the root logger has handlers; build none then.
    if logging.getLogger().handlers:
        return logger

    level_name = (level or os.getenv("LOG_LEVEL", "INFO")).upper()
    log_dir = log_dir or os.getenv("LOG_DIR")

    handlers = [logging.StreamHandler()]
    if log_dir:
        Path(log_dir).mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(Path(log_dir) / "application.log", encoding="utf-8", delay=True))

    logging.basicConfig(
        level=getattr(logging, level_name, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        handlers=handlers,
    )
    return logger
