import logging
import logging.handlers
import sys
from pathlib import Path
from typing import Optional

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

DEFAULT_LOG_DIR = Path(__file__).parent.parent / "logs"
LOG_FILE_NAME = "standings.log"


def setup_logging(log_level: str = "INFO", log_dir: Optional[Path] = None) -> Path:
    """Configure process-wide logging for the standings engine.

    Debug detail always goes to a rotating log file; the console only
    shows *log_level* and above. Calling this again is a no-op.

    Returns:
        Path of the log file.
    """
    log_dir = Path(log_dir) if log_dir else DEFAULT_LOG_DIR
    log_file = log_dir / LOG_FILE_NAME

    root_logger = logging.getLogger()
    if root_logger.handlers:
        return log_file  # Already configured

    log_dir.mkdir(parents=True, exist_ok=True)
    level = getattr(logging, log_level.upper(), logging.INFO)
    root_logger.setLevel(logging.DEBUG)

    formatter = logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT)

    # 5MB per file, 3 backups
    file_handler = logging.handlers.RotatingFileHandler(
        log_file, maxBytes=5 * 1024 * 1024, backupCount=3, encoding="utf-8"
    )
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(formatter)

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)

    root_logger.addHandler(file_handler)
    root_logger.addHandler(console_handler)

    # pandas reports dtype/parsing issues as warnings; keep them in the log
    logging.captureWarnings(True)

    logging.getLogger(__name__).info(
        "Logging initialized (level=%s, file=%s)", log_level, log_file
    )
    return log_file
