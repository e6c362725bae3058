import os
import sys
from datetime import datetime

from loguru import logger


def setup_logging(log_level: str, logs_dir: str = None):
    """Setup logging configuration."""
    if logs_dir is None:
        from src.config.settings import config

        logs_dir = config.logging.logs_dir

    logger.remove()
    # Add console logging
    logger.add(
        sys.stdout,
        level=log_level,
        format="{time:YYYY-MM-DD HH:mm:ss} | {level} | {message}",
    )

    # Add file logging when DEBUG level is specified
    if log_level == "DEBUG":
        os.makedirs(logs_dir, exist_ok=True)

        # One file per session, so no rotation
        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        log_filename = f"debug_session_{timestamp}.log"
        log_file = os.path.join(logs_dir, log_filename)

        logger.add(
            log_file,
            level="DEBUG",
            format="{time:YYYY-MM-DD HH:mm:ss} | {level} | {name} | {message}",
        )
        logger.debug(f"Debug logging enabled. Logs will be stored in {log_file}")

        cleanup_old_logs(logs_dir, max_files=10)


def cleanup_old_logs(log_dir: str, max_files: int = 50):
    """Clean up old log files if there are too many in the directory."""
    try:
        log_files = [
            f
            for f in os.listdir(log_dir)
            if f.startswith("debug_session_") and f.endswith(".log")
        ]

        if len(log_files) > max_files:
            # Oldest first
            log_files.sort(key=lambda x: os.path.getmtime(os.path.join(log_dir, x)))

            for f in log_files[:-max_files]:
                try:
                    os.remove(os.path.join(log_dir, f))
                    logger.debug(f"Cleaned up old log file: {f}")
                except OSError as e:
                    logger.warning(f"Failed to remove old log file {f}: {e}")
    except OSError as e:
        logger.warning(f"Failed to clean up old log files: {e}")
