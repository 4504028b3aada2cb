# logging_setup.py
import logging
import os
from datetime import datetime
from config import LOG_LEVEL, LOG_DIR, LOG_FILE

def setup_logging(level=None, log_to_file=True):
    """
    Set up logging configuration

    Args:
        level (str, optional): Log level name, defaults to LOG_LEVEL from config
        log_to_file (bool): Also write a timestamped log file under LOG_DIR

    Returns:
        logging.Logger: Logger for the calling module
    """
    level_name = (level or LOG_LEVEL).upper()

    handlers = [logging.StreamHandler()]

    if log_to_file:
        # Create logs directory if it doesn't exist
        os.makedirs(LOG_DIR, exist_ok=True)

        # Create log file with timestamp
        timestamp = datetime.now().strftime('%Y%m%d_%H%M%S')
        log_filename = os.path.join(LOG_DIR, f"{timestamp}_{LOG_FILE}")
        handlers.append(logging.FileHandler(log_filename, encoding='utf-8'))

    logging.basicConfig(
        level=getattr(logging, level_name, logging.INFO),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=handlers,
        force=True
    )

    # Set specific log levels for noisy libraries
    logging.getLogger('urllib3').setLevel(logging.WARNING)
    logging.getLogger('charset_normalizer').setLevel(logging.WARNING)

    return logging.getLogger(__name__)
