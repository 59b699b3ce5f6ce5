import logging
import sys
from typing import Optional

from .config import LOG_LEVEL

FORMAT = "%(asctime)s - %(levelname)s - %(name)s - %(message)s"


def setup_logging(level: Optional[str] = None) -> None:
    """Send log records to stdout with a plain text format.

    Existing root handlers are removed so repeated calls do not duplicate output.
    """
    for handler in logging.root.handlers[:]:
        logging.root.removeHandler(handler)

    logging.root.setLevel((level or LOG_LEVEL).upper())

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(logging.Formatter(FORMAT))
    logging.root.addHandler(console_handler)

    logging.captureWarnings(True)
