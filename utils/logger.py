import logging

from core.errors import UsageError
from utils.time_utils import utc_now_iso_z

# Global flag for verbose output (set by main.py)
VERBOSE = False

# Console output comes from print(); keep logging from echoing records to stderr
logging.getLogger().addHandler(logging.NullHandler())

def logInfo(message):
    if VERBOSE:
        print(message)
    logging.info(message)

def logError(message):
    print(f"❌ {message}")  # Always show errors
    logging.error(message)

def logWarn(message):
    print(f"⚠️ {message}")  # Always show warnings
    logging.warning(message)

def logDebug(message):
    if VERBOSE:
        print(f"[DEBUG] {message}")
    logging.debug(message)

def logProgress(message):
    """Always show progress messages even without --verbose"""
    print(message)
    logging.info(message)

def setup_logging(verbose=False, log_file=None):
    """Configure the root logger for a run.

    Console output is handled by the helpers above; the root logger only
    feeds the optional log file, so nothing is printed twice.
    """
    global VERBOSE
    VERBOSE = verbose

    root = logging.getLogger()
    root.setLevel(logging.DEBUG if verbose else logging.INFO)

    if log_file:
        try:
            file_handler = logging.FileHandler(log_file, encoding='utf-8')
        except OSError as e:
            raise UsageError(f"Cannot open log file '{log_file}': {e}") from e
        file_handler.setLevel(logging.DEBUG if verbose else logging.INFO)
        file_handler.setFormatter(logging.Formatter('%(message)s'))
        root.addHandler(file_handler)
        logging.info("=" * 60)
        logging.info(f"📝 resize_images run: {utc_now_iso_z()}")
        logging.info("=" * 60)
        return file_handler
    return None

def teardown_logging(file_handler):
    if file_handler is None:
        return
    logging.getLogger().removeHandler(file_handler)
    file_handler.close()
