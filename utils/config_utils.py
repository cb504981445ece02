import os
from typing import Optional

OUTPUT_DIR_ENV = "RESIZE_IMAGES_OUTPUT_DIR"
VERBOSE_ENV = "RESIZE_IMAGES_VERBOSE"

TRUTHY = {"1", "true", "yes", "on"}


def _expand_path(value: str) -> str:
    # Expand ${VAR} and ~ the same way for flags and environment values
    return os.path.expanduser(os.path.expandvars(value))


def resolve_output_dir(cli_value: Optional[str] = None) -> str:
    """Resolve the directory both outputs are written to.

    Priority:
    1. --output-dir flag
    2. ENV RESIZE_IMAGES_OUTPUT_DIR
    3. current working directory
    """
    configured = cli_value or os.getenv(OUTPUT_DIR_ENV)
    if configured:
        return _expand_path(configured)
    return os.curdir


def resolve_verbose(cli_flag: bool = False) -> bool:
    if cli_flag:
        return True
    return os.getenv(VERBOSE_ENV, "").strip().lower() in TRUTHY


def resolve_log_file(cli_value: Optional[str] = None) -> Optional[str]:
    if not cli_value:
        return None
    return _expand_path(cli_value)
