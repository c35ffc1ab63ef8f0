"""
Configuration Settings

Environment-driven settings.  Values are read at call time so tests and
callers can change the environment without re-importing the package.

Environment Variables:
    - FARS_DATA_DIR:  Directory holding ``accident_<year>.csv.bz2`` files.
                      Defaults to the current working directory.
    - FARS_LOG_LEVEL: Default level used by ``setup_logging`` (e.g. ``DEBUG``).
                      Defaults to ``INFO``.
"""

import logging
import os
from pathlib import Path
from typing import Optional, Union

DATA_DIR_ENV = "FARS_DATA_DIR"
LOG_LEVEL_ENV = "FARS_LOG_LEVEL"

_DEFAULT_LOG_LEVEL = "INFO"


def get_data_dir(data_dir: Optional[Union[str, Path]] = None) -> Path:
    """
    Resolve the directory FARS files are looked up in.

    Args:
        data_dir: Explicit directory.  Takes precedence over ``FARS_DATA_DIR``.

    Returns:
        Directory path (not checked for existence).
    """
    if data_dir is not None:
        return Path(data_dir)
    env_dir = os.environ.get(DATA_DIR_ENV)
    if env_dir:
        return Path(env_dir)
    return Path.cwd()


def get_log_level() -> int:
    """
    Return the logging level named by ``FARS_LOG_LEVEL``.

    Unknown names fall back to ``INFO``.
    """
    name = os.environ.get(LOG_LEVEL_ENV, _DEFAULT_LOG_LEVEL).strip().upper()
    level = logging.getLevelName(name)
    if isinstance(level, int):
        return level
    return logging.INFO
