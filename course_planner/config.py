#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""Runtime defaults read from the environment, and logging setup."""

import logging
import os
from typing import Optional

DATA_FILE_ENV = "COURSE_PLANNER_DATA"
LOG_LEVEL_ENV = "COURSE_PLANNER_LOG_LEVEL"

def default_data_file() -> Optional[str]:
    return os.environ.get(DATA_FILE_ENV) or None

def default_log_level(default: str = "WARNING") -> str:
    return os.environ.get(LOG_LEVEL_ENV, default).upper()

def configure_logging(verbose: bool = False) -> None:
    level = logging.DEBUG if verbose else getattr(logging, default_log_level(), None)
    if not isinstance(level, int):
        level = logging.WARNING
    logging.basicConfig(level=level, format="%(levelname)s: %(message)s")
