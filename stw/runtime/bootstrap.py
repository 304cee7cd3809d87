# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
Runtime bootstrap for stw.

The one-time setup every command goes through before touching any file:
  1. Validate the environment (Python version)
  2. Initialize the logger from the global config
  3. Log where we're running, once
"""

import logging
from pathlib import Path

from stw.config.schema import GlobalConfig
from stw.logging.logger import get_logger
from stw.runtime.environment import check_minimum_python, get_system_info


def bootstrap(config: GlobalConfig) -> logging.Logger:
    """
    Run the bootstrap sequence and return the runtime logger.

    Args:
        config: The validated global configuration.

    Raises:
        RuntimeError: If the interpreter is too old.
    """
    check_minimum_python()

    log_file = Path(config.log_file) if config.log_file is not None else None
    logger = get_logger("stw.runtime", log_level=config.log_level, log_file=log_file)

    system_info = get_system_info()
    logger.debug(
        "stw bootstrap complete",
        extra={
            "config_version": config.config_version,
            "python_version": system_info.python_version,
            "platform": system_info.platform,
            "architecture": system_info.architecture,
        },
    )
    return logger
