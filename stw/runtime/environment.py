# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
Interpreter checks run once per stw invocation, before any file is touched.

A too-old Python is reported up front; otherwise it would surface as a
syntax or stdlib error after part of a repository had already been rewritten.
"""

import platform
import sys
from typing import NamedTuple

MINIMUM_PYTHON = (3, 11)


class SystemInfo(NamedTuple):
    """What the bootstrap debug line reports about the host."""

    python_version: str
    platform: str
    architecture: str


def get_python_version() -> tuple[int, int, int]:
    """Return the current Python version as a (major, minor, micro) tuple."""
    return sys.version_info[:3]


def check_minimum_python() -> None:
    """
    Refuse to start on an interpreter older than 3.11.

    Raises:
        RuntimeError: With the running and required versions in the message.
    """
    running = get_python_version()[:2]
    if running < MINIMUM_PYTHON:
        required = ".".join(map(str, MINIMUM_PYTHON))
        found = ".".join(map(str, running))
        raise RuntimeError(f"stw needs Python >= {required} to run, found {found}")


def get_system_info() -> SystemInfo:
    """Interpreter and platform details for the bootstrap debug line."""
    return SystemInfo(
        python_version=platform.python_version(),
        platform=platform.system(),
        architecture=platform.machine(),
    )
