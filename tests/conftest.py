# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
Shared pytest fixtures for stw tests.

Fixtures here are available to every test file automatically.
We keep them minimal: just the stuff that multiple test modules need.
"""

import logging
import textwrap
from pathlib import Path

import pytest


@pytest.fixture(autouse=True)
def _reset_stw_loggers() -> None:
    """
    Detach and close the handlers get_logger installed, after each test.

    get_logger binds its StreamHandler to whatever sys.stdout is at creation
    time, and capsys swaps sys.stdout per test. Without this, a logger created
    in one test would keep writing to the previous test's capture buffer.
    Handlers that pytest itself attached are left alone.
    """
    yield  # type: ignore[misc]
    for name in list(logging.Logger.manager.loggerDict):
        if not name.startswith("stw"):
            continue
        logger = logging.getLogger(name)
        for handler in list(logger.handlers):
            if hasattr(handler, "_stw_destination"):
                logger.removeHandler(handler)
                handler.close()


@pytest.fixture()
def tmp_config_file(tmp_path: Path) -> Path:
    """The smallest config that passes schema validation."""
    config_content = textwrap.dedent("""\
        global:
          config_version: "1.0.0"
          log_level: "DEBUG"
    """)
    config_file = tmp_path / "test_config.yaml"
    config_file.write_text(config_content, encoding="utf-8")
    return config_file


@pytest.fixture()
def invalid_config_file(tmp_path: Path) -> Path:
    """A config file that's valid YAML but fails schema validation (missing required field)."""
    config_content = textwrap.dedent("""\
        global:
          log_level: "INFO"
    """)
    config_file = tmp_path / "invalid_config.yaml"
    config_file.write_text(config_content, encoding="utf-8")
    return config_file


@pytest.fixture()
def broken_yaml_file(tmp_path: Path) -> Path:
    """A file that isn't valid YAML at all."""
    config_file = tmp_path / "broken.yaml"
    config_file.write_text("{{not: yaml: at: all:::", encoding="utf-8")
    return config_file


@pytest.fixture()
def dirty_tree(tmp_path: Path) -> Path:
    """
    A small source tree with a mix of dirty, clean, and ignored files.

    Layout:
      repo/a.rs          trailing spaces and extra blank lines
      repo/b.py          already clean
      repo/c.txt         dirty, but not a selected extension
      repo/nested/d.rs   CRLF with trailing tabs
    """
    root = tmp_path / "repo"
    (root / "nested").mkdir(parents=True)
    (root / "a.rs").write_bytes(b"fn main() {   \n}\n\n\n")
    (root / "b.py").write_bytes(b"print('hi')\n")
    (root / "c.txt").write_bytes(b"notes   \n\n")
    (root / "nested" / "d.rs").write_bytes(b"let x = 1;\t\r\nlet y = 2;\r\n")
    return root
