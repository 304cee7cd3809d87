# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""Tests for environment checks and the runtime bootstrap."""

import json
from pathlib import Path
from unittest import mock

import pytest

from stw.config.schema import GlobalConfig
from stw.runtime.bootstrap import bootstrap
from stw.runtime.environment import check_minimum_python, get_system_info


class TestEnvironment:
    def test_current_interpreter_passes(self) -> None:
        check_minimum_python()

    def test_old_interpreter_rejected(self) -> None:
        with mock.patch("stw.runtime.environment.get_python_version", return_value=(3, 9, 0)):
            with pytest.raises(RuntimeError, match=r"needs Python >= 3\.11.*found 3\.9"):
                check_minimum_python()

    def test_system_info_is_populated(self) -> None:
        info = get_system_info()
        assert info.python_version
        assert info.platform is not None


class TestBootstrap:
    def test_returns_configured_logger(self) -> None:
        logger = bootstrap(GlobalConfig(config_version="1.0.0", log_level="WARNING"))
        assert logger.name == "stw.runtime"
        assert logger.level == 30

    def test_debug_level_logs_environment(self, tmp_path: Path) -> None:
        log_file = tmp_path / "stw.log"
        bootstrap(GlobalConfig(config_version="1.0.0", log_level="DEBUG", log_file=str(log_file)))

        entry = json.loads(log_file.read_text(encoding="utf-8").strip().splitlines()[0])
        assert entry["msg"] == "stw bootstrap complete"
        assert entry["config_version"] == "1.0.0"
