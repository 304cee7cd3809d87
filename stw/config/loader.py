# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
Reads an stw YAML config file into a frozen StwConfig.

A config file is optional for stw; this module is only reached when --config
is given. Only the `global` section is required. `normalize` falls back to
its defaults and `select` may be left out entirely, in which case the root and
extensions have to come from -p/-e on the command line. Whatever the file
says, CLI flags are merged on top later and win.

Any problem here aborts the command with CONFIG_ERROR before a single file is
selected, let alone rewritten.
"""

from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from stw.config.exceptions import ConfigLoadError, ConfigValidationError
from stw.config.schema import StwConfig


def _read_yaml_file(config_path: Path) -> dict[str, Any]:
    """
    Parse the config file into a mapping.

    Raises:
        ConfigLoadError: Missing path, a directory, unreadable file, broken
            YAML, an empty document, or a top level that is not a mapping.
    """
    if not config_path.is_file():
        reason = "not found" if not config_path.exists() else "not a file"
        raise ConfigLoadError(f"Config path {reason}: {config_path}")

    try:
        parsed = yaml.safe_load(config_path.read_text(encoding="utf-8"))
    except OSError as err:
        raise ConfigLoadError(f"Cannot read config file {config_path}: {err}") from err
    except yaml.YAMLError as err:
        raise ConfigLoadError(f"Invalid YAML in {config_path}: {err}") from err

    if parsed is None:
        raise ConfigLoadError(f"Config file is empty: {config_path}")
    if not isinstance(parsed, dict):
        raise ConfigLoadError(
            f"Config file must contain a YAML mapping (dict), got {type(parsed).__name__}"
        )

    return parsed


def _describe_errors(err: ValidationError) -> str:
    """One "section.field: message" line per schema violation."""
    lines = []
    for error in err.errors():
        location = ".".join(str(part) for part in error["loc"]) or "<root>"
        lines.append(f"  {location}: {error['msg']}")
    return "\n".join(lines)


def load_config(config_path: Path) -> StwConfig:
    """
    Load an stw config file.

    The error message for a schema violation names each offending key by its
    dotted YAML path (for example `select.extensions`), so a typo in a CI
    config is easy to find.

    Raises:
        ConfigLoadError: The file could not be read or parsed.
        ConfigValidationError: The file parsed but does not match the schema.
    """
    raw_data = _read_yaml_file(config_path)

    try:
        return StwConfig.model_validate(raw_data)
    except ValidationError as err:
        raise ConfigValidationError(
            f"Invalid config {config_path}:\n{_describe_errors(err)}"
        ) from err
