# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
Errors raised while loading an stw config file.

The CLI catches ConfigError as a whole and turns it into CONFIG_ERROR.
"""


class ConfigError(Exception):
    """Base for anything wrong with the --config file."""


class ConfigLoadError(ConfigError):
    """The file is missing, unreadable, empty, or not a YAML mapping."""


class ConfigValidationError(ConfigError):
    """
    The YAML parsed but the schema rejected it: no global.config_version, an
    unknown key, a bad log level, or an empty select.extensions list.
    """
