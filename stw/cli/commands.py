# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
Subcommand handlers for the stw CLI.

Each function here corresponds to one CLI subcommand and returns an exit code.
Settings come from two places: an optional YAML config file, and command-line
flags. Flags win.

No print() calls. Everything goes through the structured logger.
"""

import argparse
import logging
from pathlib import Path
from typing import Optional

from pydantic import ValidationError

from stw.cli.exit_codes import (
    CONFIG_ERROR,
    RUNTIME_ERROR,
    SUCCESS,
    USER_ERROR,
    VALIDATION_ERROR,
)
from stw.config.exceptions import ConfigError
from stw.config.loader import load_config
from stw.config.schema import GlobalConfig, NormalizationConfig, SelectionConfig, StwConfig
from stw.logging.logger import get_logger
from stw.pipeline.report import RunReport
from stw.pipeline.runner import run_normalizer, write_report
from stw.runtime.bootstrap import bootstrap

_DEFAULT_LOG_LEVEL = "INFO"
_DEFAULT_CONFIG_VERSION = "1.0.0"


def _effective_log_level(args: argparse.Namespace, config: Optional[StwConfig]) -> str:
    if args.log_level is not None:
        return args.log_level
    if config is not None:
        return config.global_config.log_level
    return _DEFAULT_LOG_LEVEL


def _log_file(config: Optional[StwConfig]) -> Optional[Path]:
    if config is None or config.global_config.log_file is None:
        return None
    return Path(config.global_config.log_file)


def _load_and_bootstrap(
    args: argparse.Namespace,
    command_name: str,
) -> tuple[int, Optional[StwConfig], logging.Logger]:
    """
    The shared setup every command needs: load config, run bootstrap.

    Returns a tuple of (exit_code, config, logger). If exit_code is not SUCCESS,
    the caller should return it immediately.
    """
    logger = get_logger(f"stw.cli.{command_name}", log_level=args.log_level or _DEFAULT_LOG_LEVEL)

    config = None
    if args.config is not None:
        try:
            config = load_config(Path(args.config))
        except ConfigError as err:
            logger.error(
                "Configuration error",
                extra={"command": command_name, "error": str(err)},
            )
            return CONFIG_ERROR, None, logger

    log_level = _effective_log_level(args, config)
    if config is not None:
        global_config = config.global_config.model_copy(update={"log_level": log_level})
    else:
        global_config = GlobalConfig(config_version=_DEFAULT_CONFIG_VERSION, log_level=log_level)
    bootstrap(global_config)
    logger = get_logger(
        f"stw.cli.{command_name}", log_level=log_level, log_file=_log_file(config)
    )

    if config is None:
        logger.debug(
            "No config provided, running with defaults",
            extra={"command": command_name},
        )

    return SUCCESS, config, logger


def _resolve_settings(
    args: argparse.Namespace,
    config: Optional[StwConfig],
) -> tuple[SelectionConfig, NormalizationConfig]:
    """
    Merge the config file's select/normalize sections with command-line flags.

    Raises:
        ValueError: If no extensions were given anywhere.
        ValidationError: If the merged selection settings are invalid.
    """
    select_data: dict[str, object] = {}
    if config is not None and config.select is not None:
        select_data = config.select.model_dump()

    if args.path is not None:
        select_data["root"] = args.path
    if args.extensions:
        select_data["extensions"] = args.extensions
    if args.ignore_case:
        select_data["case_sensitive"] = False

    if not select_data.get("extensions"):
        raise ValueError("No extensions given. Pass -e/--extensions or set select.extensions.")

    selection = SelectionConfig.model_validate(select_data)

    normalization = config.normalize if config is not None else NormalizationConfig()
    if args.disable_eof_newline_normalization:
        normalization = NormalizationConfig(eof_newline_normalization=False)

    return selection, normalization


def _execute_run(
    args: argparse.Namespace,
    command_name: str,
    dry_run: bool,
) -> tuple[int, Optional[RunReport], logging.Logger]:
    """
    Everything clean and check share: setup, settings, the run, the report file.

    Returns (exit_code, report, logger). The report is None when the run never
    started.
    """
    exit_code, config, logger = _load_and_bootstrap(args, command_name)
    if exit_code != SUCCESS:
        return exit_code, None, logger

    try:
        selection, normalization = _resolve_settings(args, config)
    except ValidationError as err:
        logger.error("Invalid selection settings", extra={"command": command_name, "error": str(err)})
        return USER_ERROR, None, logger
    except ValueError as err:
        logger.error(str(err), extra={"command": command_name})
        return USER_ERROR, None, logger

    if not Path(selection.root).exists():
        logger.error("Root path does not exist", extra={"root": selection.root})
        return USER_ERROR, None, logger

    try:
        logger.info(
            "Command started",
            extra={"command": command_name, "root": selection.root, "dry_run": dry_run},
        )
        report = run_normalizer(
            selection,
            normalization,
            dry_run=dry_run,
            log_level=_effective_log_level(args, config),
            log_file=_log_file(config),
        )
    except Exception as err:
        logger.error(
            "Runtime error",
            extra={"command": command_name, "error": str(err)},
            exc_info=True,
        )
        return RUNTIME_ERROR, None, logger

    if args.report is not None:
        try:
            write_report(report, Path(args.report), root=selection.root)
        except OSError as err:
            logger.error("Could not write report", extra={"path": args.report, "error": str(err)})
            return RUNTIME_ERROR, report, logger

    if report.failed:
        logger.warning(
            "Some files could not be processed",
            extra={"command": command_name, "failed": report.failed},
        )
        return RUNTIME_ERROR, report, logger

    return SUCCESS, report, logger


def handle_clean(args: argparse.Namespace) -> int:
    """Strip trailing whitespace and fix file endings in place."""
    exit_code, _, logger = _execute_run(args, "clean", dry_run=args.dry_run)
    if exit_code == SUCCESS:
        logger.info("Command completed", extra={"command": "clean"})
    return exit_code


def handle_check(args: argparse.Namespace) -> int:
    """Report files that need normalization without writing anything."""
    exit_code, report, logger = _execute_run(args, "check", dry_run=True)
    if exit_code != SUCCESS or report is None:
        return exit_code

    if report.changed:
        logger.warning(
            "Files need normalization",
            extra={"command": "check", "paths": [str(p) for p in report.changed_paths]},
        )
        return VALIDATION_ERROR

    logger.info("All files clean", extra={"command": "check", "scanned": report.scanned})
    return SUCCESS
