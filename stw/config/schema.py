# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
Type-safe configuration schemas for stw.

Every config section gets its own frozen pydantic model. Frozen means once you
create it, you cannot mutate it. The normalizer and the selector both rely on
that: they take a config and treat it as a plain immutable value.

The models use pydantic v2's ConfigDict with:
  - frozen=True: immutability after construction
  - extra="forbid": unknown fields cause immediate failure
  - validate_default=True: even defaults get type-checked
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class GlobalConfig(BaseModel):
    """
    Cross-cutting settings that apply to every command.

    This is the only required section of a config file. It controls
    observability (log_level, log_file) and tracks the schema version.
    """

    model_config = ConfigDict(frozen=True, extra="forbid", validate_default=True)

    config_version: str = Field(
        description="Schema version for compatibility tracking, e.g. '1.0.0'"
    )
    log_level: str = Field(
        default="INFO",
        description="One of DEBUG, INFO, WARNING, ERROR, CRITICAL",
    )
    log_file: Optional[str] = Field(
        default=None,
        description="Optional path for file-based log output",
    )

    @field_validator("log_level")
    @classmethod
    def _known_log_level(cls, value: str) -> str:
        upper = value.upper()
        if upper not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Unknown log level '{value}'")
        return upper


class NormalizationConfig(BaseModel):
    """
    How file content gets cleaned up.

    Trailing whitespace stripping is always on, so there's no switch for it.
    The only knob is whether trailing blank lines at EOF get collapsed.
    """

    model_config = ConfigDict(frozen=True, extra="forbid", validate_default=True)

    eof_newline_normalization: bool = Field(
        default=True,
        description="Collapse trailing blank lines so the file ends in exactly one newline",
    )


class SelectionConfig(BaseModel):
    """
    Which files get visited: everything under root whose extension is listed.

    Extensions are written without the leading dot ("rs", not ".rs"). A dot is
    tolerated and dropped, since that's the most common way to get it wrong.
    """

    model_config = ConfigDict(frozen=True, extra="forbid", validate_default=True)

    root: str = Field(default=".", description="Directory (or single file) to walk")
    extensions: list[str] = Field(
        min_length=1,
        description="Extension tokens to match, e.g. ['rs', 'py']",
    )
    case_sensitive: bool = Field(
        default=True,
        description="Match extensions exactly (True) or ignoring case (False)",
    )

    @field_validator("extensions")
    @classmethod
    def _strip_leading_dots(cls, value: list[str]) -> list[str]:
        cleaned = [ext[1:] if ext.startswith(".") else ext for ext in value]
        if any(not ext for ext in cleaned):
            raise ValueError("Extensions must not be empty")
        return cleaned


class StwConfig(BaseModel):
    """
    Top-level config container.

    A config file needs `global:`. The `normalize:` and `select:` sections are
    optional because the CLI can supply (or override) everything in them.
    """

    model_config = ConfigDict(frozen=True, extra="forbid", validate_default=True)

    global_config: GlobalConfig = Field(alias="global")
    normalize: NormalizationConfig = Field(default_factory=NormalizationConfig)
    select: Optional[SelectionConfig] = Field(default=None)
