# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
Whitespace normalization for source files.

Two rules, nothing else:
  1. Strip trailing whitespace from every line
  2. Collapse trailing blank lines at EOF down to a single terminating newline
     (switchable through NormalizationConfig.eof_newline_normalization)

Everything happens on bytes. We never decode, so binary files, Latin-1 files
and broken UTF-8 all go through without errors. Line endings are kept per line:
a CRLF line stays CRLF, an LF line stays LF, even inside the same file.

This is a pure function with no side effects: same input always produces the
same output, and running it on its own output changes nothing.
"""

from typing import NamedTuple

from stw.config.schema import NormalizationConfig
from stw.core.lines import LF, Line, join_lines, split_lines

# Horizontal whitespace, byte-wise. \r is in here on purpose: a \r that is not
# directly followed by \n is content, and at the end of a line it is trailing
# junk.
TRAILING_WHITESPACE = b" \t\x0b\x0c\r"


class NormalizeResult(NamedTuple):
    """Normalized bytes plus whether they differ from the input."""

    content: bytes
    changed: bool


def strip_trailing_whitespace(lines: list[Line]) -> list[Line]:
    """Strip every line's content on the right. Terminators are left alone."""
    return [Line(line.content.rstrip(TRAILING_WHITESPACE), line.terminator) for line in lines]


def _last_terminator(lines: list[Line]) -> bytes:
    """The terminator of the last terminated line, or LF if there isn't one."""
    for line in reversed(lines):
        if line.is_terminated:
            return line.terminator
    return LF


def collapse_trailing_blank_lines(lines: list[Line]) -> list[Line]:
    """
    Make the file end with exactly one terminator after its last real line.

    Expects already-stripped lines, so "blank" just means empty content.

    Cases:
      - no lines at all: stays empty (we don't invent a newline out of nothing)
      - only blank lines: one blank line survives, keeping the first line's
        terminator (LF if it had none)
      - otherwise: trailing blank lines go, and the last line gets a terminator
        if it has none, borrowing the style of the nearest terminated line
    """
    if not lines:
        return []

    end = len(lines)
    while end > 0 and lines[end - 1].is_blank:
        end -= 1

    if end == 0:
        return [Line(b"", lines[0].terminator or LF)]

    kept = lines[:end]
    last = kept[-1]
    if not last.is_terminated:
        kept[-1] = Line(last.content, _last_terminator(kept))
    return kept


def normalize(content: bytes, config: NormalizationConfig) -> NormalizeResult:
    """
    Normalize one file's raw bytes.

    Never raises for any input. The changed flag is an exact byte comparison
    against the original, so a file that is already clean reports False.
    """
    lines = strip_trailing_whitespace(split_lines(content))

    if config.eof_newline_normalization:
        lines = collapse_trailing_blank_lines(lines)

    result = join_lines(lines)
    return NormalizeResult(content=result, changed=result != content)
