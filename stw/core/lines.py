# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
Byte-level line tokenizer.

Python's own splitlines() treats \\r, \\x0b, \\x0c and friends as line breaks
and throws the terminator away, which makes it useless when the whole point is
to give every line back exactly the ending it came with. So we tokenize by
hand into (content, terminator) pairs.

The rules:
  - only \\n ends a line
  - a \\r right before \\n is part of the terminator, not the content
  - whatever follows the last \\n (if anything) is an unterminated final line

split_lines and join_lines are exact inverses: join_lines(split_lines(b)) == b
for every byte string b.
"""

from typing import NamedTuple

LF = b"\n"
CRLF = b"\r\n"
NO_TERMINATOR = b""


class Line(NamedTuple):
    """One line of a file: everything before the newline, and the newline itself."""

    content: bytes
    terminator: bytes

    @property
    def is_blank(self) -> bool:
        return not self.content

    @property
    def is_terminated(self) -> bool:
        return bool(self.terminator)


def split_lines(content: bytes) -> list[Line]:
    """
    Split raw file content into lines, keeping each line's terminator.

    Empty lines survive as Line(b"", b"\\n"). An empty input gives an empty
    list, not a single empty line.
    """
    lines: list[Line] = []
    start = 0
    length = len(content)

    while start < length:
        newline_at = content.find(LF, start)
        if newline_at == -1:
            lines.append(Line(content[start:], NO_TERMINATOR))
            break

        if newline_at > start and content[newline_at - 1 : newline_at] == b"\r":
            lines.append(Line(content[start : newline_at - 1], CRLF))
        else:
            lines.append(Line(content[start:newline_at], LF))
        start = newline_at + 1

    return lines


def join_lines(lines: list[Line]) -> bytes:
    """Glue lines back together. Inverse of split_lines."""
    return b"".join(line.content + line.terminator for line in lines)


def count_terminators(lines: list[Line]) -> int:
    return sum(1 for line in lines if line.is_terminated)
