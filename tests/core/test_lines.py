# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
Tests for the byte-level line tokenizer.

The tokenizer must keep every terminator exactly as it was, never merge or
drop empty lines, and only ever break on \\n.
"""

import pytest

from stw.core.lines import CRLF, LF, NO_TERMINATOR, Line, count_terminators, join_lines, split_lines


class TestSplitLines:
    def test_empty_content_gives_no_lines(self) -> None:
        assert split_lines(b"") == []

    def test_lf_lines(self) -> None:
        assert split_lines(b"a\nb\n") == [Line(b"a", LF), Line(b"b", LF)]

    def test_crlf_lines(self) -> None:
        assert split_lines(b"a\r\nb\r\n") == [Line(b"a", CRLF), Line(b"b", CRLF)]

    def test_mixed_endings_kept_per_line(self) -> None:
        assert split_lines(b"a\r\nb\nc\r\n") == [
            Line(b"a", CRLF),
            Line(b"b", LF),
            Line(b"c", CRLF),
        ]

    def test_unterminated_final_fragment(self) -> None:
        assert split_lines(b"a\nb") == [Line(b"a", LF), Line(b"b", NO_TERMINATOR)]

    def test_empty_lines_are_preserved(self) -> None:
        assert split_lines(b"\n\n\r\n") == [Line(b"", LF), Line(b"", LF), Line(b"", CRLF)]

    def test_lone_cr_is_not_a_line_break(self) -> None:
        assert split_lines(b"a\rb\n") == [Line(b"a\rb", LF)]

    def test_trailing_lone_cr_stays_in_content(self) -> None:
        assert split_lines(b"a\r") == [Line(b"a\r", NO_TERMINATOR)]

    def test_only_one_cr_belongs_to_terminator(self) -> None:
        assert split_lines(b"a\r\r\n") == [Line(b"a\r", CRLF)]

    def test_binary_content_does_not_fail(self) -> None:
        lines = split_lines(b"\x00\xff\xfe\n\x80")
        assert lines == [Line(b"\x00\xff\xfe", LF), Line(b"\x80", NO_TERMINATOR)]


class TestJoinLines:
    @pytest.mark.parametrize(
        "content",
        [b"", b"\n", b"a", b"a\r\nb\nc", b"\r\n\r\n", b"x\r", b"\x00\r\n\xff  \n"],
    )
    def test_join_restores_original(self, content: bytes) -> None:
        assert join_lines(split_lines(content)) == content


class TestLineProperties:
    def test_blank_and_terminated(self) -> None:
        assert Line(b"", LF).is_blank is True
        assert Line(b"", LF).is_terminated is True
        assert Line(b"x", NO_TERMINATOR).is_blank is False
        assert Line(b"x", NO_TERMINATOR).is_terminated is False

    def test_count_terminators(self) -> None:
        assert count_terminators(split_lines(b"a\nb\r\nc")) == 2
