# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
Tests for whole-file I/O: byte reads and atomic writes.

Atomic writes are checked by verifying that the target ends up with exactly
the new bytes and that no temp file is left lying around.
"""

import os
from pathlib import Path

import pytest

from stw.utils.filesystem import atomic_write, atomic_write_bytes, read_bytes


class TestReadBytes:
    def test_reads_raw_bytes(self, tmp_path: Path) -> None:
        target = tmp_path / "crlf.txt"
        target.write_bytes(b"a\r\nb \r\n")
        assert read_bytes(target) == b"a\r\nb \r\n"

    def test_raises_on_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            read_bytes(tmp_path / "missing.txt")

    def test_raises_on_directory(self, tmp_path: Path) -> None:
        with pytest.raises(IsADirectoryError):
            read_bytes(tmp_path)


class TestAtomicWriteBytes:
    def test_overwrites_existing_file(self, tmp_path: Path) -> None:
        target = tmp_path / "file.rs"
        target.write_bytes(b"old   \n")
        atomic_write_bytes(target, b"new\n")
        assert target.read_bytes() == b"new\n"

    def test_no_leftover_temp_files_on_success(self, tmp_path: Path) -> None:
        target = tmp_path / "clean.rs"
        atomic_write_bytes(target, b"x\n")
        assert list(tmp_path.glob(".stw_tmp_*")) == []

    def test_creates_parent_directories(self, tmp_path: Path) -> None:
        target = tmp_path / "nested" / "deep" / "out.bin"
        atomic_write_bytes(target, b"\x00\x01")
        assert target.read_bytes() == b"\x00\x01"

    @pytest.mark.skipif(os.name != "posix", reason="symlinks need POSIX")
    def test_symlink_target_rewritten_and_link_kept(self, tmp_path: Path) -> None:
        real = tmp_path / "real.rs"
        real.write_bytes(b"x  \n")
        link = tmp_path / "link.rs"
        link.symlink_to(real)

        atomic_write_bytes(link, b"x\n")

        assert link.is_symlink()
        assert real.read_bytes() == b"x\n"

    @pytest.mark.skipif(os.name != "posix", reason="permission bits need POSIX")
    def test_existing_mode_is_kept(self, tmp_path: Path) -> None:
        target = tmp_path / "run.sh"
        target.write_bytes(b"echo hi  \n")
        target.chmod(0o755)

        atomic_write_bytes(target, b"echo hi\n")

        assert target.stat().st_mode & 0o7777 == 0o755

    @pytest.mark.skipif(os.name != "posix", reason="permission bits need POSIX")
    def test_new_file_gets_umask_default_mode(self, tmp_path: Path) -> None:
        old_umask = os.umask(0o022)
        try:
            atomic_write_bytes(tmp_path / "report.json", b"{}\n")
        finally:
            os.umask(old_umask)

        assert (tmp_path / "report.json").stat().st_mode & 0o7777 == 0o644


class TestAtomicWrite:
    def test_writes_text(self, tmp_path: Path) -> None:
        target = tmp_path / "report.json"
        atomic_write(target, '{"ok": true}\n')
        assert target.read_text(encoding="utf-8") == '{"ok": true}\n'
