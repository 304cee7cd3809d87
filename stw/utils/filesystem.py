# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
Whole-file I/O for stw.

The normalizer hands back a complete new file body, so writes are always
whole-file. They are also atomic: we write to a temporary file in the same
directory as the target, then rename over it. Rename on the same filesystem
is atomic on POSIX, so an interrupted run leaves either the old content or the
new content, never half of each.
"""

import os
import tempfile
from pathlib import Path

_TEMP_PREFIX = ".stw_tmp_"


def _default_file_mode() -> int:
    """The mode open() would give a brand-new file under the current umask."""
    umask = os.umask(0)
    os.umask(umask)
    return 0o666 & ~umask


def read_bytes(file_path: Path) -> bytes:
    """
    Read a whole file as raw bytes.

    Raises:
        FileNotFoundError: If the path doesn't exist.
        IsADirectoryError: If the path is a directory.
        OSError: For other I/O errors.
    """
    if not file_path.exists():
        raise FileNotFoundError(f"File not found: {file_path}")
    if not file_path.is_file():
        raise IsADirectoryError(f"Expected a file, got a directory: {file_path}")
    return file_path.read_bytes()


def _atomic_replace(target_path: Path, data: bytes) -> None:
    # dir= same directory as target so the rename never crosses filesystems.
    temp_fd = tempfile.NamedTemporaryFile(
        mode="wb",
        dir=str(target_path.parent),
        prefix=_TEMP_PREFIX,
        suffix=".tmp",
        delete=False,
    )
    temp_path = Path(temp_fd.name)

    try:
        temp_fd.write(data)
        temp_fd.flush()
        temp_fd.close()
        # NamedTemporaryFile creates 0600; a new target gets the usual umask default.
        if target_path.exists():
            mode = target_path.stat().st_mode & 0o7777
        else:
            mode = _default_file_mode()
        os.chmod(temp_path, mode)
        os.replace(temp_path, target_path)
    except BaseException:
        temp_fd.close()
        if temp_path.exists():
            temp_path.unlink()
        raise


def atomic_write_bytes(target_path: Path, data: bytes) -> None:
    """
    Replace a file's content with `data`, atomically.

    The target's permission bits are carried over, so rewriting an executable
    script keeps it executable. If the target is a symlink, the file it points
    to gets rewritten and the link stays in place.

    Raises:
        OSError: If the write or rename fails. The target is untouched.
    """
    target_path = target_path.resolve() if target_path.is_symlink() else target_path
    target_path.parent.mkdir(parents=True, exist_ok=True)
    _atomic_replace(target_path, data)


def atomic_write(target_path: Path, content: str, encoding: str = "utf-8") -> None:
    """Text flavour of atomic_write_bytes, used for reports."""
    atomic_write_bytes(target_path, content.encode(encoding))
