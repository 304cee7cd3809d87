# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
File selection: which files under a root get normalized.

The selector knows nothing about file content. It walks the tree, keeps
regular files whose extension is in the configured set, and yields them one
at a time. Directories are always descended into; there is no ignore-file
support here.

Walk order is depth-first with entries sorted by name inside each directory,
so the same tree always produces the same sequence.
"""

import errno
import os
from pathlib import Path
from typing import Callable, Iterator, Optional

from stw.config.schema import SelectionConfig

ErrorCallback = Callable[[Path, OSError], None]


def extension_of(name: str) -> Optional[str]:
    """
    Return the substring after the last dot in a file name, or None.

    A name whose only dot is the very first character (".bashrc") has no
    extension. "archive.tar.gz" gives "gz". "trailing." gives "".
    """
    stem, dot, extension = name.rpartition(".")
    if not dot or not stem:
        return None
    return extension


def matches_extension(path: Path, extensions: list[str], case_sensitive: bool = True) -> bool:
    """Check whether a path's final extension token is one of `extensions`."""
    extension = extension_of(path.name)
    if extension is None:
        return False
    if case_sensitive:
        return extension in extensions
    return extension.lower() in {ext.lower() for ext in extensions}


def select(
    criteria: SelectionConfig,
    on_error: Optional[ErrorCallback] = None,
) -> Iterator[Path]:
    """
    Lazily yield every matching regular file under criteria.root.

    This is a generator, so nothing is read up front and the sequence can only
    be consumed once. Directory symlinks are not followed (no cycles); a
    symlink pointing at a regular file counts as a regular file.

    Traversal errors (unreadable directory, root vanished mid-walk, a matching
    symlink whose target is gone) never escape. They go to
    `on_error(path, error)` if given, and that path or subtree is skipped.
    """
    root = Path(criteria.root)

    def _has_extension(path: Path) -> bool:
        return matches_extension(path, criteria.extensions, criteria.case_sensitive)

    def _report(path: Path, error: OSError) -> None:
        if on_error is not None:
            on_error(path, error)

    def _check(path: Path) -> bool:
        if not _has_extension(path):
            return False
        if path.is_symlink() and not path.exists():
            _report(
                path,
                FileNotFoundError(errno.ENOENT, "Broken symlink", str(path)),
            )
            return False
        return path.is_file()

    if root.is_file() or (root.is_symlink() and not root.exists()):
        if _check(root):
            yield root
        return

    def _on_walk_error(error: OSError) -> None:
        _report(Path(error.filename) if error.filename else root, error)

    for dirpath, dirnames, filenames in os.walk(root, onerror=_on_walk_error):
        # os.walk descends in the order of dirnames, so sorting in place fixes the order.
        dirnames.sort()
        base = Path(dirpath)
        for filename in sorted(filenames):
            path = base / filename
            if _check(path):
                yield path
