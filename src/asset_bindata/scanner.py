"""Directory scanning and asset collection.

This module walks input roots depth-first and turns every file it finds
into an Asset with a logical name and a unique identifier. Symbolic links
are followed once per target, so self-referencing trees terminate.
"""

import os
import re
import stat
from collections.abc import Iterable

from .core.naming import safe_function_name
from .core.types import Asset


class InvalidFileError(ValueError):
    """Raised when a file reduces to an empty asset name."""

    def __init__(self, path: str):
        super().__init__(f"Invalid file: {path}")
        self.path = path


def to_slash(path: str) -> str:
    """Return path with OS separators replaced by forward slashes."""
    if os.sep == "/":
        return path
    return path.replace(os.sep, "/")


def clean_path(path: str) -> str:
    """Return the shortest lexical equivalent of path.

    Like os.path.normpath, but a POSIX leading "//" collapses to a single
    slash as well, so names never keep an empty first component.
    """
    path = os.path.normpath(path)
    if path.startswith("//"):
        path = "/" + path.lstrip("/")
    return path


def compile_ignore_patterns(patterns: Iterable[str]) -> list[re.Pattern[str]]:
    """Compile ignore expressions.

    Raises:
        re.error: If an expression is not a valid regular expression
    """
    return [re.compile(pattern) for pattern in patterns]


def is_ignored(path: str, ignore: Iterable[re.Pattern[str]]) -> bool:
    """Check whether any ignore pattern matches somewhere in path."""
    return any(pattern.search(path) for pattern in ignore)


def _list_directory(dirpath: str) -> list[os.DirEntry[str]]:
    with os.scandir(dirpath) as it:
        entries = list(it)
    # Sort to make output stable between invocations
    entries.sort(key=lambda entry: entry.name)
    return entries


def find_files(
    directory: str,
    prefix: str,
    recursive: bool,
    toc: list[Asset],
    ignore: list[re.Pattern[str]],
    known_funcs: dict[str, int],
    visited_paths: set[str],
) -> None:
    """Recursively collect the files below directory into toc.

    Args:
        directory: Input root, a directory or a single file
        prefix: Path prefix stripped from asset names
        recursive: Whether to descend into subdirectories
        toc: Accumulator that discovered assets are appended to
        ignore: Compiled patterns; matching paths are skipped with their subtrees
        known_funcs: Identifier counters shared by the whole run
        visited_paths: Canonical directory paths entered so far in the run

    Raises:
        OSError: If any path cannot be stat'ed, listed or resolved
        InvalidFileError: If a file's logical name is empty
    """
    directory = clean_path(directory)
    dirpath = directory
    if prefix:
        dirpath = clean_path(os.path.abspath(dirpath))
        prefix = to_slash(clean_path(os.path.abspath(prefix)))

    stat_info = os.stat(dirpath)

    # (name, is_dir, is_symlink) per entry
    listing: list[tuple[str, bool, bool]]
    if stat.S_ISDIR(stat_info.st_mode):
        visited_paths.add(os.path.realpath(dirpath))
        listing = [
            (entry.name, entry.is_dir(follow_symlinks=False), entry.is_symlink())
            for entry in _list_directory(dirpath)
        ]
    else:
        listing = [(os.path.basename(dirpath), False, False)]
        dirpath = os.path.dirname(dirpath)

    for filename, is_dir, is_symlink in listing:
        asset_path = clean_path(os.path.join(dirpath, filename))

        if is_ignored(os.path.abspath(asset_path), ignore):
            continue

        if is_dir:
            if recursive:
                visited_paths.add(os.path.realpath(asset_path))
                find_files(
                    os.path.join(directory, filename),
                    prefix,
                    recursive,
                    toc,
                    ignore,
                    known_funcs,
                    visited_paths,
                )
            continue

        if is_symlink:
            link_path = os.readlink(asset_path)
            if not os.path.isabs(link_path):
                link_path = os.path.join(dirpath, link_path)
            link_path = os.path.realpath(link_path)
            if link_path not in visited_paths:
                visited_paths.add(link_path)
                find_files(
                    asset_path,
                    prefix,
                    recursive,
                    toc,
                    ignore,
                    known_funcs,
                    visited_paths,
                )
            continue

        name = to_slash(asset_path)
        if name.startswith(prefix):
            name = name[len(prefix):]
        else:
            name = to_slash(clean_path(os.path.join(directory, filename)))

        # If we have a leading slash, get rid of it
        name = name.lstrip("/")

        if not name:
            raise InvalidFileError(asset_path)

        toc.append(
            Asset(
                path=os.path.abspath(asset_path),
                name=name,
                func=safe_function_name(name, known_funcs),
            )
        )

