"""Operating-system helpers."""

from __future__ import annotations

import os


def _existing(path: str) -> str | None:
    if os.path.exists(path):
        return path
    if os.name == "nt":
        exe = path + ".exe"
        if os.path.exists(exe):
            return exe
    return None


def get_full_path(path: str | os.PathLike) -> str | None:
    """Resolve a program path.

    Returns the absolute path if it exists, otherwise the first match of its
    file name in the directories of ``PATH``, otherwise ``None``. On Windows
    a ``.exe`` suffix is tried as well.
    """
    absolute = os.path.abspath(os.fspath(path))
    found = _existing(absolute)
    if found:
        return found

    path_env = os.environ.get("PATH", "")
    if not path_env:
        return None

    name = os.path.basename(absolute)
    for directory in path_env.split(os.pathsep):
        found = _existing(directory + os.sep + name)
        if found:
            return found
    return None