""" Locate executables on the search path. """
import logging
import os
import stat

from mysh.constants import EXEC_BITS


def is_executable(path: str) -> bool:
    """ True if path is a regular file with at least one execute bit set. """
    try:
        st = os.stat(path)
    except (OSError, ValueError):
        return False
    return stat.S_ISREG(st.st_mode) and bool(st.st_mode & EXEC_BITS)


def _on_disk(path, cwd):
    if cwd is None:
        return path
    return os.path.join(cwd, path)


def find_executable(name: str, directories: list[str], cwd=None) -> str | None:
    """
    Return the path of the first executable called `name` in `directories`.

    Directories are searched in the order given, so an earlier entry wins
    over a later one. If none matches, `name` itself is tried as a path
    (for `./foo` or `/usr/bin/foo`) and returned unchanged when it is
    executable. Relative paths are looked up from `cwd` when it is given.
    None means the command was not found.
    """
    if not name:
        return None

    for directory in directories:
        candidate = os.path.join(directory, name)
        if is_executable(_on_disk(candidate, cwd)):
            logging.debug("resolved %s to %s", name, candidate)
            return candidate

    if is_executable(_on_disk(name, cwd)):
        logging.debug("resolved %s as a path", name)
        return name

    logging.debug("%s not found in %s", name, directories)
    return None


def executable_path(resolved: str, cwd: str) -> str:
    """ Absolute path of a resolved executable as seen from cwd. """
    return os.path.normpath(os.path.join(cwd, resolved))
