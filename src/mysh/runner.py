""" Execute a shell command. """
import logging
import subprocess
import sys

from mysh.command import Command
from mysh.constants import STATUS_NOT_FOUND
from mysh.exceptions import LaunchError
from mysh.resolver import executable_path, find_executable
from mysh.shell_builtins import BUILTINS
from mysh.shell_state import ShellState


def spawn(path: str, cmd: Command, shell_state: ShellState) -> int:
    """
    Run the executable at `path` in the shell's working directory and
    wait for it. The child inherits our stdin and stdout.
    """
    # builtin output written so far must appear before the child's
    sys.stdout.flush()

    stderr = subprocess.STDOUT if shell_state.merge_stderr else None
    executable = executable_path(path, shell_state.cwd)
    logging.debug("spawning %s %s in %s", executable, cmd.args, shell_state.cwd)
    try:
        completed = subprocess.run(
            [cmd.name] + cmd.args,
            executable=executable,
            cwd=shell_state.cwd,
            env=shell_state.env,
            stderr=stderr,
        )
    except OSError as e:
        raise LaunchError(path, e) from e

    logging.debug("%s exited with status %d", cmd.name, completed.returncode)
    return completed.returncode


def execute_command(cmd: Command, shell_state: ShellState) -> int:
    if not cmd.name:
        return 0

    if cmd.name in BUILTINS:
        return BUILTINS[cmd.name](cmd.args, shell_state) or 0

    path = find_executable(cmd.name, shell_state.search_path(), cwd=shell_state.cwd)
    if path is None:
        print(f"{cmd.name}: command not found")
        return STATUS_NOT_FOUND

    if not shell_state.can_enter(shell_state.cwd):
        # the working directory vanished or lost its permissions after cd
        print(f"{cmd.name}: {shell_state.cwd}: No such file or directory")
        return 1

    return spawn(path, cmd, shell_state)
