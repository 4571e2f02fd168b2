""" Registry of builtin commands. """
import enum

from mysh.exceptions import ShellExit
from mysh.resolver import find_executable


class Builtin(enum.Enum):
    EXIT = "exit"
    ECHO = "echo"
    TYPE = "type"
    PWD = "pwd"
    CD = "cd"


BUILTINS = {}


def builtin(kind: Builtin):
    """Decorator to register builtins"""
    def wrapper(func):
        BUILTINS[kind.value] = func
        return func
    return wrapper


def is_builtin(name: str) -> bool:
    return name in BUILTINS


@builtin(Builtin.CD)
def builtin_cd(args, state):
    target = args[0] if args else "~"

    if state.chdir(target):
        return 0
    print(f"cd: {target}: No such file or directory")
    return 1


@builtin(Builtin.ECHO)
def builtin_echo(args, state) -> int:
    print(" ".join(args))
    return 0


@builtin(Builtin.EXIT)
def builtin_exit(args, state):
    # arguments are ignored
    raise ShellExit(0)


@builtin(Builtin.PWD)
def builtin_pwd(args, state):
    print(state.cwd)
    return 0


@builtin(Builtin.TYPE)
def builtin_type(args, state):
    """
    type NAME...
    Say how each NAME would be run: as a builtin, from a path, or not at all.
    """
    rc = 0
    for name in args:
        if is_builtin(name):
            print(f"{name} is a shell builtin")
            continue

        path = find_executable(name, state.search_path(), cwd=state.cwd)
        if path:
            print(f"{name} is {path}")
        else:
            print(f"{name}: command not found")
            rc = 1
    return rc
