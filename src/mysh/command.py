""" Command to be executed. """
from mysh.shell_state import ShellState


class Executable:
    """ Base class for executable types. """
    def execute(self, state):
        raise NotImplementedError


class Command:
    """ A tokenized command line. """
    def __init__(self, name, args=None):
        self.name = name
        self.args = list(args) if args else []

    @classmethod
    def from_tokens(cls, tokens: list[str]) -> "Command":
        if not tokens:
            return cls("", [])
        return cls(tokens[0], tokens[1:])

    def __repr__(self):
        return f"Command({self.name!r}, {self.args!r})"


class CommandNode(Executable):
    """ Implement a simple command as a parsed node. """
    def __init__(self, cmd: Command, executor):
        self.cmd = cmd
        self.executor = executor

    def execute(self, state: ShellState) -> int:
        return self.executor(self.cmd, state) or 0
