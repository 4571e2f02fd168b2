""" Implement the core of the shell. """
from mysh.command import Command, CommandNode
from mysh.constants import PROMPT
from mysh.exceptions import InputError, ShellExit
from mysh.lexer import tokenize
from mysh.runner import execute_command
from mysh.shell_state import ShellState


def read_command(prompt=PROMPT):
    """ Print the prompt and read one line. EOFError means input is exhausted. """
    try:
        return input(prompt)
    except (OSError, ValueError) as e:
        raise InputError(f"error reading input: {e}") from e


class Shell:
    def __init__(self, state=None, prompt=PROMPT):
        self.state = state if state is not None else ShellState()
        self.prompt = prompt

    def run(self):
        while True:
            try:
                line = read_command(self.prompt)
            except EOFError:
                print()
                return 0

            tokens = tokenize(line)
            if not tokens:
                continue

            node = CommandNode(Command.from_tokens(tokens), execute_command)
            try:
                status = node.execute(self.state)
            except ShellExit as e:
                return e.status
            self.state.set_status(status)
