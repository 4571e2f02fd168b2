""" Exceptions raised by the shell. """


class ShellExit(Exception):
    """ Raised by the `exit` builtin to stop the interpreter loop. """
    def __init__(self, status=0):
        super().__init__(status)
        self.status = status


class ShellError(Exception):
    """ Base class for failures that abort the whole interpreter. """


class InputError(ShellError):
    """ Reading the next command line failed for a reason other than EOF. """


class LaunchError(ShellError):
    """ A resolved executable could not be started. """
    def __init__(self, path, reason):
        super().__init__(f"error executing {path}: {reason}")
        self.path = path
        self.reason = reason
