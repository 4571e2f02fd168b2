""" Current state of the shell. """
import logging
import os
import pwd


class ShellState:
    def __init__(self, cwd=None, env=None, merge_stderr=False):
        self.env = os.environ if env is None else env
        self.cwd = os.path.abspath(cwd if cwd is not None else os.getcwd())
        self.last_status = 0
        self.merge_stderr = merge_stderr

    def get_var(self, name):
        return self.env.get(name, "")

    def set_status(self, status: int):
        # normalize like shells do
        self.last_status = int(status) if status is not None else 0

    def search_path(self) -> list[str]:
        """ Directories listed in PATH, in order. Unset or empty PATH is an empty list. """
        value = self.get_var("PATH")
        if not value:
            return []
        return [d for d in value.split(os.pathsep) if d]

    def home_dir(self) -> str:
        home = self.get_var("HOME")
        if home:
            return home
        # no HOME in the environment; ask the password database
        return pwd.getpwuid(os.getuid()).pw_dir

    def resolve_path(self, path: str) -> str:
        """
        Turn a path typed at the prompt into an absolute one.
        A leading `~` becomes the home directory and relative paths
        are taken from the shell's working directory.
        """
        if path.startswith("~"):
            path = path.replace("~", self.home_dir(), 1)
        return os.path.normpath(os.path.join(self.cwd, path))

    def can_enter(self, path: str) -> bool:
        """ True if path is a directory the shell is allowed to search. """
        return os.path.isdir(path) and os.access(path, os.X_OK)

    def chdir(self, path: str) -> bool:
        target = self.resolve_path(path)
        if not self.can_enter(target):
            return False
        logging.debug("cd: %s -> %s", self.cwd, target)
        self.cwd = target
        return True
