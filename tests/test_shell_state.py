import os
import pwd
import tempfile
import unittest
from unittest.mock import patch, MagicMock

from mysh.shell_state import ShellState


class TestShellState(unittest.TestCase):
    def setUp(self):
        self.tmpdir = tempfile.TemporaryDirectory()
        self.addCleanup(self.tmpdir.cleanup)
        self.root = os.path.abspath(self.tmpdir.name)
        os.mkdir(os.path.join(self.root, "sub"))
        self.state = ShellState(cwd=self.root, env={"HOME": self.root})

    def test_defaults_to_process_working_directory(self):
        state = ShellState()
        self.assertEqual(os.path.abspath(os.getcwd()), state.cwd)
        self.assertIs(os.environ, state.env)
        self.assertEqual(0, state.last_status)
        self.assertFalse(state.merge_stderr)

    def test_get_var_unset_returns_empty_string(self):
        self.assertEqual("", self.state.get_var("MISSING"))

    def test_set_status_normalizes_none(self):
        self.state.set_status(3)
        self.assertEqual(3, self.state.last_status)
        self.state.set_status(None)
        self.assertEqual(0, self.state.last_status)

    # -------------------------
    # search_path
    # -------------------------
    def test_search_path_keeps_order(self):
        state = ShellState(env={"PATH": os.pathsep.join(["/b", "/a", "/c"])})
        self.assertEqual(["/b", "/a", "/c"], state.search_path())

    def test_search_path_missing_is_empty(self):
        self.assertEqual([], ShellState(env={}).search_path())

    def test_search_path_empty_is_empty(self):
        self.assertEqual([], ShellState(env={"PATH": ""}).search_path())

    def test_search_path_drops_empty_entries(self):
        state = ShellState(env={"PATH": os.pathsep.join(["/a", "", "/b"])})
        self.assertEqual(["/a", "/b"], state.search_path())

    # -------------------------
    # home_dir / resolve_path
    # -------------------------
    def test_home_dir_from_environment(self):
        self.assertEqual(self.root, self.state.home_dir())

    def test_home_dir_falls_back_to_user_lookup(self):
        state = ShellState(env={})
        entry = MagicMock(pw_dir="/home/someone")
        with patch.object(pwd, "getpwuid", return_value=entry) as mock_getpwuid:
            with patch.dict(os.environ, {"HOME": "/elsewhere"}):
                self.assertEqual("/home/someone", state.home_dir())
        mock_getpwuid.assert_called_once_with(os.getuid())

    def test_resolve_relative_path_against_cwd(self):
        self.assertEqual(os.path.join(self.root, "sub"), self.state.resolve_path("sub"))

    def test_resolve_parent_directory(self):
        self.state.cwd = os.path.join(self.root, "sub")
        self.assertEqual(self.root, self.state.resolve_path(".."))

    def test_resolve_absolute_path_ignores_cwd(self):
        self.assertEqual("/usr/bin", self.state.resolve_path("/usr//bin/"))

    def test_resolve_tilde(self):
        self.assertEqual(self.root, self.state.resolve_path("~"))
        self.assertEqual(os.path.join(self.root, "sub"), self.state.resolve_path("~/sub"))

    # -------------------------
    # chdir
    # -------------------------
    def test_chdir_updates_cwd(self):
        self.assertTrue(self.state.chdir("sub"))
        self.assertEqual(os.path.join(self.root, "sub"), self.state.cwd)

    def test_chdir_does_not_touch_process_cwd(self):
        before = os.getcwd()
        self.state.chdir("sub")
        self.assertEqual(before, os.getcwd())

    def test_chdir_missing_directory_leaves_cwd(self):
        self.assertFalse(self.state.chdir("nope"))
        self.assertEqual(self.root, self.state.cwd)

    def test_chdir_unsearchable_directory_leaves_cwd(self):
        with patch.object(os, "access", return_value=False) as mock_access:
            self.assertFalse(self.state.chdir("sub"))
        mock_access.assert_called_once_with(os.path.join(self.root, "sub"), os.X_OK)
        self.assertEqual(self.root, self.state.cwd)

    def test_can_enter(self):
        self.assertTrue(self.state.can_enter(self.root))
        self.assertFalse(self.state.can_enter(os.path.join(self.root, "nope")))

    def test_chdir_to_file_leaves_cwd(self):
        with open(os.path.join(self.root, "file.txt"), "w", encoding="utf-8") as f:
            f.write("x\n")
        self.assertFalse(self.state.chdir("file.txt"))
        self.assertEqual(self.root, self.state.cwd)

    def test_instances_are_independent(self):
        other = ShellState(cwd=self.root, env={})
        self.state.chdir("sub")
        self.assertEqual(self.root, other.cwd)


if __name__ == "__main__":
    unittest.main()
