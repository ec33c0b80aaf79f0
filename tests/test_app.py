"""
Tests for the command line and the TryApp controller.

The picker and git are replaced with fakes; everything else runs against
a temporary workspace.
"""

import io
import json
import sys
from unittest.mock import patch, MagicMock

import pytest

from tryout import __version__
from tryout.app import TryApp, main, show_config, write_config
from tryout.config import UserSettings
from tryout.core.formatting import today_stamp
from tryout.core.paths import get_settings_path
from tryout.ui.session import make_create_request
from tryout.vcs import VcsError


class FakePicker:
    """Returns a canned result and records how it was called."""

    def __init__(self, result: str):
        self.result = result
        self.calls = []

    def __call__(self, base_path, initial_query=""):
        self.calls.append((base_path, initial_query))
        return self.result


@pytest.fixture
def settings(tmp_path):
    s = UserSettings(tmp_path / "settings.json")
    s.workspace_path = tmp_path / "tries"
    return s


@pytest.fixture
def tty_stdin():
    with patch.object(sys, "stdin", MagicMock(isatty=MagicMock(return_value=True))):
        yield


@pytest.fixture
def git():
    """Patch the git wrappers used by TryApp."""
    with patch("tryout.app.vcs.init") as init, \
         patch("tryout.app.vcs.initial_commit") as commit, \
         patch("tryout.app.vcs.clone") as clone:
        yield MagicMock(init=init, initial_commit=commit, clone=clone)


class TestTryAppRun:
    """Interactive runs with a fake picker."""

    def test_selected_path_printed(self, settings, tty_stdin, git):
        out = io.StringIO()
        picker = FakePicker("/somewhere/2025-01-01-x")
        TryApp(settings, out=out, picker=picker).run("quer")

        assert out.getvalue() == "/somewhere/2025-01-01-x\n"
        assert picker.calls == [(settings.workspace_path, "quer")]
        assert settings.workspace_path.is_dir()

    def test_cancel_prints_nothing(self, settings, tty_stdin, git):
        out = io.StringIO()
        TryApp(settings, out=out, picker=FakePicker("")).run()
        assert out.getvalue() == ""
        git.init.assert_not_called()

    def test_create_request_creates_folder(self, settings, tty_stdin, git):
        out = io.StringIO()
        TryApp(settings, out=out, picker=FakePicker(make_create_request("New Idea"))).run()

        path = settings.workspace_path / f"{today_stamp()}-new-idea"
        assert path.is_dir()
        assert out.getvalue() == f"{path}\n"
        git.init.assert_called_once_with(path)
        git.initial_commit.assert_called_once_with(path)

    def test_requires_terminal(self, settings):
        with patch.object(sys, "stdin", MagicMock(isatty=MagicMock(return_value=False))):
            with pytest.raises(RuntimeError):
                TryApp(settings, picker=FakePicker("")).run()


class TestTryAppCreate:
    """git behaviour on create."""

    def test_no_git_flag(self, settings, git):
        TryApp(settings, no_git=True, out=io.StringIO()).create("x")
        git.init.assert_not_called()
        git.initial_commit.assert_not_called()

    def test_no_commit_flag(self, settings, git):
        TryApp(settings, no_commit=True, out=io.StringIO()).create("x")
        git.init.assert_called_once()
        git.initial_commit.assert_not_called()

    def test_auto_init_disabled(self, settings, git):
        settings.auto_init = False
        TryApp(settings, out=io.StringIO()).create("x")
        git.init.assert_not_called()

    def test_initial_commit_disabled(self, settings, git):
        settings.initial_commit = False
        TryApp(settings, out=io.StringIO()).create("x")
        git.init.assert_called_once()
        git.initial_commit.assert_not_called()


class TestTryAppClone:
    def test_url_target_clones_without_picker(self, settings, git):
        out = io.StringIO()
        picker = FakePicker("unused")
        TryApp(settings, out=out, picker=picker).run("https://github.com/user/repo")

        dest = settings.workspace_path / f"{today_stamp()}-user-repo"
        git.clone.assert_called_once_with("https://github.com/user/repo", dest)
        assert out.getvalue() == f"{dest}\n"
        assert picker.calls == []

    def test_existing_destination_gets_suffix(self, settings, git):
        settings.ensure_workspace()
        (settings.workspace_path / f"{today_stamp()}-user-repo").mkdir()

        dest = TryApp(settings, out=io.StringIO()).clone("git@github.com:user/repo.git")
        assert dest.name == f"{today_stamp()}-user-repo-2"


class TestShowConfig:
    def test_defaults_note_for_new_settings(self, tmp_path):
        out = io.StringIO()
        show_config(UserSettings.load(tmp_path / "settings.json"), out=out)
        text = out.getvalue()
        assert "Workspace:" in text
        assert "Auto git init:  true" in text
        assert "Using defaults" in text

    def test_saved_settings(self, tmp_path):
        path = tmp_path / "settings.json"
        path.write_text(json.dumps({"auto_init": False}))
        out = io.StringIO()
        show_config(UserSettings.load(path), out=out)
        text = out.getvalue()
        assert "Auto git init:  false" in text
        assert "Using defaults" not in text


class TestMain:
    """main() argument handling and exit codes."""

    def test_version(self, capsys):
        assert main(["version"]) == 0
        assert __version__ in capsys.readouterr().out

    def test_init_script(self, capsys):
        assert main(["init", "fish"]) == 0
        assert "function gt" in capsys.readouterr().out

    def test_init_unknown_shell(self):
        with pytest.raises(SystemExit):
            main(["init", "tcsh"])

    def test_config(self, capsys):
        assert main(["config"]) == 0
        out = capsys.readouterr().out
        assert str(get_settings_path()) in out

    def test_clone_url(self, tmp_path, capsys, git):
        ws = tmp_path / "ws"
        assert main(["https://github.com/user/repo", "--path", str(ws)]) == 0

        out = capsys.readouterr().out.strip()
        assert out == str(ws / f"{today_stamp()}-user-repo")

    def test_git_failure_exit_code(self, tmp_path, capsys, git):
        git.clone.side_effect = VcsError("git clone failed with exit code 128")
        assert main(["https://github.com/user/repo", "--path", str(tmp_path)]) == 1

        captured = capsys.readouterr()
        assert captured.out == ""
        assert "error: git clone failed" in captured.err

    def test_non_interactive_without_target(self, tmp_path, capsys):
        with patch.object(sys, "stdin", MagicMock(isatty=MagicMock(return_value=False))):
            assert main(["--path", str(tmp_path)]) == 1
        assert "terminal" in capsys.readouterr().err

    def test_stderr_restored(self, tmp_path, git):
        before = sys.stderr
        main(["https://github.com/user/repo", "--path", str(tmp_path)])
        assert sys.stderr is before

    def test_create_through_main(self, tmp_path, capsys, git, tty_stdin):
        with patch("tryout.app.run_picker", FakePicker(make_create_request("demo"))):
            assert main(["--path", str(tmp_path), "--no-git"]) == 0
        out = capsys.readouterr().out.strip()
        assert out.endswith(f"{today_stamp()}-demo")
        git.init.assert_not_called()


class TestWriteConfig:
    """config --write creates settings.json from the defaults."""

    def test_writes_defaults(self, tmp_path):
        path = tmp_path / "cfg" / "settings.json"
        out = io.StringIO()
        assert write_config(UserSettings.load(path), out=out) is True

        data = json.loads(path.read_text())
        assert data["auto_init"] is True
        assert data["initial_commit"] is True
        assert "Wrote" in out.getvalue()
        assert not UserSettings.load(path).is_new

    def test_existing_file_untouched(self, tmp_path):
        path = tmp_path / "settings.json"
        path.write_text("{not json")
        out = io.StringIO()

        assert write_config(UserSettings.load(path), out=out) is False
        assert path.read_text() == "{not json"
        assert "already exists" in out.getvalue()

    def test_main_config_write(self, capsys):
        assert main(["config", "--write"]) == 0
        assert get_settings_path().exists()
        assert "Wrote" in capsys.readouterr().out

    def test_show_config_mentions_write(self, tmp_path):
        out = io.StringIO()
        show_config(UserSettings.load(tmp_path / "settings.json"), out=out)
        assert "tryout config --write" in out.getvalue()
