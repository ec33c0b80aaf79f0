"""
tryout command line.

    tryout [name|url|query] [--no-git] [--no-commit] [--path DIR]
    tryout init {bash,zsh,fish,powershell}
    tryout config [--write]
    tryout version

stdout only ever carries the result line (a folder path) so the shell
function can cd into it. Everything else goes to stderr.
"""

import argparse
import sys
from pathlib import Path

from tryout import __version__, vcs
from tryout.config import UserSettings
from tryout.core.logging import TeeOutput, debug_log, get_log_path
from tryout.core.paths import get_settings_path, get_logs_dir, expand_user_path
from tryout.shell import init_script, SHELL_SCRIPTS
from tryout.ui import run_picker, parse_create_request
from tryout.workspace import create_directory, next_free_path

SUBCOMMANDS = ("init", "config", "version")


class TryApp:
    """Main application controller."""

    def __init__(
        self,
        settings: UserSettings,
        no_git: bool = False,
        no_commit: bool = False,
        out=None,
        picker=None,
    ):
        self.settings = settings
        self.no_git = no_git
        self.no_commit = no_commit
        self.out = out or sys.stdout
        self._picker = picker or run_picker

    def emit(self, path: Path | str):
        """Print the result line for the shell function."""
        print(path, file=self.out)

    def run(self, target: str = None):
        """Clone a URL, or open the picker with target as the initial query."""
        workspace = self.settings.ensure_workspace()

        if target and vcs.is_repository_url(target):
            self.clone(target)
            return

        if not sys.stdin.isatty():
            raise RuntimeError("interactive mode needs a terminal on stdin")

        result = self._picker(workspace, initial_query=target or "")
        name = parse_create_request(result)
        if name is not None:
            self.create(name)
        elif result:
            self.emit(result)
        else:
            debug_log("SESSION | cancelled")

    def create(self, name: str) -> Path:
        """Create a dated folder, git-initialize it if configured, print it."""
        path = create_directory(self.settings.workspace_path, name)

        if self.settings.auto_init and not self.no_git:
            vcs.init(path)
            if self.settings.initial_commit and not self.no_commit:
                vcs.initial_commit(path)

        self.emit(path)
        return path

    def clone(self, url: str) -> Path:
        """Clone url into <workspace>/<today>-<owner>-<repo>, print the path."""
        target = vcs.parse_repo_url(url)
        dest = next_free_path(self.settings.workspace_path / target.directory_name())
        print(f"Cloning {url} into {dest}", file=sys.stderr)
        vcs.clone(url, dest)
        self.emit(dest)
        return dest


def show_config(settings: UserSettings, out=None):
    """Print the effective configuration."""
    out = out or sys.stdout
    print("Configuration", file=out)
    print("─────────────", file=out)
    print(f"Config file:    {settings.path}", file=out)
    print(f"Workspace:      {settings.workspace_path}", file=out)
    print(f"Auto git init:  {str(settings.auto_init).lower()}", file=out)
    print(f"Initial commit: {str(settings.initial_commit).lower()}", file=out)

    if settings.is_new:
        print("\n(Using defaults - no config file found)", file=out)
        print(f"\nRun `tryout config --write` to create {settings.path}, or write it by hand:", file=out)
        print('''{
  "workspace_path": "~/tries",
  "auto_init": true,
  "initial_commit": true
}''', file=out)


def write_config(settings: UserSettings, out=None) -> bool:
    """Write settings.json with the current values unless it already exists."""
    out = out or sys.stdout
    if settings.path.exists():
        print(f"Config file already exists: {settings.path}", file=out)
        return False
    settings.save()
    print(f"Wrote {settings.path}", file=out)
    return True


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tryout",
        description="tryout (gt) - manage dated experiment folders",
        epilog="Subcommands: init <shell>, config, version",
    )
    parser.add_argument("target", nargs="?", help="folder name, search query, or git URL to clone")
    parser.add_argument("--no-git", action="store_true", help="skip git initialization")
    parser.add_argument("--no-commit", action="store_true", help="skip initial commit")
    parser.add_argument("--path", help="override workspace path")
    parser.add_argument("--version", action="version", version=f"tryout {__version__}")
    return parser


def build_subcommand_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="tryout")
    sub = parser.add_subparsers(dest="command", required=True)
    init = sub.add_parser("init", help="output shell integration script")
    init.add_argument("shell", choices=sorted(SHELL_SCRIPTS))
    config = sub.add_parser("config", help="show current configuration")
    config.add_argument("--write", action="store_true", help="create the config file with default values")
    sub.add_parser("version", help="print version information")
    return parser


def _run_subcommand(argv: list[str]) -> int:
    args = build_subcommand_parser().parse_args(argv)
    if args.command == "init":
        sys.stdout.write(init_script(args.shell))
    elif args.command == "config":
        settings = UserSettings.load(get_settings_path())
        if args.write:
            write_config(settings)
        else:
            show_config(settings)
    else:
        print(f"tryout version {__version__}")
    return 0


def main(argv: list[str] = None) -> int:
    """Entry point. Returns the process exit code."""
    argv = list(sys.argv[1:] if argv is None else argv)

    if argv and argv[0] in SUBCOMMANDS:
        try:
            return _run_subcommand(argv)
        except (OSError, ValueError) as e:
            print(f"error: {e}", file=sys.stderr)
            return 1

    args = build_parser().parse_args(argv)

    settings = UserSettings.load(get_settings_path())
    if args.path:
        settings.workspace_path = expand_user_path(args.path)

    tee = TeeOutput(get_log_path(get_logs_dir()), stream=sys.stderr, version=__version__)
    old_stderr = sys.stderr
    sys.stderr = tee
    try:
        debug_log(f"SESSION | workspace={settings.workspace_path} | target={args.target!r}")
        app = TryApp(settings, no_git=args.no_git, no_commit=args.no_commit)
        app.run(args.target)
    except (OSError, RuntimeError, ValueError, vcs.VcsError) as e:
        debug_log(f"ERROR | {e}")
        print(f"error: {e}", file=sys.stderr)
        return 1
    finally:
        sys.stderr = old_stderr
        tee.close()
    return 0


if __name__ == "__main__":
    try:
        sys.exit(main())
    except KeyboardInterrupt:
        sys.exit(130)
