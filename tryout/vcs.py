"""
Git plumbing for tryout.

Thin wrappers over the git CLI: init, initial commit, clone, plus the URL
helpers that decide when an argument is a repository to clone.
"""

import re
import subprocess
import sys
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from urllib.parse import urlparse

from .core.formatting import today_stamp
from .core.logging import debug_log

COMMIT_MESSAGE = "✨ Let's try something new\n\n🤖 Created with tryout"

SSH_URL_PATTERN = re.compile(r'^git@([^:]+):([^/]+)/(.+?)(?:\.git)?$')

KNOWN_HOST_PREFIXES = ("https://github.com", "https://gitlab.com")


class VcsError(Exception):
    """Raised when a git command fails or git is missing."""
    pass


class InvalidRepositoryURL(ValueError):
    """Raised when a URL doesn't name an owner/repo pair."""
    pass


@dataclass(frozen=True)
class RepoTarget:
    """Host, owner and repository name parsed from a clone URL."""
    host: str
    owner: str
    repo: str

    def directory_name(self, today: datetime = None) -> str:
        """Destination folder name: YYYY-MM-DD-owner-repo."""
        return f"{today_stamp(today)}-{self.owner}-{self.repo}"


def _run_git(args: list[str], cwd: Path = None, show_output: bool = True):
    """Run git, streaming its output to stderr (stdout carries the result)."""
    debug_log(f"GIT | {' '.join(args)} | cwd={cwd}")
    try:
        result = subprocess.run(
            ["git", *args],
            cwd=cwd,
            stdout=sys.stderr if show_output else subprocess.DEVNULL,
            stderr=sys.stderr if show_output else subprocess.DEVNULL,
        )
    except (FileNotFoundError, OSError) as e:
        raise VcsError(f"could not run git: {e}") from e
    if result.returncode != 0:
        raise VcsError(f"git {args[0]} failed with exit code {result.returncode}")


def init(path: Path):
    """git init inside path."""
    _run_git(["init"], cwd=path)


def initial_commit(path: Path):
    """Commit a placeholder .gitkeep so the repo has a first commit."""
    (Path(path) / ".gitkeep").write_bytes(b"")
    _run_git(["add", "."], cwd=path, show_output=False)
    _run_git(["commit", "-m", COMMIT_MESSAGE], cwd=path)


def clone(url: str, dest_path: Path):
    """git clone url into dest_path."""
    _run_git(["clone", url, str(dest_path)])


def parse_repo_url(url: str) -> RepoTarget:
    """
    Parse SSH (git@host:owner/repo.git) or HTTP(S) clone URLs.

    Raises:
        InvalidRepositoryURL: if no owner/repo pair can be extracted
    """
    match = SSH_URL_PATTERN.match(url)
    if match:
        return RepoTarget(host=match.group(1), owner=match.group(2), repo=match.group(3))

    try:
        parsed = urlparse(url)
    except ValueError as e:
        raise InvalidRepositoryURL(f"invalid URL: {e}") from e

    parts = parsed.path.strip("/").split("/")
    if len(parts) < 2 or not parts[0] or not parts[1]:
        raise InvalidRepositoryURL(f"invalid repository URL: {url}")

    repo = parts[1]
    if repo.endswith(".git"):
        repo = repo[:-len(".git")]
    return RepoTarget(host=parsed.netloc, owner=parts[0], repo=repo)


def is_repository_url(text: str) -> bool:
    """
    Heuristic check for "this argument is something to clone".

    Any plain http:// URL counts. https:// counts for the known hosts or
    when the URL contains ".git".
    """
    return (
        text.startswith("git@")
        or text.startswith(KNOWN_HOST_PREFIXES)
        or text.startswith("http://")
        or (text.startswith("https://") and ".git" in text)
    )
