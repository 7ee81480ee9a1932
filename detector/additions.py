"""
CommitLens additions — the file changes handed to detectors, and the
providers that collect them from a git index or a directory tree.
"""
import logging
import os
import subprocess
from dataclasses import dataclass

_log = logging.getLogger(__name__)

DEFAULT_MAX_SIZE = 10 * 1024 * 1024


class AdditionError(RuntimeError):
    """Raised when additions cannot be collected (e.g. git is unavailable)."""


@dataclass(frozen=True)
class Addition:
    """One file's proposed content: a path identifier and raw bytes."""

    path: str
    data: bytes = b""

    @property
    def name(self) -> str:
        return self.path.replace("\\", "/").rsplit("/", 1)[-1]


# ─── Staged git changes ───────────────────────────────────────────────────────

def _run_git(args: list, cwd: str = None) -> bytes:
    try:
        return subprocess.check_output(["git"] + args, cwd=cwd, stderr=subprocess.DEVNULL)
    except FileNotFoundError as e:
        raise AdditionError("git executable not found on PATH") from e


def repository_root(cwd: str = None) -> str:
    """Top-level directory of the git work tree containing cwd."""
    try:
        raw = _run_git(["rev-parse", "--show-toplevel"], cwd=cwd)
    except subprocess.CalledProcessError as e:
        raise AdditionError("Not inside a git work tree") from e
    return raw.decode("utf-8", "replace").strip()


def staged_additions(repo_root: str = None) -> list:
    """
    Return an Addition for every added, copied, modified or renamed path in
    the git index, with the staged blob as data. Unreadable blobs yield empty data.
    """
    try:
        raw = _run_git(["diff", "--cached", "--name-only", "-z", "--diff-filter=ACMR"], cwd=repo_root)
    except subprocess.CalledProcessError as e:
        raise AdditionError(f"Could not list staged files: git exited with {e.returncode}") from e

    paths = [p for p in raw.decode("utf-8", "replace").split("\0") if p]
    additions = []
    for path in paths:
        try:
            data = _run_git(["show", f":{path}"], cwd=repo_root)
        except subprocess.CalledProcessError:
            _log.debug("Could not read staged blob for %s", path)
            data = b""
        additions.append(Addition(path, data))
    return additions


# ─── Directory tree ───────────────────────────────────────────────────────────

def additions_from_path(root: str, max_size: int = DEFAULT_MAX_SIZE) -> list:
    """
    Walk root (hidden directories skipped) and return an Addition per file
    no larger than max_size, with root-relative forward-slash paths, sorted.
    """
    if not os.path.isdir(root):
        raise AdditionError(f"Path does not exist or is not a directory: {root}")

    additions = []
    for dirpath, dirnames, filenames in os.walk(root):
        dirnames[:] = [d for d in dirnames if not d.startswith(".")]
        for fname in filenames:
            full = os.path.join(dirpath, fname)
            try:
                if os.path.getsize(full) > max_size:
                    _log.debug("Skipping %s: larger than %d bytes", full, max_size)
                    continue
                with open(full, "rb") as f:
                    data = f.read()
            except OSError as e:
                _log.debug("Could not read %s: %s", full, e)
                continue
            rel = os.path.relpath(full, root).replace("\\", "/")
            additions.append(Addition(rel, data))

    additions.sort(key=lambda a: a.path)
    return additions
