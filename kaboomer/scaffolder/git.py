"""Git repository initialisation for freshly scaffolded projects."""

from __future__ import annotations

from pathlib import Path

from ..utils import print_running, stream_command


class GitError(Exception):
    """Raised when a git command cannot be spawned or exits non-zero."""

    def __init__(self, message: str, command: str = "", stderr: str = ""):
        self.command = command
        self.stderr = stderr
        super().__init__(message)


async def init_repository(root: str | Path, git: str = "git") -> None:
    """Run ``git init`` inside *root*, relaying its output.

    Files already written under *root* are left alone if this fails.

    Raises:
        GitError: If git is missing or exits with a non-zero code.
    """
    cmd = [git, "init"]
    cmd_str = " ".join(cmd)
    print_running(cmd_str)

    try:
        returncode = await stream_command(cmd, cwd=root)
    except OSError as exc:
        raise GitError(
            f"Could not run {cmd_str!r}: {exc}",
            command=cmd_str,
            stderr=str(exc),
        ) from exc

    if returncode != 0:
        raise GitError(
            f"Git command failed (exit {returncode}): {cmd_str}",
            command=cmd_str,
        )
