"""Release detection for Corvid SDK."""

from __future__ import annotations

import json
import logging
import os
import re
import subprocess
from pathlib import Path

from corvid.types import CommandRunner, FileReader

HEROKU_DYNO_PATH = "/etc/heroku/dyno"

GIT_REVISION_COMMAND = ["git", "rev-parse", "HEAD"]

# Capistrano 3.0 - 3.1.x log line: "... (at ...) deployed as release 20240101120000 by deploy"
_CAPISTRANO_RELEASE = re.compile(r"as release ([0-9]+)")

logger = logging.getLogger("corvid")


def run_command(argv: list[str]) -> str | None:
    """Run a command and return its output, or None if it did not succeed."""
    try:
        result = subprocess.run(
            argv,
            stdout=subprocess.PIPE,
            stderr=subprocess.DEVNULL,
            text=True,
            check=False,
        )
    except (OSError, ValueError):
        return None

    if result.returncode != 0:
        return None
    return result.stdout


def read_file(path: str) -> str:
    """Read a UTF-8 text file."""
    return Path(path).read_text(encoding="utf-8")


class ReleaseDetector:
    """
    Detects the release identifier attached to outgoing events.

    Strategies are tried in order and the first non-empty result wins:
    git revision, Capistrano REVISION file, Capistrano revisions.log,
    Heroku dyno metadata. Each strategy absorbs its own failures.
    """

    def __init__(
        self,
        project_root: str,
        read_file: FileReader = read_file,
        run_command: CommandRunner = run_command,
        logger: logging.Logger = logger,
        heroku_dyno_path: str = HEROKU_DYNO_PATH,
    ) -> None:
        self.project_root = project_root
        self.read_file = read_file
        self.run_command = run_command
        self.logger = logger
        self.heroku_dyno_path = heroku_dyno_path

    def detect(self) -> str | None:
        """Return the first release found, or None."""
        for strategy in (self.from_git, self.from_capistrano, self.from_heroku):
            release = strategy()
            if release:
                self.logger.debug("Detected release %s via %s", release, strategy.__name__)
                return release

        self.logger.debug("No release detected")
        return None

    def from_git(self) -> str | None:
        try:
            output = self.run_command(GIT_REVISION_COMMAND)
        except (OSError, ValueError, subprocess.SubprocessError):
            return None
        return output.strip() if output else None

    def from_capistrano(self) -> str | None:
        revision = self._read(os.path.join(self.project_root, "REVISION"))
        if revision and revision.strip():
            return revision.strip()

        log = self._read(os.path.join(self.project_root, "..", "revisions.log"))
        if not log:
            return None

        lines = log.splitlines()
        if not lines:
            return None
        match = _CAPISTRANO_RELEASE.search(lines[-1])
        return match.group(1) if match else None

    def from_heroku(self) -> str | None:
        contents = self._read(self.heroku_dyno_path)
        if contents is None:
            return None
        contents = contents.strip()

        try:
            info = json.loads(contents)
        except ValueError:
            self.logger.error("Cannot parse Heroku JSON: %s", contents)
            return None

        release = info.get("release") if isinstance(info, dict) else None
        commit = release.get("commit") if isinstance(release, dict) else None
        return commit if isinstance(commit, str) else None

    def _read(self, path: str) -> str | None:
        try:
            return self.read_file(path)
        except (OSError, ValueError):
            return None


def detect_release(
    project_root: str,
    read_file: FileReader = read_file,
    run_command: CommandRunner = run_command,
    logger: logging.Logger = logger,
) -> str | None:
    """Detect the release for a project rooted at `project_root`."""
    return ReleaseDetector(
        project_root,
        read_file=read_file,
        run_command=run_command,
        logger=logger,
    ).detect()
