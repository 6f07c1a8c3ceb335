"""Base git command invocation logic."""

import subprocess
from pathlib import Path
from typing import Optional


class CommandError(RuntimeError):
    """A git command exited non-zero or could not be started."""

    def __init__(self, args: list[str], returncode: Optional[int], detail: str = ""):
        self.command = args
        self.returncode = returncode
        message = f"Command failed ({returncode}): {' '.join(args)}"
        if detail:
            message += f": {detail}"
        super().__init__(message)


class GitRunner:
    """Runs git commands one at a time, each with an explicit working directory."""

    def __init__(self, git: str = "git"):
        self.git = git

    def _command(self, args: tuple[str, ...]) -> list[str]:
        return [self.git, *args]

    def run(self, *args: str, cwd: Optional[Path] = None) -> subprocess.CompletedProcess:
        """Run a git command, letting its output through to the terminal."""
        command = self._command(args)
        try:
            return subprocess.run(command, cwd=cwd, check=True)
        except subprocess.CalledProcessError as e:
            raise CommandError(command, e.returncode) from e
        except OSError as e:
            raise CommandError(command, None, str(e)) from e

    def capture(self, *args: str, cwd: Optional[Path] = None) -> str:
        """Run a git command and return its stdout."""
        command = self._command(args)
        try:
            result = subprocess.run(
                command, cwd=cwd, check=True, capture_output=True, text=True
            )
        except subprocess.CalledProcessError as e:
            raise CommandError(command, e.returncode, (e.stderr or "").strip()) from e
        except OSError as e:
            raise CommandError(command, None, str(e)) from e
        return result.stdout
