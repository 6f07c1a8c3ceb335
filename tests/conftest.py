import shutil
import subprocess
from pathlib import Path

import pytest

from src.core.runner import CommandError

requires_git = pytest.mark.skipif(shutil.which("git") is None, reason="git not installed")


def git(*args, cwd):
    subprocess.run(
        ["git", "-c", "user.name=Docs Test", "-c", "user.email=docs@example.com", *args],
        cwd=cwd,
        check=True,
        capture_output=True,
    )


def make_repo(root: Path, files: dict[str, str]) -> str:
    """Create a one-commit repository holding files and return its file:// URL."""
    root.mkdir(parents=True)
    git("init", "-q", "-b", "main", cwd=root)
    for rel, content in files.items():
        path = root / rel
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
    git("add", "-A", cwd=root)
    git("commit", "-q", "-m", "initial", cwd=root)
    return root.as_uri()


REMOTE_FILES = {
    "docs/guide.md": "# Guide\n\nHello.\n",
    "docs/sub/page.md": "# Page\n",
    "README.md": "# Project\n",
    "src/index.ts": "export {};\n",
}


@pytest.fixture
def remote_with_docs(tmp_path):
    return make_repo(tmp_path / "remote", REMOTE_FILES)


@pytest.fixture
def remote_without_docs(tmp_path):
    return make_repo(tmp_path / "remote-nodocs", {"README.md": "# Project\n", "src/index.ts": "x\n"})


@pytest.fixture
def clone_root(tmp_path):
    """Private temp root so leftover clone directories can be counted."""
    root = tmp_path / "clones"
    root.mkdir()
    return root


class FakeRunner:
    """Records git calls; checkout materializes the given files into the clone."""

    def __init__(self, files=None, fail_on=None):
        self.calls = []
        self.files = files if files is not None else {"docs/guide.md": "# Guide\n"}
        self.fail_on = fail_on
        self.workdir = None

    def run(self, *args, cwd=None):
        self.calls.append(args)
        if self.fail_on == args[0]:
            raise CommandError(["git", *args], 128)
        if args[0] == "clone":
            self.workdir = Path(args[-1])
            (self.workdir / ".git").mkdir()
        if args[0] == "checkout":
            for rel, content in self.files.items():
                path = self.workdir / rel
                path.parent.mkdir(parents=True, exist_ok=True)
                path.write_text(content, encoding="utf-8")

    def capture(self, *args, cwd=None):
        return "0123abcd\n"


@pytest.fixture
def fake_runner():
    return FakeRunner()
