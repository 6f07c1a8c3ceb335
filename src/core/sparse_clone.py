"""Sparse clone of a single folder from a remote git repository.

The clone is shallow (one commit), single-branch and blob-filtered, so only
the contents of the selected folder are ever downloaded. The folder is copied
out of a throwaway clone, which is removed whether or not the copy succeeded.
"""

import shutil
import sys
import tempfile
from pathlib import Path
from typing import Optional

from src.core.files import report_files
from src.core.runner import CommandError, GitRunner
from src.core.workspace import temp_clone_dir


class DocsNotFoundError(FileNotFoundError):
    """The cloned repository has no folder at the requested path."""


def remove_path(path: Path) -> None:
    """Delete a file, symlink or directory tree. Symlinks are removed, never followed."""
    if path.is_symlink() or not path.is_dir():
        path.unlink()
    else:
        shutil.rmtree(path)


class SparseClone:
    """Clones one folder of a repository's default branch into a local directory."""

    def __init__(
        self,
        repo_url: str,
        target: str | Path,
        subdir: str = "docs",
        temp_prefix: str = "docs-clone",
        runner: Optional[GitRunner] = None,
        atomic: bool = True,
        temp_root: Optional[Path] = None,
    ):
        self.repo_url = repo_url
        self.target = Path(target)
        self.subdir = subdir
        self.temp_prefix = temp_prefix
        self.runner = runner or GitRunner()
        self.atomic = atomic
        self.temp_root = temp_root

    def clone(self, workdir: Path) -> None:
        """Clone without checkout, fetching the latest commit's trees only."""
        self.runner.run(
            "clone",
            "--no-checkout",
            "--filter=blob:none",
            "--depth=1",
            "--single-branch",
            self.repo_url,
            str(workdir),
        )

    def configure_sparse(self, workdir: Path) -> None:
        """Restrict the working tree to the requested folder (cone mode)."""
        self.runner.run("config", "core.sparseCheckout", "true", cwd=workdir)
        self.runner.run("sparse-checkout", "init", "--cone", cwd=workdir)
        self.runner.run("sparse-checkout", "set", self.subdir, cwd=workdir)

    def checkout(self, workdir: Path) -> None:
        print(f"Checking out only {self.subdir} folder...")
        self.runner.run("checkout", cwd=workdir)

    def describe(self, workdir: Path) -> None:
        """Print the checked out commit. Failures only produce a warning."""
        try:
            commit = self.runner.capture("rev-parse", "HEAD", cwd=workdir).strip()
        except CommandError as e:
            print(f"Warning: could not read checked out commit: {e}", file=sys.stderr)
            return
        print(f"Checked out commit {commit}")

    def remove_target(self) -> None:
        if self.target.exists() or self.target.is_symlink():
            print(f"Removing existing {self.target}...")
            remove_path(self.target)

    def install(self, source: Path) -> None:
        """Copy source to the target path, replacing whatever was there."""
        print(f"Copying {self.subdir} folder to {self.target}...")
        self.target.parent.mkdir(parents=True, exist_ok=True)

        if not self.atomic:
            shutil.copytree(source, self.target)
            return

        # Staging lives next to the target so both renames stay on one filesystem
        staging_root = Path(
            tempfile.mkdtemp(prefix=f".{self.target.name}.staging-", dir=self.target.parent)
        )
        try:
            staged = staging_root / "new"
            previous = staging_root / "old"
            shutil.copytree(source, staged)

            # Old target moves aside and goes away with staging_root
            if self.target.exists() or self.target.is_symlink():
                print(f"Replacing existing {self.target}...")
                self.target.rename(previous)
            try:
                staged.rename(self.target)
            except OSError:
                if previous.exists() or previous.is_symlink():
                    previous.rename(self.target)
                raise
        finally:
            if staging_root.exists():
                shutil.rmtree(staging_root)

    def run(self) -> Path:
        """
        Run the full clone-and-copy process.

        Returns:
            The target directory, now holding a copy of the remote folder

        Raises:
            CommandError: A git command failed
            DocsNotFoundError: The folder does not exist on the default branch
        """
        print(f"Starting sparse clone of {self.subdir} folder from {self.repo_url}")

        with temp_clone_dir(self.temp_prefix, self.temp_root) as workdir:
            if not self.atomic:
                self.remove_target()

            print(f"Creating sparse clone in: {workdir}")
            self.clone(workdir)
            self.configure_sparse(workdir)
            self.checkout(workdir)

            print("Verifying sparse checkout contents...")
            self.describe(workdir)
            report_files("Files checked out", workdir)

            source = workdir / self.subdir
            if not source.is_dir():
                raise DocsNotFoundError(
                    f"{self.subdir.capitalize()} folder not found in cloned repository"
                    f" - the repository might not have a {self.subdir} folder"
                )

            self.install(source)
            print(f"Successfully copied {self.subdir} folder to {self.target}")
            report_files(f"Final result - files in {self.target}", self.target)

        return self.target
