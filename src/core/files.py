"""File listing helpers used for progress output."""

import os
import sys
from pathlib import Path


def list_files(root: str | Path, skip_hidden: bool = True) -> list[Path]:
    """Return all regular files below root, relative to it, sorted.

    Dot-directories and dot-files are pruned when skip_hidden is set.
    Errors while walking are raised rather than skipped.
    """
    root_path = Path(root)
    if not root_path.is_dir():
        raise NotADirectoryError(f"Not a directory: {root_path}")

    def on_error(error: OSError) -> None:
        raise error

    files: list[Path] = []
    for dirpath, dirnames, filenames in os.walk(root_path, onerror=on_error):
        if skip_hidden:
            dirnames[:] = [d for d in dirnames if not d.startswith(".")]
        for filename in filenames:
            if skip_hidden and filename.startswith("."):
                continue
            files.append((Path(dirpath) / filename).relative_to(root_path))

    return sorted(files)


def report_files(label: str, root: str | Path, skip_hidden: bool = True) -> bool:
    """Print the files below root. Never raises; returns False if listing failed."""
    try:
        files = list_files(root, skip_hidden=skip_hidden)
    except OSError as e:
        print(f"Warning: could not list files in {root}: {e}", file=sys.stderr)
        return False

    print(f"{label}: {len(files)} files")
    for path in files:
        print(f"  {path.as_posix()}")
    return True
