"""Temporary work directories for throwaway clones."""

import shutil
import tempfile
import time
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, Optional


def make_temp_dir(prefix: str, root: Optional[Path] = None) -> Path:
    """Create a uniquely named directory under the system temp dir (or root)."""
    stamp = int(time.time() * 1000)
    return Path(tempfile.mkdtemp(prefix=f"{prefix}-{stamp}-", dir=root))


@contextmanager
def temp_clone_dir(prefix: str, root: Optional[Path] = None) -> Iterator[Path]:
    """
    Yield a fresh temporary directory and remove it on every exit path.

    Removal errors are not suppressed, so a failed cleanup becomes the
    error of the enclosing operation.
    """
    path = make_temp_dir(prefix, root)
    try:
        yield path
    finally:
        if path.exists():
            print("Cleaning up temporary directory...")
            shutil.rmtree(path)
