"""intern3.chat documentation sync module."""

from pathlib import Path
from typing import Optional

from src.core.runner import GitRunner
from src.core.sparse_clone import SparseClone
from src.modules.base import BaseModule
from src.modules.intern3 import config


class Intern3Module(BaseModule):
    """Syncs the docs folder of the intern3-chat repository via sparse clone."""

    @property
    def default_output(self) -> Path:
        return Path(config.OUTPUT_DIR)

    def __init__(
        self,
        repo_url: Optional[str] = None,
        atomic: bool = True,
        runner: Optional[GitRunner] = None,
    ):
        self.repo_url = repo_url or config.REPO_URL
        self.atomic = atomic
        self.runner = runner

    def run(self, output_dir: str | Path | None = None) -> Path:
        """Replace output_dir with the repository's docs folder."""
        target = Path(output_dir) if output_dir else self.default_output
        clone = SparseClone(
            repo_url=self.repo_url,
            target=target,
            subdir=config.DOCS_PATH,
            temp_prefix=config.TEMP_PREFIX,
            runner=self.runner,
            atomic=self.atomic,
        )
        return clone.run()
