"""Abstract base class for documentation sources."""

from abc import ABC, abstractmethod
from pathlib import Path


class BaseModule(ABC):
    """Base class that all documentation sources must implement."""

    @property
    @abstractmethod
    def default_output(self) -> Path:
        """Where the documentation lands when no output directory is given."""
        pass

    @abstractmethod
    def run(self, output_dir: Path) -> Path:
        """
        Run the full documentation sync process.

        Args:
            output_dir: Directory to replace with the synced documentation

        Returns:
            The directory holding the synced documentation
        """
        pass
