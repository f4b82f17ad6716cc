"""Base class for project-level analyzer plugins."""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import List, Sequence

from ..models import ComponentFacts


class ProjectAnalyzer(ABC):
    """Contract for analyzers that look at the whole project at once."""

    @abstractmethod
    def analyze(self, root: Path, components: Sequence[ComponentFacts]) -> List[str]:
        """Return human-readable project suggestions."""
