"""Project-wide analyzers: directory layout and shared state imports."""

from __future__ import annotations

from collections import Counter
from pathlib import Path
from typing import List, Sequence

from .base import ProjectAnalyzer
from ..models import ComponentFacts

EXPECTED_DIRS: tuple[str, ...] = ("components", "pages", "hooks", "utils", "services")

_STATE_HOOK_MARKER = "useState"


def analyze_structure(project_root: Path | str) -> List[str]:
    """Suggest each conventional ``src/`` directory that is missing, in fixed order."""
    src = Path(project_root) / "src"
    suggestions: List[str] = []
    for name in EXPECTED_DIRS:
        if not (src / name).exists():
            suggestions.append(f"Consider adding a '{name}' directory for better organization")
    return suggestions


def analyze_dependencies(components: Sequence[ComponentFacts]) -> List[str]:
    """Flag state imports shared by more than half of the components.

    Imports are compared as raw strings. Callers must not rely on the relative
    order of the returned suggestions.
    """
    counts: Counter[str] = Counter()
    for component in components:
        counts.update(component.imports)

    threshold = len(components) // 2
    suggestions: List[str] = []
    for statement, count in counts.items():
        if count > threshold and _STATE_HOOK_MARKER in statement:
            suggestions.append(
                "Consider creating a custom hook for commonly used state logic "
                f"({statement})"
            )
    return suggestions


class StructureAnalyzer(ProjectAnalyzer):
    """Checks for the conventional React source layout."""

    def analyze(self, root: Path, components: Sequence[ComponentFacts]) -> List[str]:
        return analyze_structure(root)


class DependencyAnalyzer(ProjectAnalyzer):
    """Looks for state-hook imports repeated across most components."""

    def analyze(self, root: Path, components: Sequence[ComponentFacts]) -> List[str]:
        return analyze_dependencies(components)


__all__ = [
    "DependencyAnalyzer",
    "EXPECTED_DIRS",
    "StructureAnalyzer",
    "analyze_dependencies",
    "analyze_structure",
]
