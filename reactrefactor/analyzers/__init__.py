"""Component extraction, per-file rules, and the project analyzer set."""

from __future__ import annotations

from typing import List

from .base import ProjectAnalyzer
from .extractor import extract_component
from .project import DependencyAnalyzer, StructureAnalyzer, analyze_dependencies, analyze_structure
from .rules import count_lines, evaluate_component


def default_analyzers() -> List[ProjectAnalyzer]:
    """Layout check first, then shared-import check; the report keeps this order."""
    return [StructureAnalyzer(), DependencyAnalyzer()]


__all__ = [
    "DependencyAnalyzer",
    "ProjectAnalyzer",
    "StructureAnalyzer",
    "analyze_dependencies",
    "analyze_structure",
    "count_lines",
    "default_analyzers",
    "evaluate_component",
    "extract_component",
]
