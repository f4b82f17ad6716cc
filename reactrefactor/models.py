"""Core data models shared across reactrefactor components."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Tuple

UNKNOWN_COMPONENT = "Unknown"


@dataclass(frozen=True)
class ComponentFacts:
    """Lexical facts extracted from one component source file.

    ``content`` is the text the facts were extracted from; the rewriter works
    on it directly instead of re-reading the file.
    """

    name: str
    props: Tuple[str, ...]
    hooks: Tuple[str, ...]
    imports: Tuple[str, ...]
    jsx_elements: Tuple[str, ...]
    file_path: str
    content: str


@dataclass(frozen=True)
class RefactorConfig:
    """Thresholds for suggestions and switches for the rewrite steps."""

    max_lines: int = 300
    max_hooks: int = 5
    max_props: int = 10
    use_memo: bool = True
    use_arrow_funcs: bool = True
    sort_imports: bool = True

    def to_dict(self) -> Dict[str, Any]:
        return {
            "maxLines": self.max_lines,
            "maxHooks": self.max_hooks,
            "maxProps": self.max_props,
            "useMemo": self.use_memo,
            "useArrowFuncs": self.use_arrow_funcs,
            "sortImports": self.sort_imports,
        }


@dataclass
class ComponentMetrics:
    lines: int
    hooks: int
    props: int

    def to_dict(self) -> Dict[str, int]:
        return {"lines": self.lines, "hooks": self.hooks, "props": self.props}


@dataclass
class ComponentReport:
    """Per-file entry of the analysis report."""

    name: str
    file: str
    suggestions: List[str]
    metrics: ComponentMetrics

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "file": self.file,
            "suggestions": list(self.suggestions),
            "metrics": self.metrics.to_dict(),
        }


@dataclass
class Statistics:
    total_components: int = 0
    components_with_issues: int = 0
    total_suggestions: int = 0

    def to_dict(self) -> Dict[str, int]:
        return {
            "totalComponents": self.total_components,
            "componentsWithIssues": self.components_with_issues,
            "totalSuggestions": self.total_suggestions,
        }


@dataclass
class Report:
    """Overall result of one analysis run."""

    components: List[ComponentReport] = field(default_factory=list)
    global_suggestions: List[str] = field(default_factory=list)
    statistics: Statistics = field(default_factory=Statistics)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "components": [component.to_dict() for component in self.components],
            "globalSuggestions": list(self.global_suggestions),
            "statistics": self.statistics.to_dict(),
        }
