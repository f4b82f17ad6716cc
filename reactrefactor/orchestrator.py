"""Pipeline orchestration: discover, analyze, report, then rewrite."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, List, Optional

from .analyzers import ProjectAnalyzer, default_analyzers, evaluate_component, extract_component
from .config import ConfigError, default_config, load_config
from .logging import get_logger
from .models import ComponentFacts, RefactorConfig, Report
from .refactor import Formatter, RefactorError, Refactorer
from .report import build_component_report
from .scanner import ComponentScanner


class RefactorTool:
    """Coordinates one analysis/refactoring run over a React project."""

    def __init__(
        self,
        project_path: str | Path,
        *,
        config: RefactorConfig | None = None,
        scanner: ComponentScanner | None = None,
        analyzers: Optional[Iterable[ProjectAnalyzer]] = None,
        refactorer: Refactorer | None = None,
        formatter: Formatter | None = None,
    ) -> None:
        self.project_path = Path(project_path).expanduser().resolve()
        self.config = config or default_config()
        self.scanner = scanner or ComponentScanner()
        self.analyzers = list(analyzers) if analyzers is not None else default_analyzers()
        self.refactorer = refactorer or Refactorer(self.config)
        self.refactorer.set_config(self.config)
        self.formatter = formatter or Formatter()
        self.components: List[ComponentFacts] = []
        self.logger = get_logger("orchestrator")

    def set_config(self, config: RefactorConfig) -> None:
        """Replace the whole configuration; only valid before a run starts."""
        self.config = config
        self.refactorer.set_config(config)

    def load_config(self, path: str | Path) -> bool:
        """Load ``path`` into the tool; keep the current config on failure.

        Returns True when the file was loaded (or absent, meaning defaults).
        """
        try:
            config = load_config(Path(path))
        except ConfigError as exc:
            self.logger.warning("Could not load config file: %s", exc)
            return False
        self.set_config(config)
        return True

    def analyze_project(self) -> Report:
        """Scan, extract and evaluate every component, then run project analyzers."""
        self.logger.info("Starting project analysis for %s", self.project_path)
        files = self.scanner.scan(self.project_path)
        self.logger.debug("Scanner discovered %d component files", len(files))

        report = Report()
        report.statistics.total_components = len(files)
        self.components = []

        for path in files:
            self.logger.debug("Analyzing component: %s", path)
            facts = self._parse_component(path)
            if facts is None:
                continue
            self.components.append(facts)

            suggestions = evaluate_component(facts, self.config)
            report.components.append(build_component_report(facts, suggestions))
            if suggestions:
                report.statistics.components_with_issues += 1
                report.statistics.total_suggestions += len(suggestions)

        for analyzer in self.analyzers:
            report.global_suggestions.extend(analyzer.analyze(self.project_path, self.components))

        self.logger.info(
            "Analyzed %d components, %d with issues",
            len(self.components),
            report.statistics.components_with_issues,
        )
        return report

    def apply_refactoring(self, *, run_formatter: bool = True) -> int:
        """Rewrite every analyzed component, then format the project.

        Returns the number of files whose content changed. The first failed
        rewrite aborts the run; files already rewritten stay rewritten.
        """
        if not self.components:
            raise RefactorError("no components to refactor")

        changed = 0
        for facts in self.components:
            self.logger.debug("Refactoring component: %s", facts.file_path)
            try:
                if self.refactorer.apply(facts):
                    changed += 1
            except RefactorError as exc:
                raise RefactorError(f"error refactoring {facts.file_path}: {exc}") from exc

        if run_formatter:
            self.formatter.format(self.project_path)
        self.logger.info("Refactored %d of %d components", changed, len(self.components))
        return changed

    def _parse_component(self, path: Path) -> ComponentFacts | None:
        try:
            with path.open(encoding="utf-8", newline="") as handle:
                text = handle.read()
        except (OSError, UnicodeDecodeError) as exc:
            self.logger.warning("Error parsing component %s: %s", path, exc)
            return None
        return extract_component(text, str(path))


__all__ = ["RefactorTool"]
