"""Tests for reactrefactor.orchestrator."""

from __future__ import annotations

from pathlib import Path

import pytest

from reactrefactor.analyzers import DependencyAnalyzer, StructureAnalyzer
from reactrefactor.models import RefactorConfig
from reactrefactor.orchestrator import RefactorTool
from reactrefactor.refactor import Formatter, FormatterError, RefactorError, backup_path

STATE_IMPORT = "import React, { useState } from 'react';"


class RecordingFormatter(Formatter):
    """Formatter double that records invocations instead of running prettier."""

    def __init__(self, fail: bool = False) -> None:
        super().__init__(runner=self._record)
        self.roots: list[Path] = []
        self.fail = fail

    def _record(self, args, cwd) -> None:
        self.roots.append(Path(cwd))
        if self.fail:
            raise FileNotFoundError(args[0])


def _tool(root: Path, **kwargs) -> RefactorTool:
    kwargs.setdefault("analyzers", [StructureAnalyzer(), DependencyAnalyzer()])
    kwargs.setdefault("formatter", RecordingFormatter())
    return RefactorTool(root, **kwargs)


def _seed(project) -> None:
    project.write(
        {
            "src/components/Counter.jsx": f"""
                {STATE_IMPORT}

                function Counter() {{
                  const [a, setA] = useState(0);
                  const [b, setB] = useState(0);
                  return <span>{{a}}</span>;
                }}

                export default Counter;
            """,
            "src/components/Toggle.jsx": f"""
                {STATE_IMPORT}

                function Toggle() {{
                  const [on, setOn] = useState(false);
                  return <button>{{on}}</button>;
                }}

                export default Toggle;
            """,
            "src/App.test.js": "test('renders', () => {});\n",
        }
    )


def test_analyze_project_builds_report(project) -> None:
    _seed(project)
    tool = _tool(project.path(), config=RefactorConfig(max_hooks=1))

    report = tool.analyze_project()

    assert report.statistics.total_components == 2
    assert report.statistics.components_with_issues == 1
    assert report.statistics.total_suggestions == 1
    names = {entry.name: entry for entry in report.components}
    assert names["Counter"].suggestions == ["Too many hooks (2). Consider custom hooks"]
    assert names["Counter"].metrics.hooks == 2
    assert names["Toggle"].suggestions == []
    assert len(tool.components) == 2

    structure = [s for s in report.global_suggestions if "directory" in s]
    assert report.global_suggestions[: len(structure)] == structure
    assert "Consider adding a 'components' directory for better organization" not in structure
    assert len(structure) == 4
    assert report.global_suggestions[-1] == (
        f"Consider creating a custom hook for commonly used state logic ({STATE_IMPORT})"
    )


def test_unreadable_files_are_skipped(project) -> None:
    project.write({"src/Good.jsx": "function Good() {}\n"})
    (project.path("src") / "Bad.jsx").write_bytes(b"\xff\xfe\x00broken")

    tool = _tool(project.path())
    report = tool.analyze_project()

    assert report.statistics.total_components == 2
    assert [entry.name for entry in report.components] == ["Good"]


def test_apply_refactoring_rewrites_then_formats(project) -> None:
    _seed(project)
    formatter = RecordingFormatter()
    tool = _tool(project.path(), formatter=formatter)
    tool.analyze_project()
    original = project.read("src/components/Counter.jsx")

    changed = tool.apply_refactoring()

    assert changed == 2
    rewritten = project.read("src/components/Counter.jsx")
    assert "const Counter = () => {" in rewritten
    assert backup_path(project.path("src/components/Counter.jsx")).read_text(
        encoding="utf-8"
    ) == original
    assert formatter.roots == [project.path().resolve()]


def test_apply_refactoring_can_skip_formatter(project) -> None:
    _seed(project)
    formatter = RecordingFormatter()
    tool = _tool(project.path(), formatter=formatter)
    tool.analyze_project()

    tool.apply_refactoring(run_formatter=False)

    assert formatter.roots == []


def test_apply_refactoring_without_components_fails(project) -> None:
    tool = _tool(project.path())
    tool.analyze_project()

    with pytest.raises(RefactorError, match="no components to refactor"):
        tool.apply_refactoring()


def test_formatter_failure_keeps_rewrites(project) -> None:
    _seed(project)
    tool = _tool(project.path(), formatter=RecordingFormatter(fail=True))
    tool.analyze_project()

    with pytest.raises(FormatterError):
        tool.apply_refactoring()

    assert "const Toggle = () => {" in project.read("src/components/Toggle.jsx")


def test_rewrite_failure_names_the_file(project) -> None:
    project.write({"src/A.jsx": "function A() {}\n"})
    tool = _tool(project.path())
    tool.analyze_project()
    backup_path(project.path("src/A.jsx").resolve()).mkdir()

    with pytest.raises(RefactorError, match="error refactoring .*A.jsx"):
        tool.apply_refactoring()


def test_load_config_replaces_config_for_refactorer(project) -> None:
    project.write({".reactrefactor.yml": "useArrowFuncs: false\nmaxHooks: 1\n"})
    tool = _tool(project.path())

    assert tool.load_config(project.path()) is True

    assert tool.config.max_hooks == 1
    assert tool.refactorer.config.use_arrow_funcs is False


def test_broken_config_keeps_defaults(project, caplog: pytest.LogCaptureFixture) -> None:
    project.write({"broken.yml": "maxLines: [1\n"})
    tool = _tool(project.path())

    with caplog.at_level("WARNING", logger="reactrefactor"):
        loaded = tool.load_config(project.path("broken.yml"))

    assert loaded is False
    assert tool.config == RefactorConfig()
    assert "Could not load config file" in caplog.text
