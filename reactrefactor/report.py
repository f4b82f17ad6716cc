"""Report assembly and rendering (JSON and plain text)."""

from __future__ import annotations

import json
from typing import Sequence

from jinja2 import Environment, StrictUndefined

from .analyzers.rules import count_lines
from .models import ComponentFacts, ComponentMetrics, ComponentReport, Report

OUTPUT_FORMATS: tuple[str, ...] = ("json", "text")

_TEXT_TEMPLATE = """
Analysis Report:
Total Components: {{ stats.total_components }}
Components with Issues: {{ stats.components_with_issues }}
Total Suggestions: {{ stats.total_suggestions }}

{% if report.global_suggestions %}
Global Suggestions:
{% for suggestion in report.global_suggestions %}
- {{ suggestion }}
{% endfor %}

{% endif %}
Component Analysis:
{% for component in report.components if component.suggestions %}

{{ component.name }} ({{ component.file }}):
{% for suggestion in component.suggestions %}
  - {{ suggestion }}
{% endfor %}
{% endfor %}
"""

_env = Environment(
    autoescape=False,
    trim_blocks=True,
    lstrip_blocks=True,
    undefined=StrictUndefined,
)
_text_template = _env.from_string(_TEXT_TEMPLATE)


def build_component_report(facts: ComponentFacts, suggestions: Sequence[str]) -> ComponentReport:
    return ComponentReport(
        name=facts.name,
        file=facts.file_path,
        suggestions=list(suggestions),
        metrics=ComponentMetrics(
            lines=count_lines(facts.content),
            hooks=len(facts.hooks),
            props=len(facts.props),
        ),
    )


def check_format(fmt: str) -> str:
    """Validate an output format name before any analysis runs."""
    if fmt not in OUTPUT_FORMATS:
        raise ValueError(f"unknown output format: {fmt}")
    return fmt


def render_json(report: Report) -> str:
    return json.dumps(report.to_dict(), indent=2) + "\n"


def render_text(report: Report) -> str:
    """Summary counts, global suggestions, then only components with suggestions."""
    return _text_template.render(report=report, stats=report.statistics)


def render_report(report: Report, fmt: str) -> str:
    if check_format(fmt) == "json":
        return render_json(report)
    return render_text(report)


__all__ = [
    "OUTPUT_FORMATS",
    "build_component_report",
    "check_format",
    "render_json",
    "render_text",
    "render_report",
]
