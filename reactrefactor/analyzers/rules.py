"""Per-component threshold rules."""

from __future__ import annotations

from typing import List

from ..models import ComponentFacts, RefactorConfig


def count_lines(text: str) -> int:
    """Number of newline-separated segments; an empty file is one line."""
    return len(text.split("\n"))


def evaluate_component(facts: ComponentFacts, config: RefactorConfig) -> List[str]:
    """Return suggestions for ``facts`` in fixed order: size, hooks, props."""
    suggestions: List[str] = []

    lines = count_lines(facts.content)
    if lines > config.max_lines:
        suggestions.append(f"Component is too large ({lines} lines). Consider splitting it")

    if len(facts.hooks) > config.max_hooks:
        suggestions.append(f"Too many hooks ({len(facts.hooks)}). Consider custom hooks")

    if len(facts.props) > config.max_props:
        suggestions.append(f"Too many props ({len(facts.props)}). Consider composition")

    return suggestions


__all__ = ["count_lines", "evaluate_component"]
