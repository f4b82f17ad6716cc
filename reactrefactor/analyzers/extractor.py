"""Regex-based fact extraction for React component sources."""

from __future__ import annotations

import re
from typing import List, Tuple

from ..models import UNKNOWN_COMPONENT, ComponentFacts

_COMPONENT_DECL = re.compile(r"function\s+(\w+)|class\s+(\w+)")
_IMPORT_LINE = re.compile(r"import.*from.*")
_HOOK_CALL = re.compile(r"use\w+\(")
_PROP = re.compile(r"\{(\w+)\}|\s(\w+)=")
_JSX_TAG = re.compile(r"<(\w+)[^>]*>")


def extract_component(text: str, file_path: str = "") -> ComponentFacts:
    """Return the lexical facts for ``text``.

    Never raises: a pattern that does not match yields an empty tuple, or the
    ``"Unknown"`` sentinel for the component name.
    """
    return ComponentFacts(
        name=extract_name(text),
        props=extract_props(text),
        hooks=extract_hooks(text),
        imports=extract_imports(text),
        jsx_elements=extract_jsx(text),
        file_path=file_path,
        content=text,
    )


def extract_name(text: str) -> str:
    # Only the first declaration counts, whether function or class.
    match = _COMPONENT_DECL.search(text)
    if match is None:
        return UNKNOWN_COMPONENT
    return match.group(1) or match.group(2) or UNKNOWN_COMPONENT


def extract_props(text: str) -> Tuple[str, ...]:
    props: List[str] = []
    seen: set[str] = set()
    for match in _PROP.finditer(text):
        prop = match.group(1) or match.group(2)
        if prop and prop not in seen:
            seen.add(prop)
            props.append(prop)
    return tuple(props)


def extract_hooks(text: str) -> Tuple[str, ...]:
    return tuple(_HOOK_CALL.findall(text))


def extract_imports(text: str) -> Tuple[str, ...]:
    return tuple(_IMPORT_LINE.findall(text))


def extract_jsx(text: str) -> Tuple[str, ...]:
    return tuple(match.group(0) for match in _JSX_TAG.finditer(text))


__all__ = [
    "extract_component",
    "extract_hooks",
    "extract_imports",
    "extract_jsx",
    "extract_name",
    "extract_props",
]
