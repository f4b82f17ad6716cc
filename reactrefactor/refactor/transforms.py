"""Text transformations applied by the refactorer.

Each function takes source text and returns new text; when its pattern does
not apply the input comes back unchanged.
"""

from __future__ import annotations

import re
from typing import Iterable, List

from ..models import UNKNOWN_COMPONENT

MEMO_IMPORT = "import { memo } from 'react';"

_FRAMEWORK_MARKER = "react"
_RELATIVE_MARKER = "."
_IMPORT_BLOCK = re.compile(r"(?:import.*?\n)+", re.DOTALL)
_MODULE_PATH = re.compile(r"""from\s+(['"])(.*?)\1""")


def convert_to_arrow_function(content: str, component_name: str) -> str:
    """Rewrite ``function Name(args) {`` as ``const Name = (args) => {``."""
    if component_name == UNKNOWN_COMPONENT:
        return content
    pattern = re.compile(rf"function\s+{re.escape(component_name)}\s*\((.*?)\)\s*\{{")
    return pattern.sub(lambda match: f"const {component_name} = ({match.group(1)}) => {{", content)


def add_memo(content: str, component_name: str) -> str:
    """Wrap ``export default Name`` in ``memo(...)`` and import ``memo`` if needed."""
    export = re.compile(rf"export default {re.escape(component_name)}\b")
    if not export.search(content):
        return content
    if "import { memo }" not in content:
        content = f"{MEMO_IMPORT}\n{content}"
    return export.sub(f"export default memo({component_name})", content)


def module_path(statement: str) -> str:
    """Return the quoted module of an import statement, or the statement itself."""
    match = _MODULE_PATH.search(statement)
    if match is None:
        return statement.strip()
    return match.group(2)


def group_imports(imports: Iterable[str]) -> List[str]:
    """Order imports as framework, third-party, then relative; each group sorted."""
    framework: List[str] = []
    third_party: List[str] = []
    local: List[str] = []
    for statement in imports:
        if _FRAMEWORK_MARKER in statement:
            framework.append(statement)
        elif module_path(statement).startswith(_RELATIVE_MARKER):
            local.append(statement)
        else:
            third_party.append(statement)
    return sorted(framework) + sorted(third_party) + sorted(local)


def sort_imports(content: str, imports: Iterable[str]) -> str:
    """Replace the first contiguous run of import lines with ``imports`` regrouped."""
    ordered = group_imports(imports)
    if not ordered:
        return content
    replacement = "\n".join(ordered) + "\n\n"
    return _IMPORT_BLOCK.sub(lambda _match: replacement, content, count=1)


__all__ = [
    "MEMO_IMPORT",
    "add_memo",
    "convert_to_arrow_function",
    "group_imports",
    "module_path",
    "sort_imports",
]
