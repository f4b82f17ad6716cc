"""Discovery of React component files under a project root."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Iterator, List

_EXCLUDED_DIRS = {"node_modules"}

_COMPONENT_SUFFIXES = {".jsx", ".tsx"}
_SCRIPT_SUFFIX = ".js"
_TEST_MARKER = ".test."


def is_component_file(path: Path) -> bool:
    """True for ``.jsx``/``.tsx`` files and ``.js`` files that are not tests."""
    suffix = path.suffix.lower()
    if suffix in _COMPONENT_SUFFIXES:
        return True
    return suffix == _SCRIPT_SUFFIX and _TEST_MARKER not in path.name


def _raise(error: OSError) -> None:
    raise error


def _iter_files(root: Path) -> Iterator[Path]:
    for dirpath, dirnames, filenames in os.walk(root, onerror=_raise):
        current_dir = Path(dirpath)
        dirnames[:] = sorted(
            name for name in dirnames
            if name not in _EXCLUDED_DIRS and not name.startswith(".")
        )
        for filename in sorted(filenames):
            path = current_dir / filename
            if is_component_file(path):
                yield path


class ComponentScanner:
    """Walks the project tree and lists candidate component files."""

    def scan(self, root: str | Path) -> List[Path]:
        """Return component paths below ``root``, skipping node_modules and dot-directories."""
        root_path = Path(root).expanduser().resolve()
        if not root_path.exists():
            raise FileNotFoundError(f"Project path does not exist: {root}")
        if not root_path.is_dir():
            raise NotADirectoryError(f"Project path is not a directory: {root}")
        return list(_iter_files(root_path))


__all__ = ["ComponentScanner", "is_component_file"]
