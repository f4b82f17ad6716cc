"""Backup-guarded in-place rewriting of component files."""

from __future__ import annotations

from pathlib import Path
from typing import List

from ..config import default_config
from ..logging import get_logger
from ..models import ComponentFacts, RefactorConfig
from .transforms import MEMO_IMPORT, add_memo, convert_to_arrow_function, sort_imports

BACKUP_SUFFIX = ".backup"


class RefactorError(RuntimeError):
    """Raised when a backup or the rewritten file cannot be written."""


def backup_path(file_path: str | Path) -> Path:
    return Path(f"{file_path}{BACKUP_SUFFIX}")


class Refactorer:
    """Applies the arrow, memo and import-order rewrites to component files."""

    def __init__(self, config: RefactorConfig | None = None) -> None:
        self.config = config or default_config()
        self.logger = get_logger("refactor")

    def set_config(self, config: RefactorConfig) -> None:
        self.config = config

    def transform(self, facts: ComponentFacts) -> str:
        """Return the rewritten text for ``facts`` without touching the disk."""
        config = self.config
        content = facts.content

        if config.use_arrow_funcs and "function " in content:
            content = convert_to_arrow_function(content, facts.name)

        memo_added = False
        if config.use_memo and len(facts.props) > 2 and "memo" not in content:
            wrapped = add_memo(content, facts.name)
            # "memo" was absent, so any change means the import was prepended too.
            memo_added = wrapped != content
            content = wrapped

        if config.sort_imports and facts.imports:
            imports: List[str] = list(facts.imports)
            if memo_added:
                imports.append(MEMO_IMPORT)
                # Regroup the prepended memo import into the existing block, which
                # may sit below a header comment.
                stripped = content.removeprefix(f"{MEMO_IMPORT}\n")
                regrouped = sort_imports(stripped, imports)
                content = regrouped if regrouped != stripped else sort_imports(content, imports)
            else:
                content = sort_imports(content, imports)

        return content

    def apply(self, facts: ComponentFacts) -> bool:
        """Back up the original text, then write the rewritten file.

        Returns True when the rewritten text differs from the original. A
        failed backup leaves the source untouched; a failed write leaves the
        backup in place and is not rolled back.
        """
        target = Path(facts.file_path)
        backup = backup_path(target)
        try:
            backup.write_text(facts.content, encoding="utf-8", newline="")
        except OSError as exc:
            raise RefactorError(f"error creating backup {backup}: {exc}") from exc

        content = self.transform(facts)

        try:
            target.write_text(content, encoding="utf-8", newline="")
        except OSError as exc:
            raise RefactorError(f"error writing refactored content to {target}: {exc}") from exc

        changed = content != facts.content
        self.logger.debug("Rewrote %s (%s)", target, "changed" if changed else "unchanged")
        return changed


__all__ = ["BACKUP_SUFFIX", "RefactorError", "Refactorer", "backup_path"]
