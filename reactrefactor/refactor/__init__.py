"""Mechanical rewrites of component files and the post-rewrite formatter."""

from .formatter import Formatter, FormatterError
from .rewriter import BACKUP_SUFFIX, RefactorError, Refactorer, backup_path

__all__ = [
    "BACKUP_SUFFIX",
    "Formatter",
    "FormatterError",
    "RefactorError",
    "Refactorer",
    "backup_path",
]
