"""External code formatter invocation (prettier)."""

from __future__ import annotations

import subprocess
from pathlib import Path
from typing import Callable, Iterable, Sequence

DEFAULT_COMMAND: tuple[str, ...] = ("npx", "prettier", "--write", ".")


class FormatterError(RuntimeError):
    """Raised when the formatter is missing or exits with a non-zero status."""


class Formatter:
    """Runs the project formatter once all rewrites are on disk."""

    def __init__(
        self,
        runner: Callable[..., None] | None = None,
        command: Sequence[str] = DEFAULT_COMMAND,
    ) -> None:
        self._runner = runner or self._default_runner
        self.command = tuple(command)

    def format(self, project_root: Path | str) -> None:
        root = Path(project_root)
        try:
            self._runner(self.command, cwd=root)
        except FileNotFoundError as exc:
            raise FormatterError(f"formatter executable not found: {self.command[0]}") from exc
        except OSError as exc:
            raise FormatterError(f"formatter could not be started: {exc}") from exc
        except subprocess.CalledProcessError as exc:
            raise FormatterError(
                f"formatter exited with status {exc.returncode}: {' '.join(self.command)}"
            ) from exc

    @staticmethod
    def _default_runner(args: Iterable[str], *, cwd: Path) -> None:
        subprocess.run(list(args), cwd=str(cwd), check=True, text=True)


__all__ = ["DEFAULT_COMMAND", "Formatter", "FormatterError"]
