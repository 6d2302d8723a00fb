"""
errors.py

Build failures. Every error carries the path that caused it so the CLI can
report the offending file.
"""

from __future__ import annotations

from pathlib import Path


class BuildError(RuntimeError):
    def __init__(self, message: str, path: Path) -> None:
        super().__init__(message)
        self.path = path


class IncludeResolutionError(BuildError):
    """An `{{include:...}}` target could not be read."""

    def __init__(self, path: Path) -> None:
        super().__init__(f"Failed to include: {path}", path)


class TemplateReadError(BuildError):
    def __init__(self, path: Path) -> None:
        super().__init__(f"Failed to read template: {path}", path)


class DirectoryAccessError(BuildError):
    """The source directory cannot be listed or the output directory cannot be created."""

    def __init__(self, path: Path, action: str) -> None:
        super().__init__(f"Failed to {action} directory: {path}", path)


class WriteError(BuildError):
    def __init__(self, path: Path) -> None:
        super().__init__(f"Failed to write output: {path}", path)
