"""
expander.py

Responsibility: Replace `{{include:path}}` placeholders with file contents.

Rules:
- Paths are resolved against the given base directory, even when they start with `/`.
- Included files are read as UTF-8, line endings untouched, and stripped of
  surrounding whitespace.
- Placeholders are handled first to last in a single pass. Included text is
  inserted verbatim and never scanned for further placeholders.
- Any unreadable include aborts the expansion; no partial text is returned.
"""

from __future__ import annotations

import logging
import re
from pathlib import Path

from cmdbuild.errors import IncludeResolutionError

logger = logging.getLogger(__name__)

# Non-greedy: a path never contains `}}`.
INCLUDE_PATTERN = re.compile(r"\{\{include:(.+?)\}\}")


def find_includes(content: str) -> list[str]:
    """Return the include paths referenced by `content`, in occurrence order."""
    return [m.group(1) for m in INCLUDE_PATTERN.finditer(content)]


def resolve_include(base_path: Path, relative_path: str) -> Path:
    # A leading "/" still means "from the base", never the filesystem root.
    return base_path / relative_path.lstrip("/\\")


def read_verbatim(path: Path) -> str:
    """Read UTF-8 text without translating line endings."""
    with path.open(encoding="utf-8", newline="") as f:
        return f.read()


def _read_include(file_path: Path) -> str:
    try:
        return read_verbatim(file_path).strip()
    except (OSError, ValueError) as e:
        # ValueError covers undecodable bytes and NUL characters in the path.
        logger.error("Failed to include: %s", file_path)
        raise IncludeResolutionError(file_path) from e


def expand_includes(content: str, base_path: str | Path) -> str:
    base = Path(base_path)

    def _substitute(match: re.Match[str]) -> str:
        file_path = resolve_include(base, match.group(1))
        logger.debug("Including %s", file_path)
        return _read_include(file_path)

    return INCLUDE_PATTERN.sub(_substitute, content)
