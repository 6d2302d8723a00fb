"""
build.py

Responsibility: Expand every command template in the source directory into the output directory.

Rules:
- Templates are discovered in sorted name order so repeated builds are reproducible.
- Only names ending with the template suffix are considered.
- Each template is expanded fully before its output is written; a failing
  template leaves no output of its own.
- Outputs are overwritten unconditionally. Line endings are kept as authored.
- The first failure aborts the run. This module raises; it never exits the process.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from cmdbuild.config import BuildConfig
from cmdbuild.errors import DirectoryAccessError, TemplateReadError, WriteError
from cmdbuild.expander import expand_includes, find_includes, read_verbatim

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BuildResult:
    # (template path, output path) in processing order
    outputs: tuple[tuple[Path, Path], ...]


def output_name_for(template_name: str, config: BuildConfig) -> str:
    """
    Derive the output file name, e.g. `foo.template.md` -> `foo.md`.
    """
    if not template_name.endswith(config.template_suffix):
        raise ValueError(f"Not a template file name: {template_name}")
    stem = template_name[: -len(config.template_suffix)]
    return stem + config.output_suffix


def discover_templates(config: BuildConfig) -> list[str]:
    src_dir = config.source_path
    try:
        names = [p.name for p in src_dir.iterdir()]
    except OSError as e:
        raise DirectoryAccessError(src_dir, "list") from e
    return sorted(name for name in names if name.endswith(config.template_suffix))


def _ensure_output_dir(path: Path) -> None:
    try:
        path.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise DirectoryAccessError(path, "create") from e


def _read_template(path: Path) -> str:
    try:
        return read_verbatim(path)
    except (OSError, ValueError) as e:
        raise TemplateReadError(path) from e


def _write_output(path: Path, text: str) -> None:
    try:
        path.write_text(text, encoding="utf-8", newline="")
    except OSError as e:
        raise WriteError(path) from e


def build_template(template_path: Path, output_path: Path, config: BuildConfig) -> None:
    content = _read_template(template_path)
    logger.debug("%s includes: %s", template_path.name, ", ".join(find_includes(content)) or "(none)")
    expanded = expand_includes(content, config.base_path)
    _write_output(output_path, expanded)


def build(config: BuildConfig) -> BuildResult:
    logger.info("Building commands...")

    _ensure_output_dir(config.output_path)

    outputs: list[tuple[Path, Path]] = []
    for name in discover_templates(config):
        output_name = output_name_for(name, config)
        logger.info("  %s -> %s", name, output_name)

        template_path = config.source_path / name
        output_path = config.output_path / output_name
        build_template(template_path, output_path, config)
        outputs.append((template_path, output_path))

    logger.info("Build complete!")
    return BuildResult(outputs=tuple(outputs))
