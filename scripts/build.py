"""
Build the plugin's command files.

Expands `{{include:path}}` placeholders in `src/commands/*.template.md` and
writes the results to `commands/`. The plugin root is this script's parent
directory's parent, regardless of the working directory.
"""

from __future__ import annotations

from pathlib import Path

from cmdbuild.cli import main

PLUGIN_ROOT = Path(__file__).resolve().parent.parent


if __name__ == "__main__":
    raise SystemExit(main(["--root", str(PLUGIN_ROOT)]))
