"""
cmdbuild: publish plugin command files from templates.

A template such as `src/commands/review.template.md` pulls shared fragments in
with `{{include:path}}`; the build writes the expanded `commands/review.md`.
Options live in `config.py`, placeholder handling in `expander.py`, the run
itself in `build.py`, and the command line in `cli.py`.
"""

from __future__ import annotations

__version__ = "0.1.0"
