"""Recursive discovery of rule files."""

from __future__ import annotations

import logging
import os
from collections.abc import Iterable
from pathlib import Path

from ai_linter.config import DEFAULT_EXCLUDED_DIRS, DEFAULT_RULE_FILE_NAME
from ai_linter.lint.models import RuleFile

logger = logging.getLogger(__name__)


def scan_for_rule_files(
    root: Path,
    *,
    file_name: str = DEFAULT_RULE_FILE_NAME,
    excluded_dirs: Iterable[str] = DEFAULT_EXCLUDED_DIRS,
) -> list[RuleFile]:
    """Find every rule file under ``root``, skipping excluded directory names.

    Hidden directories are searched too. Results are sorted by path.
    """

    root = root.resolve()
    excluded = set(excluded_dirs)
    paths: list[Path] = []
    for dirpath, dirnames, filenames in os.walk(root):
        dirnames[:] = sorted(name for name in dirnames if name not in excluded)
        if file_name in filenames:
            paths.append(Path(dirpath) / file_name)

    rule_files = [
        RuleFile(path=path, directory=path.parent, content=path.read_text("utf-8"))
        for path in sorted(paths)
    ]
    logger.debug("Found %d rule file(s) under %s", len(rule_files), root)
    return rule_files
