"""Add processor jars to an existing Eclipse .classpath."""

from __future__ import annotations

import logging
import xml.etree.ElementTree as ET
from pathlib import Path

from aptwire.idea.document import ProjectDocument, append_child

logger = logging.getLogger(__name__)


def _entry_path(jar: Path, project_dir: Path) -> str:
    try:
        return jar.relative_to(project_dir.resolve()).as_posix()
    except ValueError:
        return jar.as_posix()


def add_library_entries(document: ProjectDocument, jars: list[Path], project_dir: Path) -> int:
    """Append a ``kind="lib"`` classpathentry per jar not already listed."""
    root = document.root
    known = {e.get("path") for e in root.findall("classpathentry") if e.get("kind") == "lib"}
    added = 0
    for jar in jars:
        path = _entry_path(jar, project_dir)
        if path in known:
            continue
        entry = ET.Element("classpathentry", {"kind": "lib", "path": path})
        append_child(root, entry, "", "\t")
        known.add(path)
        added += 1
    return added


def update_classpath_file(
    path: Path,
    jars: list[Path],
    project_dir: Path,
    dry_run: bool = False,
) -> str:
    """Returns "updated" or "unchanged"."""
    document = ProjectDocument.parse(path)
    if not add_library_entries(document, jars, project_dir):
        return "unchanged"
    if not dry_run:
        document.write()
    logger.info("Added processor jars to %s", path)
    return "updated"
