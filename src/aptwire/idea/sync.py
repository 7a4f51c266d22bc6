"""IntelliJ sync: module files first, then project-level compiler settings."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from aptwire.config import ProjectConfig
from aptwire.errors import AptwireError
from aptwire.idea import COMPILER_CONFIGURATION
from aptwire.idea.compiler_xml import patch_file
from aptwire.idea.module import update_module_file
from aptwire.paths import idea_compiler_xml
from aptwire.processors.bucket import ProcessorBucket

logger = logging.getLogger(__name__)


def module_files(project_dir: Path, config: ProjectConfig) -> list[Path]:
    """The .iml files to update: the configured one, else every top-level *.iml."""
    if config.idea.module_file:
        path = project_dir / config.idea.module_file
        return [path] if path.is_file() else []
    return sorted(project_dir.glob("*.iml"))


def project_files(project_dir: Path, config: ProjectConfig) -> list[Path]:
    """Project files holding a CompilerConfiguration: .idea/compiler.xml and the .ipr."""
    found = []
    compiler_xml = idea_compiler_xml(project_dir)
    if compiler_xml.is_file():
        found.append(compiler_xml)
    if config.idea.project_file:
        ipr = project_dir / config.idea.project_file
        if ipr.is_file():
            found.append(ipr)
    return found


def sync_idea(
    project_dir: Path,
    config: ProjectConfig,
    bucket: ProcessorBucket,
    dry_run: bool = False,
) -> dict[str, Any]:
    """Wire the processor bucket into IntelliJ module and project files.

    A module file that cannot be updated is recorded under ``errors`` and
    the remaining files are still processed. ConfigurationNotFound from a
    project file propagates to the caller.
    """
    updated: list[str] = []
    unchanged: list[str] = []
    errors: list[dict[str, str]] = []
    jars = bucket.files()

    for iml in module_files(project_dir, config):
        try:
            action = update_module_file(
                iml, config.idea.output_dir, config.idea.test_output_dir, jars, dry_run,
            )
        except (AptwireError, OSError) as e:
            logger.error("Could not update %s: %s", iml, e)
            errors.append({"path": str(iml), "error": str(e)})
            continue
        (updated if action == "updated" else unchanged).append(str(iml))

    for path in project_files(project_dir, config):
        action = patch_file(
            path,
            config.idea.output_dir,
            config.idea.test_output_dir,
            section_name=COMPILER_CONFIGURATION,
            dry_run=dry_run,
        )
        (updated if action == "updated" else unchanged).append(str(path))

    if not updated and not unchanged and not errors:
        logger.warning("No IntelliJ project or module files found in %s", project_dir)

    return {
        "updated": updated,
        "unchanged": unchanged,
        "errors": errors,
        "dry_run": dry_run,
    }
