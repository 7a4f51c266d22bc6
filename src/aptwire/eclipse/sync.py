"""Eclipse sync: renders APT files and patches JDT settings.

The sync process:
1. Render .settings/org.eclipse.jdt.apt.core.prefs (APT on, gen dir)
2. Render .factorypath with one entry per processor jar
3. Switch processAnnotations on in .settings/org.eclipse.jdt.core.prefs
4. Add the processor jars to .classpath, if the project has one
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from aptwire.config import ProjectConfig
from aptwire.eclipse import (
    APT_PREFS_FILE,
    CLASSPATH_FILE,
    FACTORYPATH_FILE,
    JDT_PREFS_FILE,
    PROCESS_ANNOTATIONS_KEY,
)
from aptwire.eclipse.classpath import update_classpath_file
from aptwire.eclipse.prefs import update_prefs_file
from aptwire.eclipse.templates import APT_PREFS, FACTORYPATH, format_factorypath_entries
from aptwire.processors.bucket import ProcessorBucket
from aptwire.templates import TemplateTask, clean, render_to_file

logger = logging.getLogger(__name__)


def template_tasks(
    project_dir: Path,
    config: ProjectConfig,
    bucket: ProcessorBucket | None = None,
) -> list[TemplateTask]:
    """The eclipseAptPrefs and eclipseFactoryPath tasks.

    Without a bucket the tasks carry no bindings; that is enough to clean.
    """
    apt = TemplateTask("eclipseAptPrefs", APT_PREFS, project_dir / APT_PREFS_FILE)
    factory = TemplateTask("eclipseFactoryPath", FACTORYPATH, project_dir / FACTORYPATH_FILE)
    if bucket is not None:
        apt.bindings = {"output_dir": config.eclipse.processor_output_dir(project_dir)}
        factory.bindings = {"entries_block": format_factorypath_entries(bucket.files())}
    return [apt, factory]


def _record(result: dict[str, Any], action: str, path: Path) -> None:
    result.setdefault(action, []).append(str(path))


def sync_eclipse(
    project_dir: Path,
    config: ProjectConfig,
    bucket: ProcessorBucket,
    dry_run: bool = False,
) -> dict[str, Any]:
    """Wire the processor bucket into the Eclipse project files."""
    result: dict[str, Any] = {"created": [], "updated": [], "unchanged": [], "dry_run": dry_run}

    for task in template_tasks(project_dir, config, bucket):
        _record(result, render_to_file(task, dry_run), task.output)

    jdt_prefs = project_dir / JDT_PREFS_FILE
    action = update_prefs_file(jdt_prefs, PROCESS_ANNOTATIONS_KEY, "enabled", dry_run)
    _record(result, action, jdt_prefs)

    classpath = project_dir / CLASSPATH_FILE
    if classpath.is_file():
        action = update_classpath_file(classpath, bucket.files(), project_dir, dry_run)
        _record(result, action, classpath)
    else:
        logger.debug("No %s in %s, skipping", CLASSPATH_FILE, project_dir)

    return result


def clean_eclipse(project_dir: Path, config: ProjectConfig, dry_run: bool = False) -> dict[str, Any]:
    """Delete the rendered APT files (cleanEclipseAptPrefs, cleanEclipseFactoryPath)."""
    deleted: list[str] = []
    missing: list[str] = []
    for task in template_tasks(project_dir, config):
        action = clean(task, dry_run)
        (deleted if action == "deleted" else missing).append(str(task.output))
    return {"deleted": deleted, "missing": missing, "dry_run": dry_run}
