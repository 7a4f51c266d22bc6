"""Ordered configuration pipeline.

Runs each wiring step whose plugins are enabled in processors.yaml:

1. java:    javac ``-processorpath``, javadoc and source-set classpaths
2. eclipse: APT prefs, factory path, JDT prefs, .classpath (needs java)
3. idea:    .iml folders and libraries, CompilerConfiguration (needs java)

Per-file failures other than ConfigurationNotFound are collected under
``errors``; ConfigurationNotFound aborts the run.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from aptwire.config import ProjectConfig
from aptwire.eclipse.sync import clean_eclipse, sync_eclipse
from aptwire.errors import AptwireError, ConfigurationNotFound
from aptwire.idea.sync import sync_idea
from aptwire.java.compile import javadoc_classpath, processor_path_args, source_set_classpaths
from aptwire.processors.bucket import ProcessorBucket

logger = logging.getLogger(__name__)

_FILE_ACTIONS = ("created", "updated", "unchanged", "deleted")


def make_bucket(project_dir: Path, config: ProjectConfig) -> ProcessorBucket:
    return ProcessorBucket(entries=list(config.processors), base_dir=project_dir)


def wire_java(config: ProjectConfig, bucket: ProcessorBucket) -> dict[str, Any]:
    """Compiler args, javadoc classpath and source-set classpaths."""
    return {
        "compiler_args": processor_path_args(bucket, config.java.compiler_args),
        "javadoc_classpath": javadoc_classpath(bucket, config.java.javadoc_classpath),
        "source_sets": source_set_classpaths(bucket, config.java.source_sets),
    }


def _merge(result: dict[str, Any], name: str, step: dict[str, Any]) -> None:
    for action in _FILE_ACTIONS:
        result[action].extend(step.get(action, []))
    for error in step.get("errors", []):
        result["errors"].append({"step": name, **error})


def apply(
    project_dir: Path | str,
    config: ProjectConfig,
    dry_run: bool = False,
) -> dict[str, Any]:
    """Run every enabled wiring step against ``project_dir``."""
    root = Path(project_dir)
    bucket = make_bucket(root, config)

    result: dict[str, Any] = {action: [] for action in _FILE_ACTIONS}
    result.update({
        "skipped": [],
        "compiler_args": [],
        "javadoc_classpath": [],
        "source_sets": {},
        "errors": [],
        "dry_run": dry_run,
    })

    if not config.has_plugin("java"):
        logger.info("java plugin not enabled; nothing to wire")
        result["skipped"].extend(sorted(config.plugins))
        return result

    result.update(wire_java(config, bucket))

    steps = [
        ("eclipse", sync_eclipse),
        ("idea", sync_idea),
    ]
    for name, step in steps:
        if not config.has_plugin(name):
            result["skipped"].append(name)
            continue
        try:
            _merge(result, name, step(root, config, bucket, dry_run))
        except ConfigurationNotFound:
            raise
        except (AptwireError, OSError) as e:
            logger.error("%s step failed: %s", name, e)
            result["errors"].append({"step": name, "error": str(e)})

    return result


def clean(project_dir: Path | str, config: ProjectConfig, dry_run: bool = False) -> dict[str, Any]:
    """Remove generated files of the enabled steps."""
    root = Path(project_dir)
    if config.has_plugin("java", "eclipse"):
        return clean_eclipse(root, config, dry_run)
    return {"deleted": [], "missing": [], "dry_run": dry_run}
