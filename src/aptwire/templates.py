"""Render templated configuration files.

A TemplateTask is a plain record: a template string with named
``str.format`` placeholders, the file it renders to, and the bindings.
Each task has a matching clean task that deletes the output.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from aptwire.errors import TemplateError

logger = logging.getLogger(__name__)


@dataclass
class TemplateTask:
    name: str
    template: str
    output: Path
    bindings: dict[str, Any] = field(default_factory=dict)

    @property
    def clean_name(self) -> str:
        """eclipseAptPrefs -> cleanEclipseAptPrefs."""
        return "clean" + self.name[:1].upper() + self.name[1:]

    def render(self) -> str:
        try:
            return self.template.format(**self.bindings)
        except KeyError as e:
            raise TemplateError(
                f"Template for {self.name} needs binding {e.args[0]!r}"
            ) from e


def render_to_file(task: TemplateTask, dry_run: bool = False) -> str:
    """Render a task to its output file.

    Returns:
        "created", "updated" or "unchanged".
    """
    content = task.render()
    if task.output.exists():
        if task.output.read_text(encoding="utf-8") == content:
            return "unchanged"
        action = "updated"
    else:
        action = "created"

    if not dry_run:
        task.output.parent.mkdir(parents=True, exist_ok=True)
        task.output.write_text(content, encoding="utf-8")
    logger.info("%s: %s %s", task.name, action, task.output)
    return action


def clean(task: TemplateTask, dry_run: bool = False) -> str:
    """Delete a task's output. Returns "deleted" or "missing"."""
    if not task.output.exists():
        return "missing"
    if not dry_run:
        task.output.unlink()
    logger.info("%s: deleted %s", task.clean_name, task.output)
    return "deleted"
