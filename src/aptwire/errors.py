"""
Base exception for user-facing errors.

Everything the CLI reports as a clean ``ERROR:`` line (without a stack
trace) inherits from AptwireError. XML parse errors and OS errors are
not wrapped; they propagate with full tracebacks.
"""

from __future__ import annotations


class AptwireError(Exception):
    """Base class for all user-facing errors in aptwire."""


class ConfigError(AptwireError):
    """processors.yaml is malformed or names an unknown plugin."""


class ConfigurationNotFound(AptwireError):
    """An IDE project file lacks the component the patcher targets."""

    def __init__(self, section_name: str, path: str | None = None):
        self.section_name = section_name
        self.path = path
        where = f" in {path}" if path else ""
        super().__init__(f"Unable to find {section_name} element{where}")


class BucketResolutionError(AptwireError):
    """A processor entry matches no file on disk."""


class ModuleLayoutError(AptwireError):
    """An IntelliJ module file has no content root to attach folders to."""


class TemplateError(AptwireError):
    """A template references a binding the caller did not supply."""


__all__ = [
    "AptwireError",
    "BucketResolutionError",
    "ConfigError",
    "ConfigurationNotFound",
    "ModuleLayoutError",
    "TemplateError",
]
