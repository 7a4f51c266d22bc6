"""Load and validate processors.yaml."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

import yaml

from aptwire.errors import ConfigError
from aptwire.paths import config_path

logger = logging.getLogger(__name__)

KNOWN_PLUGINS = {"java", "eclipse", "idea"}

DEFAULT_IDEA_OUTPUT_DIR = "generated_src"
DEFAULT_IDEA_TEST_OUTPUT_DIR = "generated_testSrc"
DEFAULT_ECLIPSE_OUTPUT_DIR = "bin"


@dataclass
class JavaSettings:
    compiler_args: list[str] = field(default_factory=list)
    javadoc_classpath: list[str] = field(default_factory=list)
    source_sets: dict[str, list[str]] = field(
        default_factory=lambda: {"main": [], "test": []}
    )


@dataclass
class EclipseSettings:
    default_output_dir: str = DEFAULT_ECLIPSE_OUTPUT_DIR
    output_dir: str | None = None

    def processor_output_dir(self, project_dir: Path | None = None) -> str:
        """Generated-source dir, defaulting to <default_output_dir>/generated/java.

        An absolute dir inside ``project_dir`` is made project-relative.
        """
        if not self.output_dir:
            return f"{self.default_output_dir}/generated/java"
        out = Path(self.output_dir)
        if out.is_absolute() and project_dir is not None:
            for base in (Path(project_dir), Path(project_dir).resolve()):
                if out.is_relative_to(base):
                    return out.relative_to(base).as_posix()
        return self.output_dir


@dataclass
class IdeaSettings:
    output_dir: str = DEFAULT_IDEA_OUTPUT_DIR
    test_output_dir: str = DEFAULT_IDEA_TEST_OUTPUT_DIR
    module_file: str | None = None
    project_file: str | None = None


@dataclass
class ProjectConfig:
    """Typed view of processors.yaml."""

    plugins: set[str] = field(default_factory=set)
    processors: list[str] = field(default_factory=list)
    java: JavaSettings = field(default_factory=JavaSettings)
    eclipse: EclipseSettings = field(default_factory=EclipseSettings)
    idea: IdeaSettings = field(default_factory=IdeaSettings)

    def has_plugin(self, *names: str) -> bool:
        """True when every named plugin is enabled."""
        return all(n in self.plugins for n in names)


def _section(data: dict, key: str) -> dict:
    value = data.get(key) or {}
    if not isinstance(value, dict):
        raise ConfigError(f"'{key}' must be a mapping, got {type(value).__name__}")
    return value


def _string_list(value, key: str) -> list[str]:
    if value is None:
        return []
    if isinstance(value, str):
        return [value]
    if not isinstance(value, list):
        raise ConfigError(f"'{key}' must be a list")
    return [str(v) for v in value]


def parse_config(data: dict | None) -> ProjectConfig:
    """Build a ProjectConfig from an already-parsed YAML mapping.

    Raises:
        ConfigError: If the data is not a mapping or names an unknown plugin.
    """
    if data is None:
        return ProjectConfig()
    if not isinstance(data, dict):
        raise ConfigError("processors.yaml is not a YAML mapping")

    plugins = set(_string_list(data.get("plugins"), "plugins"))
    unknown = plugins - KNOWN_PLUGINS
    if unknown:
        raise ConfigError(
            f"Unknown plugin(s): {', '.join(sorted(unknown))} "
            f"(valid: {', '.join(sorted(KNOWN_PLUGINS))})"
        )

    java = _section(data, "java")
    source_sets = java.get("source_sets")
    if source_sets is None:
        source_sets = {"main": [], "test": []}
    elif not isinstance(source_sets, dict):
        raise ConfigError("'java.source_sets' must be a mapping")

    eclipse = _section(data, "eclipse")
    idea = _section(data, "idea")

    return ProjectConfig(
        plugins=plugins,
        processors=_string_list(data.get("processors"), "processors"),
        java=JavaSettings(
            compiler_args=_string_list(java.get("compiler_args"), "java.compiler_args"),
            javadoc_classpath=_string_list(
                java.get("javadoc_classpath"), "java.javadoc_classpath",
            ),
            source_sets={
                str(name): _string_list(cp, f"java.source_sets.{name}")
                for name, cp in source_sets.items()
            },
        ),
        eclipse=EclipseSettings(
            default_output_dir=str(
                eclipse.get("default_output_dir") or DEFAULT_ECLIPSE_OUTPUT_DIR
            ),
            output_dir=eclipse.get("output_dir"),
        ),
        idea=IdeaSettings(
            output_dir=str(idea.get("output_dir") or DEFAULT_IDEA_OUTPUT_DIR),
            test_output_dir=str(
                idea.get("test_output_dir") or DEFAULT_IDEA_TEST_OUTPUT_DIR
            ),
            module_file=idea.get("module_file"),
            project_file=idea.get("project_file"),
        ),
    )


def load_config(path: Path | str | None = None) -> ProjectConfig:
    """Read processors.yaml from disk.

    Args:
        path: Path to the config file. Defaults to paths.config_path().

    Returns:
        Parsed config. A missing file yields the defaults (no plugins).

    Raises:
        ConfigError: If the file content is invalid.
        yaml.YAMLError: If the YAML is malformed.
    """
    cfg_path = Path(path) if path else config_path()
    if not cfg_path.is_file():
        logger.debug("No config at %s, using defaults", cfg_path)
        return ProjectConfig()

    with open(cfg_path) as f:
        data = yaml.safe_load(f)
    logger.debug("Loaded config from %s", cfg_path)
    return parse_config(data)
