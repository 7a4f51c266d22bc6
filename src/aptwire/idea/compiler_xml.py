"""Patch the annotation-processing profile of an IntelliJ project file.

The CompilerConfiguration component must already exist; its
``annotationProcessing`` child is replaced wholesale (never merged) with
the canonical single-profile fragment. Patching is idempotent.
"""

from __future__ import annotations

import logging
import xml.etree.ElementTree as ET
from pathlib import Path

from aptwire.errors import ConfigurationNotFound
from aptwire.idea import ANNOTATION_PROCESSING, COMPILER_CONFIGURATION
from aptwire.idea.document import (
    ProjectDocument,
    append_child,
    children_indent,
    indent_of,
    indent_step,
    indent_subtree,
    read_source,
    remove_child,
    replace_child,
)

logger = logging.getLogger(__name__)


def build_fragment(output_dir: str, test_output_dir: str) -> ET.Element:
    """The canonical annotationProcessing subtree for the given dirs."""
    fragment = ET.Element(ANNOTATION_PROCESSING)
    profile = ET.SubElement(
        fragment, "profile", {"default": "true", "name": "Default", "enabled": "true"},
    )
    ET.SubElement(profile, "sourceOutputDir", {"name": output_dir})
    ET.SubElement(profile, "sourceTestOutputDir", {"name": test_output_dir})
    ET.SubElement(profile, "outputRelativeToContentRoot", {"value": "true"})
    ET.SubElement(profile, "processorPath", {"useClasspath": "true"})
    return fragment


def find_component(root: ET.Element, name: str) -> ET.Element | None:
    """First top-level ``<component name=...>`` with the given name."""
    for component in root.findall("component"):
        if component.get("name") == name:
            return component
    return None


def patch(
    document: ProjectDocument,
    section_name: str,
    output_dir: str,
    test_output_dir: str,
) -> ProjectDocument:
    """Install the canonical annotationProcessing fragment.

    Args:
        document: Parsed project file; mutated in place.
        section_name: Name attribute of the component to patch.
        output_dir: Generated-source dir, used verbatim.
        test_output_dir: Generated-test-source dir, used verbatim.

    Returns:
        The same document.

    Raises:
        ConfigurationNotFound: If no component has ``section_name``. The
            document is left untouched.
    """
    root = document.root
    component = find_component(root, section_name)
    if component is None:
        raise ConfigurationNotFound(
            section_name, str(document.path) if document.path else None,
        )

    step = indent_step(root, component)
    own_indent = indent_of(root, component)
    fragment = build_fragment(output_dir, test_output_dir)
    existing = component.findall(ANNOTATION_PROCESSING)

    if not existing:
        append_child(component, fragment, own_indent, step)
        logger.debug("Added %s to %s", ANNOTATION_PROCESSING, section_name)
        return document

    level = children_indent(component, own_indent, step)
    if level is not None:
        indent_subtree(fragment, level, step)
    replace_child(component, existing[0], fragment)
    for stale in existing[1:]:
        remove_child(component, stale)
    logger.debug(
        "Replaced %d %s element(s) in %s",
        len(existing), ANNOTATION_PROCESSING, section_name,
    )
    return document


def patch_file(
    path: Path | str,
    output_dir: str,
    test_output_dir: str,
    section_name: str = COMPILER_CONFIGURATION,
    dry_run: bool = False,
) -> str:
    """Patch a project file on disk.

    The file is rewritten only when the serialized result differs.

    Returns:
        "updated" or "unchanged".
    """
    file_path = Path(path)
    original = read_source(file_path)
    document = ProjectDocument.from_string(original, path=file_path)
    patch(document, section_name, output_dir, test_output_dir)

    if document.to_string() == original:
        return "unchanged"
    if not dry_run:
        document.write()
    logger.info("Patched %s in %s", section_name, file_path)
    return "updated"
