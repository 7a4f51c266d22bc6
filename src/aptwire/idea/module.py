"""IntelliJ module (.iml) wiring.

Registers the generated source folders with the module's content root and
adds each processor jar as a PROVIDED-scope module library. Entries that
are already present are left alone.
"""

from __future__ import annotations

import logging
import xml.etree.ElementTree as ET
from pathlib import Path

from aptwire.errors import ModuleLayoutError
from aptwire.idea import MODULE_DIR_URL, MODULE_ROOT_MANAGER
from aptwire.idea.document import ProjectDocument, append_child, indent_of, indent_step

logger = logging.getLogger(__name__)

PROVIDED_SCOPE = "PROVIDED"


def _module_dir_relative(path: str | Path, module_dir: Path | None) -> str:
    p = Path(path)
    if p.is_absolute() and module_dir is not None:
        try:
            return p.relative_to(module_dir).as_posix()
        except ValueError:
            return p.as_posix()
    return p.as_posix()


def source_folder_url(path: str | Path, module_dir: Path | None = None) -> str:
    return f"{MODULE_DIR_URL}/{_module_dir_relative(path, module_dir)}"


def jar_url(jar: Path, module_dir: Path | None = None) -> str:
    if module_dir is not None:
        try:
            rel = jar.relative_to(module_dir).as_posix()
            return f"jar://$MODULE_DIR$/{rel}!/"
        except ValueError:
            pass
    return f"jar://{jar.as_posix()}!/"


def _root_manager(root: ET.Element) -> ET.Element:
    for component in root.findall("component"):
        if component.get("name") == MODULE_ROOT_MANAGER:
            return component
    for component in root.findall("component"):
        if component.find("content") is not None:
            return component
    raise ModuleLayoutError(f"No {MODULE_ROOT_MANAGER} component in module file")


def add_generated_source_folder(
    document: ProjectDocument,
    path: str | Path,
    is_test: bool,
) -> bool:
    """Add a generated sourceFolder to the first content root.

    IntelliJ only shows the folder once it exists on disk, so the entry is
    written explicitly.

    Returns:
        True if an entry was added, False if one was already there.
    """
    module_dir = document.path.resolve().parent if document.path else None
    component = _root_manager(document.root)
    content = component.find("content")
    if content is None:
        raise ModuleLayoutError("Module has no content root for generated sources")

    url = source_folder_url(path, module_dir)
    if any(f.get("url") == url for f in content.findall("sourceFolder")):
        return False

    folder = ET.Element("sourceFolder", {
        "url": url,
        "isTestSource": "true" if is_test else "false",
        "generated": "true",
    })
    append_child(content, folder, indent_of(component, content), indent_step(component, content))
    logger.debug("Registered generated %s folder %s", "test" if is_test else "main", url)
    return True


def _library_urls(entry: ET.Element) -> set[str]:
    return {r.get("url") for r in entry.iterfind("library/CLASSES/root")}


def add_provided_libraries(document: ProjectDocument, jars: list[Path]) -> int:
    """Add each jar as a PROVIDED module library. Returns how many were added."""
    module_dir = document.path.resolve().parent if document.path else None
    root = document.root
    component = _root_manager(root)
    own_indent = indent_of(root, component)
    step = indent_step(root, component)

    known: set[str] = set()
    for entry in component.findall("orderEntry"):
        if entry.get("type") == "module-library":
            known |= _library_urls(entry)

    added = 0
    for jar in jars:
        url = jar_url(jar, module_dir)
        if url in known:
            continue
        entry = ET.Element("orderEntry", {"type": "module-library", "scope": PROVIDED_SCOPE})
        library = ET.SubElement(entry, "library")
        classes = ET.SubElement(library, "CLASSES")
        ET.SubElement(classes, "root", {"url": url})
        ET.SubElement(library, "JAVADOC")
        ET.SubElement(library, "SOURCES")
        append_child(component, entry, own_indent, step)
        known.add(url)
        added += 1
    return added


def update_module_file(
    path: Path | str,
    output_dir: str,
    test_output_dir: str,
    jars: list[Path],
    dry_run: bool = False,
) -> str:
    """Apply all module wiring to one .iml file.

    Returns:
        "updated" or "unchanged".
    """
    file_path = Path(path)
    document = ProjectDocument.parse(file_path)

    changed = add_generated_source_folder(document, output_dir, is_test=False)
    changed |= add_generated_source_folder(document, test_output_dir, is_test=True)
    changed |= add_provided_libraries(document, jars) > 0

    if not changed:
        return "unchanged"
    if not dry_run:
        document.write()
    logger.info("Updated module %s", file_path)
    return "updated"
