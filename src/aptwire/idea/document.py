"""In-memory XML project documents.

ProjectDocument wraps an ElementTree root together with the text that
ElementTree itself would drop: the prolog (XML declaration, comments and
DOCTYPE before the root element), the trailing whitespace after it, a
leading byte-order mark and the file's line-ending style.
Comments and processing instructions inside the root are kept, and the
``text``/``tail`` whitespace of every element is preserved, so a file
that is parsed and written back without changes comes out the same.
"""

from __future__ import annotations

import re
import xml.etree.ElementTree as ET
from dataclasses import dataclass
from pathlib import Path

_PROLOG = re.compile(
    r"(?:\s+|<\?.*?\?>|<!--.*?-->|<!DOCTYPE[^>\[]*(?:\[.*?\])?\s*>)*",
    re.DOTALL,
)
_EPILOG = re.compile(r"\s*\Z")
_SPACED_EMPTY_TAG = re.compile(r"(<[^!?<>][^<>]*?) />")

DEFAULT_INDENT_STEP = "  "
BOM = "\ufeff"


def read_source(path: Path | str) -> str:
    """File text exactly as stored: no newline translation, BOM kept."""
    with open(path, encoding="utf-8", newline="") as f:
        return f.read()


@dataclass
class ProjectDocument:
    root: ET.Element
    path: Path | None = None
    prolog: str = ""
    epilog: str = "\n"
    compact_empty: bool = True
    newline: str = "\n"
    bom: bool = False

    @classmethod
    def from_string(cls, text: str, path: Path | str | None = None) -> ProjectDocument:
        """Parse XML text. ParseError propagates unchanged.

        A leading byte-order mark and CRLF line endings are remembered and
        restored by to_string().
        """
        bom = text.startswith(BOM)
        if bom:
            text = text[len(BOM):]
        newline = "\r\n" if "\r\n" in text else "\n"
        text = text.replace("\r\n", "\n")
        parser = ET.XMLParser(
            target=ET.TreeBuilder(insert_comments=True, insert_pis=True),
        )
        root = ET.fromstring(text, parser=parser)
        prolog = _PROLOG.match(text).group(0)
        epilog = _EPILOG.search(text).group(0)
        return cls(
            root=root,
            path=Path(path) if path else None,
            prolog=prolog,
            epilog=epilog,
            compact_empty=" />" not in text,
            newline=newline,
            bom=bom,
        )

    @classmethod
    def parse(cls, path: Path | str) -> ProjectDocument:
        """Read and parse an XML file."""
        file_path = Path(path)
        return cls.from_string(read_source(file_path), path=file_path)

    def to_string(self) -> str:
        body = ET.tostring(self.root, encoding="unicode")
        if self.compact_empty:
            body = _SPACED_EMPTY_TAG.sub(r"\1/>", body)
        text = self.prolog + body + self.epilog
        if self.newline != "\n":
            text = text.replace("\n", self.newline)
        return (BOM if self.bom else "") + text

    def write(self, path: Path | str | None = None) -> Path:
        """Serialize to ``path``, defaulting to the file it was parsed from."""
        target = Path(path) if path else self.path
        if target is None:
            raise ValueError("ProjectDocument has no path to write to")
        with open(target, "w", encoding="utf-8", newline="") as f:
            f.write(self.to_string())
        return target


# ── Whitespace helpers ────────────────────────────────────────────


def _line_indent(whitespace: str | None) -> str | None:
    """Indentation after the last newline, or None on a single line."""
    if not whitespace or "\n" not in whitespace:
        return None
    tail = whitespace.rsplit("\n", 1)[1]
    return tail if not tail.strip() else None


def indent_of(parent: ET.Element, child: ET.Element) -> str | None:
    """Indentation that precedes ``child`` inside ``parent``."""
    children = list(parent)
    idx = children.index(child)
    return _line_indent(parent.text if idx == 0 else children[idx - 1].tail)


def children_indent(element: ET.Element, own_indent: str | None, step: str) -> str | None:
    """Indentation used (or to be used) for the children of ``element``."""
    if len(element):
        return _line_indent(element.text)
    if own_indent is None:
        return None
    return own_indent + step


def indent_step(parent: ET.Element, element: ET.Element) -> str:
    """Guess one level of indentation from how ``element`` sits in ``parent``."""
    own = indent_of(parent, element) or ""
    inner = _line_indent(element.text) if len(element) else None
    if inner and inner.startswith(own) and len(inner) > len(own):
        return inner[len(own):]
    return own or DEFAULT_INDENT_STEP


def indent_subtree(element: ET.Element, level: str, step: str) -> None:
    """Pretty-print ``element``'s descendants, starting at ``level``.

    The element's own tail is left alone; the caller owns it.
    """
    if not len(element):
        return
    inner = level + step
    element.text = "\n" + inner
    for child in element:
        indent_subtree(child, inner, step)
        child.tail = "\n" + inner
    element[-1].tail = "\n" + level


def append_child(
    parent: ET.Element,
    child: ET.Element,
    parent_indent: str | None,
    step: str,
) -> None:
    """Append ``child`` as the last element, matching sibling layout."""
    level = children_indent(parent, parent_indent, step)
    if level is not None:
        indent_subtree(child, level, step)

    siblings = list(parent)
    if siblings:
        last = siblings[-1]
        child.tail = last.tail
        if level is not None:
            last.tail = "\n" + level
    elif level is not None:
        parent.text = "\n" + level
        child.tail = "\n" + (parent_indent or "")
    parent.append(child)


def remove_child(parent: ET.Element, child: ET.Element) -> None:
    """Remove ``child``, handing its tail to the previous sibling if it was last."""
    siblings = list(parent)
    idx = siblings.index(child)
    if idx == len(siblings) - 1 and idx > 0:
        siblings[idx - 1].tail = child.tail
    parent.remove(child)


def replace_child(parent: ET.Element, old: ET.Element, new: ET.Element) -> None:
    """Put ``new`` where ``old`` was; ``new`` takes over ``old``'s tail."""
    idx = list(parent).index(old)
    new.tail = old.tail
    parent.remove(old)
    parent.insert(idx, new)
