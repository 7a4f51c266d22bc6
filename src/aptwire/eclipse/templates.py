"""Templates for Eclipse APT files.

Templates use str.format() with named placeholders.
"""

from __future__ import annotations

import html
from pathlib import Path

# ── .settings/org.eclipse.jdt.apt.core.prefs ──────────────────────

APT_PREFS = """\
eclipse.preferences.version=1
org.eclipse.jdt.apt.aptEnabled=true
org.eclipse.jdt.apt.genSrcDir={output_dir}
org.eclipse.jdt.apt.reconcileEnabled=true
"""

# ── .factorypath ──────────────────────────────────────────────────

FACTORYPATH = """\
<factorypath>
{entries_block}</factorypath>
"""

FACTORYPATH_ENTRY = (
    '    <factorypathentry kind="EXTJAR" id="{path}" enabled="true" runInBatchMode="false"/>\n'
)


def format_factorypath_entries(files: list[Path]) -> str:
    """One factorypathentry line per processor jar."""
    return "".join(FACTORYPATH_ENTRY.format(path=html.escape(f.as_posix())) for f in files)
