"""Edit Eclipse ``.prefs`` property files line by line.

Only the targeted key is touched. Comments, ordering and every other
property stay as they are.
"""

from __future__ import annotations

from pathlib import Path

PREFS_VERSION_LINE = "eclipse.preferences.version=1"


def set_property(text: str, key: str, value: str) -> str:
    """Return ``text`` with ``key`` set to ``value``, appending it if absent."""
    lines = text.splitlines()
    entry = f"{key}={value}"
    for i, line in enumerate(lines):
        stripped = line.strip()
        if stripped.startswith(("#", "!")) or "=" not in stripped:
            continue
        if stripped.split("=", 1)[0].strip() == key:
            lines[i] = entry
            break
    else:
        lines.append(entry)
    return "\n".join(lines) + "\n"


def update_prefs_file(path: Path, key: str, value: str, dry_run: bool = False) -> str:
    """Set one property in a prefs file, creating the file if needed.

    Returns:
        "created", "updated" or "unchanged".
    """
    if path.exists():
        current = path.read_text(encoding="utf-8")
        action = "updated"
    else:
        current = PREFS_VERSION_LINE + "\n"
        action = "created"

    new = set_property(current, key, value)
    if action == "updated" and new == current:
        return "unchanged"
    if not dry_run:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(new, encoding="utf-8")
    return action
