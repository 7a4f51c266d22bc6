"""Resolve processor entries to files on disk."""

from __future__ import annotations

import glob
import logging
import os
from dataclasses import dataclass, field
from pathlib import Path

from aptwire.errors import BucketResolutionError
from aptwire.processors import BUCKET_NAME

logger = logging.getLogger(__name__)

_GLOB_CHARS = set("*?[")


@dataclass
class ProcessorBucket:
    """A named set of annotation-processor artifacts.

    Entries are file paths or glob patterns. Relative entries resolve
    against ``base_dir``.
    """

    entries: list[str] = field(default_factory=list)
    base_dir: Path = field(default_factory=Path.cwd)
    name: str = BUCKET_NAME

    @property
    def is_empty(self) -> bool:
        return not self.entries

    def _expand(self, entry: str) -> list[Path]:
        raw = Path(entry).expanduser()
        if not raw.is_absolute():
            raw = Path(self.base_dir) / raw

        if _GLOB_CHARS & set(entry):
            matches = sorted(Path(p) for p in glob.glob(str(raw)))
            files = [p for p in matches if p.is_file()]
            if not files:
                raise BucketResolutionError(
                    f"{self.name}: pattern '{entry}' matched no files"
                )
            return files

        if not raw.is_file():
            raise BucketResolutionError(f"{self.name}: no such file '{entry}'")
        return [raw]

    def files(self) -> list[Path]:
        """Resolved files in declaration order, without duplicates."""
        seen: set[Path] = set()
        resolved: list[Path] = []
        for entry in self.entries:
            for path in self._expand(entry):
                path = path.resolve()
                if path not in seen:
                    seen.add(path)
                    resolved.append(path)
        logger.debug("Bucket %s resolved to %d file(s)", self.name, len(resolved))
        return resolved

    def as_path(self) -> str:
        """Files joined with the platform path separator."""
        return os.pathsep.join(str(p) for p in self.files())
