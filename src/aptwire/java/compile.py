"""Append the processor bucket to compiler flags and classpaths.

Every function returns a new list; inputs are never mutated. Running the
same wiring twice yields the same result.
"""

from __future__ import annotations

from aptwire.java import PROCESSOR_PATH_FLAG
from aptwire.processors.bucket import ProcessorBucket


def _strip_processor_path(args: list[str]) -> list[str]:
    out: list[str] = []
    skip = False
    for arg in args:
        if skip:
            skip = False
            continue
        if arg == PROCESSOR_PATH_FLAG:
            skip = True
            continue
        out.append(arg)
    return out


def processor_path_args(bucket: ProcessorBucket, compiler_args: list[str]) -> list[str]:
    """Return compiler args ending in ``-processorpath <bucket path>``.

    A ``-processorpath`` pair already present in ``compiler_args`` is
    dropped first so the flag appears exactly once.
    """
    return _strip_processor_path(list(compiler_args)) + [
        PROCESSOR_PATH_FLAG, bucket.as_path(),
    ]


def _append_unique(classpath: list[str], extra: list[str]) -> list[str]:
    result = list(classpath)
    for entry in extra:
        if entry not in result:
            result.append(entry)
    return result


def javadoc_classpath(bucket: ProcessorBucket, classpath: list[str]) -> list[str]:
    """Javadoc classpath with the processor files appended."""
    return _append_unique(classpath, [str(p) for p in bucket.files()])


def source_set_classpaths(
    bucket: ProcessorBucket,
    source_sets: dict[str, list[str]],
) -> dict[str, list[str]]:
    """Compile classpath of every source set, plus the processor files."""
    files = [str(p) for p in bucket.files()]
    return {name: _append_unique(cp, files) for name, cp in source_sets.items()}
