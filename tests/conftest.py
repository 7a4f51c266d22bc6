"""Shared test fixtures for aptwire."""

import shutil
from pathlib import Path

import pytest

from aptwire.config import load_config

FIXTURES = Path(__file__).parent / "fixtures"

PROCESSOR_JARS = [
    "lib/auto-value-1.1.jar",
    "lib/processors/a-processor.jar",
    "lib/processors/b-processor.jar",
]


@pytest.fixture
def java_project(tmp_path):
    """A project dir with processor jars on disk and processors.yaml."""
    for rel in PROCESSOR_JARS + ["lib/guava.jar", "lib/junit.jar"]:
        jar = tmp_path / rel
        jar.parent.mkdir(parents=True, exist_ok=True)
        jar.write_bytes(b"PK\x03\x04")
    shutil.copy(FIXTURES / "processors.yaml", tmp_path / "processors.yaml")
    return tmp_path


@pytest.fixture
def project_config(java_project):
    return load_config(java_project / "processors.yaml")


@pytest.fixture
def compiler_xml(tmp_path):
    """Directory-based IntelliJ settings with a stale annotationProcessing profile."""
    target = tmp_path / ".idea" / "compiler.xml"
    target.parent.mkdir(parents=True, exist_ok=True)
    shutil.copy(FIXTURES / "compiler-stale.xml", target)
    return target
