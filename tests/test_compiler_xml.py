"""Tests for the IntelliJ CompilerConfiguration patcher."""

from pathlib import Path

import pytest

from aptwire.errors import ConfigurationNotFound
from aptwire.idea import COMPILER_CONFIGURATION
from aptwire.idea.compiler_xml import build_fragment, find_component, patch, patch_file
from aptwire.idea.document import ProjectDocument

FIXTURES = Path(__file__).parent / "fixtures"

EXPECTED_STALE_PATCHED = """\
<?xml version="1.0" encoding="UTF-8"?>
<project version="4">
  <component name="CompilerConfiguration">
    <resourceExtensions />
    <annotationProcessing>
      <profile default="true" name="Default" enabled="true">
        <sourceOutputDir name="generated_src" />
        <sourceTestOutputDir name="generated_testSrc" />
        <outputRelativeToContentRoot value="true" />
        <processorPath useClasspath="true" />
      </profile>
    </annotationProcessing>
    <bytecodeTargetLevel target="1.8" />
  </component>
  <component name="JavacSettings">
    <option name="ADDITIONAL_OPTIONS_STRING" value="-Xlint:unchecked" />
  </component>
</project>
"""


def _profile(document):
    component = find_component(document.root, COMPILER_CONFIGURATION)
    fragments = component.findall("annotationProcessing")
    assert len(fragments) == 1
    profiles = fragments[0].findall("profile")
    assert len(profiles) == 1
    return profiles[0]


class TestBuildFragment:
    def test_canonical_shape(self):
        fragment = build_fragment("out", "testOut")
        assert fragment.tag == "annotationProcessing"
        (profile,) = list(fragment)
        assert profile.attrib == {"default": "true", "name": "Default", "enabled": "true"}
        assert [c.tag for c in profile] == [
            "sourceOutputDir",
            "sourceTestOutputDir",
            "outputRelativeToContentRoot",
            "processorPath",
        ]
        assert profile[0].get("name") == "out"
        assert profile[1].get("name") == "testOut"
        assert profile[2].get("value") == "true"
        assert profile[3].get("useClasspath") == "true"

    def test_paths_used_verbatim(self):
        fragment = build_fragment("../weird dir/$X$", "")
        assert fragment[0][0].get("name") == "../weird dir/$X$"
        assert fragment[0][1].get("name") == ""


class TestPatch:
    def test_replaces_stale_profile(self):
        doc = ProjectDocument.parse(FIXTURES / "compiler-stale.xml")
        result = patch(doc, COMPILER_CONFIGURATION, "generated_src", "generated_testSrc")
        assert result is doc
        profile = _profile(doc)
        assert profile.find("sourceOutputDir").get("name") == "generated_src"
        assert profile.find("sourceTestOutputDir").get("name") == "generated_testSrc"
        assert len(profile.findall("outputRelativeToContentRoot")) == 1
        assert len(profile.findall("processorPath")) == 1

    def test_discards_unexpected_children(self):
        doc = ProjectDocument.parse(FIXTURES / "compiler-stale.xml")
        patch(doc, COMPILER_CONFIGURATION, "generated_src", "generated_testSrc")
        assert _profile(doc).find("processor") is None

    def test_serialization_matches_canonical_layout(self):
        doc = ProjectDocument.parse(FIXTURES / "compiler-stale.xml")
        patch(doc, COMPILER_CONFIGURATION, "generated_src", "generated_testSrc")
        assert doc.to_string() == EXPECTED_STALE_PATCHED

    def test_idempotent(self):
        doc = ProjectDocument.parse(FIXTURES / "compiler-stale.xml")
        once = patch(doc, COMPILER_CONFIGURATION, "a", "b").to_string()
        twice = patch(doc, COMPILER_CONFIGURATION, "a", "b").to_string()
        assert once == twice

    def test_second_patch_replaces_first(self):
        doc = ProjectDocument.parse(FIXTURES / "compiler-stale.xml")
        patch(doc, COMPILER_CONFIGURATION, "a", "b")
        patch(doc, COMPILER_CONFIGURATION, "c", "d")
        profile = _profile(doc)
        assert profile.find("sourceOutputDir").get("name") == "c"
        assert profile.find("sourceTestOutputDir").get("name") == "d"

    def test_missing_section_raises_and_leaves_document(self):
        doc = ProjectDocument.parse(FIXTURES / "compiler-no-config.xml")
        before = doc.to_string()
        with pytest.raises(ConfigurationNotFound) as exc:
            patch(doc, COMPILER_CONFIGURATION, "generated_src", "generated_testSrc")
        assert exc.value.section_name == COMPILER_CONFIGURATION
        assert "CompilerConfiguration" in str(exc.value)
        assert doc.to_string() == before

    def test_adds_fragment_when_absent(self):
        doc = ProjectDocument.parse(FIXTURES / "compiler-no-profile.xml")
        patch(doc, COMPILER_CONFIGURATION, "generated_src", "generated_testSrc")
        text = doc.to_string()
        assert "    <resourceExtensions/>\n    <annotationProcessing>\n" in text
        assert "        <sourceOutputDir name=\"generated_src\"/>\n" in text
        assert "    </annotationProcessing>\n  </component>\n" in text
        assert "<!-- managed by hand -->" in text

    def test_adds_fragment_to_empty_component(self):
        doc = ProjectDocument.from_string(
            '<project version="4">\n'
            '  <component name="CompilerConfiguration"/>\n'
            '</project>\n'
        )
        patch(doc, COMPILER_CONFIGURATION, "out", "testOut")
        text = doc.to_string()
        assert text.startswith(
            '<project version="4">\n'
            '  <component name="CompilerConfiguration">\n'
            '    <annotationProcessing>\n'
            '      <profile default="true" name="Default" enabled="true">\n'
        )
        assert text.endswith("    </annotationProcessing>\n  </component>\n</project>\n")

    def test_collapses_duplicate_fragments(self):
        doc = ProjectDocument.from_string(
            '<project version="4">\n'
            '  <component name="CompilerConfiguration">\n'
            '    <annotationProcessing/>\n'
            '    <annotationProcessing><profile name="Other"/></annotationProcessing>\n'
            '  </component>\n'
            '</project>\n'
        )
        patch(doc, COMPILER_CONFIGURATION, "out", "testOut")
        assert _profile(doc).get("name") == "Default"
        assert doc.to_string().endswith("    </annotationProcessing>\n  </component>\n</project>\n")

    def test_custom_section_name(self):
        doc = ProjectDocument.from_string(
            '<project><component name="Custom"><annotationProcessing/></component></project>'
        )
        patch(doc, "Custom", "x", "y")
        component = find_component(doc.root, "Custom")
        assert component.find("annotationProcessing/profile/sourceOutputDir").get("name") == "x"

    def test_siblings_untouched(self):
        doc = ProjectDocument.parse(FIXTURES / "compiler-stale.xml")
        patch(doc, COMPILER_CONFIGURATION, "generated_src", "generated_testSrc")
        javac = (
            '  <component name="JavacSettings">\n'
            '    <option name="ADDITIONAL_OPTIONS_STRING" value="-Xlint:unchecked" />\n'
            '  </component>\n'
        )
        assert javac in doc.to_string()


class TestPatchFile:
    def test_updates_then_unchanged(self, compiler_xml):
        assert patch_file(compiler_xml, "generated_src", "generated_testSrc") == "updated"
        assert compiler_xml.read_text() == EXPECTED_STALE_PATCHED
        assert patch_file(compiler_xml, "generated_src", "generated_testSrc") == "unchanged"
        assert compiler_xml.read_text() == EXPECTED_STALE_PATCHED

    def test_dry_run_does_not_write(self, compiler_xml):
        before = compiler_xml.read_text()
        assert patch_file(compiler_xml, "x", "y", dry_run=True) == "updated"
        assert compiler_xml.read_text() == before

    def test_missing_section_leaves_file_untouched(self, tmp_path):
        target = tmp_path / "compiler.xml"
        original = (FIXTURES / "compiler-no-config.xml").read_text()
        target.write_text(original)
        with pytest.raises(ConfigurationNotFound) as exc:
            patch_file(target, "generated_src", "generated_testSrc")
        assert exc.value.path == str(target)
        assert target.read_text() == original

    def test_crlf_file_keeps_crlf(self, compiler_xml):
        compiler_xml.write_bytes(compiler_xml.read_bytes().replace(b"\n", b"\r\n"))
        assert patch_file(compiler_xml, "generated_src", "generated_testSrc") == "updated"
        data = compiler_xml.read_bytes()
        assert data == EXPECTED_STALE_PATCHED.replace("\n", "\r\n").encode()
        assert data.count(b"\n") == data.count(b"\r\n")
        assert patch_file(compiler_xml, "generated_src", "generated_testSrc") == "unchanged"

    def test_bom_file_keeps_declaration(self, compiler_xml):
        compiler_xml.write_bytes(b"\xef\xbb\xbf" + compiler_xml.read_bytes())
        assert patch_file(compiler_xml, "generated_src", "generated_testSrc") == "updated"
        data = compiler_xml.read_bytes()
        assert data.startswith(b'\xef\xbb\xbf<?xml version="1.0" encoding="UTF-8"?>')
        assert data[3:].decode() == EXPECTED_STALE_PATCHED
