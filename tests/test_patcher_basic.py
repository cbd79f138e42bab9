import re
import tempfile
from pathlib import Path

from splashpatch.patcher import (
    PatchSpec,
    insert_in_file_before_last,
    replace_or_insert_in_file,
    write_or_replace_or_insert_in_file,
)

SPEC = PatchSpec(
    file_content="<list>\n  <value>1</value> <!-- ours -->\n</list>\n",
    replace_content="  <value>2</value> <!-- ours -->\n",
    replace_pattern=re.compile(r"^.*<value>.*</value> <!-- ours -->.*\n", re.M),
    insert_content="  <value>3</value> <!-- ours -->\n",
    insert_pattern=re.compile(r"^.*</list>", re.M),
)


def test_missing_file_is_created_with_parent_dirs():
    with tempfile.TemporaryDirectory() as td:
        path = Path(td) / "values" / "nested" / "file.xml"
        result = write_or_replace_or_insert_in_file(path, SPEC, target="values")
        assert result.created and not result.replaced and not result.inserted
        assert result.operation == "created"
        assert path.read_text() == SPEC.file_content


def test_blank_file_is_treated_as_missing():
    with tempfile.TemporaryDirectory() as td:
        path = Path(td) / "file.xml"
        path.write_text("  \n\t\n")
        result = write_or_replace_or_insert_in_file(path, SPEC)
        assert result.created
        assert path.read_text() == SPEC.file_content


def test_replace_takes_precedence():
    with tempfile.TemporaryDirectory() as td:
        path = Path(td) / "file.xml"
        path.write_text(SPEC.file_content)
        result = write_or_replace_or_insert_in_file(path, SPEC)
        assert result.replaced and not result.inserted and not result.created
        assert path.read_text() == "<list>\n  <value>2</value> <!-- ours -->\n</list>\n"


def test_insert_when_replace_pattern_is_absent():
    with tempfile.TemporaryDirectory() as td:
        path = Path(td) / "file.xml"
        path.write_text("<list>\n  <value>other</value>\n</list>\n")
        result = write_or_replace_or_insert_in_file(path, SPEC)
        assert result.inserted and not result.replaced
        assert path.read_text() == "<list>\n  <value>other</value>\n  <value>3</value> <!-- ours -->\n</list>\n"


def test_fallback_appends_insert_pattern_text():
    with tempfile.TemporaryDirectory() as td:
        path = Path(td) / "file.xml"
        path.write_text("unrelated content\n")
        result = write_or_replace_or_insert_in_file(path, SPEC)
        assert result.inserted
        content = path.read_text()
        assert content == "unrelated content\n" + r"/^.*<\/list>/m"
        assert SPEC.insert_content not in content
        assert "no anchor found" in result.warning


def test_second_run_is_stable():
    with tempfile.TemporaryDirectory() as td:
        path = Path(td) / "file.xml"
        spec = PatchSpec(
            file_content=SPEC.file_content,
            replace_content="  <value>1</value> <!-- ours -->\n",
            replace_pattern=SPEC.replace_pattern,
            insert_content=SPEC.insert_content,
            insert_pattern=SPEC.insert_pattern,
        )
        write_or_replace_or_insert_in_file(path, spec)
        first = path.read_bytes()
        write_or_replace_or_insert_in_file(path, spec)
        assert path.read_bytes() == first


def test_replace_or_insert_reports_nothing_applied():
    with tempfile.TemporaryDirectory() as td:
        path = Path(td) / "file.xml"
        path.write_text("nothing to see\n")
        result = replace_or_insert_in_file(path, SPEC, target="values")
        assert not result.applied
        assert result.operation == "unchanged"
        assert path.read_text() == "nothing to see\n"


def test_crlf_line_endings_survive_patching():
    with tempfile.TemporaryDirectory() as td:
        path = Path(td) / "file.xml"
        path.write_bytes(b"<list>\r\n</list>\r\n")
        replace_or_insert_in_file(path, PatchSpec(
            replace_pattern="never",
            replace_content="",
            insert_pattern="</list>",
            insert_content="<value/>",
        ))
        assert path.read_bytes() == b"<list>\r\n<value/></list>\r\n"


def test_insert_before_last_in_file():
    with tempfile.TemporaryDirectory() as td:
        path = Path(td) / "A.java"
        path.write_text("class A {\n  void f() {\n  }\n}\n")
        ok = insert_in_file_before_last(path, PatchSpec(
            insert_content="  void g() {}\n",
            insert_pattern=re.compile(r"^\s*}\s*$", re.M),
        ))
        assert ok
        assert path.read_text() == "class A {\n  void f() {\n  }\n  void g() {}\n}\n"
