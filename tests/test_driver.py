"""
Tests for the file driver: writes, no-op detection and per-file failure
isolation.
"""

import os
import stat
import sys

import pytest

from allways.driver import process_file, process_files
from allways.mutation import SourceEditor


GOOD = "from . import bar\n"
MALFORMED = "from . import bar\n# allways: start\n"
BROKEN = "def (:\n"


class TestProcessFile:

    def test_modifies_and_writes(self, temp_package):
        result = process_file(temp_package)
        assert result.status == "modified"
        assert result.names == ["bar", "foo", "z"]
        text = temp_package.read_text(encoding="utf-8")
        assert text.endswith('__all__ = [\n    "bar",\n    "foo",\n    "z",\n]\n# allways: end\n')

    def test_second_run_unchanged(self, temp_package):
        process_file(temp_package)
        mtime = temp_package.stat().st_mtime_ns
        content = temp_package.read_bytes()

        result = process_file(temp_package)

        assert result.status == "unchanged"
        assert temp_package.read_bytes() == content
        assert temp_package.stat().st_mtime_ns == mtime

    def test_no_write(self, temp_package):
        original = temp_package.read_bytes()
        result = process_file(temp_package, write=False, with_diff=True)
        assert result.status == "modified"
        assert temp_package.read_bytes() == original
        assert "+# allways: start" in result.diff
        assert '+    "bar",' in result.diff

    def test_malformed_left_untouched(self, write_module):
        path = write_module("pkg/__init__.py", MALFORMED)
        result = process_file(path)
        assert result.status == "failed"
        assert result.error_code == "malformed_markers"
        assert "no matching" in result.error
        assert path.read_bytes() == MALFORMED.encode()

    def test_parse_failure(self, write_module):
        path = write_module("bad.py", BROKEN)
        result = process_file(path)
        assert result.status == "failed"
        assert result.error_code == "parse_error"
        assert str(path) in result.error
        assert path.read_bytes() == BROKEN.encode()

    def test_missing_file(self, tmp_path):
        result = process_file(tmp_path / "nope.py")
        assert result.status == "failed"
        assert result.error_code == "io_error"

    def test_not_utf8(self, write_module, tmp_path):
        path = tmp_path / "latin.py"
        path.write_bytes(b"x = '\xe9'\n")
        result = process_file(path)
        assert result.status == "failed"
        assert result.error_code == "io_error"

    def test_utf8_bom_kept(self, tmp_path):
        path = tmp_path / "bom.py"
        path.write_bytes(b"\xef\xbb\xbfimport os\n")

        result = process_file(path)

        assert result.status == "modified"
        assert result.names == ["os"]
        data = path.read_bytes()
        assert data.startswith(b"\xef\xbb\xbfimport os\n\n\n# allways: start\n")
        assert data.count(b"\xef\xbb\xbf") == 1
        assert process_file(path).status == "unchanged"

    def test_crlf_preserved(self, write_module):
        path = write_module("crlf.py", "import os\r\nimport sys\r\n")
        process_file(path)
        data = path.read_bytes()
        assert b"\r\n" in data
        assert b"\n" not in data.replace(b"\r\n", b"")

    @pytest.mark.skipif(sys.platform == "win32", reason="POSIX permissions")
    def test_file_mode_preserved(self, write_module):
        path = write_module("exec.py", GOOD)
        os.chmod(path, 0o755)
        process_file(path)
        assert stat.S_IMODE(path.stat().st_mode) == 0o755


class TestProcessFiles:

    def test_failures_do_not_stop_run(self, write_module):
        good = write_module("a/__init__.py", GOOD)
        bad = write_module("b/__init__.py", MALFORMED)
        broken = write_module("c/__init__.py", BROKEN)

        summary = process_files([bad, broken, good])

        assert [r.status for r in summary.results] == ["failed", "failed", "modified"]
        assert not summary.ok
        assert "# allways: end" in good.read_text(encoding="utf-8")

    def test_parallel_matches_sequential(self, write_module):
        paths = [write_module(f"p{i}/__init__.py", f"from . import mod{i}\n") for i in range(6)]
        summary = process_files(paths, workers=4)
        assert [r.path for r in summary.results] == [str(p) for p in paths]
        assert all(r.status == "modified" for r in summary.results)
        assert summary.results[3].names == ["mod3"]

    def test_deeply_nested_file_does_not_stop_run(self, write_module):
        deep = write_module("deep.py", "x = " + "-" * 200000 + "1\n")
        good = write_module("good.py", GOOD)

        summary = process_files([deep, good])

        assert [r.status for r in summary.results] == ["failed", "modified"]
        assert summary.results[0].error_code == "parse_error"
        assert "# allways: end" in good.read_text(encoding="utf-8")

    def test_summary_dict(self, write_module):
        good = write_module("a.py", GOOD)
        summary = process_files([good], write=False)
        payload = summary.to_dict()
        assert payload["total_files"] == 1
        assert payload["modified"] == 1
        assert payload["results"][0]["status"] == "modified"
        assert "error" not in payload["results"][0]


class TestSourceEditor:

    def test_atomic_write(self, tmp_path):
        test_file = tmp_path / "test.py"
        test_file.write_text("original content")

        SourceEditor().write(str(test_file), "new content")

        assert test_file.read_text() == "new content"
        assert [p.name for p in tmp_path.iterdir() if p.name.endswith(".tmp")] == []

    def test_unified_diff_empty_when_equal(self):
        assert SourceEditor().generate_unified_diff("x.py", "a\n", "a\n") == ""
