"""Tests for the belscript-check command."""

from belscript.cli import check_file, main

SMALL = """SET DOCUMENT Name = "Small"
DEFINE NAMESPACE HGNC AS URL "http://example.org/hgnc.belns"
p(HGNC:AKT1)
p(HGNC:AKT1) -> p(HGNC:MTOR)
p(HGNC:A) =| (p(HGNC:B) -> p(HGNC:C)) // nested
"""


class TestCheck:
    def test_check_file_counts(self, tmp_path):
        path = tmp_path / "small.bel"
        path.write_text(SMALL)
        kinds, shapes = check_file(path)
        assert kinds["statement"] == 3
        assert kinds["document_property"] == 1
        assert shapes == {"subject_only": 1, "simple": 1, "nested": 1}

    def test_main_ok(self, tmp_path, capsys):
        path = tmp_path / "small.bel"
        path.write_text(SMALL)
        assert main([str(path)]) == 0
        out = capsys.readouterr().out
        assert "OK" in out
        assert "3 statements (nested=1, simple=1, subject_only=1)" in out
        assert "All clear." in out

    def test_main_reports_failures(self, tmp_path, capsys):
        good = tmp_path / "good.bel"
        good.write_text(SMALL)
        bad = tmp_path / "bad.bel"
        bad.write_text("p(HGNC:MYC ->\n")
        assert main([str(good), str(bad)]) == 1
        out = capsys.readouterr().out
        assert f"FAIL  {bad}" in out
        assert "line 1, col 2: unclosed '('" in out

    def test_missing_file(self, tmp_path, capsys):
        assert main([str(tmp_path / "missing.bel")]) == 1
        assert "FAIL" in capsys.readouterr().out

    def test_undecodable_file(self, tmp_path, capsys):
        path = tmp_path / "latin1.bel"
        path.write_bytes('SET Disease = "Maladie cardiaque é"\n'.encode("latin-1"))
        assert main([str(path)]) == 1
        out = capsys.readouterr().out
        assert f"FAIL  {path}" in out
        assert "codec can't decode" in out
