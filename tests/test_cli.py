"""Tests for the command-line entry point."""

from __future__ import annotations

from pathlib import Path

import pytest
from bs4 import BeautifulSoup

from mdtoc.cli import EXIT_ERROR, EXIT_USAGE, main


@pytest.fixture
def workdir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run from an empty working directory with a separate source tree."""
    cwd = tmp_path / "work"
    cwd.mkdir()
    monkeypatch.chdir(cwd)
    return cwd


def _write(root: Path, name: str, text: str) -> None:
    path = root / name
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")


class TestMain:
    """Tests for main function."""

    def test_end_to_end(self, tmp_path: Path, workdir: Path) -> None:
        """Writes the grouped tree to the default output path."""
        src = tmp_path / "docs"
        _write(src, "index.md", "---\npart: Guide\n---\n")
        for name in ("a.md", "b.md"):
            _write(src, name, "---\npart: Guide\n---\n# Title\n## Sub {anchor-x}\n")

        assert main([str(src)]) == 0

        output = workdir / "_build" / "toc.xml"
        soup = BeautifulSoup(output.read_text(encoding="utf-8"), "xml")
        root = soup.find("topic")
        assert (root["title"], root["href"]) == ("Guide", "index.html")
        (group,) = root.find_all("topic", recursive=False)
        assert group["title"] == "Guide"
        assert group.get("href") is None
        topics = group.find_all("topic", recursive=False)
        assert [t["href"] for t in topics] == ["a.html", "b.html"]
        assert topics[0].find("topic")["href"] == "a.html#anchor-x"

    def test_rerun_is_byte_identical(self, tmp_path: Path, workdir: Path) -> None:
        """Running twice on unchanged input gives the same bytes."""
        src = tmp_path / "docs"
        _write(src, "index.md", "---\npart: Docs\n---\n")
        _write(src, "x/b.md", "# B\n### Deep\n## Mid\n")
        _write(src, "a.md", "# A\n")
        output = workdir / "_build" / "toc.xml"

        assert main([str(src)]) == 0
        first = output.read_bytes()
        assert main([str(src)]) == 0
        assert output.read_bytes() == first

    def test_defaults_to_current_directory(self, workdir: Path) -> None:
        """Without a source argument the working directory is scanned."""
        _write(workdir, "index.md", "---\npart: Here\n---\n")
        _write(workdir, "a.md", "# A\n")

        assert main([]) == 0
        assert (workdir / "_build" / "toc.xml").is_file()

    def test_missing_index(self, tmp_path: Path, workdir: Path, capsys: pytest.CaptureFixture[str]) -> None:
        """Exits non-zero and writes nothing without an index document."""
        src = tmp_path / "docs"
        _write(src, "a.md", "# A\n")

        assert main([str(src)]) == EXIT_ERROR
        assert "Index document not found" in capsys.readouterr().err
        assert not (workdir / "_build").exists()

    def test_empty_source(self, tmp_path: Path, workdir: Path, capsys: pytest.CaptureFixture[str]) -> None:
        """Exits non-zero with a message when no documents exist."""
        src = tmp_path / "docs"
        src.mkdir()

        assert main([str(src)]) == EXIT_ERROR
        assert "No .md documents found" in capsys.readouterr().err
        assert not (workdir / "_build").exists()

    def test_source_not_directory(self, tmp_path: Path, workdir: Path, capsys: pytest.CaptureFixture[str]) -> None:
        """A file given as source root is rejected."""
        src = tmp_path / "file.md"
        src.write_text("# A\n", encoding="utf-8")

        assert main([str(src)]) == EXIT_ERROR
        assert "not a directory" in capsys.readouterr().err

    def test_help_exits_non_zero(self, workdir: Path, capsys: pytest.CaptureFixture[str]) -> None:
        """A help request prints usage and fails."""
        assert main(["--help"]) == EXIT_USAGE
        assert "usage: mdtoc" in capsys.readouterr().err

    def test_print_to_stdout(self, tmp_path: Path, workdir: Path, capsys: pytest.CaptureFixture[str]) -> None:
        """--print writes the document to stdout and no file."""
        src = tmp_path / "docs"
        _write(src, "index.md", "---\npart: Docs\n---\n")
        _write(src, "a.md", "# A\n")

        assert main([str(src), "--print"]) == 0
        assert capsys.readouterr().out.startswith('<?xml version="1.0" encoding="UTF-8"?>\n')
        assert not (workdir / "_build").exists()

    def test_skip_code_blocks_and_max_level(self, tmp_path: Path, workdir: Path) -> None:
        """Options reach the builder."""
        src = tmp_path / "docs"
        _write(src, "index.md", "---\npart: Docs\n---\n")
        _write(src, "a.md", "# A\n```sh\n# comment\n```\n## B\n### C\n")
        output = tmp_path / "out.xml"

        assert main([str(src), "--skip-code-blocks", "--max-level", "2", "-o", str(output)]) == 0

        titles = [t["title"] for t in BeautifulSoup(output.read_text(encoding="utf-8"), "xml").find_all("topic")]
        assert titles == ["Docs", "", "A", "B"]

    def test_ungrouped_and_grouped_share_depth(self, tmp_path: Path, workdir: Path) -> None:
        """Documents without a part: label get their own group element."""
        src = tmp_path / "docs"
        _write(src, "index.md", "---\npart: Docs\n---\n")
        _write(src, "a.md", "# A\n")
        _write(src, "b.md", "---\npart: Guide\n---\n# B\n")

        assert main([str(src)]) == 0

        text = (workdir / "_build" / "toc.xml").read_text(encoding="utf-8")
        assert text.count("<topic") == 5
        root = BeautifulSoup(text, "xml").find("topic")
        groups = root.find_all("topic", recursive=False)
        assert [g["title"] for g in groups] == ["", "Guide"]
        assert [[t["title"] for t in g.find_all("topic", recursive=False)] for g in groups] == [["A"], ["B"]]
        assert '\t\t<topic title="A" href="a.html">' in text
        assert '\t\t<topic title="B" href="b.html">' in text

    def test_undecodable_document(
        self, tmp_path: Path, workdir: Path, caplog: pytest.LogCaptureFixture
    ) -> None:
        """A document that is not valid text fails the run with a logged diagnostic."""
        src = tmp_path / "docs"
        _write(src, "index.md", "---\npart: Docs\n---\n")
        (src / "a.md").write_bytes(b"# Caf\xe9\n")

        assert main([str(src)]) == EXIT_ERROR
        assert "I/O error while building table of contents" in caplog.text
        assert "UnicodeDecodeError" in caplog.text
        assert not (workdir / "_build").exists()

    def test_unwritable_output(
        self, tmp_path: Path, workdir: Path, caplog: pytest.LogCaptureFixture
    ) -> None:
        """An output path that cannot be written fails the run."""
        src = tmp_path / "docs"
        _write(src, "index.md", "---\npart: Docs\n---\n")
        _write(src, "a.md", "# A\n")
        output = tmp_path / "taken"
        output.mkdir()

        assert main([str(src), "-o", str(output)]) == EXIT_ERROR
        assert "I/O error while building table of contents" in caplog.text
        assert output.is_dir()

    def test_invalid_max_level(self, workdir: Path) -> None:
        """A max level below one is a usage error."""
        with pytest.raises(SystemExit) as excinfo:
            main(["--max-level", "0"])
        assert excinfo.value.code != 0
