from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path
from typing import Any

import pytest
from typer.testing import CliRunner

from txt2pdf.cli import app
from txt2pdf.utils.logging import configure_logging


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch: Any) -> Iterator[None]:
    monkeypatch.delenv("TXT2PDF_FONT_SIZE", raising=False)
    yield
    configure_logging(verbose=False)


def _input(tmp_path: Path, text: str = "hello world\n\nfoo bar baz", name: str = "in.txt") -> Path:
    path = tmp_path / name
    path.write_text(text, encoding="utf-8")
    return path


def test_run_writes_pdf_next_to_input(tmp_path: Path) -> None:
    src = _input(tmp_path)
    runner = CliRunner()
    result = runner.invoke(app, ["-i", str(src)])
    assert result.exit_code == 0
    out = tmp_path / "in.pdf"
    assert out.read_bytes().startswith(b"%PDF")
    assert str(out) in result.output


def test_run_explicit_output_and_font(tmp_path: Path) -> None:
    src = _input(tmp_path)
    out = tmp_path / "nested" / "custom.pdf"
    runner = CliRunner()
    result = runner.invoke(
        app, ["--input", str(src), "--output", str(out), "--font", "TIMES-ITALIC"]
    )
    assert result.exit_code == 0
    assert out.exists()
    assert not (tmp_path / "in.pdf").exists()


def test_missing_input_argument() -> None:
    runner = CliRunner()
    result = runner.invoke(app, [])
    assert result.exit_code == 2
    assert "You must provide an input file" in result.output


def test_blank_input_argument() -> None:
    runner = CliRunner()
    result = runner.invoke(app, ["-i", "   "])
    assert result.exit_code == 2


def test_wrong_extension(tmp_path: Path) -> None:
    src = _input(tmp_path, name="notes.md")
    runner = CliRunner()
    result = runner.invoke(app, ["-i", str(src)])
    assert result.exit_code == 2
    assert ".txt" in result.output
    assert list(tmp_path.glob("*.pdf")) == []


def test_missing_file(tmp_path: Path) -> None:
    missing = tmp_path / "missing.txt"
    runner = CliRunner()
    result = runner.invoke(app, ["-i", str(missing)])
    assert result.exit_code == 3
    assert str(missing) in result.output


def test_empty_file(tmp_path: Path) -> None:
    src = _input(tmp_path, text="  \n\n ")
    runner = CliRunner()
    result = runner.invoke(app, ["-i", str(src)])
    assert result.exit_code == 5
    assert "empty" in result.output
    assert not (tmp_path / "in.pdf").exists()


def test_unsupported_font(tmp_path: Path) -> None:
    src = _input(tmp_path)
    runner = CliRunner()
    result = runner.invoke(app, ["-i", str(src), "--font", "bogus"])
    assert result.exit_code == 2
    assert "Supported fonts" in result.output
    assert "helvetica" in result.output
    assert not (tmp_path / "in.pdf").exists()


def test_bad_config(tmp_path: Path) -> None:
    src = _input(tmp_path)
    bad_cfg = tmp_path / "bad.yml"
    bad_cfg.write_text("unknown: true\n", encoding="utf-8")
    runner = CliRunner()
    result = runner.invoke(app, ["-i", str(src), "--config", str(bad_cfg)])
    assert result.exit_code == 4
    assert not (tmp_path / "in.pdf").exists()


def test_missing_config_file(tmp_path: Path) -> None:
    src = _input(tmp_path)
    runner = CliRunner()
    result = runner.invoke(app, ["-i", str(src), "--config", str(tmp_path / "nope.yml")])
    assert result.exit_code == 4


def test_verbose_reports_progress(tmp_path: Path) -> None:
    src = _input(tmp_path)
    runner = CliRunner()
    result = runner.invoke(app, ["-i", str(src), "-v"])
    assert result.exit_code == 0
    assert "Wrote 1 page(s), 3 line(s)" in result.output


def test_version() -> None:
    runner = CliRunner()
    result = runner.invoke(app, ["--version"])
    assert result.exit_code == 0
    assert "0.1.0" in result.output


def test_help() -> None:
    runner = CliRunner()
    result = runner.invoke(app, ["--help"])
    assert result.exit_code == 0
    assert "--input" in result.output
    assert "--output" in result.output
    assert "--font" in result.output


def test_repeated_runs_produce_same_content(tmp_path: Path) -> None:
    pypdf = pytest.importorskip("pypdf")
    src = _input(tmp_path, text="\n".join(f"paragraph {i} " * 12 for i in range(60)))
    out = tmp_path / "out.pdf"
    runner = CliRunner()

    contents = []
    for _ in range(2):
        result = runner.invoke(app, ["-i", str(src), "-o", str(out)])
        assert result.exit_code == 0
        reader = pypdf.PdfReader(str(out))
        contents.append([page.extract_text() for page in reader.pages])

    assert len(contents[0]) > 1
    assert contents[0] == contents[1]


def test_consecutive_runs_in_one_process(tmp_path: Path) -> None:
    src = _input(tmp_path)
    runner = CliRunner()
    first = runner.invoke(app, ["-i", str(src), "-v"])
    second = runner.invoke(app, ["-i", str(src), "-v"])
    third = runner.invoke(app, ["-i", str(src)])
    assert first.exit_code == 0
    assert second.exit_code == 0, second.output
    assert third.exit_code == 0, third.output


def test_bad_config_names_the_field(tmp_path: Path) -> None:
    src = _input(tmp_path)
    bad_cfg = tmp_path / "bad.yml"
    bad_cfg.write_text("layout:\n  font_size: 0\n", encoding="utf-8")
    runner = CliRunner()
    result = runner.invoke(app, ["-i", str(src), "--config", str(bad_cfg)])
    assert result.exit_code == 4
    assert "layout.font_size" in result.output
