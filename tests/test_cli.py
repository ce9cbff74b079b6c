import io
import logging
import subprocess
from pathlib import Path

import pytest

import tt2doc
from evt2doc.generators import latexmk

from conftest import make_block


@pytest.fixture(autouse=True)
def restore_logging():
    """setup_logging() mijenja root logger, vracamo ga nakon testa."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.fixture
def input_file(tmp_path, timetable_text):
    path = tmp_path / "raspored.txt"
    path.write_text(timetable_text, encoding="utf-8")
    return path


def test_html_to_file(input_file, tmp_path):
    out = tmp_path / "raspored.html"
    assert tt2doc.main(["-i", str(input_file), "-f", "html", "-o", str(out)]) == 0
    assert out.read_text(encoding="utf-8").count('<div class="day">') == 3


def test_tikz_to_stdout(input_file, capsys):
    assert tt2doc.main(["-i", str(input_file), "-f", "tikz"]) == 0
    assert "\\node[fun={2.00}{1}] at (3,14.00) {Izlet};" in capsys.readouterr().out


def test_stdin_input(monkeypatch, capsys, timetable_text):
    monkeypatch.setattr("sys.stdin", io.StringIO(timetable_text))
    assert tt2doc.main(["-i", "-", "-f", "abstracts"]) == 0
    assert "\\subsection{Izlet}" in capsys.readouterr().out


def test_custom_template(input_file, tmp_path, capsys):
    template = tmp_path / "sablon.html"
    template.write_text("<main>{{ CALENDAR }}</main>", encoding="utf-8")
    assert tt2doc.main(["-i", str(input_file), "-f", "html", "-t", str(template)]) == 0
    assert capsys.readouterr().out.startswith("<main><div class=\"day\">")


def test_dump(input_file, capsys):
    assert tt2doc.main(["-i", str(input_file), "-d"]) == 0
    out = capsys.readouterr().out
    assert "=== DOGADJAJI ===" in out
    assert "Dana: 3, sati: 9-16" in out


def test_parse_error_exits_with_1(tmp_path, capsys):
    path = tmp_path / "los.txt"
    path.write_text(make_block(date="2024-11-06 09:00", duration="pola sata"), encoding="utf-8")
    assert tt2doc.main(["-i", str(path), "-f", "html"]) == 1
    assert "pola sata" in capsys.readouterr().err


def test_skip_invalid(tmp_path, capsys):
    path = tmp_path / "mjesovito.txt"
    path.write_text("\n---\n".join([
        make_block(title="Dobar", date="2024-11-06 09:00", duration="30"),
        make_block(title="Los", date="2024-11-06 10:00"),
    ]), encoding="utf-8")
    assert tt2doc.main(["-i", str(path), "-f", "html", "--skip-invalid"]) == 0
    captured = capsys.readouterr()
    assert "<b>Dobar</b>" in captured.out
    assert "Upozorenje" in captured.err


def test_empty_document_fails_in_layout(tmp_path, capsys):
    path = tmp_path / "prazno.txt"
    path.write_text("---\n\n---\n", encoding="utf-8")
    assert tt2doc.main(["-i", str(path), "-f", "tikz"]) == 1
    assert "dogadjaj" in capsys.readouterr().err


def test_missing_input_file(tmp_path):
    assert tt2doc.main(["-i", str(tmp_path / "nema.txt"), "-f", "html"]) == 1


def test_format_or_dump_required(input_file):
    assert tt2doc.main(["-i", str(input_file)]) == 1


def test_pdf_only_for_latex_formats(input_file):
    with pytest.raises(SystemExit) as info:
        tt2doc.main(["-i", str(input_file), "-f", "html", "--pdf"])
    assert info.value.code == 2


def test_pdf_output(input_file, tmp_path, monkeypatch):
    def fake_run(args, cwd=None, **kwargs):
        (Path(cwd) / "timetable.pdf").write_bytes(b"%PDF")
        return subprocess.CompletedProcess(args, 0, stdout="", stderr="")

    monkeypatch.setattr(latexmk.subprocess, "run", fake_run)
    out = tmp_path / "raspored.pdf"
    assert tt2doc.main(["-i", str(input_file), "-f", "tikz", "--pdf", "-o", str(out)]) == 0
    assert out.read_bytes() == b"%PDF"


def test_log_file(input_file, tmp_path):
    log = tmp_path / "tt2doc.log"
    tt2doc.main(["-i", str(input_file), "-f", "html", "-o", str(tmp_path / "x.html"),
                 "--log-file", str(log)])
    logging.getLogger().handlers[-1].flush()
    assert "[INFO] Parsirano dogadjaja: 5" in log.read_text(encoding="utf-8")


def test_dump_with_document_on_stdout_goes_to_stderr(input_file, capsys):
    assert tt2doc.main(["-i", str(input_file), "-f", "html", "-d"]) == 0
    captured = capsys.readouterr()
    assert "=== DOGADJAJI ===" not in captured.out
    assert captured.out.startswith("<!DOCTYPE html>")
    assert "=== DOGADJAJI ===" in captured.err


def test_dump_with_output_file_stays_on_stdout(input_file, tmp_path, capsys):
    out = tmp_path / "raspored.html"
    assert tt2doc.main(["-i", str(input_file), "-f", "html", "-d", "-o", str(out)]) == 0
    assert "=== DOGADJAJI ===" in capsys.readouterr().out
    assert "=== DOGADJAJI ===" not in out.read_text(encoding="utf-8")
