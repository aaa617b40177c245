import pytest

import main
from comic_ocr.config import RunConfig


@pytest.fixture
def calls(monkeypatch):
    recorded = []
    monkeypatch.setattr(main, "configure_dependencies", lambda: None)
    monkeypatch.setattr(main, "process_file", lambda path, **kw: recorded.append(("file", path, kw)) or path + ".txt")
    monkeypatch.setattr(main, "process_directory", lambda path, **kw: recorded.append(("dir", path, kw)) or [])
    return recorded


def test_no_arguments_prints_usage(capsys):
    with pytest.raises(SystemExit) as exc:
        main._cli([])
    assert exc.value.code == 0
    assert "usage:" in capsys.readouterr().out


def test_help_exits_zero(capsys):
    with pytest.raises(SystemExit) as exc:
        main._cli(["-h"])
    assert exc.value.code == 0
    assert "--rows" in capsys.readouterr().out


def test_unknown_argument(capsys, calls):
    with pytest.raises(SystemExit) as exc:
        main._cli(["--bogus"])
    assert exc.value.code == 1
    out = capsys.readouterr().out
    assert "Unknown argument: --bogus" in out
    assert "usage:" in out
    assert calls == []


def test_missing_value(capsys, calls):
    with pytest.raises(SystemExit) as exc:
        main._cli(["-f"])
    assert exc.value.code == 1
    assert "usage:" in capsys.readouterr().out


@pytest.mark.parametrize("value", ["0", "-2", "two"])
def test_rows_must_be_positive_integer(value, calls):
    with pytest.raises(SystemExit) as exc:
        main._cli(["-d", ".", "-n", value])
    assert exc.value.code == 1
    assert calls == []


def test_file_mode(calls):
    main._cli(["-f", "page.png", "-n", "3"])
    assert calls == [("file", "page.png", {"rows": 3, "lang": "eng"})]


def test_directory_mode(calls):
    main._cli(["--directory", "pages", "--recursive", "--lang", "jpn", "-j", "2"])
    assert calls == [("dir", "pages", {"recursive": True, "rows": None, "lang": "jpn", "jobs": 2})]


def test_configured_language_is_default(monkeypatch, calls):
    monkeypatch.setattr(main, "configure_dependencies", lambda: "eng+fra")
    main._cli(["-f", "page.png"])
    assert calls[0][2]["lang"] == "eng+fra"


def test_run_reports_failed_file(monkeypatch):
    monkeypatch.setattr(main, "process_file", lambda path, **kw: None)
    assert main.run(RunConfig(file="missing.png")) == 1


def test_run_reports_missing_directory(tmp_path, capsys):
    assert main.run(RunConfig(directory=str(tmp_path / "none"))) == 1
    assert "none" in capsys.readouterr().out
