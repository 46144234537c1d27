import io

import pytest

from authorcompany.cli import main


def feed(monkeypatch, text):
    monkeypatch.setattr("sys.stdin", io.StringIO(text))


def test_default_edition_is_last(monkeypatch, capsys):
    feed(monkeypatch, "Ada\n30\nParis\nMy Book\n250\nPoetry\nPass\n")
    assert main([]) == 0
    output = capsys.readouterr().out
    assert "• Genre submitted: Poetry\n" in output
    assert output.endswith("\n✅ Thank you for applying to Author Company!\n")


def test_second_edition_rejects_genre(monkeypatch, capsys):
    feed(monkeypatch, "Ada\n30\nParis\nMy Book\n250\nPoetry\nPass\n")
    assert main(["--edition", "second"]) == 0
    output = capsys.readouterr().out
    assert output.endswith(
        "\n❌ Invalid genre. Please submit only Self-Help, Sci-fi, or Research.\n"
    )


def test_first_edition(monkeypatch, capsys):
    feed(monkeypatch, "Ada\n30\nParis\nMy Book\n250\nFail\n")
    assert main(["--edition", "first"]) == 0
    output = capsys.readouterr().out
    assert output.startswith("Welcome to Author Company\n")
    assert "Title: To Kill a Mockingbird" not in output


def test_truncated_input_reports_error(monkeypatch, capsys):
    feed(monkeypatch, "Ada\n")
    assert main(["--edition", "code-runner"]) == 1
    assert "input ended" in capsys.readouterr().err


def test_bad_age_reports_error(monkeypatch, capsys):
    feed(monkeypatch, "Ada\nold\nParis\n")
    assert main(["--edition", "bookstore"]) == 1
    assert "expected an integer" in capsys.readouterr().err


def test_unknown_edition_is_rejected(monkeypatch):
    feed(monkeypatch, "")
    with pytest.raises(SystemExit) as excinfo:
        main(["--edition", "ninth"])
    assert excinfo.value.code == 2