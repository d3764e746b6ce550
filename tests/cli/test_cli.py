"""Tests for the termflex command line."""

import argparse
import io

import pytest

from termflex.__main__ import build_parser, main, positive_int

FLEX_END = '<div class="flexbox" data-justify="end">AB</div>'


@pytest.fixture
def markup_file(tmp_path):
    path = tmp_path / "layout.html"
    path.write_text(FLEX_END, encoding="utf-8")
    return path


class TestParser:
    """Tests for argument parsing."""

    @pytest.mark.unit
    def test_render_arguments(self):
        args = build_parser().parse_args(
            ["render", "x.html", "--width", "30", "--translators", "text", "--plain"]
        )
        assert args.file == "x.html"
        assert args.width == 30
        assert args.translators == "text"
        assert args.plain is True

    @pytest.mark.unit
    def test_no_command_fails(self, capsys):
        assert main([]) == 1


    @pytest.mark.unit
    @pytest.mark.parametrize("command", ["render", "measure"])
    @pytest.mark.parametrize("width", ["0", "-3", "wide"])
    def test_width_must_be_positive(self, markup_file, command, width, capsys):
        with pytest.raises(SystemExit) as excinfo:
            main([command, str(markup_file), "--width", width])
        assert excinfo.value.code == 2
        assert "--width" in capsys.readouterr().err

    @pytest.mark.unit
    def test_positive_int(self):
        assert positive_int("12") == 12
        with pytest.raises(argparse.ArgumentTypeError):
            positive_int("0")


class TestRenderCommand:
    """Tests for `termflex render`."""

    @pytest.mark.unit
    def test_plain(self, markup_file, capsys):
        assert main(["render", str(markup_file), "--width", "10", "--plain"]) == 0
        assert capsys.readouterr().out == "        AB\n"

    @pytest.mark.unit
    def test_console_output(self, markup_file, capsys):
        assert main(["render", str(markup_file), "--width", "10"]) == 0
        lines = capsys.readouterr().out.splitlines()
        assert lines[0].rstrip().endswith("AB")
        assert lines[0].startswith("        ")

    @pytest.mark.unit
    def test_width_from_environment(self, markup_file, capsys, monkeypatch):
        monkeypatch.setenv("TERMFLEX_WIDTH", "4")
        assert main(["render", str(markup_file), "--plain"]) == 0
        assert capsys.readouterr().out == "  AB\n"

    @pytest.mark.unit
    def test_stdin(self, capsys, monkeypatch):
        monkeypatch.setattr("sys.stdin", io.StringIO(FLEX_END))
        assert main(["render", "-", "--width", "6", "--plain"]) == 0
        assert capsys.readouterr().out == "    AB\n"

    @pytest.mark.unit
    def test_missing_file(self, tmp_path):
        assert main(["render", str(tmp_path / "missing.html")]) == 1

    @pytest.mark.unit
    def test_unhandled_markup(self, tmp_path):
        path = tmp_path / "bad.html"
        path.write_text('<div class="flexbox"><widget>A</widget></div>', encoding="utf-8")
        assert main(["render", str(path)]) == 1

    @pytest.mark.unit
    def test_unknown_translator(self, markup_file):
        assert main(["render", str(markup_file), "--translators", "flexbox,nope"]) == 1

    @pytest.mark.unit
    def test_translator_subset(self, markup_file):
        # Without the text translator the character data cannot be handled
        assert main(["render", str(markup_file), "--translators", "flexbox"]) == 1


class TestMeasureCommand:
    """Tests for `termflex measure`."""

    @pytest.mark.unit
    def test_measure(self, markup_file, capsys):
        assert main(["measure", str(markup_file)]) == 0
        assert capsys.readouterr().out == "2 2\n"

    @pytest.mark.unit
    def test_measure_row_with_gap(self, tmp_path, capsys):
        path = tmp_path / "gap.html"
        path.write_text(
            '<div class="flexbox" data-gap="3"><p>AAAA</p><p>BB</p></div>',
            encoding="utf-8",
        )
        assert main(["measure", str(path), "--width", "40"]) == 0
        assert capsys.readouterr().out == "4 9\n"


class TestInspectionCommands:
    """Tests for `termflex translators` and `termflex env`."""

    @pytest.mark.unit
    def test_translators_default_order(self, capsys):
        assert main(["translators"]) == 0
        out = capsys.readouterr().out
        assert "1. flexbox" in out
        assert "6. text" in out
        assert "inactive" not in out

    @pytest.mark.unit
    def test_translators_configured(self, capsys, monkeypatch):
        monkeypatch.setenv("TERMFLEX_TRANSLATORS", "text,flexbox")
        assert main(["translators"]) == 0
        out = capsys.readouterr().out
        assert "1. text" in out
        assert "Registered but inactive: align, panel, rows, inline" in out

    @pytest.mark.unit
    def test_env_lists_variables(self, capsys):
        assert main(["env"]) == 0
        out = capsys.readouterr().out
        for name in (
            "TERMFLEX_WIDTH",
            "TERMFLEX_NO_COLOR",
            "TERMFLEX_TRANSLATORS",
            "TERMFLEX_LOG_LEVEL",
        ):
            assert name in out

    @pytest.mark.unit
    def test_env_category(self, capsys):
        assert main(["env", "--category", "logging"]) == 0
        out = capsys.readouterr().out
        assert "TERMFLEX_LOG_LEVEL" in out
        assert "TERMFLEX_WIDTH" not in out
