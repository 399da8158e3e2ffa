# test_cli.py

import argparse
import pytest

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from fluent_ansi import BasicColor, IndexedColor, RGBColor, SimpleColor, Logger
from fluent_ansi.cli import main, parse_color


class TestParseColor:
    """Test command line color parsing."""

    @pytest.mark.parametrize("spec, expected", [
        ("red", SimpleColor(BasicColor.RED)),
        ("Bright-Red", SimpleColor(BasicColor.RED, is_bright=True)),
        ("bright_blue", SimpleColor(BasicColor.BLUE, is_bright=True)),
        ("208", IndexedColor(208)),
        ("#0080ff", RGBColor(0, 128, 255)),
        ("1, 2, 3", RGBColor(1, 2, 3)),
    ])
    def test_valid(self, spec, expected):
        assert parse_color(spec) == expected

    @pytest.mark.parametrize("spec", ["purple", "256", "#12", "1,2", "1,2,300"])
    def test_invalid(self, spec):
        with pytest.raises(argparse.ArgumentTypeError):
            parse_color(spec)


class TestMain:
    """Test the command line entry point."""

    def test_styled_output(self, capsys):
        main(["--bold", "--fg", "red", "Some", "content"])
        assert capsys.readouterr().out == "\x1b[1;31mSome content\x1b[0m\n"

    def test_plain_output(self, capsys):
        main(["plain"])
        assert capsys.readouterr().out == "plain\n"

    def test_show_codes(self, capsys):
        main(["--show-codes", "--underline", "curly", "x"])
        assert capsys.readouterr().out == repr("\x1b[4:3mx\x1b[0m") + "\n"

    def test_via_rich(self, capsys):
        main(["--via-rich", "--italic", "hello"])
        assert "hello" in capsys.readouterr().out

    def test_via_rich_keeps_brackets_literal(self, capsys):
        main(["--via-rich", "--bold", "[/]"])
        assert "[/]" in capsys.readouterr().out

        main(["--via-rich", "[red]x[/red]"])
        assert "[red]x[/red]" in capsys.readouterr().out

        main(["--via-rich", ":smile:"])
        assert ":smile:" in capsys.readouterr().out

    def test_invalid_color_exits(self, capsys):
        with pytest.raises(SystemExit) as excinfo:
            main(["--fg", "nope", "x"])
        assert excinfo.value.code == 2
        assert "invalid color" in capsys.readouterr().err


class TestLogger:
    """Test the logging wrapper."""

    def test_stdout_logging(self, capsys):
        logger = Logger("fluent_ansi.tests.stdout", logging_enabled=True, log_file="-")
        logger.debug("hello")
        assert "DEBUG - hello" in capsys.readouterr().out

    def test_file_logging(self, tmp_path):
        log_file = tmp_path / "debug.log"
        logger = Logger("fluent_ansi.tests.file", logging_enabled=True, log_file=str(log_file))
        logger.info("written")
        assert "INFO - written" in log_file.read_text()

    def test_disabled_logging(self, capsys):
        logger = Logger("fluent_ansi.tests.disabled")
        logger.error("quiet")
        captured = capsys.readouterr()
        assert "quiet" not in captured.out

    def test_repeated_construction_logs_once(self, capsys):
        Logger("fluent_ansi.tests.repeat", logging_enabled=True, log_file="-")
        logger = Logger("fluent_ansi.tests.repeat", logging_enabled=True, log_file="-")
        logger.debug("once")
        assert capsys.readouterr().out.count("once") == 1
