#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/e2e/test_cli.py
"""End-to-end tests for the flowdoc command line."""

import io
import subprocess
import sys

import pytest

from flowdoc.cli import EXIT_ERROR, EXIT_SUCCESS, EXIT_USAGE_ERROR, apply_env_vars_to_parser, create_parser, main
from flowdoc.exceptions import ParsingError
from flowdoc.options import HtmlOptions

STANDALONE_PREFIX = "<!doctype html><html><head><meta charset='UTF-8'></head><body>"


@pytest.fixture
def html_file(tmp_path):
    """Write a small HTML page and return its path."""
    path = tmp_path / "page.html"
    path.write_text(
        "<html><head><title>T</title></head><body><h1>Title</h1><p>Some  <b>bold</b> text</p>"
        "<ul><li>A</li><li>B</li></ul></body></html>",
        encoding="utf-8",
    )
    return path


@pytest.mark.e2e
@pytest.mark.cli
class TestMain:
    """Tests running main() in process."""

    def test_normalize_to_stdout(self, html_file, capsys) -> None:
        """Test converting a file to standalone HTML on stdout."""
        assert main([str(html_file)]) == EXIT_SUCCESS
        out = capsys.readouterr().out
        assert out == (
            f"{STANDALONE_PREFIX}<h1>Title</h1><p>Some <b>bold</b> text</p>"
            "<ul><li>A</li><li>B</li></ul></body></html>\n"
        )

    def test_fragment(self, html_file, capsys) -> None:
        """Test body markup only."""
        assert main([str(html_file), "--fragment"]) == EXIT_SUCCESS
        assert capsys.readouterr().out.startswith("<h1>Title</h1>")

    def test_output_file(self, html_file, tmp_path) -> None:
        """Test writing to a file."""
        target = tmp_path / "out.html"
        assert main([str(html_file), "-o", str(target), "--fragment", "--charset", "latin-1"]) == EXIT_SUCCESS
        assert target.read_text(encoding="utf-8").startswith("<h1>Title</h1>")

    def test_stdin(self, monkeypatch, capsys) -> None:
        """Test reading from stdin."""
        monkeypatch.setattr(sys, "stdin", io.StringIO("hi  there"))
        assert main(["-", "--fragment"]) == EXIT_SUCCESS
        assert capsys.readouterr().out == "<p>hi there</p>\n"

    def test_no_collapse_whitespace(self, monkeypatch, capsys) -> None:
        """Test the whitespace switch."""
        monkeypatch.setattr(sys, "stdin", io.StringIO("<p>a  b</p>"))
        assert main(["-", "--fragment", "--no-collapse-whitespace"]) == EXIT_SUCCESS
        assert capsys.readouterr().out == "<p>a  b</p>\n"

    def test_out_of_range_color_dropped(self, monkeypatch, capsys) -> None:
        """Test that an unusable color leaves the text unformatted."""
        monkeypatch.setattr(sys, "stdin", io.StringIO('<p><font color="rgb(300,0,0)">x</font></p>'))
        assert main(["-", "--fragment"]) == EXIT_SUCCESS
        assert capsys.readouterr().out == "<p>x</p>\n"

    def test_nesting_at_default_depth(self, monkeypatch, capsys) -> None:
        """Test that the deepest document the parser keeps is written back."""
        depth = HtmlOptions().max_depth
        markup = "<b>" * (depth - 1) + "x" + "</b>" * (depth - 1)
        monkeypatch.setattr(sys, "stdin", io.StringIO(markup))
        assert main(["-", "--fragment"]) == EXIT_SUCCESS
        out = capsys.readouterr().out
        assert out.count("<b>") == depth - 1
        assert "x" in out

    def test_tree(self, html_file, capsys) -> None:
        """Test printing the document structure."""
        assert main([str(html_file), "--tree"]) == EXIT_SUCCESS
        out = capsys.readouterr().out
        assert "Document" in out
        assert "Section 'body'" in out
        assert "Paragraph size=32 weight=bold" in out
        assert "Run 'Title'" in out
        assert "List disc" in out

    def test_tree_to_file(self, html_file, tmp_path) -> None:
        """Test writing the tree to a file."""
        target = tmp_path / "tree.txt"
        assert main([str(html_file), "--tree", "-o", str(target)]) == EXIT_SUCCESS
        assert "Bold" in target.read_text(encoding="utf-8")

    def test_missing_input_file(self, tmp_path, capsys) -> None:
        """Test the exit code for an unreadable input."""
        assert main([str(tmp_path / "missing.html")]) == EXIT_USAGE_ERROR
        assert "Error" in capsys.readouterr().err

    def test_invalid_max_depth(self, html_file, capsys) -> None:
        """Test option validation errors."""
        assert main([str(html_file), "--max-depth", "0"]) == EXIT_USAGE_ERROR
        assert "max_depth must be positive" in capsys.readouterr().err

    def test_conversion_error(self, html_file, monkeypatch, capsys) -> None:
        """Test the exit code for a conversion failure."""

        def fail(*args, **kwargs):
            raise ParsingError("cannot parse")

        monkeypatch.setattr("flowdoc.cli.html_to_document", fail)
        assert main([str(html_file)]) == EXIT_ERROR
        assert "cannot parse" in capsys.readouterr().err

    def test_unknown_argument(self, html_file) -> None:
        """Test that argparse usage errors exit with code 2."""
        with pytest.raises(SystemExit) as exc_info:
            main([str(html_file), "--bogus"])
        assert exc_info.value.code == EXIT_USAGE_ERROR

    def test_log_file(self, html_file, tmp_path) -> None:
        """Test that --trace writes debug records to the log file."""
        log_path = tmp_path / "flowdoc.log"
        assert main([str(html_file), "--fragment", "--trace", "--log-file", str(log_path)]) == EXIT_SUCCESS
        assert "Dropping unsupported element <title>" not in log_path.read_text(encoding="utf-8")
        assert "Converting HTML tree completed" in log_path.read_text(encoding="utf-8")


@pytest.mark.e2e
@pytest.mark.cli
class TestEnvironmentDefaults:
    """Tests for FLOWDOC_* environment variables."""

    def test_env_sets_defaults(self, monkeypatch) -> None:
        """Test that environment variables become defaults."""
        monkeypatch.setenv("FLOWDOC_HTML_PARSER", "html5lib")
        monkeypatch.setenv("FLOWDOC_MAX_DEPTH", "12")
        monkeypatch.setenv("FLOWDOC_FRAGMENT", "true")
        monkeypatch.setenv("FLOWDOC_COLLAPSE_WHITESPACE", "false")
        parser = create_parser()
        apply_env_vars_to_parser(parser)
        args = parser.parse_args(["in.html"])
        assert args.html_parser == "html5lib"
        assert args.max_depth == 12
        assert args.fragment is True
        assert args.collapse_whitespace is False

    def test_command_line_wins(self, monkeypatch) -> None:
        """Test that explicit arguments override the environment."""
        monkeypatch.setenv("FLOWDOC_MAX_DEPTH", "12")
        parser = create_parser()
        apply_env_vars_to_parser(parser)
        assert parser.parse_args(["in.html", "--max-depth", "3"]).max_depth == 3

    def test_invalid_values_ignored(self, monkeypatch) -> None:
        """Test that bad environment values keep the built-in default."""
        monkeypatch.setenv("FLOWDOC_MAX_DEPTH", "deep")
        monkeypatch.setenv("FLOWDOC_HTML_PARSER", "regex")
        parser = create_parser()
        apply_env_vars_to_parser(parser)
        args = parser.parse_args(["in.html"])
        assert args.max_depth == 256
        assert args.html_parser == "html.parser"


@pytest.mark.e2e
@pytest.mark.cli
@pytest.mark.slow
class TestExitCodes:
    """Tests running the command as a subprocess."""

    def _run_cli(self, args: list[str]) -> subprocess.CompletedProcess:
        cmd = [sys.executable, "-m", "flowdoc"] + args
        return subprocess.run(cmd, capture_output=True, text=True)

    def test_success(self, html_file) -> None:
        """Test exit code 0."""
        result = self._run_cli([str(html_file), "--fragment"])
        assert result.returncode == 0
        assert "<h1>Title</h1>" in result.stdout

    def test_missing_file(self, tmp_path) -> None:
        """Test exit code 2 for a missing input file."""
        result = self._run_cli([str(tmp_path / "nope.html")])
        assert result.returncode == 2
        assert "Error" in result.stderr

    def test_no_arguments(self) -> None:
        """Test exit code 2 for a usage error."""
        result = self._run_cli([])
        assert result.returncode == 2
