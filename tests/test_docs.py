"""Tests for completion script and Markdown help generation."""

import typer

from here_cli.cli import app
from here_cli.docs import _elvish_quote, completion_script, elvish_script, markdown_help

command = typer.main.get_command(app)


def test_elvish_lists_every_option():
    script = elvish_script(command, "here")

    assert "set edit:completion:arg-completer[here]" in script
    for opt in ("-f", "--folder", "-w", "--from-where", "--no-posix", "--select-first", "--markdown"):
        assert f"cand {opt} " in script


def test_elvish_quote_escapes_single_quotes():
    assert _elvish_quote("it's") == "'it''s'"


def test_bash_script_mentions_program():
    script = completion_script(command, "bash", "here")

    assert "here" in script
    assert "_HERE_COMPLETE" in script


def test_fish_script_mentions_program():
    assert "here" in completion_script(command, "fish", "here")


def test_markdown_sections():
    page = markdown_help(command, "here")

    assert page.startswith("# `here`")
    assert "**Usage**:" in page
    assert "$ here [OPTIONS]" in page
    assert "PATH SEGMENT / PROGRAM SEARCH" in page
    assert "**Arguments**:" in page
    assert "* `-f, --folder`: Get folder component of result." in page
    assert "--completions, --completion [bash|elvish|fish|powershell|zsh]" in page


def test_markdown_lists_every_option():
    page = markdown_help(command, "here")

    assert "**Options**:" in page
    for param in command.params:
        if param.param_type_name == "option" and not param.hidden:
            assert param.opts[0] in page


def test_elvish_candidates_not_empty():
    script = elvish_script(command, "here")

    assert script.count("cand ") >= len([p for p in command.params if p.param_type_name == "option"])
