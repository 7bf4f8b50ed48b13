"""Generate shell completion scripts and a Markdown help page."""

from __future__ import annotations

from typing import List

import click
import typer
from click.shell_completion import get_completion_class
from typer.completion import completion_init

ELVISH_TEMPLATE = """\
use str

set edit:completion:arg-completer[%(prog_name)s] = {|@words|
    fn cand {|text desc|
        edit:complex-candidate $text &display=(str:join "" [$text " (" $desc ")"])
    }
%(candidates)s
}
"""


def _is_option(param: click.Parameter) -> bool:
    return param.param_type_name == "option" and not getattr(param, "hidden", False)


def _elvish_quote(text: str) -> str:
    return "'" + text.replace("'", "''") + "'"


def _short_help(param: click.Parameter) -> str:
    text = getattr(param, "help", None) or ""
    return text.strip().splitlines()[0] if text.strip() else ""


def elvish_script(command: click.Command, prog_name: str) -> str:
    """Static elvish completer listing every option of ``command``."""
    lines: List[str] = []
    for param in command.params:
        if not _is_option(param):
            continue
        desc = _elvish_quote(_short_help(param))
        for opt in param.opts + param.secondary_opts:
            lines.append(f"    cand {opt} {desc}")
    return ELVISH_TEMPLATE % {"prog_name": prog_name, "candidates": "\n".join(lines)}


def completion_script(command: click.Command, shell: str, prog_name: str) -> str:
    """Return the completion script for ``shell``.

    bash, zsh, fish and powershell use the completion classes typer
    registers with click; elvish gets a static script.
    """
    if shell == "elvish":
        return elvish_script(command, prog_name)

    completion_init()
    cls = get_completion_class(shell)
    if cls is None:
        raise typer.BadParameter(f"Unsupported shell: {shell}")
    complete_var = f"_{prog_name}_COMPLETE".replace("-", "_").upper()
    return cls(command, {}, prog_name, complete_var).source()


def _option_label(param: click.Option) -> str:
    # short options first, like click's own help output
    names = sorted(param.opts + param.secondary_opts, key=lambda o: len(o) - len(o.lstrip("-")))
    label = ", ".join(names)
    if param.is_flag:
        return label
    choices = getattr(param.type, "choices", None)
    if choices:
        return f"{label} [{'|'.join(str(c) for c in choices)}]"
    return f"{label} {param.metavar or param.type.name.upper()}"


def markdown_help(command: click.Command, prog_name: str) -> str:
    """Render ``command``'s help as a standalone Markdown document."""
    ctx = typer.Context(command, info_name=prog_name)
    usage = " ".join([prog_name] + command.collect_usage_pieces(ctx))

    out: List[str] = [f"# `{prog_name}`", ""]
    if command.help:
        out += [command.help.strip(), ""]
    out += ["**Usage**:", "", "```console", f"$ {usage}", "```", ""]

    arguments = [p for p in command.params if p.param_type_name == "argument"]
    if arguments:
        out += ["**Arguments**:", ""]
        for arg in arguments:
            name = arg.metavar or arg.name.upper()
            suffix = "" if arg.required else " (optional)"
            out.append(f"* `{name}`: {_short_help(arg)}{suffix}")
        out.append("")

    options = [p for p in command.params if _is_option(p)]
    if options:
        out += ["**Options**:", ""]
        for opt in options:
            out.append(f"* `{_option_label(opt)}`: {_short_help(opt)}")
        out.append("")

    return "\n".join(out)
