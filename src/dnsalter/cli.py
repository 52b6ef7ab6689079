from __future__ import annotations

import dataclasses
import logging
import sys
from pathlib import Path
from typing import List, Optional

import typer

from .alterations.runner import expand_names, unique_candidates
from .alterations.state import MutationState
from .config import load_settings
from .core.contracts import ALL_TECHNIQUES, DEFAULT_TECHNIQUES, Technique
from .core.errors import DnsAlterError, InvalidConfigError

app = typer.Typer(help="dnsalter: generate domain-name alterations for discovery")


class _EchoHandler(logging.Handler):
    """Route log records through typer.echo so they always land on stderr."""

    def emit(self, record: logging.LogRecord) -> None:
        typer.echo(self.format(record), err=True)


def _configure_logging(level: str) -> None:
    pkg = logging.getLogger("dnsalter")
    if not any(isinstance(h, _EchoHandler) for h in pkg.handlers):
        h = _EchoHandler()
        h.setFormatter(logging.Formatter("[%(levelname)s] %(name)s: %(message)s"))
        pkg.addHandler(h)
    try:
        pkg.setLevel(level.upper())
    except ValueError as e:
        raise InvalidConfigError(f"Unknown log level: {level!r}") from e


def _read_names(names: List[str], input_file: Optional[str]) -> List[str]:
    out = list(names)
    if input_file == "-":
        out.extend(line.strip() for line in sys.stdin)
    elif input_file:
        text = Path(input_file).read_text(encoding="utf-8")
        out.extend(line.strip() for line in text.splitlines())
    return [n for n in out if n and not n.startswith("#")]


@app.command("expand")
def expand(
    names: Optional[List[str]] = typer.Argument(
        None, help="Base names, e.g. dev-api1.example.com"
    ),
    technique: Optional[List[Technique]] = typer.Option(
        None,
        "--technique",
        "-t",
        case_sensitive=False,
        help="Technique to run (repeatable); default: all but fuzzy-label",
    ),
    min_for_word_flip: Optional[int] = typer.Option(
        None, min=0, help="Times a word must be seen before it is substituted"
    ),
    edit_distance: Optional[int] = typer.Option(
        None, min=0, help="Edit rounds for fuzzy-label"
    ),
    wordlist: Optional[Path] = typer.Option(
        None, help="Seed vocabulary, one word per line"
    ),
    workers: Optional[int] = typer.Option(None, min=1, help="Worker threads"),
    input_file: Optional[str] = typer.Option(
        None, "--input", "-i", help="File of names, one per line ('-' = stdin)"
    ),
    include_input: bool = typer.Option(
        False, help="Also print the input names if they are regenerated"
    ),
    log_level: Optional[str] = typer.Option(
        None, help="Logging level (DEBUG, INFO, WARNING, ...)"
    ),
):
    """Print every alteration of the given names, one per line."""
    try:
        settings = load_settings()
        overrides = {
            "min_for_word_flip": min_for_word_flip,
            "edit_distance": edit_distance,
            "wordlist": wordlist,
            "workers": workers,
            "log_level": log_level.upper() if log_level else None,
        }
        settings = dataclasses.replace(
            settings, **{k: v for k, v in overrides.items() if v is not None}
        )
        _configure_logging(settings.log_level)
        state = MutationState.from_settings(settings)
        items = _read_names(names or [], input_file)
    except (DnsAlterError, OSError) as e:
        typer.echo(f"error: {e}", err=True)
        raise typer.Exit(code=2)

    if not items:
        typer.echo("error: no names given", err=True)
        raise typer.Exit(code=2)

    results = expand_names(
        state,
        items,
        technique or DEFAULT_TECHNIQUES,
        workers=settings.workers,
    )
    for r in results:
        if not r.ok:
            typer.echo(f"invalid: {r.error}", err=True)

    for n in sorted(unique_candidates(results, include_input=include_input)):
        typer.echo(n)

    if all(not r.ok for r in results):
        raise typer.Exit(code=1)
    return None


@app.command("techniques")
def techniques():
    """List available techniques (default set marked with '*')."""
    for t in ALL_TECHNIQUES:
        mark = "*" if t in DEFAULT_TECHNIQUES else " "
        typer.echo(f"{mark} {t.value}")


def main() -> None:
    app()


if __name__ == "__main__":
    app()
