"""Command-line interface for cardmask."""

from __future__ import annotations

from pathlib import Path
from typing import List, Optional

import pydantic
import typer

from cardmask.config import get_settings
from cardmask.errors import ValidationError
from cardmask.logging_utils import configure_logging
from cardmask.masking import mask
from cardmask.models.options import MaskOptions
from cardmask.redact import redact_text

app = typer.Typer(help="Mask payment card numbers for display.")


@app.callback()
def setup() -> None:
    """Configure logging from the environment before any command runs."""

    settings = get_settings()
    configure_logging(
        settings.log_level,
        settings.log_format,
        MaskOptions.from_settings(settings),
    )


@app.command("mask")
def mask_command(
    number: str = typer.Argument(..., help="Card number, separators allowed."),
    mask_char: Optional[str] = typer.Option(None, "--mask-char", help="Mask character."),
    start: Optional[int] = typer.Option(None, "--start", help="Leading digits left visible."),
    end: Optional[int] = typer.Option(None, "--end", help="Trailing digits left visible."),
    preserve_spacing: bool = typer.Option(
        False,
        "--preserve-spacing",
        help="Keep the original separators (wins over --group).",
    ),
    group: Optional[List[int]] = typer.Option(
        None,
        "--group",
        help="Group size; repeat for explicit sizes, e.g. --group 4 --group 6 --group 5.",
    ),
    hide_length: bool = typer.Option(
        False,
        "--hide-length",
        help="Collapse the hidden run to at most four mask characters.",
    ),
    validate: bool = typer.Option(False, "--validate", help="Require 13-19 digits."),
) -> None:
    """
    Print the masked form of a card number.
    """

    defaults = MaskOptions.from_settings(get_settings())
    overrides: dict[str, object] = {"preserve_spacing": preserve_spacing}
    if mask_char is not None:
        overrides["mask_char"] = mask_char
    if start is not None:
        overrides["unmasked_start"] = start
    if end is not None:
        overrides["unmasked_end"] = end
    if group:
        overrides["grouping"] = group[0] if len(group) == 1 else tuple(group)
    if hide_length:
        overrides["show_length"] = False
    if validate:
        overrides["validate_input"] = True

    try:
        options = defaults.with_overrides(**overrides)
    except pydantic.ValidationError as exc:
        raise typer.BadParameter(str(exc)) from exc

    try:
        typer.echo(mask(number, options))
    except ValidationError as exc:
        typer.secho(f"Error: {exc}", err=True, fg=typer.colors.RED)
        raise typer.Exit(code=2) from exc


@app.command("redact")
def redact_command(
    path: Optional[Path] = typer.Argument(
        None,
        help="Text file to redact; reads stdin when omitted or '-'.",
    ),
) -> None:
    """Mask every card number found in a text file or stdin."""

    if path is None or str(path) == "-":
        text = typer.get_text_stream("stdin").read()
    else:
        text = path.read_text(encoding="utf-8")

    options = MaskOptions.from_settings(get_settings()).with_overrides(validate_input=False)
    typer.echo(redact_text(text, options), nl=False)


def main(argv: Optional[list[str]] = None) -> None:
    """Entry point for `python -m cardmask`."""
    app(prog_name="cardmask", args=argv)


if __name__ == "__main__":
    main()
