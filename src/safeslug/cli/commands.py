"""CLI command implementations"""

from pathlib import Path
from typing import Annotated, Optional

import typer

from safeslug.config import Settings, load_config
from safeslug.core.errors import InvalidEncodingError, SlugError
from safeslug.core.estimate import estimate_size
from safeslug.core.models import SlugOptions
from safeslug.core.slug import slugify
from safeslug.core.translit import TransliterationTable, default_table, load_table
from safeslug.core.utf8 import validate_utf8


def _fail(msg: str, cause: Exception = None) -> None:
    """Print a user-friendly error to stderr and exit 1."""
    typer.echo(f"Error: {msg}", err=True)
    if cause:
        typer.echo(f"  {cause}", err=True)
    raise typer.Exit(1)


def _settings(overrides: dict = None) -> tuple[Settings, SlugOptions]:
    """Load config and build options with standard CLI error handling."""
    try:
        settings = load_config(overrides=overrides)
        return settings, settings.options()
    except ValueError as e:
        _fail("Invalid configuration", e)


def _table(settings: Settings) -> TransliterationTable:
    if not settings.table_path:
        return default_table()
    try:
        return load_table(Path(settings.table_path))
    except (OSError, ValueError) as e:
        _fail(f"Could not load transliteration table {settings.table_path}", e)


def _read_input(text: Optional[str], input_file: Optional[Path]) -> bytes:
    if input_file is not None:
        try:
            return input_file.read_bytes()
        except OSError as e:
            _fail(f"Could not read {input_file}", e)
    if text is None:
        _fail("Provide TEXT or --input-file")
    return text.encode("utf-8", "surrogatepass")


def slug_cmd(
    text: Annotated[Optional[str], typer.Argument(help="Text to convert")] = None,
    input_file: Annotated[Optional[Path], typer.Option("--input-file", "-f", help="Read raw input bytes from a file")] = None,
    separator: Annotated[Optional[str], typer.Option("--separator", "-s", help="Separator character")] = None,
    max_length: Annotated[Optional[int], typer.Option("--max-length", "-n", help="Max slug bytes; 0 = unlimited")] = None,
    preserve_case: Annotated[Optional[bool], typer.Option("--preserve-case/--lowercase", help="Keep case and raw non-ASCII")] = None,
    table: Annotated[Optional[str], typer.Option("--table", help="YAML transliteration table")] = None,
    ):
    """Convert TEXT (or the bytes of --input-file) to a slug."""
    settings, options = _settings(overrides={
        "separator": separator, "max_length": max_length,
        "preserve_case": preserve_case, "table_path": table,
    })
    data = _read_input(text, input_file)
    try:
        result = slugify(data, options, _table(settings))
    except SlugError as e:
        _fail(f"{e.kind.value}: {e}")
    typer.echo(result)


def check_cmd(
    path: Annotated[Path, typer.Argument(help="File whose bytes are validated as UTF-8")],
    ):
    """Validate a file as secure UTF-8 (no overlong forms, surrogates or non-characters)."""
    data = _read_input(None, path)
    try:
        validate_utf8(data)
    except InvalidEncodingError as e:
        _fail(f"{path}: {e.reason} sequence at byte {e.position}")
    typer.echo("valid")


def estimate_cmd(
    text: Annotated[str, typer.Argument(help="Text to size")],
    separator: Annotated[Optional[str], typer.Option("--separator", "-s", help="Separator character")] = None,
    preserve_case: Annotated[Optional[bool], typer.Option("--preserve-case/--lowercase", help="Keep case and raw non-ASCII")] = None,
    table: Annotated[Optional[str], typer.Option("--table", help="YAML transliteration table")] = None,
    ):
    """Print the size-estimation pass result for TEXT (before max_length and trailing trim)."""
    settings, options = _settings(overrides={
        "separator": separator, "preserve_case": preserve_case, "table_path": table,
    })
    data = _read_input(text, None)
    try:
        validate_utf8(data)
    except InvalidEncodingError as e:
        _fail(f"{e.kind.value}: {e}")
    typer.echo(estimate_size(data, options, _table(settings)))
