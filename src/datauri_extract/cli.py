"""CLI interface for datauri-extract."""

import logging
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.logging import RichHandler

from datauri_extract import __version__
from datauri_extract.errors import ExtractError
from datauri_extract.model.content import RewriteResult
from datauri_extract.model.options import ExtractOptions
from datauri_extract.pipeline import extract_file
from datauri_extract.ui.progress import ProgressReporter

app = typer.Typer(
    name="datauri-extract",
    help="Move inline base64 data URIs out of HTML/CSS documents into sibling files.",
    no_args_is_help=True,
)


def _configure_logging(verbose: bool) -> None:
    """Send package diagnostics to stderr through a single RichHandler."""
    pkg_logger = logging.getLogger("datauri_extract")
    pkg_logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    if not any(isinstance(h, RichHandler) for h in pkg_logger.handlers):
        # Console(stderr=True) resolves sys.stderr on every write
        pkg_logger.addHandler(
            RichHandler(
                console=Console(stderr=True),
                show_time=False,
                show_path=False,
            )
        )


@app.command()
def extract(
    path: Annotated[
        Path,
        typer.Argument(help="Path to the HTML/CSS document to rewrite"),
    ],
    default_extension: Annotated[
        str,
        typer.Option(
            "--default-extension",
            help="Extension for payloads whose MIME type is unknown (default: .bin)",
        ),
    ] = ".bin",
    hash_length: Annotated[
        int,
        typer.Option(
            "--hash-length",
            help="Hex characters of the SHA-1 content digest used in file names (default: 8)",
        ),
    ] = 8,
    atomic: Annotated[
        bool,
        typer.Option(
            "--atomic/--no-atomic",
            help=(
                "Write the output document only once every data URI was extracted "
                "(default: no, partial output is left on failure)"
            ),
        ),
    ] = False,
    progress: Annotated[
        bool,
        typer.Option("--progress/--no-progress", help="Show a progress spinner on stderr"),
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Log every extracted resource"),
    ] = False,
) -> None:
    """
    Extract the data URIs of a document into files next to it.

    Every url(data:...), src="data:..." and href="data:..." carrying a base64
    payload is decoded into File_<hash><ext> beside the document, and the
    rewritten document is saved as <name>-new<ext>.

    Examples:

        # Rewrite page.html into page-new.html
        datauri-extract extract page.html

        # Keep the previous output untouched unless the whole run succeeds
        datauri-extract extract styles.css --atomic
    """
    _configure_logging(verbose)

    if not path.is_file():
        typer.echo("File does not exist", err=True)
        raise typer.Exit(1)

    try:
        options = ExtractOptions.from_cli(
            default_extension=default_extension,
            hash_length=hash_length,
            atomic=atomic,
        )
    except ValueError as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(1) from exc

    try:
        if progress:
            with ProgressReporter() as pr:
                result = extract_file(path, options, on_progress=pr.emit)
        else:
            result = extract_file(path, options)
    except ExtractError as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(1) from exc
    except OSError as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(1) from exc

    _print_summary(result)


def _print_summary(result: RewriteResult) -> None:
    names = result.file_names
    typer.echo(f"📄 Output: {result.output_path}")
    typer.echo(f"🔗 Data URIs replaced: {result.match_count}")
    typer.echo(f"📦 Files extracted: {len(names)}")
    for name in names:
        typer.echo(f"   {name}")


@app.command()
def version() -> None:
    """Show version information."""
    typer.echo(f"datauri-extract version {__version__}")


def version_callback(value: bool) -> None:
    """Version callback for --version flag."""
    if value:
        typer.echo(f"datauri-extract version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit",
        ),
    ] = None,
) -> None:
    """
    datauri-extract - De-inline base64 data URIs from bundled HTML/CSS.

    Embedded payloads are written to content-addressed files so identical
    resources share one file, and the document is rewritten to reference them.

    For detailed usage, run: datauri-extract extract --help
    """
    pass


if __name__ == "__main__":  # pragma: no cover - executed only via `python -m`
    app()
