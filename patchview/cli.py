import json
from pathlib import Path

import typer

from patchview.config import ViewerSettings, load_settings
from patchview.exceptions import EmptyPatchError, InvalidConfigError, PatchSourceError
from patchview.logging import setup_logging
from patchview.review.export import write_output, write_patch
from patchview.review.render import render_document, render_markdown
from patchview.review.source import read_patch_source
from patchview.review.state import ReviewState

app = typer.Typer(no_args_is_help = True)


def _settings(ctx: typer.Context) -> ViewerSettings:
    if ctx.obj is None:
        ctx.obj = load_settings()
    return ctx.obj


def _load_state(patch: Path) -> ReviewState:
    try:
        text = read_patch_source(patch)
    except PatchSourceError as exc:
        raise typer.BadParameter(str(exc), param_hint="PATCH")
    return ReviewState.from_text(text)


@app.callback()
def main(
    ctx: typer.Context,
    config: Path | None = typer.Option(None, "--config", help="YAML settings file"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging"),
):
    """
    Inspect generated unified-diff patches file by file.
    """
    try:
        settings = load_settings(config)
    except InvalidConfigError as exc:
        raise typer.BadParameter(str(exc), param_hint="--config")
    ctx.obj = settings
    setup_logging("DEBUG" if verbose else settings.log_level)


@app.command("show")
def show_cmd(
    ctx: typer.Context,
    patch: Path = typer.Argument(..., help="Patch file, .json response, or - for stdin"),
    file: int = typer.Option(0, "--file", "-f", help="Index of the file to show"),
    no_color: bool = typer.Option(False, "--no-color", help="Disable colors"),
):
    settings = _settings(ctx)
    state = _load_state(patch)

    if not state.document.is_empty:
        try:
            state.select(file)
        except IndexError as exc:
            raise typer.BadParameter(str(exc), param_hint="--file")

    typer.echo(
        render_document(
            state.document,
            selected=state.selected,
            color=settings.color and not no_color,
            show_line_numbers=settings.show_line_numbers,
        )
    )


@app.command("stats")
def stats_cmd(
    patch: Path = typer.Argument(..., help="Patch file, .json response, or - for stdin"),
    as_json: bool = typer.Option(False, "--json", help="Print stats as JSON"),
):
    document = _load_state(patch).document

    if as_json:
        payload = {
            "valid": document.is_valid,
            "totals": document.stats.model_dump(),
            "files": [
                {
                    "file_name": f.file_name,
                    "additions": f.additions,
                    "deletions": f.deletions,
                }
                for f in document.files
            ],
        }
        typer.echo(json.dumps(payload, indent=2))
        return

    for f in document.files:
        typer.echo(f"{f.file_name}\t+{f.additions}\t-{f.deletions}")
    typer.echo(f"Files: {document.stats.files}")
    typer.echo(f"Additions: {document.stats.additions}")
    typer.echo(f"Deletions: {document.stats.deletions}")
    typer.echo(f"Total lines changed: {document.stats.total_changed}")


@app.command("validate")
def validate_cmd(
    patch: Path = typer.Argument(..., help="Patch file, .json response, or - for stdin"),
):
    document = _load_state(patch).document
    if document.is_valid:
        typer.echo("valid")
        return
    typer.echo("not a valid diff")
    raise typer.Exit(code=1)


@app.command("export")
def export_cmd(
    ctx: typer.Context,
    patch: Path = typer.Argument(..., help="Patch file, .json response, or - for stdin"),
    out: Path | None = typer.Option(None, "--out", "-o", help="Output path"),
    file: int | None = typer.Option(None, "--file", "-f", help="Export a single file block"),
    format: str = typer.Option("diff", "--format", help="Formats: diff, md"),
    overwrite: bool = typer.Option(False, "--overwrite", help="Overwrite existing files"),
):
    settings = _settings(ctx)
    document = _load_state(patch).document

    if format not in ("diff", "md"):
        raise typer.BadParameter(f"Unknown format: {format}", param_hint="--format")
    if file is not None and not 0 <= file < len(document.files):
        raise typer.BadParameter(f"File index {file} out of range", param_hint="--file")
    if file is not None and format == "md":
        raise typer.BadParameter("--file only applies to the diff format", param_hint="--file")

    try:
        if format == "md":
            if document.is_empty:
                raise EmptyPatchError()
            out = out or Path(settings.download_name).with_suffix(".md")
            write_output(out, render_markdown(document), overwrite)
        else:
            out = write_patch(
                document,
                out or Path(settings.download_name),
                overwrite=overwrite,
                file_index=file,
            )
    except EmptyPatchError as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(code=1)
    except FileExistsError as exc:
        raise typer.BadParameter(str(exc), param_hint="--out")

    typer.echo(f"Saved: {out}")
