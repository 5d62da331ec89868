#!/usr/bin/env python3
"""
Resume Session CLI

Replays a scripted edit session (YAML list of edit events) through the
DocumentController, then shows the preview or hands it to a print target.

Commands:
    preview - Replay a session and print the preview as text
    export  - Replay a session and export the preview (pdf, image, print)

Examples:\n

    build_resume.py preview tests/fixtures/ada_session.yaml                        # Text preview

    build_resume.py export tests/fixtures/ada_session.yaml --kind pdf              # Write auto-printing HTML

    build_resume.py export tests/fixtures/ada_session.yaml --open                  # Open in browser

    build_resume.py export tests/fixtures/ada_session.yaml -p page_letter -p type_serif
"""

import os
from datetime import datetime
from pathlib import Path
from typing import List, Optional

import typer
from dotenv import load_dotenv
from typing_extensions import Annotated

from folio.contexts.editing import InvalidEditEventError, load_edit_session
from folio.contexts.editing.controller import DocumentController
from folio.contexts.editing.logger import log_session_replayed
from folio.contexts.rendering.export import BrowserTarget, ExportKind, HTMLFileTarget
from folio.contexts.rendering.logger import setup_rendering_logger
from folio.contexts.rendering.print_settings import resolve_print_settings
from folio.contexts.rendering.text_formatter import format_preview_text

load_dotenv()
LOGS_PATH = Path(os.getenv("LOGS_PATH", "outs/logs"))
EXPORTS_PATH = Path(os.getenv("EXPORTS_PATH", "outs/exports"))


app = typer.Typer(
    help="Replay resume edit sessions and preview or export the result",
    add_completion=False,
    invoke_without_command=True,
)


@app.callback()
def main(ctx: typer.Context):
    """Show help by default when no command is provided."""
    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit()


def _replay(session: Path) -> DocumentController:
    try:
        events = load_edit_session(session)
    except (FileNotFoundError, InvalidEditEventError) as e:
        typer.secho(f"Error: {e}\n", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    controller = DocumentController()
    try:
        controller.replay(events)
    except (IndexError, ValueError) as e:
        typer.secho(f"Error replaying {session}: {e}\n", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    log_session_replayed(str(session), len(events))
    return controller


@app.command("preview")
def preview_command(
    session: Annotated[
        Path,
        typer.Argument(help="YAML edit session to replay"),
    ],
):
    """
    Replay an edit session and print the preview as text.

    Examples:\n

        $ build_resume.py preview tests/fixtures/ada_session.yaml
    """
    controller = _replay(session)
    typer.echo(format_preview_text(controller.preview))


@app.command("export")
def export_command(
    session: Annotated[
        Path,
        typer.Argument(help="YAML edit session to replay"),
    ],
    kind: Annotated[
        ExportKind,
        typer.Option("--kind", "-k", help="Export kind", case_sensitive=False),
    ] = ExportKind.PDF,
    out_dir: Annotated[
        Path,
        typer.Option("--out", "-o", help="Directory for the print document"),
    ] = EXPORTS_PATH,
    presets: Annotated[
        Optional[List[str]],
        typer.Option("--preset", "-p", help="Print preset to apply (repeatable, in order)"),
    ] = None,
    open_browser: Annotated[
        bool,
        typer.Option("--open", help="Open the print document in the system browser"),
    ] = False,
):
    """
    Replay an edit session and hand the preview to a print target.

    The print document is written to --out. With --open it is also opened in
    the browser; pdf and print exports then bring up the print dialog.

    Examples:\n

        $ build_resume.py export tests/fixtures/ada_session.yaml --kind image

        $ build_resume.py export tests/fixtures/ada_session.yaml -p page_letter --open
    """
    log_dir = LOGS_PATH / f"export_{datetime.now().strftime('%Y%m%d_%H%M%S')}"
    log_file = setup_rendering_logger(log_dir, export_kind=kind.value)

    try:
        settings = resolve_print_settings(presets)
    except ValueError as e:
        typer.secho(f"Error: {e}\n", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    controller = _replay(session)

    target = BrowserTarget(out_dir) if open_browser else HTMLFileTarget(out_dir)
    controller.export(target, kind=kind, settings=settings)

    typer.echo("")
    if target.last_path:
        typer.secho(f"✓ {kind.value} export ready", fg=typer.colors.GREEN, bold=True)
        typer.echo(f"  Page: {settings.page_size}, margin {settings.margin}")
        typer.echo(f"  Document: {target.last_path}")
    else:
        typer.secho(f"✗ {kind.value} export was not written", fg=typer.colors.YELLOW, bold=True)
    typer.echo(f"  Log: {log_file}")
    typer.echo("")


if __name__ == "__main__":
    app()
