"""Mini README: Entry point CLI for generating U-Plans from trajectories.

This script exposes a Typer CLI with two commands: ``generate`` turns one or
more trajectory CSV files into ``Uplan_<id>.json`` documents, and ``serve``
starts the FastAPI generation service with uvicorn. Defaults come from the
``UPLANNER_*`` environment settings; command-line options take precedence.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional

import typer
import uvicorn

from uplanner.configuration import get_settings, parse_start_time
from uplanner.geodesy import REGISTRY
from uplanner.logging_utils import configure_root_logger, level_for_environment
from uplanner.pipeline import UplanGenerator

cli = typer.Typer(help="Generate U-Plan operation volumes from flight trajectories.")


@cli.command()
def generate(
    files: List[Path] = typer.Argument(..., help="Trajectory CSV files to process."),
    start: Optional[str] = typer.Option(
        None, help="ISO-8601 UTC start time of the first trajectory."
    ),
    output: Optional[Path] = typer.Option(None, help="Directory for generated documents."),
    stride: Optional[int] = typer.Option(None, help="Keep every Nth waypoint."),
    geodesy: Optional[str] = typer.Option(None, help="Geodesy model identifier."),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log per-segment detail."),
) -> None:
    """Generate one U-Plan per trajectory file, skipping files that fail."""

    configure_root_logger(logging.DEBUG if verbose else logging.INFO)
    settings = get_settings()

    try:
        start_timestamp = (
            parse_start_time(start) if start else settings.default_start_timestamp()
        )
    except ValueError as error:
        raise typer.BadParameter(f"Invalid start time '{start}': {error}") from error
    model = geodesy or settings.geodesy_model
    if model.lower() not in REGISTRY.available_models():
        raise typer.BadParameter(
            f"Unknown geodesy model '{model}'. Available: "
            + ", ".join(REGISTRY.available_models())
        )

    generator = UplanGenerator(
        config=settings.volume_config(),
        solver=REGISTRY.create(model),
        stride=stride if stride is not None else settings.compression_factor,
        ground_elevation=settings.ground_elevation,
    )
    report = generator.generate_batch(
        files,
        start_timestamp,
        output or settings.output_directory,
        start_increment=settings.batch_start_increment,
    )

    for path in report.written:
        typer.echo(f"Saved {path}")
    for path, reason in report.failed:
        typer.echo(f"Skipped {path}: {reason}", err=True)
    if not report.written:
        raise typer.Exit(code=1)


@cli.command()
def serve(
    host: str = typer.Option(None, help="Host interface to bind."),
    port: int = typer.Option(None, help="Port to listen on."),
    production: bool = typer.Option(
        False, help="Use production server settings (disable auto-reload)."
    ),
) -> None:
    """Start the FastAPI generation service using uvicorn."""

    settings = get_settings()
    effective_host = host or settings.interface_host
    effective_port = port or settings.interface_port
    configure_root_logger(level_for_environment(settings.environment))

    # Browsers cannot open the 0.0.0.0 / :: bind-all addresses directly.
    browser_host = "127.0.0.1" if effective_host in {"0.0.0.0", "::"} else effective_host
    typer.echo(
        f"Starting uplanner on {effective_host}:{effective_port}.\n"
        f"API docs at http://{browser_host}:{effective_port}/docs"
    )
    uvicorn.run(
        "uplanner.interface.web_app:create_application",
        host=effective_host,
        port=effective_port,
        factory=True,
        reload=not production,
    )


if __name__ == "__main__":
    cli()
