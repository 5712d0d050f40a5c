"""CLI interface for streamvol."""

from pathlib import Path

import typer

from .errors import AudioControlError
from .interfaces.cli_handlers import (
    apply_shaper,
    apply_volume,
    open_registry,
    show_status,
    show_volume,
    stream_table,
)
from .stream_options import ShaperName

app = typer.Typer(help="streamvol command line interface")


def _registry(ctx: typer.Context):
    return open_registry(ctx.obj.get("config_path") if ctx.obj else None)


def _fail(error: AudioControlError) -> None:
    typer.echo(f"Error [{error.code}]: {error.message}", err=True)
    raise typer.Exit(code=1)


@app.callback()
def main_callback(
    ctx: typer.Context,
    config: Path | None = typer.Option(
        None,
        "--config",
        "-c",
        help="YAML/JSON config file. Falls back to STREAMVOL_CONFIG.",
    ),
) -> None:
    ctx.obj = {"config_path": config}


@app.command("streams")
def streams_command(ctx: typer.Context) -> None:
    """List every stream with its persisted volume."""

    for line in stream_table(_registry(ctx)):
        typer.echo(line)


@app.command("get")
def get_command(
    ctx: typer.Context,
    stream: str | None = typer.Argument(None, help="Stream name or id (default: tts)."),
) -> None:
    """Show the persisted volume of a stream."""

    try:
        typer.echo(show_volume(_registry(ctx), stream))
    except AudioControlError as error:
        _fail(error)


@app.command("set", context_settings={"ignore_unknown_options": True})
def set_command(
    ctx: typer.Context,
    volume: float = typer.Argument(..., help="Volume 0-100; out-of-range values are clamped."),
    stream: str | None = typer.Option(
        None,
        "--stream",
        "-s",
        help="Stream name or id. Omit to set audio, playback, tts and ring together.",
    ),
) -> None:
    """Set a stream volume."""

    try:
        for line in apply_volume(_registry(ctx), volume, stream):
            typer.echo(line)
    except AudioControlError as error:
        _fail(error)


@app.command("mute")
def mute_command(ctx: typer.Context) -> None:
    """Mute audio output."""

    _registry(ctx).set_mute(True)
    typer.echo("muted")


@app.command("unmute")
def unmute_command(ctx: typer.Context) -> None:
    """Unmute audio output."""

    _registry(ctx).set_mute(False)
    typer.echo("unmuted")


@app.command("status")
def status_command(
    ctx: typer.Context,
    stream: str | None = typer.Argument(None, help="Stream name or id (default: tts)."),
) -> None:
    """Show whether a stream is playing."""

    try:
        typer.echo(show_status(_registry(ctx), stream))
    except AudioControlError as error:
        _fail(error)


@app.command("shape")
def shape_command(
    ctx: typer.Context,
    curve: ShaperName = typer.Argument(..., case_sensitive=False, help="Volume curve to apply."),
) -> None:
    """Apply a named volume curve."""

    try:
        typer.echo(apply_shaper(_registry(ctx), curve))
    except AudioControlError as error:
        _fail(error)


def main() -> None:
    app()


if __name__ == "__main__":
    main()
