"""CLI output and error rendering helpers."""

from __future__ import annotations

from pathlib import Path
from typing import NoReturn

import typer

from .errors import CommandError
from .voices import StaticVoice


def exit_with_command_error(command_name: str, exc: Exception) -> NoReturn:
    """Print concise diagnostics for command failures and exit with code 1."""

    if isinstance(exc, CommandError):
        typer.secho(
            f"{command_name} failed at stage `{exc.stage}`: {exc.detail}",
            fg=typer.colors.RED,
            err=True,
        )
        if exc.hint:
            typer.secho(f"Hint: {exc.hint}", fg=typer.colors.YELLOW, err=True)
    else:
        typer.secho(f"{command_name} failed: {exc}", fg=typer.colors.RED, err=True)
    raise typer.Exit(code=1) from exc


def echo_voice_rows(voices: list[StaticVoice]) -> None:
    """Print one aligned `name gender voice_id` row per voice."""

    if not voices:
        typer.echo("No voices found.")
        return
    name_width = max(len(voice.name) for voice in voices)
    for voice in voices:
        typer.echo(f"{voice.name.ljust(name_width)}  {voice.gender.ljust(6)}  {voice.voice_id}")


def echo_saved_audio(path: Path, audio_bytes: int) -> None:
    typer.echo(f"Audio saved to {path} ({audio_bytes} bytes)")
