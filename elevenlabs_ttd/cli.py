"""Command-line interface for Text-to-Dialogue synthesis.

Responsibilities:
- Expose user-facing commands for dialogue synthesis and voice discovery.
- Resolve client settings from CLI options, secure storage, env, and YAML.
- Manage the securely stored API key.

Key public functions:
- `app`: Typer application instance.
- `main`: invoke the Typer application.
"""

from __future__ import annotations

import os
import sys
import time
from pathlib import Path
from typing import Annotated

import typer

from .cli_rendering import echo_saved_audio, echo_voice_rows, exit_with_command_error
from .client import ElevenLabsTTDClient
from .config import ClientConfig, ClientRuntimeConfig, ConfigLoader, RuntimeConfigSources
from .credentials import create_credential_store
from .errors import CommandError, ElevenLabsTTDError
from .models import output_format_codec
from .parsing import normalize_optional_string, parse_locator_argument, parse_turn_argument
from .telemetry.logger import configure_logging
from .types import SynthesisSettings
from . import voices as voice_catalog

app = typer.Typer(
    name="elevenlabs-ttd",
    no_args_is_help=True,
    help="ElevenLabs Text-to-Dialogue CLI.",
)

_FAILURE_HINTS = {
    "invalid_api_key": "Check `ELEVENLABS_API_KEY`, `--api-key`, or the stored credential.",
    "rate_limited": "Wait before retrying; the API limits concurrent requests.",
    "insufficient_quota": "Top up credits or upgrade the subscription tier.",
    "transport": "Check network connectivity and `--base-url`.",
}


def _load_yaml_config(config_path: Path | None) -> ClientConfig:
    """Load a YAML config file when requested and map failures to command errors."""

    if config_path is None:
        return ClientConfig()

    try:
        return ConfigLoader.from_yaml(config_path)
    except FileNotFoundError as exc:
        raise CommandError(
            stage="config",
            detail=f"Config file not found: `{config_path}`.",
            hint="Provide an existing path via `--config <path.yaml>`.",
        ) from exc
    except ValueError as exc:
        raise CommandError(
            stage="config",
            detail=f"Invalid config file `{config_path}`: {exc}",
            hint="Fix config schema/values and rerun.",
        ) from exc


def _resolve_runtime(
    config_path: Path | None,
    cli_values: dict[str, str | None],
) -> ClientRuntimeConfig:
    """Resolve client settings with `cli > secure > env > config` precedence."""

    config = _load_yaml_config(config_path)
    cli = {
        key: normalized
        for key, value in cli_values.items()
        if (normalized := normalize_optional_string(value)) is not None
    }
    secure: dict[str, str] = {}
    if "api_key" not in cli:
        stored_api_key = create_credential_store().get_api_key()
        if stored_api_key is not None:
            secure["api_key"] = stored_api_key
    env = ConfigLoader.from_env_runtime_values(os.environ)

    try:
        resolved = config.resolved_runtime(RuntimeConfigSources(cli=cli, secure=secure, env=env))
    except ValueError as exc:
        raise CommandError(stage="config", detail=str(exc)) from exc
    if resolved.api_key is None:
        raise CommandError(
            stage="config",
            detail="Missing ElevenLabs API key.",
            hint=(
                "Set `ELEVENLABS_API_KEY`, pass `--api-key`, or run "
                "`elevenlabs-ttd credentials --set-api-key`."
            ),
        )
    return resolved


def _default_output_path(output_format: str) -> Path:
    """Return `outputs/<unix-timestamp>.<codec>` for a synthesized file."""

    return Path("outputs") / f"{int(time.time())}.{output_format_codec(output_format)}"


@app.command("synthesize")
def synthesize_command(
    turns: Annotated[
        list[str],
        typer.Argument(help="Dialogue turns as `VOICE=TEXT`; VOICE is a catalog name or id."),
    ],
    out: Annotated[
        Path | None,
        typer.Option("--out", help="Output audio path (default: outputs/<timestamp>.<codec>)."),
    ] = None,
    model: Annotated[str | None, typer.Option("--model", help="Model identifier.")] = None,
    output_format: Annotated[
        str | None,
        typer.Option("--output-format", help="Output format, e.g. `mp3_44100_128`."),
    ] = None,
    stability: Annotated[
        float | None,
        typer.Option("--stability", help="Voice stability, clamped to [0, 1]."),
    ] = None,
    speaker_boost: Annotated[
        bool | None,
        typer.Option("--speaker-boost/--no-speaker-boost", help="Toggle speaker boost."),
    ] = None,
    seed: Annotated[int | None, typer.Option("--seed", help="Sampling seed.")] = None,
    pronunciation_dictionaries: Annotated[
        list[str] | None,
        typer.Option(
            "--pronunciation-dictionary",
            help="Pronunciation dictionary as `ID[:VERSION]`; repeatable.",
        ),
    ] = None,
    api_key: Annotated[str | None, typer.Option("--api-key", help="ElevenLabs API key.")] = None,
    base_url: Annotated[str | None, typer.Option("--base-url", help="API base URL.")] = None,
    config_file: Annotated[
        Path | None,
        typer.Option("--config", help="Path to YAML client config."),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", help="Log request events to stderr."),
    ] = False,
) -> None:
    """Synthesize a multi-voice dialogue into one audio file."""

    if verbose:
        configure_logging(sys.stderr)

    try:
        runtime = _resolve_runtime(
            config_file,
            {
                "api_key": api_key,
                "base_url": base_url,
                "model_id": model,
                "output_format": output_format,
            },
        )
        try:
            dialogue = [parse_turn_argument(value) for value in turns]
            locators = [parse_locator_argument(value) for value in pronunciation_dictionaries or []]
        except ValueError as exc:
            raise CommandError(
                stage="input",
                detail=str(exc),
                hint="Pass turns like `Rachel=Hello there.`.",
            ) from exc

        client = ElevenLabsTTDClient.from_config(runtime)
        builder = (
            client.text_to_dialogue(dialogue)
            .model(runtime.model_id)
            .output_format(runtime.output_format)
        )
        if stability is not None or speaker_boost is not None:
            settings = SynthesisSettings()
            if stability is not None:
                settings = settings.with_stability(stability)
            if speaker_boost is not None:
                settings = settings.with_speaker_boost(speaker_boost)
            builder.settings(settings)
        if locators:
            builder.pronunciation_locators(*locators)
        if seed is not None:
            try:
                builder.seed(seed)
            except ValueError as exc:
                raise CommandError(stage="input", detail=str(exc)) from exc

        try:
            audio = builder.execute()
        except ElevenLabsTTDError as exc:
            raise CommandError(
                stage="synthesize",
                detail=str(exc),
                hint=_FAILURE_HINTS.get(exc.failure_kind),
            ) from exc

        output_path = out if out is not None else _default_output_path(runtime.output_format)
        try:
            output_path.parent.mkdir(parents=True, exist_ok=True)
            output_path.write_bytes(audio)
        except OSError as exc:
            raise CommandError(
                stage="output",
                detail=f"Failed to write audio to `{output_path}`: {exc}",
                hint="Pass a writable file path via `--out`.",
            ) from exc
    except CommandError as exc:
        exit_with_command_error("synthesize", exc)

    echo_saved_audio(output_path, len(audio))


@app.command("voices")
def voices_command(
    gender: Annotated[
        str | None,
        typer.Option("--gender", help="Only list voices of this gender (`male`/`female`)."),
    ] = None,
    name: Annotated[
        str | None,
        typer.Option("--name", help="Show the voice with this display name."),
    ] = None,
) -> None:
    """List premade catalog voices."""

    if name is not None:
        match = voice_catalog.find_by_name(name)
        if match is None:
            exit_with_command_error(
                "voices",
                CommandError(stage="lookup", detail=f"No catalog voice named `{name}`."),
            )
        echo_voice_rows([match])
        return

    if gender is None:
        echo_voice_rows(voice_catalog.all())
        return

    normalized = gender.strip().lower()
    if normalized not in voice_catalog.GENDERS:
        exit_with_command_error(
            "voices",
            CommandError(
                stage="lookup",
                detail=f"Unsupported gender `{gender}`.",
                hint="Use `male` or `female`.",
            ),
        )
    echo_voice_rows(voice_catalog.filter_by_gender(normalized))


@app.command("credentials")
def credentials_command(
    set_api_key: Annotated[
        bool,
        typer.Option(
            "--set-api-key",
            help="Prompt for API key with hidden input and store it securely.",
        ),
    ] = False,
    clear_api_key: Annotated[
        bool,
        typer.Option(
            "--clear-api-key",
            help="Clear stored API key from secure credential storage.",
        ),
    ] = False,
) -> None:
    """Manage the securely stored ElevenLabs API key."""

    if set_api_key and clear_api_key:
        exit_with_command_error(
            "credentials",
            CommandError(
                stage="credentials",
                detail="`--set-api-key` and `--clear-api-key` cannot be used together.",
                hint="Run one credentials action per command invocation.",
            ),
        )

    credential_store = create_credential_store()
    if set_api_key:
        prompted_api_key = normalize_optional_string(
            typer.prompt(
                "ElevenLabs API key (hidden input)",
                default="",
                hide_input=True,
                show_default=False,
            )
        )
        if prompted_api_key is None:
            exit_with_command_error(
                "credentials",
                CommandError(
                    stage="credentials",
                    detail="No API key entered.",
                    hint="Provide a non-empty API key when using `--set-api-key`.",
                ),
            )
        try:
            credential_store.set_api_key(prompted_api_key)
        except Exception as exc:
            exit_with_command_error(
                "credentials",
                CommandError(
                    stage="credentials",
                    detail=f"Failed to store API key securely: {exc}",
                    hint="Install and configure a keyring backend and retry.",
                ),
            )
        typer.echo("API key stored in secure credential storage.")
        return

    if clear_api_key:
        removed = credential_store.clear_api_key()
        if removed:
            typer.echo("Stored API key cleared from secure credential storage.")
        else:
            typer.echo("No stored API key found in secure credential storage.")
        return

    availability = "available" if credential_store.is_available() else "unavailable"
    has_stored_key = credential_store.get_api_key() is not None
    status = "present" if has_stored_key else "not set"
    typer.echo(f"Secure credential storage: {availability}")
    typer.echo(f"Stored ElevenLabs API key: {status}")


def main() -> None:
    """Run the Typer application."""

    app()
