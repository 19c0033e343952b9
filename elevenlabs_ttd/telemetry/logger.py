"""Structured request logging utilities.

Responsibilities:
- Emit concise, deterministic request-level log lines through `loguru`.
- Keep secrets (API keys, dialogue text) out of log context.
"""

from __future__ import annotations

from typing import TextIO

from loguru import logger


def _sanitize_context_value(value: object) -> str:
    """Convert context values into stable, shell-safe tokens."""

    raw = str(value).strip()
    if not raw:
        return "none"
    return "".join(
        character if character.isalnum() or character in {"-", "_", ".", ":", "/"} else "_"
        for character in raw
    )


def _format_context(context: dict[str, object]) -> str:
    """Serialize context key/value pairs in deterministic key order."""

    if not context:
        return ""
    tokens = [
        f"{key}={_sanitize_context_value(context[key])}"
        for key in sorted(context.keys())
    ]
    return " " + " ".join(tokens)


def configure_logging(sink: TextIO, level: str = "DEBUG") -> None:
    """Route package log lines to `sink` and enable them.

    Library code stays silent until an application calls this (or
    `logger.enable("elevenlabs_ttd")` itself).
    """

    logger.remove()
    logger.add(sink, format="{message}", level=level, colorize=False)
    logger.enable("elevenlabs_ttd")


class RequestLogger:
    """Emit deterministic log lines for one client's HTTP activity."""

    def __init__(self, stage: str = "text-to-dialogue") -> None:
        self._stage = stage

    def _emit(self, level: str, event: str, **context: object) -> None:
        """Emit one structured log line."""

        line = (
            f"[ttd] level={level} stage={self._stage} event={event}"
            f"{_format_context(context)}"
        )
        logger.log(level, line)

    def log_request_start(self, *, model_id: str, turns: int, output_format: str | None) -> None:
        self._emit(
            "DEBUG",
            "start",
            model=model_id,
            turns=turns,
            output_format=output_format or "none",
        )

    def log_request_complete(self, *, status_code: int, audio_bytes: int) -> None:
        self._emit("DEBUG", "complete", status=status_code, bytes=audio_bytes)

    def log_request_failure(self, error_type: str, status_code: int | None = None) -> None:
        """Emit a failure event without response payload details."""

        self._emit(
            "WARNING",
            "failure",
            error_type=error_type,
            status=status_code if status_code is not None else "none",
        )
