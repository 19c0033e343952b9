"""Typed client for the ElevenLabs Text-to-Dialogue API.

The main entry point is `ElevenLabsTTDClient`; `client.text_to_dialogue(turns)`
returns a builder whose `execute()` performs one request and returns raw audio
bytes. Log output is disabled until the application enables the
`elevenlabs_ttd` logger (see `telemetry.configure_logging`).
"""

from loguru import logger

from .client import DEFAULT_BASE_URL, ElevenLabsTTDClient, TextToDialogueBuilder
from .errors import (
    ApiError,
    AuthenticationError,
    ElevenLabsTTDError,
    ParseError,
    QuotaExceededError,
    RateLimitError,
    RequestError,
    ValidationError,
    error_from_response,
)
from .types import (
    DialogueRequest,
    DialogueTurn,
    PronunciationDictionaryLocator,
    SynthesisSettings,
)
from . import models, voices

logger.disable("elevenlabs_ttd")

__all__ = [
    "ApiError",
    "AuthenticationError",
    "DEFAULT_BASE_URL",
    "DialogueRequest",
    "DialogueTurn",
    "ElevenLabsTTDClient",
    "ElevenLabsTTDError",
    "ParseError",
    "PronunciationDictionaryLocator",
    "QuotaExceededError",
    "RateLimitError",
    "RequestError",
    "SynthesisSettings",
    "TextToDialogueBuilder",
    "ValidationError",
    "__version__",
    "error_from_response",
    "models",
    "voices",
]

__version__ = "0.1.0"
