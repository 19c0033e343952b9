"""Shared parsing helpers for configuration values and CLI arguments."""

from __future__ import annotations

from .types import DialogueTurn, PronunciationDictionaryLocator
from . import voices


def normalize_optional_string(value: object) -> str | None:
    """Normalize an optional value to a stripped non-empty string.

    Args:
        value: Arbitrary input value.

    Returns:
        Stripped string value, or `None` when the value is empty after trimming.
    """

    if value is None:
        return None
    text = str(value).strip()
    if not text:
        return None
    return text


def resolve_voice_id(voice: str) -> str:
    """Resolve a catalog display name to its voice id, passing raw ids through."""

    normalized = normalize_optional_string(voice)
    if normalized is None:
        raise ValueError("Voice must be a non-empty catalog name or voice id.")
    match = voices.find_by_name(normalized)
    if match is not None:
        return match.voice_id
    return normalized


def parse_turn_argument(value: str) -> DialogueTurn:
    """Parse one `VOICE=TEXT` argument into a dialogue turn.

    Only the first `=` separates voice from text, so text may contain `=`.
    """

    voice_part, separator, text_part = value.partition("=")
    if not separator:
        raise ValueError(f"Dialogue turn `{value}` must use the `VOICE=TEXT` form.")
    text = text_part.strip()
    if not text:
        raise ValueError(f"Dialogue turn `{value}` has empty text.")
    return DialogueTurn(text=text, voice_id=resolve_voice_id(voice_part))


def parse_locator_argument(value: str) -> PronunciationDictionaryLocator:
    """Parse an `ID[:VERSION]` argument into a pronunciation dictionary locator."""

    id_part, _, version_part = value.partition(":")
    dictionary_id = normalize_optional_string(id_part)
    if dictionary_id is None:
        raise ValueError(f"Pronunciation dictionary `{value}` has an empty id.")
    return PronunciationDictionaryLocator(
        dictionary_id=dictionary_id,
        version_id=normalize_optional_string(version_part),
    )
