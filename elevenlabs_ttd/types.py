"""Request records for Text-to-Dialogue API calls.

Responsibilities:
- Represent immutable dialogue turns, synthesis settings, and pronunciation
  dictionary references.
- Serialize a composed request into its JSON body and query parameters.

Key types:
- `DialogueTurn`, `SynthesisSettings`, `PronunciationDictionaryLocator`,
  and `DialogueRequest`.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any


@dataclass(frozen=True, slots=True)
class DialogueTurn:
    """One spoken line attributed to one voice.

    Attributes:
        text: Text to be converted into speech.
        voice_id: Identifier of the voice that speaks the line.
    """

    text: str
    voice_id: str

    def to_payload(self) -> dict[str, str]:
        """Return the JSON object for this turn."""

        return {"text": self.text, "voice_id": self.voice_id}


@dataclass(frozen=True, slots=True)
class SynthesisSettings:
    """Settings controlling dialogue generation.

    Attributes:
        stability: Voice stability in `[0, 1]`; lower values broaden the
            emotional range. The API documents 0.0, 0.5 and 1.0 as canonical.
        use_speaker_boost: Boost similarity to the original speaker at the cost
            of extra latency.
    """

    stability: float | None = 0.5
    use_speaker_boost: bool | None = True

    def with_stability(self, stability: float) -> SynthesisSettings:
        """Return a copy with stability clamped to `[0, 1]`."""

        return replace(self, stability=max(0.0, min(1.0, float(stability))))

    def with_speaker_boost(self, enabled: bool) -> SynthesisSettings:
        """Return a copy with speaker boost enabled or disabled."""

        return replace(self, use_speaker_boost=enabled)

    def to_payload(self) -> dict[str, Any]:
        """Return the JSON object for these settings, omitting unset fields."""

        payload: dict[str, Any] = {}
        if self.stability is not None:
            payload["stability"] = self.stability
        if self.use_speaker_boost is not None:
            payload["use_speaker_boost"] = self.use_speaker_boost
        return payload


@dataclass(frozen=True, slots=True)
class PronunciationDictionaryLocator:
    """Reference to an externally managed pronunciation dictionary.

    Attributes:
        dictionary_id: Identifier of the pronunciation dictionary.
        version_id: Dictionary version; the latest version is used when `None`.
    """

    dictionary_id: str
    version_id: str | None = None

    def to_payload(self) -> dict[str, str]:
        """Return the JSON object for this locator."""

        payload = {"pronunciation_dictionary_id": self.dictionary_id}
        if self.version_id is not None:
            payload["version_id"] = self.version_id
        return payload


@dataclass(frozen=True, slots=True)
class DialogueRequest:
    """Fully assembled Text-to-Dialogue request.

    `output_format` travels in the query string; every other field is part of
    the JSON body.

    Attributes:
        inputs: Dialogue turns in speaking order.
        model_id: Identifier of the model used for generation.
        output_format: Codec/sample-rate/bitrate string such as `mp3_44100_128`.
        settings: Optional generation settings.
        pronunciation_locators: Optional dictionaries, applied in order.
        seed: Optional sampling seed in `0..4294967295`.
    """

    inputs: tuple[DialogueTurn, ...]
    model_id: str
    output_format: str | None = None
    settings: SynthesisSettings | None = None
    pronunciation_locators: tuple[PronunciationDictionaryLocator, ...] | None = None
    seed: int | None = None

    def to_payload(self) -> dict[str, Any]:
        """Return the JSON request body (without `output_format`)."""

        payload: dict[str, Any] = {
            "inputs": [turn.to_payload() for turn in self.inputs],
            "model_id": self.model_id,
        }
        if self.settings is not None:
            payload["settings"] = self.settings.to_payload()
        if self.pronunciation_locators is not None:
            payload["pronunciation_dictionary_locators"] = [
                locator.to_payload() for locator in self.pronunciation_locators
            ]
        if self.seed is not None:
            payload["seed"] = self.seed
        return payload

    def query_params(self) -> dict[str, str]:
        """Return query-string parameters for the request URL."""

        if self.output_format is None:
            return {}
        return {"output_format": self.output_format}
