"""Unit tests for model identifiers and output-format helpers."""

import pytest

from elevenlabs_ttd import models


def test_defaults_are_known_values() -> None:
    assert models.DEFAULT_MODEL_ID == models.ELEVEN_V3 == "eleven_v3"
    assert models.DEFAULT_OUTPUT_FORMAT == "mp3_44100_128"
    assert models.DEFAULT_OUTPUT_FORMAT in models.OUTPUT_FORMATS


@pytest.mark.parametrize(
    ("output_format", "codec"),
    [
        ("mp3_44100_128", "mp3"),
        ("pcm_24000", "pcm"),
        ("ulaw_8000", "ulaw"),
        ("opus_48000_96", "opus"),
        ("  MP3_22050_32 ", "mp3"),
        ("", "bin"),
    ],
)
def test_output_format_codec(output_format: str, codec: str) -> None:
    assert models.output_format_codec(output_format) == codec


def test_every_known_format_has_a_codec_prefix() -> None:
    codecs = {models.output_format_codec(value) for value in models.OUTPUT_FORMATS}

    assert codecs == {"mp3", "pcm", "ulaw", "alaw", "opus"}
