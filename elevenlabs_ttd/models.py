"""Model identifiers and output formats accepted by the Text-to-Dialogue API."""

from __future__ import annotations

ELEVEN_V3 = "eleven_v3"

DEFAULT_MODEL_ID = ELEVEN_V3

# Formatted as codec_sample_rate[_bitrate]; MP3 192kbps and PCM 44.1kHz need
# higher subscription tiers.
OUTPUT_FORMATS = (
    "mp3_22050_32",
    "mp3_44100_32",
    "mp3_44100_64",
    "mp3_44100_96",
    "mp3_44100_128",
    "mp3_44100_192",
    "pcm_8000",
    "pcm_16000",
    "pcm_22050",
    "pcm_24000",
    "pcm_44100",
    "pcm_48000",
    "ulaw_8000",
    "alaw_8000",
    "opus_48000_32",
    "opus_48000_64",
    "opus_48000_96",
)

DEFAULT_OUTPUT_FORMAT = "mp3_44100_128"


def output_format_codec(output_format: str) -> str:
    """Return the codec prefix of an output format string (`mp3_44100_128` -> `mp3`)."""

    codec, _, _ = output_format.strip().partition("_")
    return codec.lower() or "bin"
