"""Unit tests for YAML/environment configuration and runtime precedence."""

from __future__ import annotations

from pathlib import Path

import pytest

from elevenlabs_ttd.config import ClientConfig, ConfigLoader, RuntimeConfigSources


def test_config_loader_from_yaml_normalizes_values(tmp_path: Path) -> None:
    config_path = tmp_path / "ttd.yml"
    config_path.write_text(
        """
api_key: " yaml-key "
base_url: " https://api.example.test/v1/ "
model_id: " eleven_v3 "
output_format: " pcm_24000 "
""".strip(),
        encoding="utf-8",
    )

    config = ConfigLoader.from_yaml(config_path)

    assert config.api_key == "yaml-key"
    assert config.base_url == "https://api.example.test/v1/"
    assert config.model_id == "eleven_v3"
    assert config.output_format == "pcm_24000"
    assert config.resolved_runtime().base_url == "https://api.example.test/v1"


def test_config_loader_from_yaml_applies_defaults_for_empty_file(tmp_path: Path) -> None:
    config_path = tmp_path / "empty.yml"
    config_path.write_text("", encoding="utf-8")

    config = ConfigLoader.from_yaml(config_path)

    assert config.api_key is None
    assert config.base_url == "https://api.elevenlabs.io/v1"
    assert config.model_id == "eleven_v3"
    assert config.output_format == "mp3_44100_128"


def test_config_loader_from_yaml_rejects_unknown_keys(tmp_path: Path) -> None:
    config_path = tmp_path / "unknown.yml"
    config_path.write_text("model_id: eleven_v3\nvoice: Rachel\n", encoding="utf-8")

    with pytest.raises(ValueError, match=r"unsupported key\(s\): voice"):
        ConfigLoader.from_yaml(config_path)


def test_config_loader_from_yaml_rejects_non_mapping_and_bad_syntax(tmp_path: Path) -> None:
    list_path = tmp_path / "list.yml"
    list_path.write_text("- a\n- b\n", encoding="utf-8")
    broken_path = tmp_path / "broken.yml"
    broken_path.write_text("model_id: [unclosed\n", encoding="utf-8")

    with pytest.raises(ValueError, match="top-level mapping"):
        ConfigLoader.from_yaml(list_path)
    with pytest.raises(ValueError, match="not valid YAML"):
        ConfigLoader.from_yaml(broken_path)


def test_config_validate_rejects_non_http_base_url(tmp_path: Path) -> None:
    config_path = tmp_path / "ftp.yml"
    config_path.write_text("base_url: ftp://example.test\n", encoding="utf-8")

    with pytest.raises(ValueError, match="base_url"):
        ConfigLoader.from_yaml(config_path)


def test_config_loader_from_env_reads_known_keys() -> None:
    config = ConfigLoader.from_env(
        {
            "ELEVENLABS_API_KEY": " env-key ",
            "ELEVENLABS_TTD_MODEL": "eleven_v3",
            "ELEVENLABS_TTD_OUTPUT_FORMAT": "opus_48000_64",
            "UNRELATED": "x",
        }
    )

    assert config.api_key == "env-key"
    assert config.output_format == "opus_48000_64"
    assert dict(config.runtime_sources.env) == {
        "ELEVENLABS_API_KEY": " env-key ",
        "ELEVENLABS_TTD_MODEL": "eleven_v3",
        "ELEVENLABS_TTD_OUTPUT_FORMAT": "opus_48000_64",
    }
    assert config.resolved_runtime().api_key == "env-key"


def test_runtime_resolution_precedence_cli_secure_env_default() -> None:
    """Each key should resolve `cli` > `secure` > `env` > field default."""

    config = ClientConfig(api_key="default-key", model_id="default-model")
    sources = RuntimeConfigSources(
        cli={"output_format": "pcm_16000"},
        secure={"api_key": "secure-key"},
        env={
            "ELEVENLABS_API_KEY": "env-key",
            "ELEVENLABS_TTD_MODEL": "env-model",
            "ELEVENLABS_TTD_OUTPUT_FORMAT": "mp3_22050_32",
        },
    )

    resolved = config.resolved_runtime(sources)

    assert resolved.output_format == "pcm_16000"
    assert resolved.api_key == "secure-key"
    assert resolved.model_id == "env-model"
    assert resolved.base_url == "https://api.elevenlabs.io/v1"


def test_runtime_resolution_ignores_blank_source_values() -> None:
    config = ClientConfig()
    sources = RuntimeConfigSources(cli={"api_key": "   ", "model_id": ""})

    resolved = config.resolved_runtime(sources)

    assert resolved.api_key is None
    assert resolved.model_id == "eleven_v3"
