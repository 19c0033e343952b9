"""Configuration model and loaders for the Text-to-Dialogue client.

Responsibilities:
- Define client configuration as a typed dataclass.
- Resolve runtime values with deterministic source precedence.
- Provide loader entry points for file- and environment-based configuration.

Key types:
- `ClientConfig`: configured defaults for client construction and requests.
- `ClientRuntimeConfig`: resolved values for one client.
- `RuntimeConfigSources`: optional value sources for precedence resolution.
- `ConfigLoader`: static construction helpers for `ClientConfig`.

The library itself never reads the environment; only `ConfigLoader.from_env`
and the CLI do.
"""

from __future__ import annotations

from dataclasses import dataclass, field
import os
from pathlib import Path
from typing import Any, Mapping

import yaml

from .client import DEFAULT_BASE_URL
from .models import DEFAULT_MODEL_ID, DEFAULT_OUTPUT_FORMAT
from .parsing import normalize_optional_string

ENV_API_KEY = "ELEVENLABS_API_KEY"
ENV_BASE_URL = "ELEVENLABS_BASE_URL"
ENV_MODEL_ID = "ELEVENLABS_TTD_MODEL"
ENV_OUTPUT_FORMAT = "ELEVENLABS_TTD_OUTPUT_FORMAT"


@dataclass(frozen=True, slots=True)
class RuntimeConfigSources:
    """Source mappings used for deterministic runtime value precedence.

    Attributes:
        cli: Values explicitly provided by CLI arguments.
        secure: Values loaded from secure local credential storage.
        env: Values loaded from environment variables.
    """

    cli: Mapping[str, str] = field(default_factory=dict)
    secure: Mapping[str, str] = field(default_factory=dict)
    env: Mapping[str, str] = field(default_factory=dict)


@dataclass(frozen=True, slots=True)
class ClientRuntimeConfig:
    """Resolved client settings for one run.

    Attributes:
        base_url: API base URL without trailing slash.
        model_id: Model identifier used when a request does not set one.
        output_format: Output format used when a request does not set one.
        api_key: API key, when one could be resolved.
    """

    base_url: str
    model_id: str
    output_format: str
    api_key: str | None = None


@dataclass(slots=True)
class ClientConfig:
    """Configured client defaults.

    Attributes:
        api_key: Optional API key.
        base_url: API base URL.
        model_id: Default model identifier.
        output_format: Default audio output format.
        runtime_sources: Optional runtime source overrides injected by the CLI.
    """

    api_key: str | None = None
    base_url: str = DEFAULT_BASE_URL
    model_id: str = DEFAULT_MODEL_ID
    output_format: str = DEFAULT_OUTPUT_FORMAT
    runtime_sources: RuntimeConfigSources = field(default_factory=RuntimeConfigSources)

    def validate(self) -> None:
        """Validate configured values before client construction."""

        self._require_non_empty(self.base_url, "base_url")
        self._require_non_empty(self.model_id, "model_id")
        self._require_non_empty(self.output_format, "output_format")
        if not self.base_url.strip().startswith(("http://", "https://")):
            raise ValueError("`base_url` must start with `http://` or `https://`.")

    def resolved_runtime(
        self, sources: RuntimeConfigSources | None = None
    ) -> ClientRuntimeConfig:
        """Resolve client settings with deterministic source precedence.

        Precedence for each key is `cli` > `secure` > `env` > config field default.
        When `sources` is omitted, `runtime_sources` is used.
        """

        resolved_sources = sources if sources is not None else self.runtime_sources

        base_url = self._resolve_runtime_value(
            key="base_url",
            env_key=ENV_BASE_URL,
            default_value=self.base_url,
            sources=resolved_sources,
        )
        model_id = self._resolve_runtime_value(
            key="model_id",
            env_key=ENV_MODEL_ID,
            default_value=self.model_id,
            sources=resolved_sources,
        )
        output_format = self._resolve_runtime_value(
            key="output_format",
            env_key=ENV_OUTPUT_FORMAT,
            default_value=self.output_format,
            sources=resolved_sources,
        )
        api_key = self._resolve_optional_runtime_value(
            key="api_key",
            env_key=ENV_API_KEY,
            default_value=self.api_key,
            sources=resolved_sources,
        )
        return ClientRuntimeConfig(
            base_url=base_url.rstrip("/"),
            model_id=model_id,
            output_format=output_format,
            api_key=api_key,
        )

    def _resolve_runtime_value(
        self,
        key: str,
        env_key: str,
        default_value: str | None,
        sources: RuntimeConfigSources,
    ) -> str:
        """Resolve a required runtime value from sources in precedence order."""

        resolved = self._resolve_optional_runtime_value(key, env_key, default_value, sources)
        if resolved is None:
            raise ValueError(
                f"`{key}` could not be resolved from CLI, secure storage, env, or defaults."
            )
        return resolved

    def _resolve_optional_runtime_value(
        self,
        key: str,
        env_key: str,
        default_value: str | None,
        sources: RuntimeConfigSources,
    ) -> str | None:
        """Resolve an optional runtime value from sources in precedence order."""

        cli_value = self._normalized_lookup(sources.cli, key)
        if cli_value is not None:
            return cli_value

        secure_value = self._normalized_lookup(sources.secure, key)
        if secure_value is not None:
            return secure_value

        env_value = self._normalized_lookup(sources.env, env_key)
        if env_value is not None:
            return env_value

        return normalize_optional_string(default_value)

    @staticmethod
    def _normalized_lookup(mapping: Mapping[str, str], key: str) -> str | None:
        """Return a stripped mapping value for a key or `None` when missing/blank."""

        if key not in mapping:
            return None
        return normalize_optional_string(mapping.get(key))

    @staticmethod
    def _require_non_empty(value: str, field_name: str) -> None:
        if not isinstance(value, str) or not value.strip():
            raise ValueError(f"`{field_name}` must be a non-empty string.")


class ConfigLoader:
    """Factory methods for creating `ClientConfig` from external sources."""

    _SUPPORTED_YAML_KEYS = frozenset({"api_key", "base_url", "model_id", "output_format"})
    _RUNTIME_ENV_KEYS = frozenset({ENV_API_KEY, ENV_BASE_URL, ENV_MODEL_ID, ENV_OUTPUT_FORMAT})

    @staticmethod
    def from_yaml(path: Path) -> ClientConfig:
        """Create a validated config from a YAML file."""

        raw_text = path.read_text(encoding="utf-8")
        try:
            payload = yaml.safe_load(raw_text)
        except yaml.YAMLError as exc:
            raise ValueError(f"YAML config `{path}` is not valid YAML: {exc}") from exc
        if payload is None:
            payload = {}
        if not isinstance(payload, Mapping):
            raise ValueError(f"YAML config `{path}` must contain a top-level mapping/object.")
        return ConfigLoader._build_config_from_mapping(payload, source_label=f"YAML `{path}`")

    @staticmethod
    def from_env(env: Mapping[str, str] | None = None) -> ClientConfig:
        """Create a validated config from environment variables."""

        env_map: Mapping[str, str] = os.environ if env is None else env

        runtime_env = ConfigLoader.from_env_runtime_values(env_map)
        config = ClientConfig(
            api_key=normalize_optional_string(env_map.get(ENV_API_KEY)),
            base_url=normalize_optional_string(env_map.get(ENV_BASE_URL)) or DEFAULT_BASE_URL,
            model_id=normalize_optional_string(env_map.get(ENV_MODEL_ID)) or DEFAULT_MODEL_ID,
            output_format=(
                normalize_optional_string(env_map.get(ENV_OUTPUT_FORMAT))
                or DEFAULT_OUTPUT_FORMAT
            ),
            runtime_sources=RuntimeConfigSources(env=runtime_env),
        )
        config.validate()
        return config

    @staticmethod
    def from_env_runtime_values(env: Mapping[str, str]) -> dict[str, str]:
        """Return the non-blank runtime keys of an environment mapping."""

        return {
            key: value
            for key, value in env.items()
            if key in ConfigLoader._RUNTIME_ENV_KEYS
            and normalize_optional_string(value) is not None
        }

    @staticmethod
    def _build_config_from_mapping(payload: Mapping[str, Any], source_label: str) -> ClientConfig:
        """Build a validated config from a normalized mapping payload."""

        unknown = sorted(str(key) for key in set(payload).difference(ConfigLoader._SUPPORTED_YAML_KEYS))
        if unknown:
            key_list = ", ".join(unknown)
            raise ValueError(f"{source_label} includes unsupported key(s): {key_list}.")

        config = ClientConfig(
            api_key=normalize_optional_string(payload.get("api_key")),
            base_url=normalize_optional_string(payload.get("base_url")) or DEFAULT_BASE_URL,
            model_id=normalize_optional_string(payload.get("model_id")) or DEFAULT_MODEL_ID,
            output_format=(
                normalize_optional_string(payload.get("output_format"))
                or DEFAULT_OUTPUT_FORMAT
            ),
        )
        config.validate()
        return config
