"""HTTP client for the ElevenLabs Text-to-Dialogue endpoint.

Responsibilities:
- Hold credentials, base URL, and the `requests` transport for API calls.
- Accumulate optional request parameters through a fluent, single-use builder.
- Send exactly one authenticated POST per request and map failures to the
  library error taxonomy.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterable

import requests

from .errors import RequestError, error_from_response
from .models import DEFAULT_MODEL_ID, DEFAULT_OUTPUT_FORMAT
from .telemetry.logger import RequestLogger
from .types import (
    DialogueRequest,
    DialogueTurn,
    PronunciationDictionaryLocator,
    SynthesisSettings,
)

if TYPE_CHECKING:
    from .config import ClientRuntimeConfig

DEFAULT_BASE_URL = "https://api.elevenlabs.io/v1"

_MAX_SEED = 4294967295


class ElevenLabsTTDClient:
    """Client for Text-to-Dialogue requests.

    The client is immutable after construction and can be shared between
    threads; connection pooling, timeouts, and proxies belong to the
    `requests.Session` passed as `session`.
    """

    def __init__(
        self,
        api_key: str,
        *,
        base_url: str = DEFAULT_BASE_URL,
        session: requests.Session | None = None,
    ) -> None:
        self._api_key = api_key
        self._base_url = base_url.rstrip("/")
        self._session = session if session is not None else requests.Session()
        self._request_logger = RequestLogger()

    @classmethod
    def with_base_url(cls, api_key: str, base_url: str) -> ElevenLabsTTDClient:
        """Create a client for a custom endpoint (testing or enterprise hosts)."""

        return cls(api_key, base_url=base_url)

    @classmethod
    def from_config(
        cls,
        config: ClientRuntimeConfig,
        *,
        session: requests.Session | None = None,
    ) -> ElevenLabsTTDClient:
        """Create a client from resolved runtime configuration."""

        return cls(config.api_key or "", base_url=config.base_url, session=session)

    @property
    def api_key(self) -> str:
        return self._api_key

    @property
    def base_url(self) -> str:
        return self._base_url

    def text_to_dialogue(self, inputs: Iterable[DialogueTurn]) -> TextToDialogueBuilder:
        """Start building a Text-to-Dialogue request for `inputs` in speaking order."""

        return TextToDialogueBuilder(self, inputs)

    def execute_ttd(self, request: DialogueRequest) -> bytes:
        """POST an assembled request and return the raw audio bytes.

        Raises:
            RequestError: No response was received.
            AuthenticationError, RateLimitError, QuotaExceededError, ApiError:
                The API answered with a non-success status.
        """

        endpoint = f"{self._base_url}/text-to-dialogue"
        headers = {
            "xi-api-key": self._api_key,
            "Content-Type": "application/json",
        }
        self._request_logger.log_request_start(
            model_id=request.model_id,
            turns=len(request.inputs),
            output_format=request.output_format,
        )
        try:
            response = self._session.post(
                endpoint,
                params=request.query_params(),
                headers=headers,
                json=request.to_payload(),
            )
            status_code = response.status_code
            if 200 <= status_code < 300:
                audio = bytes(response.content)
            else:
                audio = None
        except requests.RequestException as exc:
            self._request_logger.log_request_failure(RequestError.__name__)
            raise RequestError(exc) from exc

        if audio is None:
            error = error_from_response(
                status_code,
                self._decode_error_body(response),
                response.headers,
            )
            self._request_logger.log_request_failure(type(error).__name__, status_code)
            raise error

        self._request_logger.log_request_complete(
            status_code=status_code,
            audio_bytes=len(audio),
        )
        return audio

    @staticmethod
    def _decode_error_body(response: requests.Response) -> str:
        """Decode an error body into text, or an empty string when unreadable."""

        try:
            return response.text
        except Exception:
            return ""


class TextToDialogueBuilder:
    """Single-use builder for one Text-to-Dialogue request.

    Setters return the builder for chaining; calling a setter twice keeps the
    last value. `execute()` consumes the builder.
    """

    def __init__(self, client: ElevenLabsTTDClient, inputs: Iterable[DialogueTurn]) -> None:
        self._client = client
        self.inputs: tuple[DialogueTurn, ...] = tuple(inputs)
        self._output_format: str | None = None
        self._model_id: str | None = None
        self._settings: SynthesisSettings | None = None
        self._pronunciation_locators: tuple[PronunciationDictionaryLocator, ...] | None = None
        self._seed: int | None = None
        self._consumed = False

    def _ensure_unconsumed(self) -> None:
        if self._consumed:
            raise RuntimeError("Text-to-Dialogue builder was already executed.")

    def output_format(self, output_format: str) -> TextToDialogueBuilder:
        """Set the audio output format, for example `mp3_44100_128`."""

        self._ensure_unconsumed()
        self._output_format = output_format
        return self

    def model(self, model_id: str) -> TextToDialogueBuilder:
        self._ensure_unconsumed()
        self._model_id = model_id
        return self

    def settings(self, settings: SynthesisSettings) -> TextToDialogueBuilder:
        self._ensure_unconsumed()
        self._settings = settings
        return self

    def pronunciation_locators(
        self, *locators: PronunciationDictionaryLocator
    ) -> TextToDialogueBuilder:
        """Set pronunciation dictionaries, applied by the API in the given order."""

        self._ensure_unconsumed()
        self._pronunciation_locators = tuple(locators)
        return self

    def seed(self, seed: int) -> TextToDialogueBuilder:
        """Set the sampling seed; it must fit an unsigned 32-bit integer."""

        self._ensure_unconsumed()
        if isinstance(seed, bool) or not isinstance(seed, int):
            raise TypeError("`seed` must be an integer.")
        if not 0 <= seed <= _MAX_SEED:
            raise ValueError(f"`seed` must be between 0 and {_MAX_SEED}.")
        self._seed = seed
        return self

    def build_request(self) -> DialogueRequest:
        """Assemble the request, filling defaults for unset output format and model."""

        return DialogueRequest(
            inputs=self.inputs,
            model_id=self._model_id if self._model_id is not None else DEFAULT_MODEL_ID,
            output_format=(
                self._output_format
                if self._output_format is not None
                else DEFAULT_OUTPUT_FORMAT
            ),
            settings=self._settings,
            pronunciation_locators=self._pronunciation_locators,
            seed=self._seed,
        )

    def execute(self) -> bytes:
        """Send the request and return raw audio bytes; the builder cannot be reused."""

        self._ensure_unconsumed()
        request = self.build_request()
        self._consumed = True
        return self._client.execute_ttd(request)
