import httpx
import logging
from pokedex.clients.errors import (
    ContentMissingError,
    RateLimitedError,
    TranslationError,
    TranslationFailedError,
)
from pokedex.models import TranslationStyle

logger = logging.getLogger(__name__)


class TranslationClient:
    """FunTranslations client bound to a single translation style.

    translate() never raises for upstream problems: a failed translation is
    logged and reported as None so the caller can keep the original text.
    """

    TIMEOUT = 30.0

    def __init__(self, style: TranslationStyle, url: str, timeout: float = TIMEOUT):
        self.style = style
        self.url = url
        self.service_name = style.value.capitalize()
        self.client = httpx.AsyncClient(timeout=timeout, headers={"Accept": "application/json"})

    async def translate(self, text: str) -> str | None:
        """Returns the translated text, or None if it could not be obtained."""
        if not text or not text.strip():
            logger.warning(f"Refusing to send blank text to {self.service_name}", extra={"service": self.service_name})
            return None

        try:
            translated_text = await self._request_translation(text)
        except RateLimitedError as e:
            logger.error(
                f"{self.service_name} translation rate limit exceeded: {e.message}",
                extra={"service": self.service_name, "status_code": e.status_code, "error_kind": "rate_limited"},
            )
            return None
        except ContentMissingError as e:
            logger.warning(
                f"{self.service_name} translation content missing: {e.message}",
                extra={"service": self.service_name, "error_kind": "content_missing"},
            )
            return None
        except TranslationError as e:
            logger.warning(
                f"{self.service_name} translation failed: {e.message}",
                extra={"service": self.service_name, "status_code": e.status_code, "error_kind": "translation_failed"},
            )
            return None

        logger.info(f"Successfully translated text using {self.service_name} style", extra={"service": self.service_name})
        return translated_text

    async def _request_translation(self, text: str) -> str:
        """Performs the network call; raises a TranslationError subclass on any failure."""
        preview = text if len(text) <= 30 else f"{text[:30]}..."
        logger.info(f"Requesting {self.service_name} translation for: {preview}")

        try:
            response = await self.client.get(self.url, params={"text": text})
        except httpx.RequestError as e:
            raise TranslationFailedError(self.service_name, f"network error: {e!r}")

        logger.info(
            f"{self.service_name} API response status: {response.status_code}",
            extra={"service": self.service_name, "status_code": response.status_code},
        )

        if response.status_code == 429:
            raise RateLimitedError(self.service_name, 429, self._extract_error_message(response))

        if response.is_error:
            raise TranslationFailedError(
                self.service_name,
                self._extract_error_message(response),
                status_code=response.status_code,
            )

        try:
            data = response.json()
        except ValueError:
            raise TranslationFailedError(
                self.service_name,
                "unexpected response format",
                status_code=response.status_code,
            )

        return self._extract_translated_text(data)

    def _extract_translated_text(self, data) -> str:
        contents = data.get("contents") if isinstance(data, dict) else None
        translated = contents.get("translated") if isinstance(contents, dict) else None
        # A present-but-blank translation counts as a failure
        if isinstance(translated, str) and translated.strip():
            return translated
        raise ContentMissingError(self.service_name, "Could not extract translated text from API response")

    @staticmethod
    def _extract_error_message(response: httpx.Response) -> str:
        try:
            data = response.json()
        except ValueError:
            return response.text or "Unknown error occurred"

        error = data.get("error") if isinstance(data, dict) else None
        message = error.get("message") if isinstance(error, dict) else None
        if isinstance(message, str) and message.strip():
            return message
        return "Unknown error occurred"

    async def close(self):
        """Close the HTTP connection pool (call on app shutdown)."""
        await self.client.aclose()
